"""In-memory message log shown by the log view."""

from __future__ import annotations

_logs: list[str] = []


def log(msg: str) -> None:
    """Append a message to the log."""
    _logs.append(str(msg))


def clear() -> None:
    """Drop every logged message."""
    _logs.clear()


def get_logs() -> list[str]:
    """Return the logged messages, oldest first."""
    return list(_logs)