"""Command line argument parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

PREFIX = os.path.realpath(os.path.expanduser("~/.local"))
DEFAULT_FILE = PREFIX + "/share/vidd/default"


@dataclass(frozen=True)
class ArgumentInfo:
    name: str
    value_type: str
    description: str


ARGUMENT_INFO: tuple[ArgumentInfo, ...] = (
    ArgumentInfo("--", "", "every argument after this is a file"),
    ArgumentInfo("-", "", "reads data from stdin into a buffer"),
    ArgumentInfo("--test-getch", "", ""),
)


def _argument_info(name: str) -> ArgumentInfo | None:
    return next((info for info in ARGUMENT_INFO if info.name == name), None)


class Arguments:
    """Flags, valued options and file names taken from a command line."""

    def __init__(self, args: Iterable[str]) -> None:
        self.flags: list[str] = []
        self.files: list[str] = []
        self.values: list[tuple[str, str]] = []
        self._parse(list(args))

    def _parse(self, args: list[str]) -> None:
        it = iter(args)
        for arg in it:
            if arg == "--":
                self.files.extend(it)
                break
            if arg.startswith("-"):
                info = _argument_info(arg)
                if info is None or not info.value_type:
                    self.flags.append(arg)
                else:
                    try:
                        value = next(it)
                    except StopIteration:
                        raise ValueError(f"option {arg} needs a value") from None
                    self.values.append((arg, value))
            else:
                self.files.append(arg)

        if not self.files and not self.has_flag("-"):
            self.files.append(DEFAULT_FILE)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def has_value(self, name: str) -> bool:
        return any(key == name for key, _ in self.values)

    def get_value(self, name: str) -> str:
        """Return the value given to ``name``, or an empty string."""
        return next((value for key, value in self.values if key == name), "")