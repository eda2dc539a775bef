"""A shell command run in its own process group with piped stdin and stdout."""

from __future__ import annotations

import os
import select
import signal
import subprocess
from typing import Optional, Sequence, Union


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class Process:
    """Runs ``args`` joined by spaces through bash and exchanges data with it."""

    def __init__(self, args: Sequence[str]) -> None:
        self.command = " ".join(args)
        self._buffer = b""
        self._closed = False
        self._proc: Optional[subprocess.Popen] = None
        try:
            self._proc = subprocess.Popen(
                ["/bin/bash", "-c", self.command],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                start_new_session=True,
            )
        except OSError:
            self._proc = None

    def is_open(self) -> bool:
        """Return True while the child is still running."""
        return self._proc is not None and self._proc.poll() is None

    def read_ready(self) -> bool:
        """Return True if reading stdout would not block."""
        if self._proc is None or self._proc.stdout is None or self._proc.stdout.closed:
            return False
        ready, _, _ = select.select([self._proc.stdout.fileno()], [], [], 0)
        return bool(ready)

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes of output; blocks until some are available."""
        if self._proc is None or self._proc.stdout is None or self._proc.stdout.closed:
            return b""
        try:
            return os.read(self._proc.stdout.fileno(), n)
        except OSError:
            return b""

    def read_lines(self) -> list[str]:
        """Return the complete lines available now, without blocking.

        Once the child has exited, any unterminated remainder is returned too.
        """
        out: list[str] = []
        if self.read_ready():
            data = self.read(128)
            if data:
                self._buffer += data
                *complete, self._buffer = self._buffer.split(b"\n")
                out.extend(_decode(line) for line in complete)
        if not self.is_open() and self._buffer:
            out.append(_decode(self._buffer))
            self._buffer = b""
        return out

    def read_all_lines(self) -> list[str]:
        """Read output until end of file and split it at every newline."""
        data = bytearray(self._buffer)
        self._buffer = b""
        while chunk := self.read(512):
            data += chunk
        return [_decode(line) for line in bytes(data).split(b"\n")]

    def write(self, data: Union[str, bytes]) -> None:
        if self._proc is None or self._proc.stdin is None:
            raise ValueError("process is not running")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._proc.stdin.write(data)
        self._proc.stdin.flush()

    def end_write(self) -> None:
        """Close the child's stdin."""
        if self._proc is not None and self._proc.stdin is not None:
            self._proc.stdin.close()

    def close(self) -> None:
        """Interrupt the child's process group and wait for it to exit."""
        if self._proc is None or self._closed:
            return
        self._closed = True
        try:
            os.killpg(self._proc.pid, signal.SIGINT)
        except OSError:
            pass
        self._proc.wait()
        for stream in (self._proc.stdin, self._proc.stdout):
            if stream is not None and not stream.closed:
                try:
                    stream.close()
                except OSError:
                    pass

    def __bool__(self) -> bool:
        return self._proc is not None

    def __enter__(self) -> Process:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()