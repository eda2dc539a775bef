"""Line oriented reader over a file or stream."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

_CHUNK_SIZE = 512

Source = Union[str, "os.PathLike[str]", IO, None]


class Input:
    """Reads ``\\n`` separated lines from a path or an open stream.

    A path that does not exist gives an empty input. ``line_limit`` caps the
    number of newline terminated lines returned; 0 means no limit.
    """

    def __init__(self, source: Source = None, line_limit: int = 0) -> None:
        self._stream: Optional[IO] = None
        self._owned = False
        if isinstance(source, (str, os.PathLike)):
            try:
                self._stream = open(source, "rb")
                self._owned = True
            except FileNotFoundError:
                self._stream = None
        else:
            self._stream = source
        self._back = bytearray()
        self._line_limit = line_limit
        self._lines_read = 0

    def limit_lines(self, count: int) -> Input:
        """Cap the number of lines read; returns self."""
        self._line_limit = count
        return self

    def _read_chunk(self) -> bytes:
        assert self._stream is not None
        chunk = self._stream.read(_CHUNK_SIZE)
        if isinstance(chunk, str):
            return chunk.encode("utf-8")
        return chunk or b""

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    def get_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at the end."""
        if self._stream is None:
            return None
        while self._line_limit <= 0 or self._lines_read < self._line_limit:
            newline = self._back.find(b"\n")
            if newline < 0:
                chunk = self._read_chunk()
                if not chunk:
                    if not self._back:
                        return None
                    data = bytes(self._back)
                    self._back.clear()
                    return self._decode(data)
                self._back += chunk
            else:
                data = bytes(self._back[:newline])
                del self._back[: newline + 1]
                self._lines_read += 1
                return self._decode(data)
        return None

    def __iter__(self) -> Iterator[str]:
        while (line := self.get_line()) is not None:
            yield line

    def close(self) -> None:
        """Close the underlying file if this input opened it."""
        if self._owned and self._stream is not None:
            self._stream.close()
        self._stream = None

    def __enter__(self) -> Input:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()