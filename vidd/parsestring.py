"""A consumable view over a string, used for parsing escape sequences."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Union

from vidd.charsets import WHITESPACE

_Needle = Union[str, "ParseString"]


class ParseString:
    """A window onto a string whose front and back can be popped off.

    Popped pieces and copies are themselves ``ParseString`` windows over the
    same text. ``parsed_count`` reports how far the front has advanced since
    the window was made.
    """

    __slots__ = ("_data", "_origin", "_start", "_end")

    def __init__(self, data: _Needle = "") -> None:
        if isinstance(data, ParseString):
            self._data = data._data
            self._start = data._start
            self._end = data._end
        else:
            self._data = str(data)
            self._start = 0
            self._end = len(self._data)
        self._origin = self._start

    @classmethod
    def _span(cls, data: str, start: int, end: int) -> ParseString:
        view = cls.__new__(cls)
        view._data = data
        view._origin = start
        view._start = start
        view._end = end
        return view

    def __str__(self) -> str:
        return self._data[self._start:self._end]

    def __repr__(self) -> str:
        return f"ParseString({str(self)!r})"

    def __len__(self) -> int:
        return self._end - self._start

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    def __getitem__(self, idx: int) -> str:
        return str(self)[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ParseString, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def get_int(self, base: int = 10) -> int:
        """Parse the text as an integer in ``base``; raises ValueError."""
        return int(str(self), base)

    def is_empty(self) -> bool:
        return self._end == self._start

    def front(self) -> str:
        if self.is_empty():
            raise IndexError("front of empty ParseString")
        return self._data[self._start]

    def back(self) -> str:
        if self.is_empty():
            raise IndexError("back of empty ParseString")
        return self._data[self._end - 1]

    def sub_string(self, begin: int, end: Optional[int] = None) -> ParseString:
        """Return the window from ``begin`` up to ``end`` (or the end)."""
        length = len(self)
        begin = min(max(begin, 0), length)
        end = length if end is None else min(max(end, begin), length)
        return self._span(self._data, self._start + begin, self._start + end)

    def pop(self, count: int) -> ParseString:
        """Remove and return the first ``count`` characters."""
        count = min(max(count, 0), len(self))
        popped = self._span(self._data, self._start, self._start + count)
        self._start += count
        return popped

    def pop_back(self, count: int) -> ParseString:
        """Remove and return the last ``count`` characters."""
        count = min(max(count, 0), len(self))
        popped = self._span(self._data, self._end - count, self._end)
        self._end -= count
        return popped

    def pop_while(self, func: Callable[[str], bool]) -> ParseString:
        end = self._start
        while end < self._end and func(self._data[end]):
            end += 1
        return self.pop(end - self._start)

    def pop_back_while(self, func: Callable[[str], bool]) -> ParseString:
        start = self._end
        while start > self._start and func(self._data[start - 1]):
            start -= 1
        return self.pop_back(self._end - start)

    def _index_else(self, pos: int) -> int:
        return pos if pos >= 0 else len(self)

    def pop_until(self, until: _Needle) -> ParseString:
        """Remove and return everything before ``until`` (or everything)."""
        return self.pop(self._index_else(self.find(until)))

    def pop_until_and_skip(self, until: _Needle) -> ParseString:
        """Like ``pop_until`` but also drops ``until`` itself if present."""
        popped = self.pop_until(until)
        skip = len(str(until))
        if len(self) >= skip:
            self._start += skip
        return popped

    def split(self, at: _Needle) -> list[ParseString]:
        """Split at every ``at``; a trailing empty piece is not produced."""
        if len(str(at)) == 0:
            raise ValueError("empty separator")
        rest = ParseString(self)
        pieces = []
        while not rest.is_empty():
            pieces.append(rest.pop_until_and_skip(at))
        return pieces

    def strip(self) -> ParseString:
        """Return a copy without leading and trailing whitespace."""
        stripped = ParseString(self)
        stripped.pop_while(WHITESPACE.contains)
        stripped.pop_back_while(WHITESPACE.contains)
        return stripped

    def find(self, sub: _Needle) -> int:
        """Return the index of ``sub`` in the window, or -1."""
        index = self._data.find(str(sub), self._start, self._end)
        return -1 if index < 0 else index - self._start

    def parsed_count(self) -> int:
        """Return how many characters have been popped from the front."""
        return self._start - self._origin