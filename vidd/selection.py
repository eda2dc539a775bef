"""Text selections over a chain of lines and the per-line ranges they cover."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

from vidd.charsets import CHARACTERS
from vidd.line import Line


class SelectionType(Enum):
    NORMAL = "normal"
    LINE = "line"
    WORD = "word"
    BLOCK = "block"


class SelectionRangeType(Enum):
    ONLY_LINE = "only_line"
    FIRST_LINE = "first_line"
    LAST_LINE = "last_line"
    MIDDLE_LINE = "middle_line"


@dataclass(frozen=True)
class Position:
    """A cursor position: column ``x`` on line ``y``."""

    x: int
    y: Line


@dataclass(frozen=True)
class SelectionRange:
    """The columns ``start`` to ``end`` of one line that a selection covers."""

    line: Line
    start: int
    end: int
    type: SelectionRangeType

    def text(self) -> str:
        return self.line.data[self.start:self.end]


def _word_start_at(data: str, pos: int) -> int:
    if not data:
        return 0
    pos = min(pos, len(data) - 1)
    if not CHARACTERS.contains(data[pos]):
        return pos
    while pos > 0 and CHARACTERS.contains(data[pos]):
        pos -= 1
    if pos == 0 and CHARACTERS.contains(data[pos]):
        return pos
    return pos + 1


def _word_end_at(data: str, pos: int) -> int:
    if not data:
        return 0
    pos = min(pos, len(data) - 1)
    if not CHARACTERS.contains(data[pos]):
        return pos + 1
    while pos + 1 < len(data) and CHARACTERS.contains(data[pos]):
        pos += 1
    if pos + 1 == len(data) and CHARACTERS.contains(data[pos]):
        return pos + 1
    return pos


@dataclass(frozen=True)
class Selection:
    """A selection between two cursor positions.

    Iterating yields one ``SelectionRange`` per line from the start line to
    the end line; call ``ordered`` first if the start may follow the end.
    """

    type: SelectionType
    cur_start: Position
    cur_end: Position

    def ordered(self) -> Selection:
        """Return the selection with its start placed before its end."""
        start, end = self.cur_start, self.cur_end
        if self.type is SelectionType.BLOCK:
            if start.y.number > end.y.number:
                start, end = end, start
            if start.x > end.x:
                start, end = Position(end.x, start.y), Position(start.x, end.y)
        elif (start.y.number, start.x) > (end.y.number, end.x):
            start, end = end, start
        return replace(self, cur_start=start, cur_end=end)

    def _range_for(self, line: Line) -> SelectionRange:
        start, end = self.cur_start, self.cur_end
        length = len(line.data)
        if self.type is SelectionType.BLOCK:
            return SelectionRange(
                line, min(start.x, length), min(end.x, length), SelectionRangeType.ONLY_LINE
            )
        if self.type is SelectionType.LINE:
            return SelectionRange(line, 0, length, SelectionRangeType.MIDDLE_LINE)

        word = self.type is SelectionType.WORD
        if line is start.y and start.y is end.y:
            if word:
                return SelectionRange(
                    line,
                    _word_start_at(line.data, start.x),
                    _word_end_at(line.data, end.x),
                    SelectionRangeType.ONLY_LINE,
                )
            return SelectionRange(line, start.x, end.x, SelectionRangeType.ONLY_LINE)
        if line is start.y:
            begin = _word_start_at(line.data, start.x) if word else start.x
            return SelectionRange(line, begin, length, SelectionRangeType.FIRST_LINE)
        if line is end.y:
            finish = _word_end_at(line.data, end.x) if word else end.x
            return SelectionRange(line, 0, finish, SelectionRangeType.LAST_LINE)
        return SelectionRange(line, 0, length, SelectionRangeType.MIDDLE_LINE)

    def __iter__(self) -> Iterator[SelectionRange]:
        line: Line | None = self.cur_start.y
        while line is not None:
            yield self._range_for(line)
            if line is self.cur_end.y:
                break
            line = line.next()