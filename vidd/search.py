"""Filtering and search behind the fuzzy finder and grep windows."""

from __future__ import annotations

import io
import shlex
import subprocess
from dataclasses import dataclass
from typing import IO, Iterable, Optional, Sequence

from vidd.charsets import WHITESPACE


@dataclass(frozen=True)
class GrepResult:
    """One match: column ``x`` on line ``y`` of ``file``, with the line's text."""

    x: int
    y: int
    file: str
    line: str


def fuzzy_find(finds: Iterable[str], data: Iterable[str]) -> list[str]:
    """Return the items of ``data`` that contain every string in ``finds``."""
    needles = list(finds)
    return [item for item in data if all(needle in item for needle in needles)]


def split_at_spaces(text: str) -> list[str]:
    """Split at every single space, keeping empty pieces."""
    return text.split(" ")


def read_all_lines(stream: IO) -> list[str]:
    """Read a stream to its end and split it into lines.

    Whitespace other than newlines becomes a plain space. A trailing newline
    yields a final empty line.
    """
    data = stream.read()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return [
        "".join(" " if WHITESPACE.contains(c) else c for c in line)
        for line in data.split("\n")
    ]


def parse_grep_line(line: str) -> Optional[GrepResult]:
    """Parse a ``file:line:column:text`` line; return None if it is not one."""
    if not line:
        return None
    parts = line.split(":", 3)
    if len(parts) != 4:
        return None
    file, y, x, text = parts
    try:
        return GrepResult(int(x), int(y), file, text)
    except ValueError:
        return None


def _grep_command(finds: Sequence[str]) -> str:
    first, *rest = finds
    stages = [f"rg -n --column --hidden {shlex.quote(first)}"]
    stages.extend(f"rg {shlex.quote(find)}" for find in rest)
    return " | ".join(stages) + " 2>&1"


def grep(query: str) -> list[GrepResult]:
    """Search the working directory with ripgrep for lines holding every word.

    The first word is searched for in the files; each further word filters
    the matched lines. An empty query gives no results.
    """
    if not query:
        return []
    completed = subprocess.run(
        _grep_command(split_at_spaces(query)),
        shell=True,
        stdout=subprocess.PIPE,
        check=False,
    )
    lines = read_all_lines(io.BytesIO(completed.stdout))
    return [r for r in map(parse_grep_line, lines) if r is not None]


class FuzzySelector:
    """Results of a fuzzy query over ``data`` with a cursor and a scroll view.

    ``height`` is the height of the window the results are shown in; three of
    its rows are taken by the frame and the prompt.
    """

    def __init__(self, data: Iterable[str], height: int) -> None:
        self.data: list[str] = list(data)
        self.height = height
        self.query = ""
        self.results: list[str] = []
        self.cursor = 0
        self.view = 0
        self._calculate_results()

    def _calculate_results(self) -> None:
        self.results = fuzzy_find(split_at_spaces(self.query), self.data)
        self.cursor = max(0, min(self.cursor, len(self.results) - 1))

    def set_query(self, query: str) -> None:
        """Replace the query, resetting the cursor and view to the top."""
        self.query = query
        self.view = 0
        self.cursor = 0
        self._calculate_results()

    def next(self) -> None:
        self.cursor = max(0, min(len(self.results) - 1, self.cursor + 1))
        if self.cursor >= self.view + self.height - 3:
            self.view += 1

    def prev(self) -> None:
        self.cursor = max(0, self.cursor - 1)
        if self.cursor < self.view:
            self.view = self.cursor

    def scroll_down(self) -> None:
        if self.view + 1 >= len(self.results):
            return
        self.view += 1
        if self.cursor < self.view:
            self.cursor = self.view

    def scroll_up(self) -> None:
        if self.view == 0:
            return
        self.view -= 1
        if self.cursor >= self.view + self.height - 3:
            self.cursor = self.view + self.height - 4

    def selected(self) -> Optional[str]:
        """Return the result under the cursor, or None when nothing matches."""
        if not self.results:
            return None
        return self.results[self.cursor]