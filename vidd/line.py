"""Doubly linked list of text lines with a sentinel root node."""

from __future__ import annotations

from typing import Optional


class Line:
    """One line of text in a chain headed by a sentinel (the "id" line).

    The sentinel has no previous line; the first real line (the head) follows
    it. Lines carry a zero based ``number`` that is kept consistent when lines
    are inserted or removed.
    """

    __slots__ = ("data", "number", "_prev", "_next")

    def __init__(self, data: str = "") -> None:
        self.data = data
        self.number = 0
        self._prev: Optional[Line] = None
        self._next: Optional[Line] = None

    def __repr__(self) -> str:
        if self.is_id():
            return "Line(<root>)"
        return f"Line({self.number}, {self.data!r})"

    @staticmethod
    def create_chain() -> Line:
        """Return the root of a new chain holding a single empty line."""
        root = Line()
        root.insert_line()
        return root

    def remove(self) -> Line:
        """Unlink this line and return the line that takes its place.

        The root is never removed, and the last remaining line is only
        cleared, so a chain always holds at least one line.
        """
        if self.is_id():
            return self
        if self.is_isolated():
            self.data = ""
            return self
        prev = self._prev
        assert prev is not None
        prev._next = self._next
        replacement = prev
        if not self.is_tail():
            nxt = self._next
            assert nxt is not None
            nxt._prev = prev
            replacement = nxt
            nxt.adjust_numbers_after()
        self._prev = None
        self._next = None
        return replacement

    def is_id(self) -> bool:
        return self._prev is None

    def is_head(self) -> bool:
        return self._prev is not None and self._prev._prev is None

    def is_tail(self) -> bool:
        return self._next is None

    def is_isolated(self) -> bool:
        return self.is_head() and self.is_tail()

    def skip(self, count: int) -> Line:
        """Move ``count`` lines forward (or back), stopping at either end."""
        line = self
        if count > 0:
            while not line.is_tail() and count > 0:
                line = line._next  # type: ignore[assignment]
                count -= 1
        elif count < 0:
            count = -count
            while line._prev is not None and not line.is_head() and count > 0:
                line = line._prev
                count -= 1
        return line

    def get(self, number: int) -> Line:
        """Return the line with ``number``, or the nearest end of the chain."""
        line = self
        if number > line.number:
            while not line.is_tail() and number != line.number:
                line = line._next  # type: ignore[assignment]
        elif number < line.number:
            while line._prev is not None and not line.is_head() and number != line.number:
                line = line._prev
        return line

    def next(self) -> Optional[Line]:
        return self._next

    def prev(self) -> Optional[Line]:
        """Return the previous real line, or None at the head or root."""
        if self._prev is not None and self._prev.is_id():
            return None
        return self._prev

    def get_id(self) -> Line:
        line = self
        while not line.is_id():
            line = line._prev  # type: ignore[assignment]
        return line

    def first(self) -> Line:
        if self.is_id():
            assert self._next is not None
            return self._next
        line = self
        while not line.is_head():
            line = line._prev  # type: ignore[assignment]
        return line

    def last(self) -> Line:
        line = self
        while not line.is_tail():
            line = line._next  # type: ignore[assignment]
        return line

    def adjust_numbers_after(self) -> None:
        """Renumber this line and every line after it."""
        if self.is_id():
            return
        line: Optional[Line] = self
        while line is not None:
            prev = line._prev
            assert prev is not None
            line.number = 0 if prev.is_id() else prev.number + 1
            line = line._next

    def insert_line(self) -> Line:
        """Insert an empty line after this one and return it."""
        new = Line()
        if not self.is_tail():
            new._next = self._next
            self._next._prev = new  # type: ignore[union-attr]
        self._next = new
        new._prev = self
        new.number = self.number + 1
        new.adjust_numbers_after()
        return new

    def insert_line_up(self) -> Line:
        """Insert an empty line before this one and return it."""
        if self.is_id():
            return self.insert_line()
        assert self._prev is not None
        return self._prev.insert_line()

    def split_at(self, pos: int) -> Line:
        """Move the text from ``pos`` onwards to a new line below; return it."""
        new = self.insert_line()
        new.data = self.data[pos:]
        self.data = self.data[:pos]
        return new

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def first_char(self) -> int:
        """Return the index of the first non-space character, or -1."""
        return next((i for i, c in enumerate(self.data) if c != " "), -1)