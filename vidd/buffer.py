"""A text buffer loaded from an input into a chain of lines."""

from __future__ import annotations

from typing import Iterator

from vidd.input import Input, Source
from vidd.line import Line


class Buffer:
    """Lines read from an input, with tabs expanded and carriage returns removed.

    As in the editor, an empty line always follows the last line read.
    """

    def __init__(self, source: Input | Source = None) -> None:
        inp = source if isinstance(source, Input) else Input(source)
        line = Line.create_chain().first()
        self.head: Line = line
        with inp:
            for data in inp:
                line.data = data.replace("\t", "    ").replace("\r", "")
                line = line.insert_line()
        self.tail: Line = line

    def lines(self) -> Iterator[Line]:
        """Yield every line from head to tail."""
        line = self.head
        while line is not None:
            yield line
            line = line.next()