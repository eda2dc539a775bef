"""A two dimensional grid of styled character cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from vidd.style import Style

Vec2 = tuple[int, int]


@dataclass(frozen=True)
class Pixel:
    """One terminal cell: a character and its style."""

    char: str = " "
    style: Style = field(default_factory=Style)


class FrameBuffer:
    """A ``width`` by ``height`` grid of pixels addressed as ``fb[x, y]``."""

    def __init__(self, size: Vec2 = (0, 0)) -> None:
        width, height = size
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame buffer size {size}")
        self._width = width
        self._height = height
        self._rows: list[list[Pixel]] = [[Pixel()] * width for _ in range(height)]

    @property
    def size(self) -> Vec2:
        return (self._width, self._height)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"position ({x}, {y}) outside {self.size}")

    def __getitem__(self, pos: Vec2) -> Pixel:
        x, y = pos
        self._check(x, y)
        return self._rows[y][x]

    def __setitem__(self, pos: Vec2, pixel: Pixel) -> None:
        x, y = pos
        self._check(x, y)
        self._rows[y][x] = pixel

    def resize(self, size: Vec2) -> None:
        """Change the size, keeping the overlapping top-left contents.

        A negative size is ignored.
        """
        width, height = size
        if width < 0 or height < 0:
            return
        rows = []
        for y in range(height):
            if y < self._height:
                kept = self._rows[y][:width]
                rows.append(kept + [Pixel()] * (width - len(kept)))
            else:
                rows.append([Pixel()] * width)
        self._rows = rows
        self._width = width
        self._height = height

    def copy_from(self, other: FrameBuffer) -> None:
        """Copy every pixel of ``other``; does nothing if the sizes differ."""
        if other.size != self.size:
            return
        self._rows = [list(row) for row in other._rows]

    def merge(self, other: FrameBuffer, at: Vec2) -> None:
        """Draw ``other`` onto this buffer with its top-left corner at ``at``."""
        ow, oh = other.size
        if ow < 1 or oh < 1:
            return
        ax, ay = at
        for y, row in enumerate(other._rows):
            ty = ay + y
            if not 0 <= ty < self._height:
                continue
            target = self._rows[ty]
            for x, pixel in enumerate(row):
                tx = ax + x
                if 0 <= tx < self._width:
                    target[tx] = pixel

    def row(self, y: int) -> tuple[Pixel, ...]:
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} outside height {self._height}")
        return tuple(self._rows[y])

    def column(self, x: int) -> tuple[Pixel, ...]:
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} outside width {self._width}")
        return tuple(row[x] for row in self._rows)

    def rows(self) -> Iterator[tuple[Pixel, ...]]:
        for row in self._rows:
            yield tuple(row)

    def sub_area(self, pos: Vec2, size: Vec2) -> list[tuple[Pixel, ...]]:
        """Return the rows of the rectangle at ``pos`` of ``size``, clipped."""
        px, py = pos
        width, height = size
        px, py = max(px, 0), max(py, 0)
        return [
            tuple(row[px:px + width])
            for row in self._rows[py:py + max(height, 0)]
        ]

    def clear(self) -> None:
        """Reset every pixel to the default."""
        self._rows = [[Pixel()] * self._width for _ in range(self._height)]