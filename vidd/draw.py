"""Drawing of lines, boxes and text onto a frame buffer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from vidd.framebuffer import FrameBuffer, Pixel, Vec2
from vidd.style import Style


@dataclass(frozen=True)
class LineChars:
    """The characters used to draw a framed box."""

    h_line: str
    v_line: str
    tl_corner: str
    tr_corner: str
    bl_corner: str
    br_corner: str


@dataclass
class Painter:
    """Draws onto ``fb`` using the current ``style``.

    Shapes that would not fit inside the buffer are not drawn at all;
    text is clipped at the buffer's edges.
    """

    fb: FrameBuffer
    style: Style = field(default_factory=Style)

    def _pixel(self, char: str) -> Pixel:
        return Pixel(char, self.style)

    def _fits(self, tl: Vec2, size: Vec2) -> bool:
        x, y = tl
        w, h = size
        fw, fh = self.fb.size
        return x >= 0 and y >= 0 and x + w <= fw and y + h <= fh

    def _outline(self, tl: Vec2, size: Vec2, h_char: str, v_char: str) -> Vec2:
        x, y = tl
        w, h = size
        br = (x + w - 1, y + h - 1)
        self.h_line(tl, w, h_char)
        self.v_line(tl, h, v_char)
        self.h_line(br, -w, h_char)
        self.v_line(br, -h, v_char)
        return br

    def box(self, tl: Vec2, size: Vec2, chr: str) -> None:
        """Draw the outline of a rectangle with one character."""
        if not self._fits(tl, size):
            return
        self._outline(tl, size, chr, chr)

    def line_box(self, tl: Vec2, size: Vec2, line: LineChars) -> None:
        """Draw the outline of a rectangle with line and corner characters."""
        if not self._fits(tl, size) or size[0] < 1 or size[1] < 1:
            return
        bx, by = self._outline(tl, size, line.h_line, line.v_line)
        x, y = tl
        self.fb[x, y] = self._pixel(line.tl_corner)
        self.fb[bx, y] = self._pixel(line.tr_corner)
        self.fb[x, by] = self._pixel(line.bl_corner)
        self.fb[bx, by] = self._pixel(line.br_corner)

    def filled_box(self, tl: Vec2, size: Vec2, chr: str) -> None:
        if not self._fits(tl, size):
            return
        pixel = self._pixel(chr)
        x, y = tl
        w, h = size
        for py in range(y, y + h):
            for px in range(x, x + w):
                self.fb[px, py] = pixel

    def paint_format(self, tl: Vec2, size: Vec2, fmt: Style) -> None:
        """Layer ``fmt`` over the style of every pixel in the rectangle."""
        if not self._fits(tl, size):
            return
        x, y = tl
        w, h = size
        for py in range(y, y + h):
            for px in range(x, x + w):
                old = self.fb[px, py]
                self.fb[px, py] = replace(old, style=old.style + fmt)

    def v_line(self, pos: Vec2, length: int, chr: str) -> None:
        """Draw down from ``pos``; a negative length draws up to ``pos``."""
        x, y = pos
        if length < 0:
            length = -length
            y -= length - 1
        fw, fh = self.fb.size
        if y < 0 or y + length > fh or not 0 <= x < fw:
            return
        pixel = self._pixel(chr)
        for py in range(y, y + length):
            self.fb[x, py] = pixel

    def h_line(self, pos: Vec2, length: int, chr: str) -> None:
        """Draw right from ``pos``; a negative length draws left to ``pos``."""
        x, y = pos
        if length < 0:
            length = -length
            x -= length - 1
        fw, fh = self.fb.size
        if x < 0 or x + length > fw or not 0 <= y < fh:
            return
        pixel = self._pixel(chr)
        for px in range(x, x + length):
            self.fb[px, y] = pixel

    def text(self, pos: Vec2, text: str) -> None:
        """Write ``text`` on one row starting at ``pos``, clipped to the buffer."""
        x, y = pos
        fw, fh = self.fb.size
        if not (0 <= y < fh and x < fw):
            return
        for i in range(max(0, -x), len(text)):
            if i + x >= fw:
                break
            self.fb[x + i, y] = self._pixel(text[i])