"""Terminal text styles: colours plus underline, reverse, bold and italic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional

RGB = tuple[int, int, int]

_ESC = "\x1b"
NOSTYLE = _ESC + "[0m"


class StyleFlag(IntFlag):
    NONE = 0
    UNDERLINE = 1 << 1
    REVERSE = 1 << 2
    BOLD = 1 << 3
    ITALIC = 1 << 4


# Order in which flags are written, with their "on" and "off" SGR codes.
_FLAG_CODES: tuple[tuple[StyleFlag, str, str], ...] = (
    (StyleFlag.UNDERLINE, "4", "24"),
    (StyleFlag.REVERSE, "7", "27"),
    (StyleFlag.BOLD, "1", "22"),
    (StyleFlag.ITALIC, "3", "23"),
)


def _fg_str(color: Optional[RGB]) -> str:
    if color is None:
        return ""
    r, g, b = color
    return f"{_ESC}[38;2;{r};{g};{b}m"


def _bg_str(color: Optional[RGB]) -> str:
    if color is None:
        return ""
    r, g, b = color
    return f"{_ESC}[48;2;{r};{g};{b}m"


@dataclass(frozen=True)
class Style:
    """Foreground and background colour (None for unset) and format flags."""

    fg: Optional[RGB] = None
    bg: Optional[RGB] = None
    format: StyleFlag = StyleFlag.NONE

    def string(self) -> str:
        """Return the escape sequence that resets and then applies this style."""
        out = NOSTYLE
        if self.format:
            codes = [on for flag, on, _ in _FLAG_CODES if self.format & flag]
            out += f"{_ESC}[{';'.join(codes)}m"
        return out + _fg_str(self.fg) + _bg_str(self.bg)

    def difference_string(self, other: Style) -> str:
        """Return the escape sequence that changes this style into ``other``."""
        out = ""
        diff = self.format ^ other.format
        if diff:
            codes = [
                on if other.format & flag else off
                for flag, on, off in _FLAG_CODES
                if diff & flag
            ]
            if codes:
                out += f"{_ESC}[{';'.join(codes)}m"
        if self.fg != other.fg:
            out += _fg_str(other.fg)
        if self.bg != other.bg:
            out += _bg_str(other.bg)
        return out

    def __add__(self, other: Style) -> Style:
        """Layer ``other`` on top: its set colours win and flags are combined."""
        if not isinstance(other, Style):
            return NotImplemented
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            format=StyleFlag(self.format | other.format),
        )