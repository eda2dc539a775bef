"""Named character classes used for word motion and syntax handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharSet:
    """A set of characters backed by a string of its members."""

    data: str

    def contains(self, c: str | int) -> bool:
        """Return True if the single character (or code point) ``c`` is a member."""
        if isinstance(c, int):
            if not 0 <= c < 0x110000:
                return False
            c = chr(c)
        return len(c) == 1 and c in self.data

    def __contains__(self, c: object) -> bool:
        if not isinstance(c, (str, int)):
            return False
        return self.contains(c)

    def __str__(self) -> str:
        return self.data


_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "1234567890"
_SPECIALS = "`~!@#$%^&*()-=+[]{}\\|;:'\",<.>/?"

ALL = CharSet(" \r\n\t\f\v" + _LETTERS + _DIGITS + "_" + _SPECIALS)
WHITESPACE = CharSet(" \r\n\t\f\v")
NONWHITESPACE = CharSet(_LETTERS + _DIGITS + "_" + _SPECIALS)
NONESCAPE = CharSet(" " + _LETTERS + _DIGITS + "_" + _SPECIALS)
LETTERS = CharSet(_LETTERS)
LOWER_LETTERS = CharSet("abcdefghijklmnopqrstuvwxyz")
UPPER_LETTERS = CharSet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
CHARACTERS = CharSet(_LETTERS + _DIGITS + "_")
NUMBERS = CharSet("0123456789")
NUMBER_CHARACTERS = CharSet("0123456789.xXaAbBcCdDeEfF")
SPECIALS = CharSet(_SPECIALS)
STRING_CHARACTERS = CharSet("\"'`")


def char_set_of(c: str | int) -> CharSet:
    """Return the word class of ``c``: characters, whitespace, specials or all."""
    if CHARACTERS.contains(c):
        return CHARACTERS
    if WHITESPACE.contains(c):
        return WHITESPACE
    if SPECIALS.contains(c):
        return SPECIALS
    return ALL