import pytest

from vidd import charsets
from vidd.charsets import CharSet, char_set_of


@pytest.mark.parametrize("c", ["a", "Z", "0", "_"])
def test_word_characters(c):
    assert char_set_of(c) == charsets.CHARACTERS


@pytest.mark.parametrize("c", [" ", "\t", "\n"])
def test_whitespace(c):
    assert char_set_of(c) == charsets.WHITESPACE


@pytest.mark.parametrize("c", ["(", "{", "\\", "?"])
def test_specials(c):
    assert char_set_of(c) == charsets.SPECIALS


def test_unknown_falls_back_to_all():
    assert char_set_of("é") == charsets.ALL


def test_contains_accepts_code_points():
    assert charsets.LETTERS.contains(ord("q")) is True
    assert charsets.LETTERS.contains(ord("1")) is False
    assert charsets.LETTERS.contains(-5) is False


def test_in_operator():
    assert charsets.LOWER_LETTERS.__contains__("x") is True
    assert charsets.LOWER_LETTERS.__contains__("X") is False
    assert charsets.LOWER_LETTERS.__contains__("ab") is False
    assert charsets.LOWER_LETTERS.__contains__("") is False


def test_null_is_not_a_member():
    assert charsets.ALL.__contains__("\0") is False
    assert charsets.WHITESPACE.__contains__("\0") is False
    assert char_set_of("\0") == charsets.ALL


def test_equality_by_data():
    assert CharSet("abc") == CharSet("abc")
    assert CharSet("abc") != CharSet("abd")


def test_string_characters():
    assert all(charsets.STRING_CHARACTERS.__contains__(q) for q in "\"'`")
    assert charsets.STRING_CHARACTERS.__contains__("a") is False
    assert str(charsets.NUMBERS) == "0123456789"