import pytest

from vidd.style import NOSTYLE, Style, StyleFlag

FG_RED = "\x1b[38;2;255;0;0m"
BG_BLUE = "\x1b[48;2;0;0;255m"


def test_plain_style_is_reset_only():
    assert Style().string() == NOSTYLE


def test_colours_appended_after_reset():
    s = Style(fg=(255, 0, 0), bg=(0, 0, 255))
    assert s.string() == NOSTYLE + FG_RED + BG_BLUE


def test_flags_in_fixed_order():
    s = Style(format=StyleFlag.BOLD | StyleFlag.UNDERLINE)
    assert s.string() == NOSTYLE + "\x1b[4;1m"


def test_difference_of_equal_styles_is_empty():
    s = Style((1, 2, 3), (4, 5, 6), StyleFlag.ITALIC)
    assert s.difference_string(s) == ""


def test_difference_turns_flag_off():
    a = Style(format=StyleFlag.UNDERLINE)
    b = Style()
    assert a.difference_string(b) == "\x1b[24m"


def test_difference_turns_flag_on_and_changes_colour():
    a = Style(fg=(0, 0, 0))
    b = Style(fg=(255, 0, 0), format=StyleFlag.REVERSE)
    assert a.difference_string(b) == "\x1b[7m" + FG_RED


def test_add_keeps_unset_colours_and_merges_flags():
    base = Style((1, 1, 1), (2, 2, 2), StyleFlag.BOLD)
    top = Style(fg=(9, 9, 9), format=StyleFlag.ITALIC)
    result = base + top
    assert result.fg == (9, 9, 9)
    assert result.bg == (2, 2, 2)
    assert result.format == StyleFlag.BOLD | StyleFlag.ITALIC


def test_inplace_add_matches_add():
    s = Style(bg=(3, 3, 3))
    other = Style(format=StyleFlag.REVERSE)
    expected = s + other
    s += other
    assert s == expected


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Style() + 5