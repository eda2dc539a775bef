"""Decoding of the xterm mouse event byte."""

from __future__ import annotations

from enum import IntEnum


class MouseEventType(IntEnum):
    MOVE = 0b010
    CLICK = 0b001
    SCROLL = 0b011


class MouseEventButton(IntEnum):
    LEFT = 0b00
    MIDDLE = 0b01
    RIGHT = 0b10
    RELEASE = 0b11
    NONE = 0b11


class MouseEventScroll(IntEnum):
    UP = 0b0
    DOWN = 0b1


def _mask(v: int, mask: int, offset: int) -> int:
    return (v & mask) >> offset


def mouse_event_ctrl(v: int) -> int:
    return _mask(v, 0b00010000, 4)


def mouse_event_alt(v: int) -> int:
    return _mask(v, 0b00010000, 3)


def mouse_event_type(v: int) -> int:
    return _mask(v, 0b11100000, 5)


def mouse_event_button(v: int) -> int:
    return _mask(v, 0b00000011, 0)


def mouse_event_scroll(v: int) -> int:
    return _mask(v, 0b00000001, 0)