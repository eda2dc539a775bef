"""The 16 and 256 entry terminal palettes as RGB triples."""

from __future__ import annotations

from itertools import product

RGB = tuple[int, int, int]

COLOR16_TABLE: tuple[RGB, ...] = (
    (0, 0, 0),
    (200, 0, 0),
    (0, 200, 0),
    (200, 200, 0),
    (0, 0, 200),
    (200, 0, 200),
    (0, 200, 200),
    (200, 200, 200),
    (0, 0, 0),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

_BASE_256: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),
    (0x80, 0x00, 0x00),
    (0x00, 0x80, 0x00),
    (0x80, 0x80, 0x00),
    (0x00, 0x00, 0x80),
    (0x80, 0x00, 0x80),
    (0x00, 0x80, 0x80),
    (0xC0, 0xC0, 0xC0),
    (0x80, 0x80, 0x80),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0xFF, 0xFF, 0x00),
    (0x00, 0x00, 0xFF),
    (0xFF, 0x00, 0xFF),
    (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
)

_CUBE_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)

_GRAYS = (
    0x08, 0x12, 0x1C, 0x26, 0x30, 0x3A, 0x44, 0x4E,
    0x58, 0x60, 0x66, 0x76, 0x80, 0x8A, 0x94, 0x9E,
    0xA8, 0xB2, 0xBC, 0xC6, 0xD0, 0xDA, 0xE4, 0xEE,
)

COLOR256_TABLE: tuple[RGB, ...] = (
    _BASE_256
    + tuple(product(_CUBE_LEVELS, repeat=3))
    + tuple((g, g, g) for g in _GRAYS)
)

_TABLES = {16: COLOR16_TABLE, 256: COLOR256_TABLE}


def color_from_table(index: int, size: int) -> RGB:
    """Return the RGB triple of palette entry ``index`` in the ``size``-colour table."""
    try:
        table = _TABLES[size]
    except KeyError:
        raise ValueError(f"no colour table of size {size}") from None
    if not 0 <= index < len(table):
        raise IndexError(f"colour index {index} outside table of size {size}")
    return table[index]