from __future__ import annotations

"""
Palette definitions and builders.

Exports:
  PALETTE: list[tuple[int, RGBTuple, str]]  # [(hex, rgb, label), ...]
  build_palette(rows=PALETTE) -> tuple[PaletteItem, ...]
  get_palette()        -> shared, lazily built palette
  palette_lookup()     -> read-only MajorColour -> RGB mapping
  palette_rgb_array()  -> read-only uint8 [P,3]
"""

from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Tuple

import numpy as np

from .constants import PALETTE
from .core_types import RGB, MajorColour, PaletteItem, RGBTuple


def build_palette(
    rows: List[Tuple[int, RGBTuple, str]] = PALETTE,
) -> Tuple[PaletteItem, ...]:
    """
    Convert (hex, rgb, label) rows into PaletteItems, keeping row order.

    Every MajorColour must appear exactly once.
    """
    items: List[PaletteItem] = []
    seen = set()
    for hex_value, (r, g, b), label in rows:
        colour = MajorColour(label)
        if colour in seen:
            raise ValueError(f"duplicate palette label: {label}")
        seen.add(colour)
        items.append(PaletteItem(colour=colour, rgb=RGB(hex_value, r, g, b)))

    missing = [c.value for c in MajorColour if c not in seen]
    if missing:
        raise ValueError(f"palette missing labels: {', '.join(missing)}")
    return tuple(items)


@lru_cache(maxsize=None)
def get_palette() -> Tuple[PaletteItem, ...]:
    """The process-wide palette, built on first use and never mutated."""
    return build_palette()


@lru_cache(maxsize=None)
def palette_lookup() -> Mapping[MajorColour, RGB]:
    return MappingProxyType({item.colour: item.rgb for item in get_palette()})


@lru_cache(maxsize=None)
def palette_rgb_array() -> np.ndarray:
    """Palette channels as a read-only uint8 [P,3] array in declaration order."""
    arr = np.array([item.rgb.as_tuple() for item in get_palette()], dtype=np.uint8)
    arr.setflags(write=False)
    return arr


__all__ = [
    "PALETTE",
    "build_palette",
    "get_palette",
    "palette_lookup",
    "palette_rgb_array",
]
