from __future__ import annotations

"""
Nearest major-colour classification and the inverse pixel lookup.

Exports:
  nearest_color(input_hex) -> MajorColour
  to_major(rgb) -> MajorColour
  rgba_from_color(colour, less_transparent=False) -> (r, g, b, a)
  palette_distances(input_hex) -> list[(MajorColour, float)]

Notes:
  The scan runs in palette declaration order and only replaces the running
  best on a strictly smaller distance, so ties resolve to the earlier row.
"""

from typing import List, Tuple

import numpy as np

from .constants import OPAQUE_ALPHA
from .core_types import (
    RGB,
    HexInt,
    MajorColour,
    PaletteItem,
    RGBATuple,
    UnknownMajorColourError,
    euclidean_distance,
    hex_to_rgb,
)
from .palette_data import get_palette, palette_lookup, palette_rgb_array


def to_major(rgb: RGB) -> MajorColour:
    """Exact hex match against the canonical palette values (no distance)."""
    for item in get_palette():
        if item.rgb.hex == rgb.hex:
            return item.colour
    raise UnknownMajorColourError(rgb.hex)


def nearest_color(input_hex: HexInt) -> MajorColour:
    """Major colour whose canonical RGB is closest to input_hex."""
    rgb = RGB.from_hex(input_hex)
    palette = get_palette()

    nearest: PaletteItem = palette[0]  # Grey
    nearest_dist = float("inf")
    for item in palette:
        dist = euclidean_distance(rgb, item.rgb)
        if dist < nearest_dist:
            nearest = item
            nearest_dist = dist

    return to_major(nearest.rgb)


def rgba_from_color(colour: MajorColour, less_transparent: bool = False) -> RGBATuple:
    """
    Palette channels for colour plus an opaque alpha.

    less_transparent is accepted but does not change the result yet; alpha is
    always 255.
    """
    if not isinstance(colour, MajorColour):
        raise TypeError(f"expected MajorColour, got {type(colour).__name__}")
    rgb = palette_lookup()[colour]
    return (rgb.r, rgb.g, rgb.b, OPAQUE_ALPHA)


def palette_distances(input_hex: HexInt) -> List[Tuple[MajorColour, float]]:
    """Euclidean RGB distance from input_hex to every palette row, in order."""
    src = np.array(hex_to_rgb(input_hex), dtype=np.float64)
    diff = palette_rgb_array().astype(np.float64) - src[None, :]
    dist = np.sqrt(np.sum(diff * diff, axis=1))
    return [(item.colour, float(d)) for item, d in zip(get_palette(), dist)]


__all__ = ["nearest_color", "to_major", "rgba_from_color", "palette_distances"]
