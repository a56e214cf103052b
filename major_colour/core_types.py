from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np

from .constants import CHANNEL_MAX, HEX_MAX

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexInt = int
HexStr = str


# Errors


class UnknownMajorColourError(ValueError):
    """Raised when a hex value is not one of the canonical palette values."""

    def __init__(self, hex_value: int) -> None:
        super().__init__(f"not a known palette colour: {format_hex(hex_value)}")
        self.hex_value = hex_value


# Labels


class MajorColour(Enum):
    """Closed set of major colour labels, in palette declaration order."""

    GREY = "Grey"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    CYAN = "Cyan"
    VIOLET = "Violet"
    PINK = "Pink"
    WHITE = "White"
    BLACK = "Black"
    BLUE = "Blue"
    DARK_BLUE = "DarkBlue"
    LIGHT_BLUE = "LightBlue"
    LIGHT_GREEN = "LightGreen"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# Value objects


@dataclass(frozen=True)
class RGB:
    """Packed hex plus its three 8-bit channels."""

    hex: HexInt
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", _check_hex(self.hex))
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= CHANNEL_MAX:
                raise ValueError(f"channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: HexInt) -> "RGB":
        value = _check_hex(value)
        r, g, b = hex_to_rgb(value)
        return cls(value, r, g, b)

    def as_tuple(self) -> RGBTuple:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class PaletteItem:
    """Palette entry: a major colour and its canonical RGB value."""

    colour: MajorColour
    rgb: RGB


# Small helpers


def _check_hex(value: object) -> int:
    """Normalise a Python or NumPy integer to int and bound-check it."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("hex value must be an int, got bool")
    try:
        number = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"hex value must be an int, got {type(value).__name__}"
        ) from None
    if not 0 <= number <= HEX_MAX:
        raise ValueError(f"hex value out of 24-bit range: {number:#x}")
    return number


def hex_to_rgb(value: HexInt) -> RGBTuple:
    """Split a 24-bit integer into its (r, g, b) bytes."""
    value = _check_hex(value)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgb_to_hex(rgb: RGBTuple) -> HexInt:
    """Pack an (r, g, b) tuple into a 24-bit integer."""
    r, g, b = (int(c) for c in rgb)
    for channel in (r, g, b):
        if not 0 <= channel <= CHANNEL_MAX:
            raise ValueError(f"channel out of range: {channel}")
    return (r << 16) | (g << 8) | b


def format_hex(value: HexInt) -> HexStr:
    """24-bit integer to lowercase hex string '#rrggbb'."""
    return f"#{value & HEX_MAX:06x}"


def parse_hex_string(text: str) -> HexInt:
    """Parse '#rgb', '#rrggbb', 'rrggbb' or '0xrrggbb' (case-insensitive)."""
    s = text.strip().lower()
    if s.startswith("#"):
        s = s[1:]
    elif s.startswith("0x"):
        s = s[2:]
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6 or any(ch not in "0123456789abcdef" for ch in s):
        raise ValueError(f"not a hex colour: {text!r}")
    return int(s, 16)


def euclidean_distance(
    a: Union[RGB, RGBTuple], b: Union[RGB, RGBTuple]
) -> float:
    """Straight-line distance between two colours in RGB space."""
    ar, ag, ab = a.as_tuple() if isinstance(a, RGB) else a
    br, bg, bb = b.as_tuple() if isinstance(b, RGB) else b
    dr = float(ar) - float(br)
    dg = float(ag) - float(bg)
    db = float(ab) - float(bb)
    return math.sqrt(dr * dr + dg * dg + db * db)


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HexInt",
    "HexStr",
    # errors
    "UnknownMajorColourError",
    # value objects
    "MajorColour",
    "RGB",
    "PaletteItem",
    # helpers
    "hex_to_rgb",
    "rgb_to_hex",
    "format_hex",
    "parse_hex_string",
    "euclidean_distance",
]
