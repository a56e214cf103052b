from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image

from .classify import rgba_from_color
from .constants import SWATCH_CELL
from .core_types import MajorColour

"""
Swatch rendering: one solid RGBA cell per major colour, laid out left to right.
"""


def swatch_array(
    colours: Sequence[MajorColour],
    cell: int = SWATCH_CELL,
    less_transparent: bool = False,
) -> np.ndarray:
    """Build a uint8 (cell, cell*N, 4) RGBA strip for colours."""
    if not colours:
        raise ValueError("swatch needs at least one colour")
    if cell < 1:
        raise ValueError(f"cell size must be >= 1, got {cell}")

    out = np.zeros((cell, cell * len(colours), 4), dtype=np.uint8)
    for i, colour in enumerate(colours):
        out[:, i * cell : (i + 1) * cell] = rgba_from_color(colour, less_transparent)
    return out


def save_swatch_png(
    path: Path,
    colours: Sequence[MajorColour],
    cell: int = SWATCH_CELL,
    less_transparent: bool = False,
) -> Path:
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    arr = swatch_array(colours, cell=cell, less_transparent=less_transparent)
    Image.fromarray(arr).save(path)
    return path


__all__ = ["swatch_array", "save_swatch_png"]
