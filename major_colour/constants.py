# major_colour/constants.py
"""
Fixed palette and numeric constants used across the project.

- PALETTE: (hex, (r, g, b), label) rows in declaration order
- Channel / hex bounds, opaque alpha, swatch cell size
"""
from __future__ import annotations

from typing import List, Tuple

# =========================
# Major palette (hex, rgb, label)
# =========================
# Row order is the tie-break order for nearest-colour lookups.
PALETTE: List[Tuple[int, Tuple[int, int, int], str]] = [
    (0x808080, (128, 128, 128), "Grey"),
    (0xFF0000, (255, 0, 0), "Red"),
    (0x00FF00, (0, 255, 0), "Green"),
    (0xFFF000, (255, 255, 0), "Yellow"),
    (0xFFA500, (255, 165, 0), "Orange"),
    (0x00FFFF, (0, 255, 255), "Cyan"),
    (0x8F00FF, (143, 0, 255), "Violet"),
    (0xFAB1BE, (255, 177, 190), "Pink"),
    (0xFFFFFF, (255, 255, 255), "White"),
    (0x000000, (0, 0, 0), "Black"),
    (0x0000FF, (0, 0, 255), "Blue"),
    (0x00008B, (0, 0, 139), "DarkBlue"),
    (0x13AAFD, (19, 170, 253), "LightBlue"),
    (0x16F916, (22, 249, 22), "LightGreen"),
]

# =========================
# Bounds
# =========================
CHANNEL_MAX = 255
HEX_MAX = 0xFFFFFF

# =========================
# Pixel output
# =========================
OPAQUE_ALPHA = 255
SWATCH_CELL = 16

__all__ = ["PALETTE", "CHANNEL_MAX", "HEX_MAX", "OPAQUE_ALPHA", "SWATCH_CELL"]
