# major_colour/__init__.py
"""
major_colour package.

Purpose:
  Classify arbitrary 24-bit colours into 14 named major colours and turn a
  major colour back into an RGBA pixel. See classify_colour.py for CLI.

Public API:
  nearest_color   : hex int -> MajorColour (nearest by RGB Euclidean distance).
  rgba_from_color : MajorColour -> (r, g, b, 255).
  to_major        : exact canonical RGB -> MajorColour.
  MajorColour     : closed enum of labels, in palette declaration order.
  core_types      : RGB value object, hex helpers, distance, errors.
  palette_data    : palette table and lazily built views.
  swatch          : PNG swatch strips of major colours.
  utils           : formatting and logging helpers.

Quick start:
  from major_colour import nearest_color, rgba_from_color
  rgba_from_color(nearest_color(0x7F7F7F))  # (128, 128, 128, 255)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import palette_data
from . import classify
from . import swatch
from . import utils

from .core_types import (  # noqa: E402
    RGB,
    MajorColour,
    PaletteItem,
    UnknownMajorColourError,
)
from .classify import (  # noqa: E402
    nearest_color,
    palette_distances,
    rgba_from_color,
    to_major,
)

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "palette_data",
    "classify",
    "swatch",
    "utils",
    "RGB",
    "MajorColour",
    "PaletteItem",
    "UnknownMajorColourError",
    "nearest_color",
    "palette_distances",
    "rgba_from_color",
    "to_major",
]
