#!/usr/bin/env python3
"""
classify_colour.py
Classify hex colours into the 14 major colours and print their RGBA pixels.

Usage:
  python classify_colour.py VALUE [VALUE ...] --swatch PATH --cell N --debug

Input:
  Hex colours as '#rgb', '#rrggbb', 'rrggbb' or '0xrrggbb'.

Output:
  One line per value: '#rrggbb -> Label  rgba=(r, g, b, a)'.
  With --swatch, a PNG strip of the classified colours is written as well.

Notes:
  Invalid values are reported on stderr and the exit status is 2.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from major_colour.classify import nearest_color, palette_distances, rgba_from_color
from major_colour.constants import SWATCH_CELL
from major_colour.core_types import MajorColour, format_hex, parse_hex_string
from major_colour.swatch import save_swatch_png
from major_colour.utils import (
    debug_log,
    error,
    key_value_pairs_to_string,
    log,
    print_banner,
    warn,
)


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        values: hex colour strings
        swatch: optional Path for a PNG swatch
        cell: swatch cell size in pixels
        debug: bool for per-entry distances
    """
    parser = argparse.ArgumentParser(
        prog="classify_colour",
        description="Classify hex colours into major colours.",
    )
    parser.add_argument("values", nargs="+", help="Hex colours to classify")
    parser.add_argument(
        "--swatch", type=Path, default=None, help="Write a PNG swatch (optional)"
    )
    parser.add_argument(
        "--cell", type=int, default=SWATCH_CELL, help="Swatch cell size in pixels"
    )
    parser.add_argument("--debug", action="store_true", help="Print distances")
    return parser.parse_args(argv)


def _parse_values(texts: Sequence[str]) -> List[int]:
    return [parse_hex_string(t) for t in texts]


def _debug_distances(hex_value: int) -> None:
    """Print every palette distance for hex_value, nearest first."""
    rows = sorted(palette_distances(hex_value), key=lambda kv: kv[1])
    for colour, dist in rows:
        debug_log(f"  -> {colour.label}: {dist:.3f}")


def classify_values(
    hex_values: Sequence[int], debug: bool = False
) -> List[Tuple[int, MajorColour]]:
    """Classify and print each value; returns (hex, colour) pairs in order."""
    results: List[Tuple[int, MajorColour]] = []
    for hex_value in hex_values:
        colour = nearest_color(hex_value)
        log(f"{format_hex(hex_value)} -> {colour.label}  rgba={rgba_from_color(colour)}")
        if debug:
            _debug_distances(hex_value)
        results.append((hex_value, colour))
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_cli_args(argv)

    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Values", len(args.values)),
                    ("Swatch", str(args.swatch) if args.swatch else "-"),
                    ("Cell", args.cell),
                ]
            )
        )

    try:
        hex_values = _parse_values(args.values)
    except ValueError as exc:
        error(str(exc))
        return 2
    if args.swatch is not None and args.cell < 1:
        error(f"cell size must be >= 1, got {args.cell}")
        return 2

    print_banner("major colours")
    results = classify_values(hex_values, debug=args.debug)

    if args.swatch is not None:
        out = save_swatch_png(args.swatch, [c for _h, c in results], cell=args.cell)
        if out != args.swatch:
            warn(f"swatch written as PNG: {out}")
        log(f"swatch: {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
