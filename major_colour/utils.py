# major_colour/utils.py
from __future__ import annotations

"""
Shared utilities for major_colour.

Pretty formatting helpers and tidy print-based logging used by the CLI.
"""

import sys
from typing import Any, Iterable, Tuple


# Pretty formatting


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks; ints get 1,234 grouping."""
    return sep.join(
        f"{name}: {value:,}" if isinstance(value, int) else f"{name}: {value}"
        for name, value in pairs
    )


# Pretty logging


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "key_value_pairs_to_string",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
