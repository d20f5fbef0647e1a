"""
Grid utilities for the daily solvers.

Several puzzles are played on small 2D maps. This module converts their text
form into numpy arrays and back, and offers the neighbourhood helpers the
solvers share.
"""

from __future__ import annotations

import numpy as np
from typing import Dict, Iterable, List, Tuple

from .errors import ParseError
from .parsing import lines


# Type alias for clarity. Puzzle grids are small 2D arrays of integers.
Array = np.ndarray

__all__ = [
    "Array",
    "to_array",
    "parse_digit_grid",
    "parse_char_grid",
    "neighbors4",
    "in_bounds",
    "render",
    "render_points",
]


def to_array(rows: List[List[int]]) -> Array:
    """Convert a nested Python list into a 2D numpy array of dtype int64."""
    a = np.asarray(rows, dtype=np.int64)
    if a.ndim != 2:
        raise ParseError(f"Grid must be rectangular, got shape {a.shape}")
    return a


def _check_rectangular(rows: List[str]) -> None:
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise ParseError(f"Grid rows differ in width ({sorted(widths)})")


def parse_digit_grid(text: str) -> Array:
    """Parse lines of single digits (``"2199943210"``) into an int array."""
    rows = lines(text)
    _check_rectangular(rows)
    for row in rows:
        if not row.isdigit():
            raise ParseError(f'Grid row "{row}" contains non-digit characters')
    return to_array([[int(ch) for ch in row] for row in rows])


def parse_char_grid(text: str, mapping: Dict[str, int]) -> Array:
    """Parse a character grid, translating each character through ``mapping``."""
    rows = lines(text)
    _check_rectangular(rows)
    out = []
    for row in rows:
        try:
            out.append([mapping[ch] for ch in row])
        except KeyError as exc:
            raise ParseError(f"Unexpected character {exc.args[0]!r} in grid") from exc
    return to_array(out)


def neighbors4(y: int, x: int) -> List[Tuple[int, int]]:
    """Return the coordinates of the 4-neighbourhood around (y, x)."""
    return [(y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)]


def in_bounds(a: Array, y: int, x: int) -> bool:
    """Return True if (y, x) indexes a cell of ``a``."""
    h, w = a.shape
    return 0 <= y < h and 0 <= x < w


def render(mask: Array, on: str = "#", off: str = ".") -> str:
    """Render a boolean array as text, one line per row."""
    return "\n".join("".join(on if cell else off for cell in row) for row in mask)


def render_points(points: Iterable[Tuple[int, int]], on: str = "#", off: str = ".") -> str:
    """Render a set of (x, y) points cropped to their bounding box."""
    points = list(points)
    if not points:
        return ""
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    mask = np.zeros((max(ys) - min(ys) + 1, max(xs) - min(xs) + 1), dtype=bool)
    for x, y in points:
        mask[y - min(ys), x - min(xs)] = True
    return render(mask, on, off)
