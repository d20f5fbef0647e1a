"""
Text parsing helpers shared by the daily solvers.

Every helper raises :class:`~aoc2021.errors.ParseError` instead of the
underlying ``ValueError`` so the dispatcher can report malformed input
uniformly.
"""

from __future__ import annotations

import re
from itertools import groupby
from typing import List, Match, Pattern, Union

from .errors import ParseError

__all__ = [
    "lines",
    "blocks",
    "parse_int",
    "parse_int_lines",
    "parse_csv_ints",
    "match_line",
]


def lines(text: str) -> List[str]:
    """Split ``text`` into right-stripped lines without trailing blank lines.

    Works for both ``\\n`` and ``\\r\\n`` line endings. Raises ParseError if
    nothing but whitespace remains.
    """
    result = [line.rstrip() for line in text.splitlines()]
    while result and not result[-1]:
        result.pop()
    while result and not result[0]:
        result.pop(0)
    if not result:
        raise ParseError("Input is empty")
    return result


def blocks(text: str) -> List[List[str]]:
    """Group lines into blocks separated by one or more blank lines."""
    return [list(group) for non_blank, group in groupby(lines(text), bool) if non_blank]


def parse_int(token: str, what: str = "number") -> int:
    """Parse a single integer token."""
    try:
        return int(token.strip())
    except ValueError as exc:
        raise ParseError(f'Could not parse {what} "{token.strip()}"') from exc


def parse_int_lines(text: str) -> List[int]:
    """Parse one integer per line."""
    return [parse_int(line) for line in lines(text)]


def parse_csv_ints(text: str) -> List[int]:
    """Parse a single line of comma separated integers."""
    rows = lines(text)
    if len(rows) != 1:
        raise ParseError(f"Expected a single line of numbers, got {len(rows)} lines")
    return [parse_int(token) for token in rows[0].split(",")]


def match_line(pattern: Union[str, Pattern[str]], line: str, what: str = "line") -> Match[str]:
    """Return the full match of ``pattern`` against ``line`` or raise ParseError."""
    m = re.fullmatch(pattern, line.strip())
    if m is None:
        raise ParseError(f'Could not parse {what} "{line.strip()}"')
    return m
