"""Day 8: Seven Segment Search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines
from . import check_part

TITLE = "Day 8: Seven Segment Search"
REPORT = {
    1: "The digits 1, 4, 7, 8 appear {} times.",
    2: "The sum of all decoded digits is {}.",
}

Pattern = FrozenSet[str]

# Digits identified by their segment count alone.
UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


@dataclass
class Entry:
    patterns: List[Pattern]
    output: List[Pattern]


def parse(text: str) -> List[Entry]:
    entries = []
    for line in lines(text):
        if line.count("|") != 1:
            raise ParseError(f'Could not parse entry "{line}"')
        left, right = line.split("|")
        patterns = [frozenset(word) for word in left.split()]
        output = [frozenset(word) for word in right.split()]
        if len(patterns) != 10 or len(output) != 4:
            raise ParseError(f'Entry "{line}" needs ten patterns and four output digits')
        if any(not set(p) <= set("abcdefg") for p in patterns + output):
            raise ParseError(f'Entry "{line}" uses unknown segments')
        entries.append(Entry(patterns, output))
    return entries


def decode(entry: Entry) -> int:
    """Deduce the wiring from the ten patterns and read the output value.

    One, four, seven and eight have unique lengths. The six-segment digits
    split by containing four (nine) or one (zero); the five-segment digits by
    containing one (three) or sharing three segments with four (five).
    """
    by_length: Dict[int, List[Pattern]] = {}
    for pattern in entry.patterns:
        by_length.setdefault(len(pattern), []).append(pattern)
    try:
        one, = by_length[2]
        four, = by_length[4]
        seven, = by_length[3]
        eight, = by_length[7]
        sixes = by_length[6]
        fives = by_length[5]
    except (KeyError, ValueError) as exc:
        raise ParseError("Signal patterns are not a permutation of the ten digits") from exc

    digits = {one: 1, four: 4, seven: 7, eight: 8}
    for pattern in sixes:
        if four <= pattern:
            digits[pattern] = 9
        elif one <= pattern:
            digits[pattern] = 0
        else:
            digits[pattern] = 6
    for pattern in fives:
        if one <= pattern:
            digits[pattern] = 3
        elif len(pattern & four) == 3:
            digits[pattern] = 5
        else:
            digits[pattern] = 2

    try:
        return int("".join(str(digits[p]) for p in entry.output))
    except KeyError as exc:
        raise ParseError("Output digit does not match any signal pattern") from exc


def part_one(entries: List[Entry]) -> int:
    return sum(len(digit) in UNIQUE_LENGTHS for entry in entries for digit in entry.output)


def part_two(entries: List[Entry]) -> int:
    return sum(decode(entry) for entry in entries)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    entries = parse(text)
    return part_one(entries) if part == 1 else part_two(entries)
