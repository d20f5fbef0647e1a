"""Day 14: Extended Polymerization.

The polymer doubles in length every step, so only the counts of adjacent
pairs are tracked. Every element except the first is the right half of
exactly one pair, which gives the element counts back.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import blocks, match_line
from . import check_part

TITLE = "Day 14: Extended Polymerization"
REPORT = {
    1: "After 10 steps the most common minus the least common element count is {}.",
    2: "After 40 steps the most common minus the least common element count is {}.",
}

Pair = Tuple[str, str]


@dataclass
class Manual:
    template: str
    rules: Dict[Pair, str]


def parse(text: str) -> Manual:
    groups = blocks(text)
    if len(groups) != 2 or len(groups[0]) != 1:
        raise ParseError("Expected a polymer template and insertion rules separated by a blank line")
    template = groups[0][0].strip()
    if not template.isalpha():
        raise ParseError(f'Could not parse polymer template "{template}"')
    rules = {}
    for line in groups[1]:
        m = match_line(r"([A-Z])([A-Z]) -> ([A-Z])", line, "insertion rule")
        rules[(m.group(1), m.group(2))] = m.group(3)
    return Manual(template, rules)


def element_counts(manual: Manual, steps: int) -> Counter:
    """Return how often each element occurs after ``steps`` insertion steps."""
    pairs = Counter(zip(manual.template, manual.template[1:]))
    for _ in range(steps):
        grown: Counter = Counter()
        for (left, right), n in pairs.items():
            middle = manual.rules.get((left, right))
            if middle is None:
                grown[(left, right)] += n
            else:
                grown[(left, middle)] += n
                grown[(middle, right)] += n
        pairs = grown
    counts = Counter({manual.template[0]: 1})
    for (_, right), n in pairs.items():
        counts[right] += n
    return counts


def spread(counts: Counter) -> int:
    return max(counts.values()) - min(counts.values())


def part_one(manual: Manual) -> int:
    return spread(element_counts(manual, 10))


def part_two(manual: Manual) -> int:
    return spread(element_counts(manual, 40))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    manual = parse(text)
    return part_one(manual) if part == 1 else part_two(manual)
