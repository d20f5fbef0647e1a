"""Day 18: Snailfish.

A snailfish number is kept flat: the regular numbers in reading order, each
with its nesting depth. Exploding and splitting only ever touch neighbours in
that order, so no tree is needed.
"""

from __future__ import annotations

from functools import reduce
from itertools import permutations
from typing import List, Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines
from . import check_part

TITLE = "Day 18: Snailfish"
REPORT = {
    1: "The magnitude of added snailfish numbers is {}.",
    2: "The largest magnitude of any addition is {}.",
}

EXPLODE_DEPTH = 5
SPLIT_AT = 10

# (value, depth) pairs in reading order
Number = List[Tuple[int, int]]


def parse_number(line: str) -> Number:
    """Parse one bracketed snailfish number."""
    text = line.strip()
    number: Number = []
    # completed elements of every pair still open
    open_pairs: List[int] = []
    prev = ""
    i = 0
    while i < len(text):
        ch = text[i]
        starts_element = ch == "[" or ch.isdigit()
        if starts_element and prev not in ("[", ",") and (prev or ch != "["):
            raise ParseError(f'Misplaced element in snailfish number "{text}"')
        if ch.isdigit():
            j = i
            while j < len(text) and text[j].isdigit():
                j += 1
            if len(open_pairs) >= EXPLODE_DEPTH:
                raise ParseError(f'Snailfish number "{text}" is nested deeper than four pairs')
            number.append((int(text[i:j]), len(open_pairs)))
            open_pairs[-1] += 1
            prev, i = "0", j
            continue
        if ch == "[":
            open_pairs.append(0)
        elif ch == ",":
            if not open_pairs or open_pairs[-1] != 1 or prev == ",":
                raise ParseError(f'Misplaced comma in snailfish number "{text}"')
        elif ch == "]":
            if not open_pairs or open_pairs.pop() != 2:
                raise ParseError(f'Snailfish pair does not hold two elements in "{text}"')
            if open_pairs:
                open_pairs[-1] += 1
            elif i != len(text) - 1:
                raise ParseError(f'Trailing characters after snailfish number "{text}"')
        else:
            raise ParseError(f"Unexpected character {ch!r} in snailfish number")
        prev = ch
        i += 1
    if open_pairs or not number:
        raise ParseError(f'Could not parse snailfish number "{text}"')
    return number


def parse(text: str) -> List[Number]:
    return [parse_number(line) for line in lines(text)]


def _explode(number: Number) -> bool:
    for i, (left, depth) in enumerate(number):
        if depth < EXPLODE_DEPTH:
            continue
        right = number[i + 1][0]
        if i > 0:
            value, d = number[i - 1]
            number[i - 1] = (value + left, d)
        if i + 2 < len(number):
            value, d = number[i + 2]
            number[i + 2] = (value + right, d)
        number[i : i + 2] = [(0, depth - 1)]
        return True
    return False


def _split(number: Number) -> bool:
    for i, (value, depth) in enumerate(number):
        if value >= SPLIT_AT:
            number[i : i + 1] = [(value // 2, depth + 1), ((value + 1) // 2, depth + 1)]
            return True
    return False


def add(a: Number, b: Number) -> Number:
    """Add two snailfish numbers and reduce the result."""
    number = [(value, depth + 1) for value, depth in a + b]
    while _explode(number) or _split(number):
        pass
    return number


def magnitude(number: Number) -> int:
    """Collapse the deepest leftmost pair until a single value remains.

    The leftmost regular number at the greatest depth is always the left half
    of a pair whose right half is also a regular number.
    """
    items = list(number)
    while len(items) > 1:
        deepest = max(depth for _, depth in items)
        i = next(i for i, (_, depth) in enumerate(items) if depth == deepest)
        items[i : i + 2] = [(3 * items[i][0] + 2 * items[i + 1][0], deepest - 1)]
    return items[0][0]


def part_one(numbers: List[Number]) -> int:
    return magnitude(reduce(add, numbers))


def part_two(numbers: List[Number]) -> int:
    if len(numbers) < 2:
        raise ParseError("Need at least two snailfish numbers to add a pair")
    return max(magnitude(add(a, b)) for a, b in permutations(numbers, 2))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    numbers = parse(text)
    return part_one(numbers) if part == 1 else part_two(numbers)
