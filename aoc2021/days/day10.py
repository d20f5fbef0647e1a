"""Day 10: Syntax Scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines
from . import check_part

TITLE = "Day 10: Syntax Scoring"
REPORT = {
    1: "The total syntax error score is: {}.",
    2: "The middle autocomplete score is: {}.",
}

PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass
class Checked:
    corrupted_by: Optional[str]
    completion: str


def parse(text: str) -> List[str]:
    chunks = lines(text)
    allowed = set(PAIRS) | set(PAIRS.values())
    for line in chunks:
        unexpected = set(line) - allowed
        if unexpected:
            raise ParseError(f"Unexpected characters {sorted(unexpected)} in navigation subsystem")
    return chunks


def check(line: str) -> Checked:
    """Find the first illegal closing character, or the closers still missing."""
    expected: List[str] = []
    for ch in line:
        if ch in PAIRS:
            expected.append(PAIRS[ch])
        elif not expected or expected.pop() != ch:
            return Checked(ch, "")
    return Checked(None, "".join(reversed(expected)))


def completion_score(completion: str) -> int:
    score = 0
    for ch in completion:
        score = score * 5 + COMPLETION_SCORES[ch]
    return score


def part_one(chunks: List[str]) -> int:
    return sum(
        ERROR_SCORES[result.corrupted_by]
        for result in map(check, chunks)
        if result.corrupted_by is not None
    )


def part_two(chunks: List[str]) -> int:
    scores = [
        completion_score(result.completion)
        for result in map(check, chunks)
        if result.corrupted_by is None and result.completion
    ]
    if not scores:
        raise ParseError("There are no incomplete lines to autocomplete")
    return sorted(scores)[len(scores) // 2]


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    chunks = parse(text)
    return part_one(chunks) if part == 1 else part_two(chunks)
