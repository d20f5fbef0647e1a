"""Day 23: Amphipod.

Burrow states are searched with Dijkstra's algorithm. A state is the hallway
(eleven cells) plus the rooms, each listed from the hallway downwards.
Amphipods only ever move from a room into the hallway or from the hallway
into their own room; a direct room-to-room move costs the same as stopping
in the hallway on the way.
"""

from __future__ import annotations

import heapq
import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines
from . import check_part

logger = logging.getLogger(__name__)

TITLE = "Day 23: Amphipod"
REPORT = {
    1: "The least energy required to organize the amphipods is {}.",
    2: "The least energy required to organize the amphipods in the unfolded burrow is {}.",
}

KINDS = "ABCD"
ENERGY = {"A": 1, "B": 10, "C": 100, "D": 1000}
HALLWAY_LENGTH = 11
DOORS = (2, 4, 6, 8)
STOPS = tuple(i for i in range(HALLWAY_LENGTH) if i not in DOORS)
EMPTY = "."

# Rows revealed when the diagram is unfolded.
UNFOLDED_ROWS = ("DCBA", "DBAC")

Rooms = Tuple[Tuple[str, ...], ...]
State = Tuple[str, Rooms]


@dataclass
class Burrow:
    rows: List[str]

    def rooms(self, unfold: bool = False) -> Rooms:
        rows = self.rows
        if unfold:
            rows = rows[:1] + list(UNFOLDED_ROWS) + rows[1:]
        return tuple(tuple(row[i] for row in rows) for i in range(len(KINDS)))


def parse(text: str) -> Burrow:
    rows = []
    for line in lines(text):
        letters = re.findall(r"[A-Z]", line)
        if letters:
            if len(letters) != len(KINDS) or set(letters) - set(KINDS):
                raise ParseError(f'Could not parse burrow row "{line.strip()}"')
            rows.append("".join(letters))
    if not rows:
        raise ParseError("Burrow diagram shows no amphipods")
    everyone = "".join(rows)
    if any(everyone.count(kind) != len(rows) for kind in KINDS):
        raise ParseError("Every kind of amphipod must fill exactly one room")
    return Burrow(rows)


def _hallway_clear(hallway: str, start: int, end: int) -> bool:
    """True if every cell strictly after ``start`` up to ``end`` is empty."""
    step = 1 if end > start else -1
    return all(hallway[i] == EMPTY for i in range(start + step, end + step, step))


def _moves(state: State) -> Iterator[Tuple[int, State]]:
    hallway, rooms = state

    # Into a room: only the room's own kind, only when no stranger remains.
    for pos in STOPS:
        kind = hallway[pos]
        if kind == EMPTY:
            continue
        target = KINDS.index(kind)
        room = rooms[target]
        if any(a not in (EMPTY, kind) for a in room):
            continue
        if not _hallway_clear(hallway, pos, DOORS[target]):
            continue
        slot = max(i for i, a in enumerate(room) if a == EMPTY)
        steps = abs(pos - DOORS[target]) + slot + 1
        new_room = room[:slot] + (kind,) + room[slot + 1 :]
        new_hallway = hallway[:pos] + EMPTY + hallway[pos + 1 :]
        new_rooms = rooms[:target] + (new_room,) + rooms[target + 1 :]
        yield steps * ENERGY[kind], (new_hallway, new_rooms)

    # Out of a room: the topmost amphipod, unless the room is already settled.
    for r, room in enumerate(rooms):
        if all(a in (EMPTY, KINDS[r]) for a in room):
            continue
        slot = next(i for i, a in enumerate(room) if a != EMPTY)
        kind = room[slot]
        new_room = room[:slot] + (EMPTY,) + room[slot + 1 :]
        new_rooms = rooms[:r] + (new_room,) + rooms[r + 1 :]
        for pos in STOPS:
            if hallway[pos] != EMPTY or not _hallway_clear(hallway, DOORS[r], pos):
                continue
            steps = slot + 1 + abs(pos - DOORS[r])
            new_hallway = hallway[:pos] + kind + hallway[pos + 1 :]
            yield steps * ENERGY[kind], (new_hallway, new_rooms)


def least_energy(rooms: Rooms) -> int:
    depth = len(rooms[0])
    start: State = (EMPTY * HALLWAY_LENGTH, rooms)
    goal: State = (EMPTY * HALLWAY_LENGTH, tuple((kind,) * depth for kind in KINDS))
    best: Dict[State, int] = {start: 0}
    queue: List[Tuple[int, State]] = [(0, start)]
    while queue:
        energy, state = heapq.heappop(queue)
        if state == goal:
            logger.debug(f"Explored {len(best)} burrow states")
            return energy
        if energy > best[state]:
            continue
        for cost, nxt in _moves(state):
            candidate = energy + cost
            if candidate < best.get(nxt, candidate + 1):
                best[nxt] = candidate
                heapq.heappush(queue, (candidate, nxt))
    raise ParseError("The amphipods cannot be organized")


def part_one(burrow: Burrow) -> int:
    return least_energy(burrow.rooms())


def part_two(burrow: Burrow) -> int:
    return least_energy(burrow.rooms(unfold=True))


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    burrow = parse(text)
    return part_one(burrow) if part == 1 else part_two(burrow)
