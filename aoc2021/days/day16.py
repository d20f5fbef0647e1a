"""Day 16: Packet Decoder.

Decodes the BITS transmission format: a hexadecimal string encoding a tree
of literal and operator packets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines
from . import check_part

TITLE = "Day 16: Packet Decoder"
REPORT = {
    1: "The sum of the packet version numbers is {}.",
    2: "The value of the packet is {}.",
}

LITERAL = 4


@dataclass
class Packet:
    version: int
    type_id: int
    value: int = 0
    children: List["Packet"] = field(default_factory=list)

    def version_sum(self) -> int:
        return self.version + sum(child.version_sum() for child in self.children)

    def evaluate(self) -> int:
        if self.type_id == LITERAL:
            return self.value
        values = [child.evaluate() for child in self.children]
        if self.type_id == 0:
            return sum(values)
        if self.type_id == 1:
            return math.prod(values)
        if self.type_id == 2:
            return min(values)
        if self.type_id == 3:
            return max(values)
        if self.type_id == 5:
            return int(values[0] > values[1])
        if self.type_id == 6:
            return int(values[0] < values[1])
        return int(values[0] == values[1])


class BitReader:
    """Sequential reader over a string of ``0``/``1`` characters."""

    def __init__(self, bits: str) -> None:
        self.bits = bits
        self.pos = 0

    def read(self, count: int) -> int:
        if self.pos + count > len(self.bits):
            raise ParseError(f"Missing {self.pos + count - len(self.bits)} bits in input")
        chunk = self.bits[self.pos : self.pos + count]
        self.pos += count
        return int(chunk, 2)

    def read_packet(self) -> Packet:
        version = self.read(3)
        type_id = self.read(3)
        if type_id == LITERAL:
            value = 0
            more = 1
            while more:
                more = self.read(1)
                value = (value << 4) | self.read(4)
            return Packet(version, type_id, value=value)

        children = []
        if self.read(1) == 0:
            end = self.read(15) + self.pos
            while self.pos < end:
                children.append(self.read_packet())
            if self.pos != end:
                raise ParseError("Sub-packets overran their declared bit length")
        else:
            for _ in range(self.read(11)):
                children.append(self.read_packet())
        if not children:
            raise ParseError("Operator packet has no sub-packets")
        if type_id in (5, 6, 7) and len(children) != 2:
            raise ParseError(f"Comparison packet has {len(children)} sub-packets, expected 2")
        return Packet(version, type_id, children=children)


def parse(text: str) -> Packet:
    rows = lines(text)
    if len(rows) != 1:
        raise ParseError(f"Expected a single line of hexadecimal, got {len(rows)} lines")
    hex_string = rows[0].strip()
    try:
        bits = "".join(f"{int(ch, 16):04b}" for ch in hex_string)
    except ValueError as exc:
        raise ParseError(f'Transmission "{hex_string}" is not hexadecimal') from exc
    reader = BitReader(bits)
    packet = reader.read_packet()
    if "1" in bits[reader.pos :]:
        raise ParseError("Unexpected data after the outermost packet")
    return packet


def part_one(packet: Packet) -> int:
    return packet.version_sum()


def part_two(packet: Packet) -> int:
    return packet.evaluate()


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    packet = parse(text)
    return part_one(packet) if part == 1 else part_two(packet)
