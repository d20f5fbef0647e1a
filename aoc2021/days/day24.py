"""Day 24: Arithmetic Logic Unit.

MONAD is fourteen copies of one block, one per digit, differing only in
three constants. Each block either pushes ``digit + offset`` onto a base-26
stack held in ``z`` or pops the top and, unless ``digit == top + check``,
pushes again. ``z`` ends at zero only if every pop matches, which pairs the
digits up as ``digit[pop] == digit[push] + offset[push] + check[pop]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from ..config import DEFAULT_PART
from ..errors import ParseError
from ..parsing import lines, match_line
from . import check_part

TITLE = "Day 24: Arithmetic Logic Unit"
REPORT = {
    1: "The largest model number accepted by MONAD is {}.",
    2: "The smallest model number accepted by MONAD is {}.",
}

REGISTERS = "wxyz"
DIGITS = 14
BLOCK_LENGTH = 18

# The shared block, with the varying constants as placeholders.
BLOCK_TEMPLATE = [
    "inp w",
    "mul x 0",
    "add x z",
    "mod x 26",
    "div z {div}",
    "add x {check}",
    "eql x w",
    "eql x 0",
    "mul y 0",
    "add y 25",
    "mul y x",
    "add y 1",
    "mul z y",
    "mul y 0",
    "add y w",
    "add y {offset}",
    "mul y x",
    "add z y",
]
PARAMETER_LINES = {"div": 4, "check": 5, "offset": 15}


@dataclass(frozen=True)
class Instruction:
    op: str
    a: str
    b: Optional[Union[str, int]] = None

    def __str__(self) -> str:
        return self.op + " " + self.a + ("" if self.b is None else f" {self.b}")


@dataclass(frozen=True)
class Block:
    div: int
    check: int
    offset: int


def parse_instruction(line: str) -> Instruction:
    m = match_line(
        r"(inp) ([wxyz])|(add|mul|div|mod|eql) ([wxyz]) ([wxyz]|-?\d+)", line, "instruction"
    )
    if m.group(1):
        return Instruction(m.group(1), m.group(2))
    b = m.group(5)
    return Instruction(m.group(3), m.group(4), b if b in REGISTERS else int(b))


def parse(text: str) -> List[Instruction]:
    return [parse_instruction(line) for line in lines(text)]


def run(program: Iterable[Instruction], inputs: Iterable[int]) -> Dict[str, int]:
    """Execute ``program`` on the ALU and return the final registers."""
    registers = dict.fromkeys(REGISTERS, 0)
    feed = iter(inputs)
    for ins in program:
        if ins.op == "inp":
            try:
                registers[ins.a] = next(feed)
            except StopIteration:
                raise ValueError("Program reads more input than was provided") from None
            continue
        a = registers[ins.a]
        b = registers[ins.b] if isinstance(ins.b, str) else ins.b
        if ins.op == "add":
            result = a + b
        elif ins.op == "mul":
            result = a * b
        elif ins.op == "div":
            if b == 0:
                raise ValueError(f"Division by zero in '{ins}'")
            # truncates toward zero
            result = abs(a) // abs(b) * (1 if (a < 0) == (b < 0) else -1)
        elif ins.op == "mod":
            if a < 0 or b <= 0:
                raise ValueError(f"Invalid operands {a}, {b} for '{ins}'")
            result = a % b
        else:
            result = int(a == b)
        registers[ins.a] = result
    return registers


def extract_blocks(program: List[Instruction]) -> List[Block]:
    """Read the per-digit constants, checking the program has the MONAD layout."""
    if len(program) != DIGITS * BLOCK_LENGTH:
        raise ParseError(f"MONAD must have {DIGITS * BLOCK_LENGTH} instructions, got {len(program)}")
    blocks = []
    for start in range(0, len(program), BLOCK_LENGTH):
        chunk = program[start : start + BLOCK_LENGTH]
        params = {name: chunk[index].b for name, index in PARAMETER_LINES.items()}
        if not all(isinstance(v, int) for v in params.values()):
            raise ParseError(f"Unsupported MONAD block at instruction {start + 1}")
        expected = [line.format(**params) for line in BLOCK_TEMPLATE]
        if [str(ins) for ins in chunk] != expected:
            raise ParseError(f"Unsupported MONAD block at instruction {start + 1}")
        blocks.append(Block(**params))
    return blocks


def model_number(blocks: List[Block], largest: bool) -> int:
    """Pick each pushed digit as large (or small) as its paired digit allows."""
    digits = [0] * len(blocks)
    stack: List[int] = []
    for i, block in enumerate(blocks):
        if block.div == 1:
            stack.append(i)
            continue
        if not stack:
            raise ParseError("MONAD pops more digits than it pushes")
        j = stack.pop()
        diff = blocks[j].offset + block.check
        if largest:
            digits[j] = min(9, 9 - diff)
        else:
            digits[j] = max(1, 1 - diff)
        digits[i] = digits[j] + diff
        if not (1 <= digits[i] <= 9 and 1 <= digits[j] <= 9):
            raise ParseError(f"Digits {j + 1} and {i + 1} cannot be paired")
    if stack:
        raise ParseError("MONAD pushes more digits than it pops")
    return int("".join(map(str, digits)))


def part_one(program: List[Instruction]) -> int:
    return model_number(extract_blocks(program), largest=True)


def part_two(program: List[Instruction]) -> int:
    return model_number(extract_blocks(program), largest=False)


def solve(text: str, part: int = DEFAULT_PART) -> int:
    check_part(part, REPORT)
    program = parse(text)
    return part_one(program) if part == 1 else part_two(program)
