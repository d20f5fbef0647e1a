"""Tests for the shared text parsing and file reading helpers."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021.errors import AocError, InputFileError, ParseError
from aoc2021.io_utils import read_puzzle_input
from aoc2021.parsing import blocks, lines, match_line, parse_csv_ints, parse_int, parse_int_lines


def test_lines_strip_trailing_blank_lines() -> None:
    assert lines("a\nb  \n\n\n") == ["a", "b"]


def test_lines_accept_crlf() -> None:
    assert lines("1\r\n2\r\n") == ["1", "2"]
    assert parse_int_lines("1\r\n2\r\n") == [1, 2]


@pytest.mark.parametrize("text", ["", "\n", "  \n\t\n"])
def test_empty_input(text: str) -> None:
    with pytest.raises(ParseError, match="empty"):
        lines(text)


def test_blocks() -> None:
    text = "a\nb\n\nc\n\n\nd\ne\n"
    assert blocks(text) == [["a", "b"], ["c"], ["d", "e"]]


def test_parse_int() -> None:
    assert parse_int(" -12 ") == -12
    with pytest.raises(ParseError) as exc:
        parse_int("x7", "draw")
    assert 'draw "x7"' in str(exc.value)
    assert isinstance(exc.value.__cause__, ValueError)


def test_parse_error_is_value_error() -> None:
    """Callers catching ValueError also see malformed input."""
    with pytest.raises(ValueError):
        parse_int("nope")
    assert ParseError.exit_code == 1


def test_parse_csv_ints() -> None:
    assert parse_csv_ints("3,4,3,1,2\n") == [3, 4, 3, 1, 2]
    with pytest.raises(ParseError):
        parse_csv_ints("1,2\n3,4\n")
    with pytest.raises(ParseError):
        parse_csv_ints("1,,2")


def test_match_line() -> None:
    m = match_line(r"(\w+) (\d+)", "forward 5 ")
    assert m.groups() == ("forward", "5")
    with pytest.raises(ParseError, match="command"):
        match_line(r"(\w+) (\d+)", "forward 5 extra", "command")


def test_read_puzzle_input(tmp_path: Path) -> None:
    path = tmp_path / "day01-input"
    path.write_text("1\n2\n")
    assert read_puzzle_input(path) == "1\n2\n"
    assert read_puzzle_input(str(path)) == "1\n2\n"


def test_read_missing_input(tmp_path: Path) -> None:
    with pytest.raises(InputFileError, match="does not exist") as exc:
        read_puzzle_input(tmp_path / "missing")
    assert isinstance(exc.value.__cause__, FileNotFoundError)
    assert isinstance(exc.value, AocError)


def test_read_directory(tmp_path: Path) -> None:
    with pytest.raises(InputFileError):
        read_puzzle_input(tmp_path)


def test_read_undecodable_input(tmp_path: Path) -> None:
    path = tmp_path / "binary"
    path.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(InputFileError, match="Could not read"):
        read_puzzle_input(path)
