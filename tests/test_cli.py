"""Tests for the command-line dispatcher."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from aoc2021 import __version__
from aoc2021.cli import build_parser, main
from aoc2021.config import default_input_path

ROOT = Path(__file__).resolve().parents[1]
DEPTHS = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


@pytest.fixture
def depths_file(tmp_path: Path) -> Path:
    path = tmp_path / "day01-input"
    path.write_text(DEPTHS)
    return path


def test_part_two_is_default(depths_file: Path, capsys) -> None:
    assert main(["day01", "-f", str(depths_file)]) == 0
    out = capsys.readouterr().out
    assert out == "Depth measurement increases (with sliding window of three) count is: 5\n"


@pytest.mark.parametrize("part", ["one", "1"])
def test_part_one_spellings(depths_file: Path, part: str, capsys) -> None:
    assert main(["day01", "--file", str(depths_file), "--part", part]) == 0
    assert capsys.readouterr().out == "Depth measurement increases count is: 7\n"


def test_single_part_day_has_no_part_option(tmp_path: Path, capsys) -> None:
    path = tmp_path / "floor"
    path.write_text("v...>>.vv>\n.vv>>.vv..\n>>.>v>...v\n>>v>>.>.v.\nv>v.vv.v..\n"
                    ">.>>..v...\n.vv..>.>v.\nv.v..>>v.v\n....v..v.>\n")
    assert main(["day25", "-f", str(path)]) == 0
    assert capsys.readouterr().out == "The first step on which no sea cucumbers move is 58.\n"

    with pytest.raises(SystemExit) as exc:
        main(["day25", "-f", str(path), "-p", "two"])
    assert exc.value.code == 2


def test_rendered_answer(tmp_path: Path, capsys) -> None:
    path = tmp_path / "paper"
    path.write_text("0,0\n4,0\n0,4\n4,4\n2,2\n\nfold along x=10\n")
    assert main(["day13", "-f", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.endswith("#...#\n.....\n..#..\n.....\n#...#\n")


def test_missing_file(tmp_path: Path, capsys) -> None:
    assert main(["day01", "-f", str(tmp_path / "absent")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert "does not exist" in captured.err


def test_malformed_input(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad"
    path.write_text("199\ntwo hundred\n")
    assert main(["day01", "-f", str(path), "-p", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert 'Could not parse number "two hundred"' in captured.err


@pytest.mark.parametrize(
    "argv",
    [[], ["day26"], ["day01", "-p", "three"], ["day01", "--frobnicate"]],
)
def test_usage_errors(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_help_lists_days(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "day01" in out and "day25" in out
    assert "Day 12: Passage Pathing" in out


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_default_input_file() -> None:
    args = build_parser().parse_args(["day07"])
    assert args.input_file == default_input_path("day07")
    assert args.input_file.name == "day07-input"
    assert args.part == "two"


def test_module_entry_point(depths_file: Path) -> None:
    """``python -m aoc2021`` behaves like the console script."""
    process = subprocess.run(
        [sys.executable, "-m", "aoc2021", "day01", "-f", str(depths_file), "-p", "one"],
        cwd=str(ROOT),
        env={**os.environ, "PYTHONPATH": str(ROOT)},
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert process.returncode == 0
    assert process.stdout.decode().strip() == "Depth measurement increases count is: 7"

    process = subprocess.run(
        [sys.executable, "-m", "aoc2021", "day42"],
        cwd=str(ROOT),
        env={**os.environ, "PYTHONPATH": str(ROOT)},
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert process.returncode == 2
