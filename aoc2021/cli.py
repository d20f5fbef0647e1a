"""Command-line dispatcher: ``aoc2021 <day-id> [-f FILE] [-p PART]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import PART_CHOICES, default_input_path, resolve_log_level
from .errors import AocError
from .io_utils import read_puzzle_input
from .registry import get_solver_info, get_solver_module, list_solvers, solve_with_solver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2021",
        description="My solutions for Advent of Code 2021, one subcommand per day.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log output (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="day", metavar="<day-id>", title="days")
    subparsers.required = True

    for name in list_solvers():
        info = get_solver_info(name)
        sub = subparsers.add_parser(
            name,
            help=info["title"],
            description=f"My solution for {info['title']}",
        )
        sub.add_argument(
            "-f",
            "--file",
            dest="input_file",
            type=Path,
            metavar="FILE",
            default=default_input_path(name),
            help="sets the input file (default: %(default)s)",
        )
        if 2 in info["parts"]:
            sub.add_argument(
                "-p",
                "--part",
                choices=list(PART_CHOICES),
                default="two",
                help="selects the part of the puzzle solution (default: %(default)s)",
            )
        else:
            sub.set_defaults(part="one")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the selected day and print its answer. Returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=resolve_log_level(args.verbose), format="%(levelname)s: %(message)s")

    part = PART_CHOICES[args.part]
    logger.info(f"Running {args.day} part {part} on {args.input_file}")
    try:
        text = read_puzzle_input(args.input_file)
        answer = solve_with_solver(text, args.day, part)
    except AocError as e:
        logger.debug(f"{args.day} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    report = get_solver_module(args.day).REPORT[part]
    print(report.format(answer))
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
