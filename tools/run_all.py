#!/usr/bin/env python3
"""Run every registered day against a directory of puzzle inputs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

sys.path.append(str(Path(__file__).resolve().parents[1]))

from aoc2021.config import INPUT_DIR
from aoc2021.registry import benchmark_solvers, list_solvers


def load_inputs(input_dir: Path) -> Dict[str, str]:
    """Read ``<day>-input`` for every registered day that has one."""
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory {input_dir} does not exist")
    inputs = {}
    for name in list_solvers():
        path = input_dir / f"{name}-input"
        if path.is_file():
            inputs[name] = path.read_text(encoding="utf-8")
    return inputs


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input-dir", type=Path, default=INPUT_DIR)
    parser.add_argument("--days", nargs="*", help="days to run (default: all with an input)")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    inputs = load_inputs(args.input_dir)
    names = [name for name in args.days if name in inputs] if args.days else None
    results = benchmark_solvers(inputs, names)

    total = 0.0
    failures = []
    for name, result in results.items():
        for part in sorted(result["elapsed"]):
            elapsed = result["elapsed"][part]
            total += elapsed
            if part in result["errors"]:
                failures.append(f"{name} part {part}")
                print(f"✗ {name} part {part}: {result['errors'][part]}")
                continue
            answer = str(result["answers"][part])
            if "\n" in answer:
                answer = "\n" + answer
            print(f"✓ {name} part {part} ({elapsed:.3f}s): {answer}")

    print(f"Ran {len(results)} days in {total:.2f}s")
    if failures:
        print("Failures:")
        for failure in failures:
            print(f"  - {failure}")


if __name__ == "__main__":
    main()
