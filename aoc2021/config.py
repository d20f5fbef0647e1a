"""Runtime defaults, overridable through the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

INPUT_DIR = Path(os.environ.get("AOC2021_INPUT_DIR", "puzzle-inputs"))
LOG_LEVEL = os.environ.get("AOC2021_LOG_LEVEL", "WARNING").upper()
DEFAULT_PART = 2

PART_CHOICES = {"one": 1, "1": 1, "two": 2, "2": 2}


def default_input_path(day: str) -> Path:
    """Return where the input for ``day`` (e.g. ``"day01"``) is expected."""
    return INPUT_DIR / f"{day}-input"


def resolve_log_level(verbosity: int = 0) -> int:
    """Map ``-v`` repetitions onto a logging level.

    Without any ``-v`` flag the level from ``AOC2021_LOG_LEVEL`` applies;
    unknown names fall back to ``WARNING``.
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


__all__ = [
    "INPUT_DIR",
    "LOG_LEVEL",
    "DEFAULT_PART",
    "PART_CHOICES",
    "default_input_path",
    "resolve_log_level",
]
