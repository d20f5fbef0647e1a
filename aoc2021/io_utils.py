"""
Input helpers for the puzzle runner.

Puzzle inputs are small text files. They are read fully and closed before any
solver sees them, so solvers only ever deal with a ``str``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .errors import InputFileError

logger = logging.getLogger(__name__)


def read_puzzle_input(path: Union[str, Path]) -> str:
    """Return the contents of the puzzle input at ``path``.

    Raises :class:`InputFileError` if the file does not exist or cannot be
    read or decoded.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise InputFileError(f'Input file "{path}" does not exist') from exc
    except IsADirectoryError as exc:
        raise InputFileError(f'Input path "{path}" is a directory') from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f'Could not read input file "{path}" ({exc})') from exc
    logger.debug(f"Read {len(text)} characters from {path}")
    return text
