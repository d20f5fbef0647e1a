"""Error taxonomy for the puzzle runner.

Every failure the command line reports maps onto one of these classes. Each
carries the process exit code the dispatcher should return.
"""

from __future__ import annotations


class AocError(Exception):
    """Base class for all errors surfaced to the terminal."""

    exit_code: int = 1


class UsageError(AocError):
    """Raised for a bad command-line invocation detected after parsing."""

    exit_code = 2


class InputFileError(AocError):
    """Raised when the puzzle input cannot be opened or read."""


class ParseError(AocError, ValueError):
    """Raised when input text does not match the expected puzzle shape."""


__all__ = ["AocError", "UsageError", "InputFileError", "ParseError"]
