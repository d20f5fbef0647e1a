"""Daily puzzle solvers.

Every module ``dayNN`` follows the same contract:

- ``TITLE``: the puzzle title.
- ``REPORT``: answer message template per part number.
- ``parse(text)``: input text to the day's structure, raising ParseError.
- ``part_one(data)`` / ``part_two(data)``: the answers.
- ``solve(text, part)``: parse and answer the selected part.
"""

from typing import Mapping

from ..errors import UsageError


def check_part(part: int, report: Mapping[int, str]) -> None:
    """Raise UsageError if the day has no puzzle numbered ``part``."""
    if part not in report:
        raise UsageError(f"Part {part} is not available (choose from {sorted(report)})")


__all__ = ["check_part"]
