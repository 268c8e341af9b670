"""
MPS section state machine.

Header lines start in column 1 and switch the active section; indented data
lines are interpreted by whichever section is active.
"""

from __future__ import annotations

from enum import Enum


class Section(str, Enum):
    IDLE = "IDLE"
    ROWS = "ROWS"
    COLUMNS = "COLUMNS"
    RHS = "RHS"
    BOUNDS = "BOUNDS"
    ENDATA = "ENDATA"


HEADER_KEYWORDS = ("NAME", "ROWS", "COLUMNS", "RHS", "BOUNDS", "ENDATA")


def is_header_line(line: str) -> bool:
    """True for lines with no leading indentation."""
    return bool(line) and not line[0].isspace()


def next_section(token: str) -> Section | None:
    """
    Map a header keyword to the section it opens.

    NAME returns to IDLE (the rest of its line is the problem name).
    Unknown keywords return None so the caller can keep its current section.
    """
    if token == "NAME":
        return Section.IDLE
    if token in HEADER_KEYWORDS:
        return Section(token)
    return None
