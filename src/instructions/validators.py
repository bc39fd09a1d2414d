"""
Record validators for survey instruction files.

Each validator is a pure predicate over one line of text. Whitespace is
ignored everywhere; the remaining characters are checked one at a time.
"""

from typing import Optional


MAX_COORDINATE = 50
MAX_INSTRUCTION_LENGTH = 99
ORIENTATIONS = "NESW"
COMMANDS = "LFR"


def validate_grid_size(record: Optional[str]) -> bool:
    """First record may only contain digits and whitespace."""
    if not record:
        return False
    for c in record:
        if c.isspace():
            continue
        if not c.isdecimal():
            return False
    return True


def validate_ship_start(
    record: Optional[str],
    *,
    max_coordinate: int = MAX_COORDINATE,
    orientations: str = ORIENTATIONS,
) -> bool:
    """
    Validate a ship's starting coordinates and orientation, e.g. "1 2 N".

    The coordinate bound applies to each digit character on its own, not to
    the number a run of digits spells out.
    """
    if not record:
        return False
    allowed = set(orientations.upper())
    for c in record:
        if c.isspace():
            continue
        if c.isdecimal():
            if int(c) > max_coordinate:
                return False
        elif c.isalpha():
            if not c.isascii() or c.upper() not in allowed:
                return False
        else:
            return False
    return True


def validate_ship_instruction(
    record: Optional[str],
    *,
    max_length: int = MAX_INSTRUCTION_LENGTH,
    commands: str = COMMANDS,
) -> bool:
    """Validate a movement line: (L)eft, (R)ight and (F)orward only."""
    if not record:
        return False
    if len(record) > max_length:
        return False
    allowed = set(commands.upper())
    for c in record:
        if c.isspace():
            continue
        if not c.isascii() or not c.isalpha() or c.upper() not in allowed:
            return False
    return True
