"""Data models for parsed survey instruction files."""

import unicodedata
from typing import List, Literal, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Type aliases
RecordKind = Literal["grid_size", "ship_start", "ship_instruction"]

GRID_SIZE: RecordKind = "grid_size"
SHIP_START: RecordKind = "ship_start"
SHIP_INSTRUCTION: RecordKind = "ship_instruction"


class ValidationError(BaseModel):
    """A single record that failed validation."""
    code: str
    message: str
    line: Optional[int] = None
    text: Optional[str] = None


class ParsedRecord(BaseModel):
    """One non-blank line of input, classified by its position in the file."""
    model_config = ConfigDict(frozen=True)

    kind: RecordKind
    raw_text: str
    valid: bool
    line: Optional[int] = None
    error: Optional[ValidationError] = None


class GridSize(BaseModel):
    """Width and height of the survey grid."""
    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class ShipStartPosition(NamedTuple):
    """Represents a ship's starting cell and facing."""
    x: int
    y: int
    orientation: str


# Returned in place of an empty list when no ship starts parsed
NO_SHIPS = ShipStartPosition(0, 0, "U")


def _numeric_at(text: str, offset: int) -> int:
    """Numeric value of the character at offset, or -1 if absent or non-numeric."""
    if offset >= len(text):
        return -1
    return int(unicodedata.numeric(text[offset], -1))


def _start_position(text: str) -> ShipStartPosition:
    orientation = text[4] if len(text) > 4 else NO_SHIPS.orientation
    return ShipStartPosition(_numeric_at(text, 0), _numeric_at(text, 2), orientation)


class Ship(BaseModel):
    """A ship start record paired with the instruction record that follows it."""
    start: ParsedRecord
    instructions: Optional[ParsedRecord] = None

    @property
    def valid(self) -> bool:
        if not self.start.valid:
            return False
        return self.instructions is None or self.instructions.valid

    @property
    def position(self) -> Optional[ShipStartPosition]:
        if not self.start.valid:
            return None
        return _start_position(self.start.raw_text)

    @property
    def commands(self) -> str:
        """Instruction text, empty when the ship has no (valid) instructions."""
        if self.instructions is None or not self.instructions.valid:
            return ""
        return self.instructions.raw_text


class ParseResult(BaseModel):
    """
    Ordered records produced by one parse run, plus read-only query views.

    The grid size record, when present, is always first. Every query is
    well-defined on an empty result.
    """
    records: List[ParsedRecord] = Field(default_factory=list)
    source: Optional[str] = None
    source_missing: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def errors(self) -> List[ValidationError]:
        """Validation errors of all failed records, in file order."""
        return [r.error for r in self.records if r.error is not None]

    def _valid(self, kind: RecordKind) -> List[ParsedRecord]:
        return [r for r in self.records if r.kind == kind and r.valid]

    def count_of_ships(self) -> int:
        """Total ship start records that passed validation."""
        return len(self._valid(SHIP_START))

    def grid_coordinates(self) -> Tuple[int, int]:
        """
        Grid width and height read from the first record.

        Only the characters at offsets 0 and 2 are read, so each dimension is
        a single digit.
        """
        if not self.records:
            return (0, 0)
        value = self.records[0].raw_text
        if not value.strip():
            return (0, 0)
        return (_numeric_at(value, 0), _numeric_at(value, 2))

    @property
    def grid_size(self) -> Optional[GridSize]:
        if not self.records:
            return None
        width, height = self.grid_coordinates()
        return GridSize(width=width, height=height)

    def ship_start_coordinates(self) -> List[str]:
        """Raw text of each valid ship start record."""
        return [r.raw_text for r in self._valid(SHIP_START)]

    def ship_start_coordinates_as_list(self) -> List[ShipStartPosition]:
        """
        Starting coordinates and orientation of each valid ship.

        Returns [NO_SHIPS] rather than an empty list when there are none.
        """
        coords = self.ship_start_coordinates()
        if not coords:
            return [NO_SHIPS]
        return [_start_position(coord) for coord in coords]

    def ship_instructions(self) -> List[str]:
        return [r.raw_text for r in self._valid(SHIP_INSTRUCTION)]

    def ships(self) -> List[Ship]:
        """Pair each ship start with the instruction record directly after it."""
        ships: List[Ship] = []
        for record in self.records:
            if record.kind == SHIP_START:
                ships.append(Ship(start=record))
            elif record.kind == SHIP_INSTRUCTION and ships and ships[-1].instructions is None:
                ships[-1] = Ship(start=ships[-1].start, instructions=record)
        return ships
