"""
Instruction file parsing.

Lines are classified by their position in the file, not by their content:
1. The first non-blank line is the grid size (fatal if invalid)
2. Following non-blank lines alternate ship start / ship instruction
3. A blank line restarts the alternation at ship start
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import ParserConfig
from .errors import GridSizeError
from .models import (
    GRID_SIZE,
    SHIP_INSTRUCTION,
    SHIP_START,
    ParsedRecord,
    ParseResult,
    RecordKind,
    ValidationError,
)
from .validators import validate_grid_size, validate_ship_instruction, validate_ship_start

logger = logging.getLogger(__name__)


class ParseState:
    """Cursor over the expected kind of the next non-blank line."""

    def __init__(self):
        self.position: RecordKind = GRID_SIZE
        self.saw_grid_size = False

    def reset(self) -> None:
        """Blank line: the next record starts a new ship."""
        if self.saw_grid_size:
            self.position = SHIP_START

    def advance(self) -> None:
        if self.position == GRID_SIZE:
            self.saw_grid_size = True
            self.position = SHIP_START
        elif self.position == SHIP_START:
            self.position = SHIP_INSTRUCTION
        else:
            self.position = SHIP_START


class InstructionParser:
    """
    Parses survey instruction files into a ParseResult.

    All state lives on the ParseState of a single call, so one parser can be
    reused for any number of runs.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse(self, lines: Iterable[str], source: Optional[str] = None) -> ParseResult:
        """
        Classify and validate each line.

        Raises GridSizeError if the first non-blank line is not a grid size.
        Malformed ship records are kept with valid=False instead of raising.
        """
        state = ParseState()
        records: List[ParsedRecord] = []

        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                state.reset()
                continue

            if state.position == GRID_SIZE:
                if not validate_grid_size(line):
                    logger.error("Grid size record failed at line %d: %r", number, line)
                    raise GridSizeError(line, line=number)
                records.append(ParsedRecord(kind=GRID_SIZE, raw_text=line, valid=True, line=number))
            else:
                records.append(self._classify(state.position, line, number))
            state.advance()

        result = ParseResult(records=records, source=source)
        logger.info(
            "Parsed %d records from %s: %d ships, %d failed",
            len(records), source or "<lines>", result.count_of_ships(), len(result.errors)
        )
        return result

    def _classify(self, kind: RecordKind, line: str, number: int) -> ParsedRecord:
        if kind == SHIP_START:
            valid = validate_ship_start(
                line,
                max_coordinate=self.config.max_coordinate,
                orientations=self.config.orientations,
            )
            code, label = "INVALID_SHIP_START", "ship start"
        else:
            valid = validate_ship_instruction(
                line,
                max_length=self.config.max_instruction_length,
                commands=self.config.commands,
            )
            code, label = "INVALID_SHIP_INSTRUCTION", "ship instruction"

        error = None
        if not valid:
            logger.debug("Line %d failed %s validation: %r", number, label, line)
            error = ValidationError(
                code=code,
                message=f"Invalid {label} record: '{line}'",
                line=number,
                text=line,
            )
        return ParsedRecord(kind=kind, raw_text=line, valid=valid, line=number, error=error)

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse an instruction file.

        A file that cannot be found is logged and yields an empty result with
        source_missing set.
        """
        source = str(file_path)
        try:
            with open(file_path, encoding=self.config.encoding, errors="replace") as f:
                return self.parse(f, source=source)
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
            logger.warning("Issue opening file %s: %s", source, e)
            return ParseResult(source=source, source_missing=True)


def parse_lines(lines: Iterable[str], config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse instruction lines from any iterable of strings."""
    return InstructionParser(config).parse(lines)


def parse_file(file_path: Union[str, Path], config: Optional[ParserConfig] = None) -> ParseResult:
    """Parse an instruction file from disk."""
    return InstructionParser(config).parse_file(file_path)
