"""Survey ship instruction file parsing."""

from .parser import InstructionParser, ParseState, parse_lines, parse_file
from .models import (
    RecordKind,
    ValidationError,
    ParsedRecord,
    GridSize,
    ShipStartPosition,
    Ship,
    ParseResult,
    NO_SHIPS,
)
from .validators import validate_grid_size, validate_ship_start, validate_ship_instruction
from .errors import InstructionFileError, GridSizeError
from .config import ParserConfig, load_config

__all__ = [
    # Parsing
    "InstructionParser",
    "ParseState",
    "parse_lines",
    "parse_file",
    # Models
    "RecordKind",
    "ValidationError",
    "ParsedRecord",
    "GridSize",
    "ShipStartPosition",
    "Ship",
    "ParseResult",
    "NO_SHIPS",
    # Validators
    "validate_grid_size",
    "validate_ship_start",
    "validate_ship_instruction",
    # Errors
    "InstructionFileError",
    "GridSizeError",
    # Configuration
    "ParserConfig",
    "load_config",
]
