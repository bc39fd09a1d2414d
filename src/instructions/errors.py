"""Exceptions raised while parsing instruction files."""

from typing import Optional

from .models import ValidationError


class InstructionFileError(Exception):
    """Base class for unrecoverable instruction file errors."""


class GridSizeError(InstructionFileError, ValueError):
    """
    The first record is not a valid grid size.

    Without a grid there is no coordinate space, so the whole parse is
    abandoned.
    """

    def __init__(self, text: str, line: Optional[int] = None):
        self.text = text
        self.line = line
        self.error = ValidationError(
            code="INVALID_GRID_SIZE",
            message=f"Invalid grid size record: '{text}'",
            line=line,
            text=text,
        )
        super().__init__(self.error.message if line is None else f"line {line}: {self.error.message}")
