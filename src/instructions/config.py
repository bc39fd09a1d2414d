"""Parser configuration."""

from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field

from .validators import COMMANDS, MAX_COORDINATE, MAX_INSTRUCTION_LENGTH, ORIENTATIONS


class ParserConfig(BaseModel):
    """Limits and alphabets applied by the record validators."""
    max_coordinate: int = Field(MAX_COORDINATE, ge=0)
    max_instruction_length: int = Field(MAX_INSTRUCTION_LENGTH, ge=1)
    orientations: str = Field(ORIENTATIONS, min_length=1, pattern=r'^[A-Za-z]+$')
    commands: str = Field(COMMANDS, min_length=1, pattern=r'^[A-Za-z]+$')
    encoding: str = "utf-8-sig"


def load_config(config_path: Union[str, Path]) -> ParserConfig:
    """Load parser configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ParserConfig(**(data or {}))
