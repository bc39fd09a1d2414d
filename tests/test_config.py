"""Test parser configuration loading."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.instructions import ParserConfig, load_config


class TestParserConfig:

    def test_defaults(self):
        config = ParserConfig()
        assert config.max_coordinate == 50
        assert config.max_instruction_length == 99
        assert config.orientations == "NESW"
        assert config.commands == "LFR"
        assert config.encoding == "utf-8-sig"

    def test_rejects_non_letter_alphabet(self):
        with pytest.raises(PydanticValidationError):
            ParserConfig(orientations="N1")

    def test_rejects_zero_length(self):
        with pytest.raises(PydanticValidationError):
            ParserConfig(max_instruction_length=0)


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("max_instruction_length: 10\ncommands: LFRB\n")
        config = load_config(path)
        assert config.max_instruction_length == 10
        assert config.commands == "LFRB"
        assert config.orientations == "NESW"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("")
        assert load_config(path) == ParserConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
