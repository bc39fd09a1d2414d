"""Test the command-line entry point."""

import json

from src.main import main


SAMPLE = "5 5\n1 2 N\nLFRFF\n3 3 Z\nFFRFF\n"


def write(tmp_path, content, name="instructions.txt"):
    path = tmp_path / name
    path.write_text(content)
    return path


class TestMain:

    def test_summary(self, tmp_path, capsys):
        path = write(tmp_path, SAMPLE)
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "Grid: 5 x 5" in out
        assert "Ships: 1" in out
        assert "Ship 1: 1 2 N -> LFRFF" in out
        assert "Ship 2: Failed" in out

    def test_output_json(self, tmp_path):
        path = write(tmp_path, SAMPLE)
        output = tmp_path / "results" / "run.json"
        assert main([str(path), "--output", str(output)]) == 0
        data = json.loads(output.read_text())
        assert len(data["records"]) == 5
        assert data["records"][3]["valid"] is False

    def test_config_applied(self, tmp_path, capsys):
        path = write(tmp_path, SAMPLE)
        config = write(tmp_path, "max_instruction_length: 3\n", name="parser.yaml")
        assert main([str(path), "--config", str(config)]) == 0
        assert "Ship 1: Failed" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        path = write(tmp_path, SAMPLE)
        assert main([str(path), "--config", str(tmp_path / "missing.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_bad_grid(self, tmp_path, capsys):
        path = write(tmp_path, "5x5\n1 2 N\n")
        assert main([str(path)]) == 1
        assert "Invalid grid size" in capsys.readouterr().err
