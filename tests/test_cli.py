"""Tests for the group-design command-line interface."""
import json

import pytest
from click.testing import CliRunner

from groupdesign.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestSolve:

    def test_reference_example(self, runner):
        result = runner.invoke(main, [
            "solve", "10", "--spacing", "2.5", "--overhang", "0.5",
            "--changed", "girder_spacing",
        ])
        assert result.exit_code == 0, result.output
        assert "Overall width   : 15.000 m" in result.output
        assert "No. of girders  : 6" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(main, [
            "solve", "10", "--girders", "4", "--overhang", "1.5",
            "--changed", "num_girders", "--json",
        ])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["data"]["girder_spacing"] == pytest.approx(3.0)
        assert payload["data"]["overall_width"] == pytest.approx(15.0)

    def test_rejected_geometry(self, runner):
        result = runner.invoke(main, [
            "solve", "10", "--girders", "1", "--overhang", "0.5",
            "--changed", "num_girders",
        ])
        assert result.exit_code == 1
        assert "At least 2 girders are required" in result.output

    def test_changed_is_required(self, runner):
        result = runner.invoke(main, ["solve", "10", "--spacing", "2.5"])
        assert result.exit_code != 0


class TestValidate:

    def test_sample_file(self, runner, sample_input_path):
        result = runner.invoke(main, ["validate", str(sample_input_path)])
        assert result.exit_code == 0, result.output
        assert "Input file is valid." in result.output
        assert "Girders           : 6" in result.output

    def test_invalid_file(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("structure_type: highway\nspan: 2\ncarriageway_width: 10\n",
                        encoding="utf-8")
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Validation errors found:" in result.output
        assert "span:" in result.output

    def test_skew_warning(self, runner, tmp_path, sample_input_path):
        text = sample_input_path.read_text(encoding="utf-8")
        path = tmp_path / "skewed.yaml"
        path.write_text(text.replace("skew_angle: 0", "skew_angle: 30"), encoding="utf-8")
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 0, result.output
        assert "Warning: IRC 24 (2010)" in result.output


def test_template_prints_sample(runner, sample_input_path):
    result = runner.invoke(main, ["template"])
    assert result.exit_code == 0
    assert result.output == sample_input_path.read_text(encoding="utf-8")
