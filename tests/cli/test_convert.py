"""Execution tests for ``tempconv convert``."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from tempconv.cli.main import cli

if TYPE_CHECKING:
    import pytest
    from click.testing import CliRunner


class TestConvertJson:
    def test_celsius_default(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "100"])
        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        assert parsed["ok"] is True
        assert parsed["command"] == "convert"
        assert parsed["data"] == {"celsius": 100.0, "fahrenheit": 212.0, "kelvin": 373.15}

    def test_options_after_subcommand(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "212", "--unit", "f", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["celsius"] == 100.0

    def test_negative_value_without_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "-40", "-u", "fahrenheit"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["celsius"] == -40.0
        assert data["fahrenheit"] == -40.0

    def test_negative_value_after_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "-u", "c", "--", "-273.15"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["kelvin"] == 0.0

    def test_below_absolute_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "-u", "kelvin", "--", "-1"])
        assert result.exit_code == 1
        parsed = json.loads(result.output)
        assert parsed["ok"] is False
        assert parsed["command"] == "convert"
        assert parsed["error"] == {
            "code": "BelowAbsoluteZero",
            "message": "Kelvin cannot be negative",
            "unit": "kelvin",
            "value": "-1",
        }

    def test_invalid_number(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "abc"])
        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["code"] == "InvalidNumber"
        assert error["message"] == "Please enter a valid number"

    def test_too_large_to_convert(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "convert", "-u", "f", "1e308"])
        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["code"] == "InvalidNumber"
        assert error["message"] == "Temperature is too large to convert"

    def test_default_unit_from_settings(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEMPCONV_DEFAULT_UNIT", "kelvin")
        result = runner.invoke(cli, ["--format", "json", "convert", "0"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["celsius"] == -273.15

    def test_output_format_from_settings(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEMPCONV_OUTPUT_FORMAT", "json")
        result = runner.invoke(cli, ["convert", "0"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["fahrenheit"] == 32.0


class TestConvertRich:
    def test_renders_all_scales(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "rich", "convert", "0"])
        assert result.exit_code == 0, result.output
        assert "Conversion Results" in result.output
        assert "Celsius (°C)" in result.output
        assert "Fahrenheit (°F)" in result.output
        assert "Kelvin (K)" in result.output
        assert "32.0°F" in result.output
        assert "273.15 K" in result.output

    def test_below_absolute_zero_shows_hint(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "rich", "convert", "--", "-300"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "below absolute zero (-273.15°C)" in result.output
        assert "Valid Celsius (°C) values start at -273.15°C." in result.output

    def test_invalid_number_has_no_hint(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "rich", "convert", "  "])
        assert result.exit_code == 1
        assert "Please enter a temperature value" in result.output
        assert "values start at" not in result.output


class TestConvertUsage:
    def test_unknown_unit(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "10", "--unit", "rankine"])
        assert result.exit_code == 2
        assert "Unknown temperature unit" in result.output

    def test_missing_value(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert"])
        assert result.exit_code == 2

    def test_verbose_enables_debug_logging(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "5", "--verbose", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert "celsius" in result.output
        assert logging.getLogger("tempconv").level == logging.DEBUG

    def test_next_invocation_resets_level(self, runner: CliRunner) -> None:
        runner.invoke(cli, ["--verbose", "convert", "5"])
        runner.invoke(cli, ["--format", "json", "convert", "5"])
        assert logging.getLogger("tempconv").level == logging.WARNING
