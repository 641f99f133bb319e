"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate commands from the developer's TEMPCONV_* variables and .env file."""
    for key in ("TEMPCONV_DEFAULT_UNIT", "TEMPCONV_OUTPUT_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()
