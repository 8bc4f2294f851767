# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the shopexpander command line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from shopexpander.cli import app
from shopexpander.resolver import CLINT_UPGRADE_GREETING

CONFIG = """
[[objects]]
owner = "Robin"
item = 388
amount = 50

[[objects]]
owner = "???"
item = 388
amount = 10

[items.388]
name = "Wood"
price = 2
"""


def test_check_prints_registry(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(CONFIG, encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(path), "--no-emoji", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "Wood x50" in result.output
    assert "1 of 2 entries were rejected" in result.output
    assert "1 entries for 1 shops" in result.output


def test_check_missing_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(tmp_path / "missing.toml"), "--no-emoji"])
    assert result.exit_code == 2


def test_check_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    result = CliRunner().invoke(app, ["check", str(path), "--no-emoji"])
    assert result.exit_code == 2


def test_resolve_clint_upgrade() -> None:
    result = CliRunner().invoke(app, ["resolve", "--speaker", "Clint", "--greeting", CLINT_UPGRADE_GREETING])
    assert result.exit_code == 0
    assert result.output.strip() == "ClintUpgrade"


def test_resolve_location() -> None:
    result = CliRunner().invoke(app, ["resolve", "--location", "JojaMart"])
    assert result.output.strip() == "Joja"


def test_check_accepts_directory(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(CONFIG, encoding="utf-8")
    result = CliRunner().invoke(app, ["check", str(tmp_path), "--no-emoji", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "config.toml" in result.output
    assert "Wood x50" in result.output


def test_check_directory_without_config(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["check", str(tmp_path), "--no-emoji"])
    assert result.exit_code == 2
    assert "No configuration file" in result.output
