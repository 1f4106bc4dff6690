# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

import json
import re
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from coreason_logger.config import LogFormat
from coreason_logger.main import app, main

runner = CliRunner()
ANSI = re.compile(r"\x1b\[\d+m")


@pytest.fixture(autouse=True)
def clear_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_demo_human() -> None:
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    lines = ANSI.sub("", result.output).splitlines()
    assert len(lines) == 6
    assert lines[2].startswith("[SERVICE_NAME][function_name][")
    assert lines[2].endswith("] Service created successfully")
    assert lines[-1].startswith("[UNKNOWN][unknown][")
    assert lines[-1].endswith("] Log with only message field")
    assert "Cache miss" not in result.output


def test_demo_debug_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "Cache miss for key user:123" in result.output


def test_demo_json() -> None:
    result = runner.invoke(app, ["demo", "--format", "json"])

    assert result.exit_code == 0
    records = [json.loads(line)["record"] for line in result.output.splitlines()]
    assert [r["level"]["name"] for r in records] == ["INFO", "INFO", "INFO", "WARNING", "ERROR", "INFO"]


def test_demo_passes_format() -> None:
    with patch("coreason_logger.main.init_logging") as mock_init:
        with patch("coreason_logger.main.emit_samples") as mock_emit:
            result = runner.invoke(app, ["demo", "-f", "DEBUG"])

            assert result.exit_code == 0
            mock_init.assert_called_once_with(LogFormat.DEBUG)
            mock_emit.assert_called_once()


def test_demo_rejects_unknown_format() -> None:
    result = runner.invoke(app, ["demo", "--format", "xml"])
    assert result.exit_code != 0


def test_version_command() -> None:
    """Test the version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "coreason-logger v" in result.output


def test_entry_point_function() -> None:
    """
    Test the main() function directly to ensure the app() is called.
    """
    with patch("coreason_logger.main.app") as mock_app:
        main()
        mock_app.assert_called_once()
