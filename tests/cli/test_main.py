"""Tests for CLI main entry point."""

from __future__ import annotations

import sys
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from fornost_cli import __version__
from fornost_cli.container import Settings, set_override
from fornost_cli.main import app, cli_main
from fornost_cli.transport.http import HttpTransport

runner = CliRunner()


def test_cli_help() -> None:
    """Test that --help flag works and lists command groups."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("server", "ssh", "firewall", "ping", "config"):
        assert command in result.stdout


def test_cli_version() -> None:
    """Test that --version flag works."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
    assert "Fornost CLI version" in result.stdout


def test_cli_version_short() -> None:
    """Test that -v flag works for version."""
    result = runner.invoke(app, ["-v"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_cli_no_args() -> None:
    """Test that CLI shows help when no arguments provided."""
    result = runner.invoke(app, [])
    assert result.exit_code in (0, 2)
    assert "Usage:" in result.output


def test_verbose_enables_debug_logging() -> None:
    """Test --verbose configures DEBUG logging."""
    with patch("fornost_cli.main.setup_logging") as mock_setup:
        result = runner.invoke(app, ["--verbose", "config", "show", "--json"])

    assert result.exit_code == 0
    mock_setup.assert_called_once_with(level="DEBUG", format_type="console")


def test_default_log_level_from_settings() -> None:
    with patch("fornost_cli.main.setup_logging") as mock_setup:
        runner.invoke(app, ["config", "show", "--json"])

    mock_setup.assert_called_once_with(level="WARNING", format_type="console")


def test_cli_main_keyboard_interrupt() -> None:
    """Test that KeyboardInterrupt exits with code 130."""
    with patch("fornost_cli.main.app", side_effect=KeyboardInterrupt()):
        with patch.object(sys, "exit") as mock_exit:
            cli_main()
            mock_exit.assert_called_once_with(130)


def test_cli_main_generic_exception() -> None:
    """Test that unexpected exceptions exit with code 1."""
    with patch("fornost_cli.main.app", side_effect=RuntimeError("Test error")):
        with patch.object(sys, "exit") as mock_exit:
            cli_main()
            mock_exit.assert_called_once_with(1)


def test_transport_closed_after_command() -> None:
    """Test the cached HTTP session is released when the command finishes."""
    set_override("settings", Settings(_env_file=None, HETZNER_API_TOKEN="t0k"))  # type: ignore[call-arg]
    transport = Mock(spec=HttpTransport)
    transport.get.return_value = {"actions": []}

    with patch("fornost_cli.container.HttpTransport", return_value=transport):
        result = runner.invoke(app, ["ping"])

    assert result.exit_code == 0, f"Command failed: {result.output}"
    transport.get.assert_called_once_with("/actions", params={"per_page": 1})
    transport.close.assert_called_once_with()
