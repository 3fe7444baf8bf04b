"""Credential and connectivity check."""

from __future__ import annotations

from rich.console import Console

from fornost_cli.commands import fail
from fornost_cli.container import ConfigurationError, get_client
from fornost_cli.exceptions import HetznerError
from fornost_cli.formatters import format_success

console = Console()


def ping() -> None:
    """Verify credentials and connectivity."""
    try:
        get_client().ping()
    except (HetznerError, ConfigurationError) as e:
        fail(console, e, prefix="Ping failed")

    console.print(format_success("Credentials valid. Connection successful."))
