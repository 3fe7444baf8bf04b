"""CLI command groups.

Commands obtain the client from the DI container, render results with
``fornost_cli.formatters`` and turn client errors into exit codes:
1 for API/transport/configuration failures, 2 for invalid local input.
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from fornost_cli.container import ConfigurationError
from fornost_cli.exceptions import HetznerError


def fail(
    console: Console,
    error: HetznerError | ConfigurationError,
    prefix: str = "Error",
) -> NoReturn:
    """Print ``error`` and exit with status 1."""
    console.print(f"[red]{prefix}:[/red] {escape(str(error))}")
    raise typer.Exit(1)
