"""Configuration commands.

NOTE: Unlike other command groups, config commands read settings directly
from the container rather than going through the client, since
configuration is infrastructure-level and must work without a token.
"""

from __future__ import annotations

from typing import Annotated
import json

import typer
from rich.console import Console
from rich.table import Table

from fornost_cli.container import TOKEN_ENV_VAR, dotenv_path, get_settings
from fornost_cli.transport.http import BASE_URL

app = typer.Typer(
    name="config",
    help="Inspect CLI configuration",
    no_args_is_help=True,
)

console = Console()


def _mask(token: str | None) -> str | None:
    """Show only the last four characters of a token."""
    if not token:
        return None
    if len(token) <= 4:
        return "***"
    return f"***{token[-4:]}"


@app.command()
def show(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """Display the effective configuration.

    Configuration precedence:
    1. Environment variables (HETZNER_API_TOKEN, FORNOST_*)
    2. Dotenv file (~/.dotfiles/.env if present, otherwise ./.env)
    3. Defaults
    """
    settings = get_settings()
    env_file = dotenv_path()
    values = {
        "api_url": BASE_URL,
        "api_token": _mask(settings.api_token),
        "env_file": str(env_file) if env_file.is_file() else None,
        "log_level": settings.log_level,
        "log_format": settings.log_format,
    }

    if json_output:
        typer.echo(json.dumps(values, indent=2))
        return

    table = Table(title="Current Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for setting, value in values.items():
        table.add_row(setting, value if value is not None else "Not set")
    console.print(table)
    console.print(f"\n[dim]Set the token via {TOKEN_ENV_VAR} in the environment or dotenv file[/dim]")
