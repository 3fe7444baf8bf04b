"""Firewall inspection commands.

- list: List all firewalls with rule and target counts
- get: Show the rules of one firewall by name or ID
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fornost_cli.commands import fail
from fornost_cli.container import ConfigurationError, get_client
from fornost_cli.exceptions import HetznerError
from fornost_cli.formatters import (
    format_firewall_detail,
    format_firewalls_table,
    format_json,
)

app = typer.Typer(
    name="firewall",
    help="Manage Hetzner Cloud firewalls",
    no_args_is_help=True,
)

console = Console()


@app.command("list")
def list_firewalls(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """List all firewalls in the project."""
    try:
        firewalls = get_client().list_firewalls()
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(firewalls))
        return
    if not firewalls:
        console.print("No firewalls found.")
        return
    typer.echo(format_firewalls_table(firewalls), nl=False)


@app.command()
def get(
    name_or_id: Annotated[str, typer.Argument(help="Firewall name or numeric ID")],
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """Get rules for a specific firewall.

    Examples:
        fornost firewall get web-fw
        fornost firewall get 7
    """
    try:
        firewall = get_client().get_firewall(name_or_id)
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(firewall))
        return
    typer.echo(format_firewall_detail(firewall), nl=False)
