"""Server inspection commands.

- list: List all servers in the project
- get: Show details for one server by name or ID
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fornost_cli.commands import fail
from fornost_cli.container import ConfigurationError, get_client
from fornost_cli.exceptions import HetznerError
from fornost_cli.formatters import format_json, format_server_detail, format_servers_table

app = typer.Typer(
    name="server",
    help="Manage Hetzner Cloud servers",
    no_args_is_help=True,
)

console = Console()


@app.command("list")
def list_servers(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """List all servers in the project.

    Examples:
        fornost server list
        fornost server list --json
    """
    try:
        servers = get_client().list_servers()
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(servers))
        return
    if not servers:
        console.print("No servers found.")
        return
    typer.echo(format_servers_table(servers), nl=False)


@app.command()
def get(
    name_or_id: Annotated[str, typer.Argument(help="Server name or numeric ID")],
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """Get details for a specific server.

    Examples:
        fornost server get web-1
        fornost server get 42 --json
    """
    try:
        server = get_client().get_server(name_or_id)
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(server))
        return
    typer.echo(format_server_detail(server), nl=False)
