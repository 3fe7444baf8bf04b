"""SSH key management commands.

- list: List all SSH keys in the project
- add: Upload a public key file
- delete: Delete a key by name or ID
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from fornost_cli.commands import fail
from fornost_cli.container import ConfigurationError, get_client
from fornost_cli.exceptions import HetznerError
from fornost_cli.formatters import format_json, format_ssh_keys_table, format_success

app = typer.Typer(
    name="ssh",
    help="Manage Hetzner Cloud SSH keys",
    no_args_is_help=True,
)

console = Console()


@app.command("list")
def list_keys(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """List all SSH keys in the project."""
    try:
        keys = get_client().list_ssh_keys()
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(keys))
        return
    if not keys:
        console.print("No SSH keys found.")
        return
    typer.echo(format_ssh_keys_table(keys), nl=False)


@app.command()
def add(
    name: Annotated[str, typer.Option("--name", "-n", help="Name for the key in Hetzner")],
    key_path: Annotated[
        Path,
        typer.Option("--key", "-k", help="Path to public key file"),
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
) -> None:
    """Upload a new SSH key.

    Examples:
        fornost ssh add --name my-key --key ~/.ssh/id_ed25519.pub
    """
    if not name.strip():
        console.print("[red]Validation error:[/red] --name cannot be empty")
        raise typer.Exit(2)

    try:
        public_key = key_path.expanduser().read_text().strip()
    except OSError as e:
        console.print(f"[red]Validation error:[/red] read key file: {escape(str(e))}")
        raise typer.Exit(2)
    if not public_key:
        console.print(f"[red]Validation error:[/red] key file is empty: {escape(str(key_path))}")
        raise typer.Exit(2)

    try:
        key = get_client().add_ssh_key(name, public_key)
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    if json_output:
        typer.echo(format_json(key))
        return
    console.print(
        format_success(
            f'Created SSH key "{escape(key.name)}" '
            f"(ID: {key.id}, Fingerprint: {key.fingerprint})"
        )
    )


@app.command()
def delete(
    name_or_id: Annotated[str, typer.Argument(help="SSH key name or numeric ID")],
) -> None:
    """Delete an SSH key by name or ID.

    Examples:
        fornost ssh delete my-key
        fornost ssh delete 42
    """
    try:
        get_client().delete_ssh_key(name_or_id)
    except (HetznerError, ConfigurationError) as e:
        fail(console, e)

    console.print(format_success(f'Deleted SSH key "{escape(name_or_id)}"'))
