"""Main CLI entry point for Fornost."""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from fornost_cli import __version__
from fornost_cli.commands import config, firewall, ping, server, ssh
from fornost_cli.container import close_transport, get_settings
from fornost_cli.logging import setup_logging

app = typer.Typer(
    name="fornost",
    help="Fornost - a CLI tool for managing Hetzner Cloud infrastructure",
    no_args_is_help=True,
    add_completion=False,
)

# Register command groups
app.add_typer(server.app, name="server")
app.add_typer(ssh.app, name="ssh")
app.add_typer(firewall.app, name="firewall")
app.add_typer(config.app, name="config")
app.command(name="ping")(ping.ping)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Fornost CLI version: {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log HTTP requests and resolution steps to stderr"),
    ] = False,
) -> None:
    """
    Fornost - inspect and manage Hetzner Cloud servers, SSH keys, and firewalls.

    The API token is read from HETZNER_API_TOKEN, either in the environment
    or in ~/.dotfiles/.env (falling back to ./.env).

    Use 'fornost COMMAND --help' for help with specific commands.
    """
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        format_type=settings.log_format,
    )
    ctx.call_on_close(close_transport)


def cli_main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
