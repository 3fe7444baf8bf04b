"""Output formatters for the Fornost CLI.

Provides two output formats:
- JSON: Machine-readable format for scripting
- Table: Human-readable tabular format (default)

Color is disabled automatically when output is piped or NO_COLOR is set.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fornost_cli.models import Firewall, Server, ServerStatus, SSHKey


def _should_use_color() -> bool:
    """Determine if color output should be used.

    Color is disabled when:
    - NO_COLOR environment variable is set
    - TERM is set to "dumb"
    - Output is piped (not a TTY)
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return sys.stdout.isatty()


def _get_console(force_color: bool | None = None) -> Console:
    """Get a Rich Console with appropriate color settings.

    Args:
        force_color: If True, force color output. If False, disable color.
                    If None, auto-detect based on environment.
    """
    if force_color is None:
        force_color = _should_use_color()

    return Console(
        force_terminal=force_color,
        no_color=not force_color,
        highlight=False,
        width=200 if not force_color else None,
    )


def _render(renderable: object, force_color: bool | None) -> str:
    console = _get_console(force_color)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def _format_timestamp(timestamp: datetime | None) -> str:
    if timestamp is None:
        return "N/A"
    return timestamp.strftime("%Y-%m-%d %H:%M:%S")


def _format_status(status: str) -> str:
    """Colorize a server status; unrecognized values are shown uncolored."""
    text = escape(status)
    if status == ServerStatus.RUNNING:
        return f"[green]{text}[/green]"
    if status in (ServerStatus.OFF, ServerStatus.STOPPING):
        return f"[yellow]{text}[/yellow]"
    if status in (ServerStatus.DELETING, ServerStatus.UNKNOWN):
        return f"[red]{text}[/red]"
    return text


def _new_table(*columns: str) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column, overflow="fold")
    return table


def format_json(data: BaseModel | Sequence[BaseModel]) -> str:
    """Format one model or a list of models as pretty-printed JSON."""
    if isinstance(data, BaseModel):
        payload: object = data.model_dump(mode="json")
    else:
        payload = [item.model_dump(mode="json") for item in data]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_servers_table(servers: Sequence[Server], force_color: bool | None = None) -> str:
    """Format servers as a table (ID, name, status, IP, type, location, created)."""
    table = _new_table("ID", "NAME", "STATUS", "IP", "TYPE", "LOCATION", "CREATED")
    for server in servers:
        table.add_row(
            str(server.id),
            escape(server.name),
            _format_status(server.status),
            escape(server.public_ipv4),
            escape(server.server_type.name),
            escape(server.datacenter.location.name),
            _format_timestamp(server.created),
        )
    return _render(table, force_color)


def format_server_detail(server: Server, force_color: bool | None = None) -> str:
    """Format a single server as a detail view."""
    location = server.datacenter.location
    lines = [
        f"[bold]ID:[/bold]         {server.id}",
        f"[bold]Name:[/bold]       {escape(server.name)}",
        f"[bold]Status:[/bold]     {_format_status(server.status)}",
        f"[bold]IPv4:[/bold]       {escape(server.public_ipv4)}",
        f"[bold]Type:[/bold]       {escape(server.server_type.name)}",
        f"[bold]Datacenter:[/bold] {escape(server.datacenter.name)}",
        f"[bold]Location:[/bold]   {escape(location.name)} ({escape(location.city)})",
        f"[bold]Created:[/bold]    {_format_timestamp(server.created)}",
    ]
    return _render("\n".join(lines), force_color)


def format_ssh_keys_table(keys: Sequence[SSHKey], force_color: bool | None = None) -> str:
    """Format SSH keys as a table (ID, name, fingerprint)."""
    table = _new_table("ID", "NAME", "FINGERPRINT")
    for key in keys:
        table.add_row(str(key.id), escape(key.name), escape(key.fingerprint))
    return _render(table, force_color)


def format_firewalls_table(
    firewalls: Sequence[Firewall], force_color: bool | None = None
) -> str:
    """Format firewalls as a table with rule and target counts."""
    table = _new_table("ID", "NAME", "RULES", "APPLIED TO")
    for firewall in firewalls:
        table.add_row(
            str(firewall.id),
            escape(firewall.name),
            str(len(firewall.rules)),
            str(len(firewall.applied_to)),
        )
    return _render(table, force_color)


def format_firewall_detail(firewall: Firewall, force_color: bool | None = None) -> str:
    """Format a firewall header followed by its rules.

    Outbound rules show destination IPs in the IP column, inbound rules
    show source IPs.
    """
    header = "\n".join(
        [
            f"[bold]ID:[/bold]         {firewall.id}",
            f"[bold]Name:[/bold]       {escape(firewall.name)}",
            f"[bold]Applied To:[/bold] {len(firewall.applied_to)} resources",
            "",
        ]
    )
    if not firewall.rules:
        return _render(header + "\nNo rules configured.", force_color)

    table = _new_table("DIRECTION", "PROTOCOL", "PORT", "IPs", "DESCRIPTION")
    for rule in firewall.rules:
        table.add_row(
            rule.direction.value,
            escape(rule.protocol),
            escape(rule.port or ""),
            escape(", ".join(rule.peer_ips)),
            escape(rule.description or ""),
        )
    return _render(header, force_color) + _render(table, force_color)


def format_success(message: str) -> str:
    """Format a success message."""
    return f"[green]✓[/green] {message}"
