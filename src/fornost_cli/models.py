"""Hetzner Cloud API models.

Read-only snapshots of provider-side resources. Instances are frozen and
fetched fresh on every command invocation. Only ``id`` and ``name`` are
required; other fields default to empty values when the API omits them.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _Snapshot(BaseModel):
    """Base for immutable API models. Unknown fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ServerStatus(str, Enum):
    """Known server lifecycle states.

    ``Server.status`` keeps the provider string as received; these values
    are only used to pick a display color.
    """

    INITIALIZING = "initializing"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    OFF = "off"
    DELETING = "deleting"
    MIGRATING = "migrating"
    REBUILDING = "rebuilding"
    UNKNOWN = "unknown"


class RuleDirection(str, Enum):
    """Firewall rule direction."""

    IN = "in"
    OUT = "out"


class IPv4(_Snapshot):
    ip: str = ""


class PublicNet(_Snapshot):
    ipv4: IPv4 | None = None


class ServerType(_Snapshot):
    name: str = ""


class Location(_Snapshot):
    name: str = ""
    city: str = ""


class Datacenter(_Snapshot):
    name: str = ""
    location: Location = Field(default_factory=Location)


class Server(_Snapshot):
    """Cloud server.

    Attributes:
        id: Server ID
        name: Display name, unique within the project
        status: Lifecycle state as reported by the provider
        public_net: Public network configuration
        server_type: Server type (e.g. "cx22")
        datacenter: Datacenter and location
        created: Creation timestamp
    """

    id: int
    name: str
    status: str = ServerStatus.UNKNOWN.value
    public_net: PublicNet = Field(default_factory=PublicNet)
    server_type: ServerType = Field(default_factory=ServerType)
    datacenter: Datacenter = Field(default_factory=Datacenter)
    created: datetime | None = None

    @property
    def public_ipv4(self) -> str:
        """Public IPv4 address, or an empty string if none is assigned."""
        if self.public_net.ipv4 is None:
            return ""
        return self.public_net.ipv4.ip


class SSHKey(_Snapshot):
    """SSH public key stored in the project."""

    id: int
    name: str
    fingerprint: str = ""
    public_key: str = ""


class FirewallRule(_Snapshot):
    """Single firewall rule.

    ``port`` is a string because it may be a range ("80-85"); it is absent
    for protocols without ports (icmp, gre, esp).
    """

    direction: RuleDirection
    protocol: str = ""
    port: str | None = None
    source_ips: list[str] = Field(default_factory=list)
    destination_ips: list[str] = Field(default_factory=list)
    description: str | None = None

    @property
    def peer_ips(self) -> list[str]:
        """Source IPs for inbound rules, destination IPs for outbound rules."""
        if self.direction is RuleDirection.OUT:
            return self.destination_ips
        return self.source_ips


class AppliedServer(_Snapshot):
    id: int


class AppliedTo(_Snapshot):
    """Firewall target: a type tag plus an optional server reference."""

    type: str
    server: AppliedServer | None = None


class Firewall(_Snapshot):
    """Firewall with its ordered rules and applied-to targets."""

    id: int
    name: str
    rules: list[FirewallRule] = Field(default_factory=list)
    applied_to: list[AppliedTo] = Field(default_factory=list)


class Action(_Snapshot):
    id: int
    status: str = ""
    command: str = ""


class Pagination(_Snapshot):
    """Pagination block of a list response (``meta.pagination``)."""

    page: int = 1
    per_page: int = 0
    total_pages: int | None = Field(default=None, alias="last_page")
    next_page: int | None = None


class Meta(_Snapshot):
    pagination: Pagination = Field(default_factory=Pagination)


class ErrorDetail(_Snapshot):
    code: str = ""
    message: str = ""


class ErrorResponse(_Snapshot):
    """Error body returned with status >= 400."""

    error: ErrorDetail = Field(default_factory=ErrorDetail)
