"""Hetzner Cloud resource client.

Per-resource operations (list, get, create, delete) built on the HTTP
transport, the generic page-following routine and name-or-ID resolution.
Errors from every layer propagate unchanged; nothing is retried.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from fornost_cli.exceptions import DecodeError
from fornost_cli.models import Action, Firewall, Server, SSHKey
from fornost_cli.services.pagination import decode_items, fetch_all
from fornost_cli.services.resolution import resolve_id, resolve_name_or_id
from fornost_cli.transport.http import HttpTransport

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode_one(payload: Any, key: str, model: type[ModelT]) -> ModelT:
    """Extract and validate the single resource under ``key``."""
    if not isinstance(payload, dict) or key not in payload:
        raise DecodeError(f"response missing key {key!r}")
    try:
        return model.model_validate(payload[key])
    except ValidationError as e:
        raise DecodeError(f"decode {key}: {e}", cause=e)


class HetznerClient:
    """Client for Hetzner Cloud servers, SSH keys and firewalls.

    Holds only the transport; every call fetches fresh state.

    Args:
        transport: Authenticated HTTP transport

    Example:
        >>> client = HetznerClient(HttpTransport("my-token"))
        >>> server = client.get_server("web-1")
        >>> print(server.id)
        42
    """

    def __init__(self, transport: HttpTransport) -> None:
        self.transport = transport

    def _get_one(self, path: str, key: str, model: type[ModelT]) -> ModelT:
        return _decode_one(self.transport.get(path), key, model)

    def ping(self) -> None:
        """Validate the token with a one-item actions listing.

        Any decodable response counts as success, even an empty list.

        Raises:
            HetznerError: On any transport, API or decode failure
        """
        payload = self.transport.get("/actions", params={"per_page": 1})
        if not isinstance(payload, dict):
            raise DecodeError("decode actions: expected object")
        decode_items(payload.get("actions", []), "actions", Action)

    # Servers

    def list_servers(self) -> list[Server]:
        """Return all servers in the project."""
        return fetch_all(self.transport, "/servers", "servers", Server)

    def get_server(self, token: str) -> Server:
        """Get a server by numeric ID or name.

        Raises:
            NotFoundError: If ``token`` is a name that matches no server
        """
        return resolve_name_or_id(
            token,
            lambda server_id: self._get_one(f"/servers/{server_id}", "server", Server),
            self.list_servers,
            "server",
        )

    # SSH keys

    def list_ssh_keys(self) -> list[SSHKey]:
        """Return all SSH keys in the project."""
        return fetch_all(self.transport, "/ssh_keys", "ssh_keys", SSHKey)

    def add_ssh_key(self, name: str, public_key: str) -> SSHKey:
        """Upload a public key.

        Not idempotent: the provider either creates another key or rejects
        the duplicate with an API error.

        Args:
            name: Key name
            public_key: Public key text, already stripped of surrounding whitespace

        Returns:
            The created key with its server-assigned ID and fingerprint
        """
        payload = self.transport.post(
            "/ssh_keys",
            {"name": name, "public_key": public_key},
        )
        key = _decode_one(payload, "ssh_key", SSHKey)
        logger.info("ssh_key_created", id=key.id, name=key.name)
        return key

    def delete_ssh_key(self, token: str) -> None:
        """Delete an SSH key by numeric ID or name.

        Names are resolved with a full listing first; a name without a
        match raises before any delete request is sent.

        Raises:
            NotFoundError: If ``token`` is a name that matches no key
        """
        key_id = resolve_id(token, self.list_ssh_keys, "ssh key")
        self.transport.delete(f"/ssh_keys/{key_id}")
        logger.info("ssh_key_deleted", id=key_id)

    # Firewalls

    def list_firewalls(self) -> list[Firewall]:
        """Return all firewalls in the project."""
        return fetch_all(self.transport, "/firewalls", "firewalls", Firewall)

    def get_firewall(self, token: str) -> Firewall:
        """Get a firewall by numeric ID or name.

        Raises:
            NotFoundError: If ``token`` is a name that matches no firewall
        """
        return resolve_name_or_id(
            token,
            lambda firewall_id: self._get_one(
                f"/firewalls/{firewall_id}", "firewall", Firewall
            ),
            self.list_firewalls,
            "firewall",
        )
