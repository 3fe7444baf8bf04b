"""Root-level pytest configuration for all tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest
import structlog

from fornost_cli.container import Settings, reset_container, set_override
from fornost_cli.transport.http import HttpTransport

_ENV_VARS = (
    "HETZNER_API_TOKEN",
    "FORNOST_API_TOKEN",
    "FORNOST_LOG_LEVEL",
    "FORNOST_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    """Reset the container and inject settings that ignore the host environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_container()
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    set_override("settings", settings)
    yield settings
    reset_container()
    structlog.reset_defaults()


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build a fake ``requests.Response``.

    Pass ``payload`` for a JSON body or ``content`` for raw bytes.
    """

    def _make(
        status_code: int = 200,
        payload: Any = None,
        content: bytes | None = None,
    ) -> Mock:
        if content is None:
            content = b"" if payload is None else json.dumps(payload).encode()
        response = Mock()
        response.status_code = status_code
        response.content = content
        response.json.side_effect = lambda: json.loads(content)
        return response

    return _make


@pytest.fixture
def transport() -> Mock:
    """Stub transport for client tests; no network calls are made."""
    return Mock(spec=HttpTransport)


def _server(server_id: int, name: str) -> dict[str, Any]:
    return {
        "id": server_id,
        "name": name,
        "status": "running",
        "public_net": {"ipv4": {"ip": f"10.0.0.{server_id % 250}"}},
        "server_type": {"name": "cx22"},
        "datacenter": {
            "name": "fsn1-dc14",
            "location": {"name": "fsn1", "city": "Falkenstein"},
        },
        "created": "2024-03-01T12:00:00+00:00",
    }


@pytest.fixture
def server_payload() -> Callable[[int, str], dict[str, Any]]:
    """Factory for server JSON objects as returned by the API."""
    return _server


@pytest.fixture
def page() -> Callable[..., dict[str, Any]]:
    """Factory for paginated list envelopes."""

    def _page(
        key: str,
        items: list[dict[str, Any]],
        page_number: int = 1,
        next_page: int | None = None,
        last_page: int | None = None,
    ) -> dict[str, Any]:
        return {
            key: items,
            "meta": {
                "pagination": {
                    "page": page_number,
                    "per_page": 50,
                    "previous_page": page_number - 1 or None,
                    "next_page": next_page,
                    "last_page": last_page or page_number,
                    "total_entries": len(items),
                }
            },
        }

    return _page
