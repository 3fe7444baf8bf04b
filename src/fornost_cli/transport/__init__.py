"""Transport layer for the Fornost CLI.

This module handles authenticated HTTP communication with the Hetzner Cloud
API. It is responsible for:
- Bearer-token authentication
- JSON request/response bodies
- Classifying HTTP failures into the client error taxonomy
"""

from fornost_cli.transport.http import BASE_URL, HttpTransport

__all__ = [
    "BASE_URL",
    "HttpTransport",
]
