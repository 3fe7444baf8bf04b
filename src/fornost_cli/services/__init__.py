"""Resource-independent client helpers.

- pagination: follow ``meta.pagination.next_page`` across a collection
- resolution: turn a name-or-ID token into a resource or an ID

Neither module knows about specific resource types; the client supplies
endpoint paths, envelope keys, models and callbacks.
"""

from __future__ import annotations

from fornost_cli.services.pagination import PER_PAGE, fetch_all
from fornost_cli.services.resolution import parse_id, resolve_id, resolve_name_or_id

__all__ = [
    "PER_PAGE",
    "fetch_all",
    "parse_id",
    "resolve_id",
    "resolve_name_or_id",
]
