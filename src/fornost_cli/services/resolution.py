"""Name-or-ID resolution.

The API only supports direct lookup by numeric ID. A token that parses as
an integer is fetched directly; anything else is matched by exact,
case-sensitive name against a full listing. The first match in listing
order wins when several resources share a name.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar
import re

import structlog

from fornost_cli.exceptions import NotFoundError

logger = structlog.get_logger(__name__)

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Named(Protocol):
    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...


T = TypeVar("T")
NamedT = TypeVar("NamedT", bound=Named)


def parse_id(token: str) -> int | None:
    """Parse ``token`` as a signed 64-bit base-10 integer, or return None.

    Tokens outside the 64-bit range are treated as names.
    """
    if not _INTEGER.fullmatch(token):
        return None
    value = int(token)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def find_by_name(items: Iterable[NamedT], name: str, resource: str) -> NamedT:
    """Return the first item whose name equals ``name``.

    Raises:
        NotFoundError: If no item matches
    """
    for item in items:
        if item.name == name:
            logger.debug("resolved_by_name", resource=resource, name=name, id=item.id)
            return item
    raise NotFoundError(resource, name)


def resolve_name_or_id(
    token: str,
    fetch_by_id: Callable[[int], T],
    list_all: Callable[[], Iterable[NamedT]],
    resource: str,
) -> T | NamedT:
    """Resolve ``token`` to a resource.

    Args:
        token: Numeric ID or display name
        fetch_by_id: Fetches a resource by ID (used for numeric tokens only)
        list_all: Lists every resource (used for names only)
        resource: Resource label for not-found errors (e.g. "server")

    Returns:
        The fetched or matched resource

    Raises:
        NotFoundError: If a name matches nothing in the full listing
    """
    resource_id = parse_id(token)
    if resource_id is not None:
        return fetch_by_id(resource_id)
    return find_by_name(list_all(), token, resource)


def resolve_id(
    token: str,
    list_all: Callable[[], Iterable[Named]],
    resource: str,
) -> int:
    """Resolve ``token`` to a numeric ID without fetching numeric tokens.

    Raises:
        NotFoundError: If a name matches nothing in the full listing
    """
    resource_id = parse_id(token)
    if resource_id is not None:
        return resource_id
    return find_by_name(list_all(), token, resource).id
