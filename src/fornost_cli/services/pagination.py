"""Page-following for collection endpoints.

A single routine materializes any paginated list endpoint into one ordered
list, parameterized only by endpoint path, envelope key and element model.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from fornost_cli.exceptions import DecodeError
from fornost_cli.models import Meta
from fornost_cli.transport.http import HttpTransport

logger = structlog.get_logger(__name__)

PER_PAGE = 50

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_items(items: Any, key: str, model: type[ModelT]) -> list[ModelT]:
    """Validate a JSON array into a list of ``model`` instances.

    A JSON null is read as an empty array.

    Raises:
        DecodeError: If the value is not an array of valid elements
    """
    if items is None:
        return []
    try:
        return TypeAdapter(list[model]).validate_python(items)  # type: ignore[valid-type]
    except ValidationError as e:
        raise DecodeError(f"decode {key}: {e}", cause=e)


def _next_page(envelope: dict[str, Any]) -> int | None:
    """Return the next page number, or None when traversal should stop."""
    if "meta" not in envelope:
        return None
    try:
        meta = Meta.model_validate(envelope["meta"])
    except ValidationError:
        logger.debug("pagination_meta_unparseable")
        return None
    return meta.pagination.next_page


def fetch_all(
    transport: HttpTransport,
    path: str,
    key: str,
    model: type[ModelT],
) -> list[ModelT]:
    """Fetch every page of a collection endpoint.

    Starts at page 1 with ``per_page=50`` and follows
    ``meta.pagination.next_page`` until it is null or ``meta`` is absent.
    Items are returned in page order, then in-page order.

    Args:
        transport: HTTP transport
        path: Collection endpoint (e.g. "/servers")
        key: Envelope key holding the array (e.g. "servers")
        model: Element model

    Returns:
        All items across all pages

    Raises:
        DecodeError: If an envelope is not an object, lacks ``key``, or
            holds invalid elements
        HetznerError: Any transport or API failure, unchanged

    Example:
        >>> servers = fetch_all(transport, "/servers", "servers", Server)
    """
    items: list[ModelT] = []
    page: int | None = 1

    while page is not None:
        envelope = transport.get(path, params={"page": page, "per_page": PER_PAGE})
        if not isinstance(envelope, dict):
            raise DecodeError(f"decode envelope: expected object from {path}")
        if key not in envelope:
            raise DecodeError(f"response missing key {key!r}")

        batch = decode_items(envelope[key], key, model)
        items.extend(batch)
        logger.debug("page_fetched", path=path, page=page, count=len(batch))

        page = _next_page(envelope)

    return items
