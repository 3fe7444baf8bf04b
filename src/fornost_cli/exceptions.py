"""Error taxonomy for the Hetzner Cloud client.

Every failure raised by the transport and client layers is a subclass of
``HetznerError`` and carries an ``ErrorKind`` tag, so callers can branch on
the kind without inspecting message text:

- ``TRANSPORT``: the request could not be built or sent
- ``API``: the provider answered with status >= 400
- ``DECODE``: the response body did not have the expected shape
- ``NOT_FOUND``: name resolution found no match in a full listing
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"
    NOT_FOUND = "not_found"


class HetznerError(Exception):
    """Base exception for client errors.

    Args:
        message: Human-readable error description
        cause: Original exception that caused this error

    Attributes:
        kind: Failure kind, fixed per subclass
        message: Error message
        cause: Original exception (or None)
    """

    kind: ErrorKind
    message: str | None

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class TransportError(HetznerError):
    """Request could not be constructed or sent.

    Raised for network-level failures. Never retried.
    """

    kind = ErrorKind.TRANSPORT


class NetworkError(TransportError):
    """Connection refused, DNS failure, TLS failure and similar."""

    pass


class TimeoutError(TransportError):
    """Request exceeded the underlying transport's timeout."""

    pass


class ApiError(HetznerError):
    """Provider rejected the request (HTTP status >= 400).

    When the response body held a ``{"error": {"code", "message"}}``
    envelope with a non-empty message, ``code`` and ``message`` carry it
    verbatim. Otherwise both are None and only ``status_code`` is known.

    Args:
        status_code: HTTP status code of the response
        code: Provider error code (e.g. "not_found")
        message: Provider error message

    Example:
        >>> err = ApiError(404, code="not_found", message="server not found")
        >>> str(err)
        'hetzner api error: server not found (code: not_found)'
    """

    kind = ErrorKind.API

    def __init__(
        self,
        status_code: int,
        code: str | None = None,
        message: str | None = None,
    ) -> None:
        if message:
            text = f"hetzner api error: {message} (code: {code})"
        else:
            text = f"hetzner api error: status {status_code}"
            code = None
            message = None
        super().__init__(text)
        self.status_code = status_code
        self.code = code
        self.message = message


class DecodeError(HetznerError):
    """Response body did not match the expected shape.

    Signals a contract mismatch between client and API rather than a
    user-facing rejection.
    """

    kind = ErrorKind.DECODE


class NotFoundError(HetznerError):
    """No resource with the given name exists.

    Determined client-side after a full listing; no API error occurred.

    Args:
        resource: Resource type label (e.g. "server", "ssh key")
        token: The name that was looked up
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, token: str) -> None:
        super().__init__(f"{resource} not found: {token}")
        self.resource = resource
        self.token = token
