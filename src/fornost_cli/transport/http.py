"""HTTP transport layer implementation.

This module turns a method, an endpoint path and an optional JSON body into
a decoded response, under a fixed bearer-token credential. It classifies
failures into the client error taxonomy and has NO knowledge of specific
resources, pagination or name resolution.
"""

from __future__ import annotations

from typing import Any
import json
import time

import requests
import structlog
from pydantic import ValidationError

from fornost_cli.exceptions import (
    ApiError,
    DecodeError,
    NetworkError,
    TimeoutError,
    TransportError,
)
from fornost_cli.models import ErrorResponse

logger = structlog.get_logger(__name__)

BASE_URL = "https://api.hetzner.cloud/v1"


class HttpTransport:
    """Authenticated HTTP transport for the Hetzner Cloud API.

    One call is one network round trip. There is no retry logic, no
    batching and no redirect handling beyond what ``requests`` does by
    default. The underlying session is reused across calls.

    Args:
        token: API token sent as ``Authorization: Bearer <token>``
        base_url: Versioned API root (default: ``BASE_URL``)
        timeout: Request timeout passed to requests (default: None, the
            library default)

    Attributes:
        base_url: Versioned API root
        timeout: Request timeout or None
        session: Reusable requests session

    Example:
        >>> transport = HttpTransport("my-token")
        >>> transport.request("GET", "/servers/42")
        {'server': {'id': 42, 'name': 'web-1', ...}}
    """

    def __init__(
        self,
        token: str,
        base_url: str = BASE_URL,
        timeout: float | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Raises:
            ValueError: If token or base_url is empty
        """
        if not token:
            raise ValueError("token cannot be empty")
        if not base_url:
            raise ValueError("base_url cannot be empty")

        self._token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _build_headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        """Send a request and decode the JSON response.

        Args:
            method: HTTP method ("GET", "POST", "DELETE")
            path: Endpoint path relative to the API root (e.g. "/servers")
            body: Optional JSON-serializable request body
            params: Optional query parameters
            expect_body: Decode the response body (default: True). When
                False, the body of a successful response is ignored.

        Returns:
            Decoded JSON value, or None when the body is empty or not expected

        Raises:
            TransportError: Body could not be encoded or request could not be sent
            NetworkError: Connection failed
            TimeoutError: Request timed out
            ApiError: Server returned status >= 400
            DecodeError: Successful response body was not valid JSON
        """
        url = f"{self.base_url}{path}"

        data: str | None = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise TransportError(f"encode request: {e}", cause=e)

        started = time.perf_counter()
        try:
            response = self.session.request(
                method,
                url,
                data=data,
                params=params,
                headers=self._build_headers(data is not None),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TimeoutError(f"http request timed out: {e}", cause=e)
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"http request: {e}", cause=e)
        except requests.exceptions.RequestException as e:
            # Catch-all for invalid URLs, too many redirects and the like
            raise TransportError(f"http request: {e}", cause=e)

        logger.debug(
            "http_request",
            method=method,
            path=path,
            params=params,
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )

        if response.status_code >= 400:
            raise self._api_error(response)

        if not expect_body or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"decode response: {e}", cause=e)

    @staticmethod
    def _api_error(response: requests.Response) -> ApiError:
        """Classify an error response.

        Uses the provider's ``{"error": {"code", "message"}}`` envelope when
        it parses and carries a message; otherwise only the status code.
        """
        try:
            envelope = ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            logger.debug("api_error_unparseable", status=response.status_code)
            return ApiError(response.status_code)

        return ApiError(
            response.status_code,
            code=envelope.error.code,
            message=envelope.error.message,
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request."""
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any) -> Any:
        """Send a POST request with a JSON body."""
        return self.request("POST", path, body=body)

    def delete(self, path: str) -> None:
        """Send a DELETE request; the response body is not decoded."""
        self.request("DELETE", path, expect_body=False)

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
