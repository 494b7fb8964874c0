"""Massive REST API Client.

Synchronous client for the Massive market-data API (formerly Polygon.io).
Every endpoint wrapper in this package funnels through ``RESTClient.fetch``,
which authenticates the request, maps failures onto the error taxonomy in
``massive_client.errors`` and decodes the JSON body into a typed result.

API Documentation: https://massive.com/docs/rest
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar, overload

import httpx

from .errors import APIError, InvalidURLError, RequestFailedError
from .schema import decode_json, format_query_value

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.massive.com"
DEFAULT_TIMEOUT = 30.0

API_KEY_PARAM = "apiKey"


class RESTClient:
    """Client for the Massive REST API.

    The API key is sent as the ``apiKey`` query parameter on every request,
    never as a header. Redirects are followed and the status check applies to the
    final response. The client holds no per-request state, so one instance
    can be shared between threads.

    Example:
        ```python
        with RESTClient("my-key") as client:
            bars = get_bars(client, "AAPL", BarsParams(1, "day", "2025-01-02", "2025-01-06"))
        ```
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Massive API key.
            base_url: API root, overridable to target a local mock server.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> RESTClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self._http.close()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._base_url = value.rstrip("/")

    @property
    def timeout(self) -> float:
        return self._timeout

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> httpx.URL:
        """Build the authenticated request URL for ``path``.

        Query parameters already present in ``path`` are kept. Parameters whose
        value is ``None`` or the empty string are dropped. ``apiKey`` is set
        last so a caller-supplied value of that name never wins.

        Raises:
            InvalidURLError: If base URL and path do not form an absolute URL.
        """
        raw = self._base_url + path
        try:
            url = httpx.URL(raw)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InvalidURLError(raw, str(e)) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(raw, "expected an absolute http(s) URL")

        for name, value in (params or {}).items():
            text = format_query_value(value)
            if text:
                url = url.copy_set_param(name, text)

        return url.copy_set_param(API_KEY_PARAM, self._api_key)

    @overload
    def fetch(self, path: str, params: Mapping[str, Any] | None, result_type: type[T]) -> T: ...

    @overload
    def fetch(self, path: str, params: Mapping[str, Any] | None, result_type: Any) -> Any: ...

    def fetch(self, path: str, params: Mapping[str, Any] | None, result_type: Any) -> Any:
        """Perform an authenticated GET and decode the JSON response.

        Args:
            path: API path, e.g. ``/v1/open-close/AAPL/2025-01-06``.
            params: Optional query parameters; ``None``/empty values are omitted.
            result_type: Dataclass, ``list[...]``, ``dict[...]`` or ``Any``.

        Returns:
            The decoded result.

        Raises:
            InvalidURLError: If the URL cannot be built.
            RequestFailedError: On transport errors (DNS, connection, timeout, TLS).
            APIError: When the status is not 200.
            DecodeError: When the body is not JSON or does not fit ``result_type``.
        """
        url = self.build_url(path, params)

        try:
            response = self._http.get(url)
        except httpx.RequestError as e:
            raise RequestFailedError(f"request failed: {e}", {"path": path}) from e

        logger.debug(f"GET {path} -> {response.status_code}")

        if response.status_code != httpx.codes.OK:
            raise APIError(response.status_code, response.text)

        return decode_json(response.content, result_type)
