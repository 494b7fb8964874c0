"""
Massive Client Error Definitions

Every failure of a request surfaces to the caller as one of the exceptions
below. The client never retries or recovers internally; the exception type
tells the caller whether retrying makes sense.

Example:
    from massive_client.errors import APIError, RequestFailedError

    try:
        result = get_open_close(client, "AAPL", "2025-01-06")
    except APIError as e:
        if e.status_code == 404:
            logger.info(f"No data: {e.body}")
    except RequestFailedError as e:
        logger.warning(f"Network problem, try again later: {e}")
"""

from __future__ import annotations

from typing import Any


class MassiveError(Exception):
    """Base class for every failure a client call can raise.

    ``kind`` names the failure category so callers that log or serialise
    errors do not need to switch on the exception class. ``context`` holds the
    request facts known at the point of failure, such as the path, URL, HTTP
    status or JSON path. It never contains the API key.
    """

    kind = "error"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}

    def to_dict(self) -> dict[str, Any]:
        """Describe the failure as a JSON-friendly mapping for logs and CLI output."""
        return {"kind": self.kind, "message": self.message, **self.context}


class InvalidURLError(MassiveError):
    """Raised when the base URL and path do not form a valid URL."""

    kind = "invalid_url"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid URL {url!r}: {reason}", {"url": url})
        self.url = url


class RequestFailedError(MassiveError):
    """
    Raised when the HTTP request could not be completed.

    Covers DNS failures, refused connections, TLS errors and timeouts.
    The underlying transport exception is chained as ``__cause__``.
    """

    kind = "request_failed"


class APIError(MassiveError):
    """
    Raised when the provider answers with a status other than 200.

    The body is kept verbatim so callers can inspect the provider's own
    error payload, e.g. ``{"status":"NOT_FOUND","message":"Data not found."}``.
    """

    kind = "api_error"

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"API error (status {status_code}): {body}",
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class DecodeError(MassiveError):
    """Raised when a response body is not JSON or does not fit the result type."""

    kind = "decode_error"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, {"path": path} if path else None)
        self.path = path


class ConfigError(MassiveError):
    """Raised when configuration cannot be read, written or is incomplete."""

    kind = "config"
