"""Tests for the client error hierarchy."""

import pytest

from massive_client.errors import (
    APIError,
    ConfigError,
    DecodeError,
    InvalidURLError,
    MassiveError,
    RequestFailedError,
)


class TestErrorKinds:
    """Tests for failure categories."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidURLError("nope", "expected an absolute http(s) URL"), "invalid_url"),
            (RequestFailedError("request failed: refused", {"path": "/v1/x"}), "request_failed"),
            (APIError(404, "{}"), "api_error"),
            (DecodeError("bad", "$.count"), "decode_error"),
            (ConfigError("no key"), "config"),
        ],
    )
    def test_kind(self, error: MassiveError, kind: str) -> None:
        """Test each failure reports its own kind and shares the base class."""
        assert isinstance(error, MassiveError)
        assert error.kind == kind
        assert error.to_dict()["kind"] == kind


class TestToDict:
    """Tests for error serialisation."""

    def test_api_error(self) -> None:
        """Test the status and raw body are included."""
        error = APIError(403, '{"status":"NOT_AUTHORIZED"}')

        assert error.to_dict() == {
            "kind": "api_error",
            "message": 'API error (status 403): {"status":"NOT_AUTHORIZED"}',
            "status_code": 403,
            "body": '{"status":"NOT_AUTHORIZED"}',
        }

    def test_decode_error_without_path(self) -> None:
        """Test a parse failure carries no JSON path."""
        error = DecodeError("failed to parse response: Expecting value")

        assert error.path is None
        assert error.to_dict() == {
            "kind": "decode_error",
            "message": "failed to parse response: Expecting value",
        }

    def test_context_is_copied(self) -> None:
        """Test later changes to the caller's mapping do not leak into the error."""
        context = {"path": "/v1/marketstatus/now"}
        error = RequestFailedError("request failed: timed out", context)
        context["path"] = "/changed"

        assert error.context == {"path": "/v1/marketstatus/now"}
