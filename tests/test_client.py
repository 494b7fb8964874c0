"""Tests for the Massive request executor."""

import logging
from dataclasses import dataclass

import httpx
import pytest
from pytest_httpx import HTTPXMock

from massive_client.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, RESTClient
from massive_client.errors import APIError, DecodeError, InvalidURLError, RequestFailedError
from massive_client.stocks import OpenCloseResponse

API_KEY = "test-key"
BASE_URL = "https://api.massive.test"


@dataclass
class Echo:
    status: str = ""
    count: int = 0


class TestRESTClientInit:
    """Tests for RESTClient construction."""

    def test_defaults(self) -> None:
        """Test default base URL and timeout."""
        with RESTClient("abc") as client:
            assert client.base_url == DEFAULT_BASE_URL
            assert client.timeout == DEFAULT_TIMEOUT == 30.0
            assert client.api_key == "abc"

    def test_base_url_override(self) -> None:
        """Test base URL can be redirected, e.g. to a local mock server."""
        with RESTClient("abc") as client:
            client.base_url = "http://127.0.0.1:8080/"
            assert client.base_url == "http://127.0.0.1:8080"

    def test_trailing_slash_stripped(self) -> None:
        """Test trailing slash on the base URL does not double up."""
        with RESTClient("abc", base_url="https://example.com/") as client:
            url = client.build_url("/v1/marketstatus/now")
            assert url.path == "/v1/marketstatus/now"


class TestBuildURL:
    """Tests for query construction."""

    def test_api_key_always_added(self, client: RESTClient) -> None:
        """Test apiKey is present even without other params."""
        url = client.build_url("/v1/marketstatus/now")
        assert url.params.get_list("apiKey") == [API_KEY]

    def test_empty_values_dropped(self, client: RESTClient) -> None:
        """Test empty strings and None are never sent."""
        url = client.build_url("/v3/trades/AAPL", {"timestamp": "", "order": None, "limit": 10})
        assert "timestamp" not in url.params
        assert "order" not in url.params
        assert url.params.get_list("limit") == ["10"]

    def test_caller_api_key_overridden(self, client: RESTClient) -> None:
        """Test a caller-supplied apiKey never replaces the configured key."""
        url = client.build_url("/v1/marketstatus/now", {"apiKey": "attacker"})
        assert url.params.get_list("apiKey") == [API_KEY]

    def test_bool_and_number_formatting(self, client: RESTClient) -> None:
        """Test booleans are lowercase and numbers use str()."""
        url = client.build_url("/x", {"adjusted": False, "expired": True, "strike_price": 190.5})
        assert url.params["adjusted"] == "false"
        assert url.params["expired"] == "true"
        assert url.params["strike_price"] == "190.5"

    def test_existing_query_preserved(self, client: RESTClient) -> None:
        """Test parameters embedded in the path survive."""
        url = client.build_url("/v3/reference/tickers?cursor=abc", {"limit": 5})
        assert url.params["cursor"] == "abc"
        assert url.params["limit"] == "5"

    def test_invalid_scheme(self) -> None:
        """Test a non-http base URL is rejected."""
        with RESTClient("abc", base_url="ftp://example.com") as client:
            with pytest.raises(InvalidURLError):
                client.build_url("/v1/marketstatus/now")

    def test_missing_scheme(self) -> None:
        """Test a relative base URL is rejected."""
        with RESTClient("abc", base_url="") as client:
            with pytest.raises(InvalidURLError):
                client.build_url("/v1/marketstatus/now")

    def test_invalid_port(self) -> None:
        """Test an unparsable URL is rejected."""
        with RESTClient("abc", base_url="http://example.com:abc") as client:
            with pytest.raises(InvalidURLError) as exc_info:
                client.build_url("/v1/marketstatus/now")
            assert exc_info.value.url == "http://example.com:abc/v1/marketstatus/now"


class TestFetch:
    """Tests for RESTClient.fetch."""

    def test_exact_path_delivered(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test the server receives exactly the requested path."""
        httpx_mock.add_response(json={"status": "OK"})

        client.fetch("/v1/open-close/AAPL/2025-01-06", None, OpenCloseResponse)

        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "GET"
        assert request.url.host == "api.massive.test"
        assert request.url.path == "/v1/open-close/AAPL/2025-01-06"

    def test_params_sent_once(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test non-empty params arrive exactly once, empty ones not at all."""
        httpx_mock.add_response(json={"status": "OK"})

        client.fetch("/v3/trades/AAPL", {"limit": "10", "sort": "", "apiKey": "other"}, Echo)

        params = httpx_mock.get_request().url.params
        assert params.get_list("limit") == ["10"]
        assert "sort" not in params
        assert params.get_list("apiKey") == [API_KEY]

    def test_decodes_matching_fields(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test a 200 response decodes field-for-field, missing fields stay zero."""
        httpx_mock.add_response(text='{"status":"OK","open":244.31}')

        result = client.fetch("/v1/open-close/AAPL/2025-01-06", None, OpenCloseResponse)

        assert result.status == "OK"
        assert result.open == 244.31
        assert result.close == 0.0
        assert result.symbol == ""

    @pytest.mark.parametrize("status_code", [403, 404, 500])
    def test_non_200_raises_api_error(
        self, httpx_mock: HTTPXMock, client: RESTClient, status_code: int
    ) -> None:
        """Test any non-200 status raises APIError carrying the raw body."""
        body = '{"status":"ERROR","message":"nope"}'
        httpx_mock.add_response(status_code=status_code, text=body)

        with pytest.raises(APIError) as exc_info:
            client.fetch("/v1/marketstatus/now", None, Echo)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.body == body
        assert f"status {status_code}" in str(exc_info.value)

    def test_non_200_with_valid_json_still_fails(
        self, httpx_mock: HTTPXMock, client: RESTClient
    ) -> None:
        """Test a 201 is not treated as success."""
        httpx_mock.add_response(status_code=201, json={"status": "OK"})

        with pytest.raises(APIError):
            client.fetch("/v1/marketstatus/now", None, Echo)

    def test_invalid_json_raises_decode_error(
        self, httpx_mock: HTTPXMock, client: RESTClient
    ) -> None:
        """Test a non-JSON body raises DecodeError."""
        httpx_mock.add_response(text="not valid json")

        with pytest.raises(DecodeError, match="failed to parse response"):
            client.fetch("/v1/marketstatus/now", None, Echo)

    def test_shape_mismatch_raises_decode_error(
        self, httpx_mock: HTTPXMock, client: RESTClient
    ) -> None:
        """Test a JSON value of the wrong type raises DecodeError with its path."""
        httpx_mock.add_response(json={"status": "OK", "count": "three"})

        with pytest.raises(DecodeError) as exc_info:
            client.fetch("/v1/marketstatus/now", None, Echo)

        assert exc_info.value.path == "$.count"

    def test_redirect_followed(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test a 3xx is followed and the final 200 response is decoded."""
        httpx_mock.add_response(
            status_code=301,
            headers={"Location": f"{BASE_URL}/v1/open-close/AAPL/2025-01-07"},
        )
        httpx_mock.add_response(json={"status": "OK", "open": 1.0})

        result = client.fetch("/v1/open-close/AAPL/2025-01-06", None, OpenCloseResponse)

        assert result.status == "OK"
        assert result.open == 1.0
        requests = httpx_mock.get_requests()
        assert [r.url.path for r in requests] == [
            "/v1/open-close/AAPL/2025-01-06",
            "/v1/open-close/AAPL/2025-01-07",
        ]

    def test_redirect_to_error_status(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test the status check applies to the final response of a redirect."""
        httpx_mock.add_response(status_code=302, headers={"Location": f"{BASE_URL}/moved"})
        httpx_mock.add_response(status_code=404, text='{"status":"NOT_FOUND"}')

        with pytest.raises(APIError) as exc_info:
            client.fetch("/v1/marketstatus/now", None, Echo)

        assert exc_info.value.status_code == 404

    def test_deeply_nested_body_raises_decode_error(
        self, httpx_mock: HTTPXMock, client: RESTClient
    ) -> None:
        """Test pathologically nested JSON fails as a decode error."""
        httpx_mock.add_response(text="[" * 200000)

        with pytest.raises(DecodeError):
            client.fetch("/v1/marketstatus/now", None, Echo)

    def test_transport_failure(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test an unreachable host raises RequestFailedError."""
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(RequestFailedError) as exc_info:
            client.fetch("/v1/marketstatus/now", None, Echo)

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test a timeout raises RequestFailedError."""
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(RequestFailedError):
            client.fetch("/v1/marketstatus/now", None, Echo)

    def test_invalid_base_url_sends_nothing(self, httpx_mock: HTTPXMock) -> None:
        """Test URL errors are raised before any request is made."""
        with RESTClient("abc", base_url="not-a-url") as client:
            with pytest.raises(InvalidURLError):
                client.fetch("/v1/marketstatus/now", None, Echo)

        assert httpx_mock.get_requests() == []

    def test_idempotent(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test identical responses decode to equal results."""
        body = '{"status":"OK","symbol":"AAPL","open":244.31,"volume":100}'
        httpx_mock.add_response(text=body)
        httpx_mock.add_response(text=body)

        first = client.fetch("/v1/open-close/AAPL/2025-01-06", None, OpenCloseResponse)
        second = client.fetch("/v1/open-close/AAPL/2025-01-06", None, OpenCloseResponse)

        assert first == second
        assert len(httpx_mock.get_requests()) == 2

    def test_debug_log_omits_api_key(
        self, httpx_mock: HTTPXMock, client: RESTClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test the request is logged without the API key."""
        httpx_mock.add_response(json={"status": "OK"})
        caplog.set_level(logging.DEBUG, logger="massive_client.client")

        client.fetch("/v1/marketstatus/now", None, Echo)

        messages = [r.getMessage() for r in caplog.records if r.name == "massive_client.client"]
        assert messages == ["GET /v1/marketstatus/now -> 200"]
        assert all(API_KEY not in m for m in messages)


class TestBaseURLTarget:
    """Tests for pointing the client at another host."""

    def test_requests_follow_override(self, httpx_mock: HTTPXMock) -> None:
        """Test requests go to the overridden base URL."""
        httpx_mock.add_response(json={"status": "OK"})

        with RESTClient("abc", base_url=BASE_URL) as client:
            client.base_url = "http://localhost:9999"
            client.fetch("/v1/marketstatus/now", None, Echo)

        request = httpx_mock.get_request()
        assert request.url.host == "localhost"
        assert request.url.port == 9999
