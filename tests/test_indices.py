"""Tests for index endpoints."""

from pytest_httpx import HTTPXMock

from massive_client.client import RESTClient
from massive_client.indices import (
    IndexTickersParams,
    get_index_bars,
    get_index_open_close,
    get_index_previous_day_bar,
    get_index_tickers,
    get_indices_snapshot,
)
from massive_client.market import UnifiedSnapshotParams
from massive_client.stocks import BarsParams


class TestAggregates:
    """Tests for index aggregates."""

    def test_bars(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test bars without volume decode and adjusted is left off."""
        httpx_mock.add_response(
            json={"status": "OK", "ticker": "I:SPX", "resultsCount": 1, "results": [{"o": 5900.0, "c": 5950.25}]}
        )

        result = get_index_bars(client, "I:SPX", BarsParams(1, "day", "2025-01-02", "2025-01-31"))

        assert result.results_count == 1
        assert result.results[0].close == 5950.25
        request = httpx_mock.get_request()
        assert request.url.path == "/v2/aggs/ticker/I:SPX/range/1/day/2025-01-02/2025-01-31"
        assert "adjusted" not in request.url.params

    def test_open_close(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "symbol": "I:SPX", "from": "2025-01-06", "close": 5975.38})

        result = get_index_open_close(client, "I:SPX", "2025-01-06")

        assert result.from_ == "2025-01-06"
        assert result.close == 5975.38
        assert httpx_mock.get_request().url.path == "/v1/open-close/I:SPX/2025-01-06"

    def test_previous_day(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"T": "I:NDX", "c": 21000.0}]})

        result = get_index_previous_day_bar(client, "I:NDX")

        assert result.results[0].ticker == "I:NDX"
        assert httpx_mock.get_request().url.path == "/v2/aggs/ticker/I:NDX/prev"


class TestSnapshotAndTickers:
    """Tests for index snapshots and reference tickers."""

    def test_snapshot(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(
            json={
                "status": "OK",
                "results": [{"ticker": "I:SPX", "value": 5975.38, "session": {"change_percent": 0.55}}],
            }
        )

        result = get_indices_snapshot(client, UnifiedSnapshotParams(ticker_any_of="I:SPX,I:NDX"))

        assert result.results[0].value == 5975.38
        assert result.results[0].session.change_percent == 0.55
        request = httpx_mock.get_request()
        assert request.url.path == "/v3/snapshot/indices"
        assert request.url.params["ticker.any_of"] == "I:SPX,I:NDX"

    def test_tickers_force_market(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"ticker": "I:SPX", "source_feed": "CBOE"}]})

        result = get_index_tickers(client, IndexTickersParams(search="S&P", active=True))

        assert result.results[0].source_feed == "CBOE"
        params = httpx_mock.get_request().url.params
        assert params["market"] == "indices"
        assert params["search"] == "S&P"
        assert params["active"] == "true"
