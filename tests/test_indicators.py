"""Tests for technical indicator endpoints."""

import pytest
from pytest_httpx import HTTPXMock

from massive_client.client import RESTClient
from massive_client.indicators import (
    IndicatorParams,
    MACDParams,
    get_ema,
    get_macd,
    get_rsi,
    get_sma,
)


@pytest.fixture
def indicator_response() -> dict:
    """Sample single-value indicator response."""
    return {
        "status": "OK",
        "request_id": "r1",
        "next_url": "https://api.massive.com/v1/indicators/sma/AAPL?cursor=n",
        "results": {
            "underlying": {"url": "https://api.massive.com/v2/aggs/ticker/AAPL/range/1/day/..."},
            "values": [
                {"timestamp": 1736226000000, "value": 238.4},
                {"timestamp": 1736139600000, "value": 237},
            ],
        },
    }


class TestSingleValueIndicators:
    """Tests for SMA, EMA and RSI."""

    @pytest.mark.parametrize(
        ("fetch", "name"),
        [(get_sma, "sma"), (get_ema, "ema"), (get_rsi, "rsi")],
    )
    def test_indicator(
        self,
        httpx_mock: HTTPXMock,
        client: RESTClient,
        indicator_response: dict,
        fetch,
        name: str,
    ) -> None:
        """Test each indicator hits its own path and decodes values."""
        httpx_mock.add_response(json=indicator_response)

        params = IndicatorParams(timespan="day", window=14, series_type="close", limit=2)
        result = fetch(client, "AAPL", params)

        assert [v.value for v in result.results.values] == [238.4, 237.0]
        assert result.results.values[0].timestamp == 1736226000000
        assert result.results.underlying.url.startswith("https://")

        request = httpx_mock.get_request()
        assert request.url.path == f"/v1/indicators/{name}/AAPL"
        assert request.url.params["window"] == "14"
        assert request.url.params["series_type"] == "close"

    def test_any_asset_class(
        self, httpx_mock: HTTPXMock, client: RESTClient, indicator_response: dict
    ) -> None:
        """Test prefixed tickers are passed through untouched."""
        httpx_mock.add_response(json=indicator_response)

        get_sma(client, "X:BTCUSD", IndicatorParams(timestamp_gte="2025-01-01"))

        request = httpx_mock.get_request()
        assert request.url.path == "/v1/indicators/sma/X:BTCUSD"
        assert request.url.params["timestamp.gte"] == "2025-01-01"

    def test_no_results_key(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test a response without results decodes to empty values."""
        httpx_mock.add_response(json={"status": "OK"})

        result = get_rsi(client, "AAPL")

        assert result.results.values == []


class TestMACD:
    """Tests for MACD."""

    def test_macd(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(
            json={
                "status": "OK",
                "results": {
                    "underlying": {"url": "https://api.massive.com/v2/aggs/..."},
                    "values": [
                        {
                            "timestamp": 1736226000000,
                            "value": 1.52,
                            "signal": 1.2,
                            "histogram": 0.32,
                        }
                    ],
                },
            }
        )

        params = MACDParams(short_window=12, long_window=26, signal_window=9, timespan="day")
        result = get_macd(client, "AAPL", params)

        value = result.results.values[0]
        assert value.signal == 1.2
        assert value.histogram == 0.32

        request = httpx_mock.get_request()
        assert request.url.path == "/v1/indicators/macd/AAPL"
        assert request.url.params["short_window"] == "12"
        assert request.url.params["long_window"] == "26"
        assert request.url.params["signal_window"] == "9"
        assert "window" not in request.url.params
