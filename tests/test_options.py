"""Tests for options endpoints."""

from pytest_httpx import HTTPXMock

from massive_client.client import RESTClient
from massive_client.options import (
    OptionsChainSnapshotParams,
    OptionsContractsParams,
    get_option_contract_snapshot,
    get_options_bars,
    get_options_chain_snapshot,
    get_options_contract,
    get_options_contracts,
    get_options_daily_summary,
    get_options_last_quote,
    get_options_last_trade,
    get_options_previous_day_bar,
    get_options_quotes,
    get_options_trades,
)
from massive_client.stocks import BarsParams, TickParams

CONTRACT = "O:AAPL260218C00190000"


class TestContracts:
    """Tests for options reference contracts."""

    def test_list_contracts(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test filters and contract decoding."""
        httpx_mock.add_response(
            json={
                "status": "OK",
                "next_url": "https://api.massive.com/v3/reference/options/contracts?cursor=c2",
                "results": [
                    {
                        "ticker": CONTRACT,
                        "underlying_ticker": "AAPL",
                        "contract_type": "call",
                        "exercise_style": "american",
                        "expiration_date": "2026-02-18",
                        "strike_price": 190,
                        "shares_per_contract": 100,
                        "additional_underlyings": [
                            {"underlying": "AAPL", "amount": 44, "type": "equity"}
                        ],
                    }
                ],
            }
        )

        params = OptionsContractsParams(
            underlying_ticker="AAPL", contract_type="call", strike_price_gte=180, expired=False
        )
        result = get_options_contracts(client, params)

        contract = result.results[0]
        assert contract.strike_price == 190.0
        assert contract.shares_per_contract == 100
        assert contract.additional_underlyings[0].amount == 44.0
        assert result.next_url.endswith("cursor=c2")

        request = httpx_mock.get_request()
        assert request.url.path == "/v3/reference/options/contracts"
        assert request.url.params["underlying_ticker"] == "AAPL"
        assert request.url.params["strike_price.gte"] == "180"
        assert request.url.params["expired"] == "false"

    def test_single_contract(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": {"ticker": CONTRACT, "cfi": "OCASPS"}})

        result = get_options_contract(client, CONTRACT, as_of="2025-01-06")

        assert result.results.cfi == "OCASPS"
        request = httpx_mock.get_request()
        assert request.url.path == f"/v3/reference/options/contracts/{CONTRACT}"
        assert request.url.params["as_of"] == "2025-01-06"


class TestAggregates:
    """Tests for options aggregates."""

    def test_bars(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(
            json={"status": "OK", "ticker": CONTRACT, "results": [{"o": 5.1, "c": 5.6, "v": 120}]}
        )

        result = get_options_bars(client, CONTRACT, BarsParams(1, "hour", "2025-01-06", "2025-01-06"))

        assert result.results[0].close == 5.6
        assert result.results[0].volume == 120.0
        assert (
            httpx_mock.get_request().url.path
            == f"/v2/aggs/ticker/{CONTRACT}/range/1/hour/2025-01-06/2025-01-06"
        )

    def test_daily_summary(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test fractional volume is accepted for options."""
        httpx_mock.add_response(
            json={"status": "OK", "symbol": CONTRACT, "from": "2025-01-06", "volume": 12.5}
        )

        result = get_options_daily_summary(client, CONTRACT, "2025-01-06")

        assert result.volume == 12.5
        assert result.from_ == "2025-01-06"
        assert httpx_mock.get_request().url.path == f"/v1/open-close/{CONTRACT}/2025-01-06"

    def test_previous_day_bar(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"T": CONTRACT, "c": 5.6}]})

        result = get_options_previous_day_bar(client, CONTRACT, adjusted=True)

        assert result.results[0].ticker == CONTRACT
        assert httpx_mock.get_request().url.params["adjusted"] == "true"


class TestSnapshots:
    """Tests for options snapshots."""

    @staticmethod
    def snapshot() -> dict:
        return {
            "break_even_price": 195.3,
            "day": {"close": 5.6, "volume": 1200},
            "details": {"contract_type": "call", "strike_price": 190, "ticker": CONTRACT},
            "greeks": {"delta": 0.55, "gamma": 0.03, "theta": -0.12, "vega": 0.2},
            "implied_volatility": 0.27,
            "open_interest": 15000,
            "last_quote": {"ask": 5.7, "bid": 5.5, "midpoint": 5.6},
            "last_trade": {"price": 5.6, "size": 2, "conditions": [209]},
            "underlying_asset": {"ticker": "AAPL", "price": 245.0},
        }

    def test_chain(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        """Test chain snapshot decoding and range filters."""
        httpx_mock.add_response(json={"status": "OK", "results": [self.snapshot()]})

        params = OptionsChainSnapshotParams(
            contract_type="call", expiration_date_lte="2026-03-01", limit=250
        )
        result = get_options_chain_snapshot(client, "AAPL", params)

        snap = result.results[0]
        assert snap.greeks.delta == 0.55
        assert snap.greeks.theta == -0.12
        assert snap.implied_volatility == 0.27
        assert snap.open_interest == 15000.0
        assert snap.underlying_asset.price == 245.0
        assert snap.last_trade.conditions == [209]

        request = httpx_mock.get_request()
        assert request.url.path == "/v3/snapshot/options/AAPL"
        assert request.url.params["expiration_date.lte"] == "2026-03-01"
        assert request.url.params["limit"] == "250"

    def test_single_contract(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": self.snapshot()})

        result = get_option_contract_snapshot(client, "AAPL", CONTRACT)

        assert result.results.details.ticker == CONTRACT
        assert httpx_mock.get_request().url.path == f"/v3/snapshot/options/AAPL/{CONTRACT}"


class TestTradesAndQuotes:
    """Tests for options ticks."""

    def test_trades(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"price": 5.6, "size": 1}]})

        result = get_options_trades(client, CONTRACT, TickParams(limit=5))

        assert result.results[0].price == 5.6
        assert httpx_mock.get_request().url.path == f"/v3/trades/{CONTRACT}"

    def test_last_trade(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": {"T": CONTRACT, "p": 5.6}})

        result = get_options_last_trade(client, CONTRACT)

        assert result.results.price == 5.6
        assert httpx_mock.get_request().url.path == f"/v2/last/trade/{CONTRACT}"

    def test_quotes(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"ask_price": 5.7}]})

        result = get_options_quotes(client, CONTRACT)

        assert result.results[0].ask_price == 5.7
        assert httpx_mock.get_request().url.path == f"/v3/quotes/{CONTRACT}"

    def test_last_quote(self, httpx_mock: HTTPXMock, client: RESTClient) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": {"P": 5.7, "p": 5.5}})

        result = get_options_last_quote(client, CONTRACT)

        assert result.results.bid_price == 5.5
        assert httpx_mock.get_request().url.path == f"/v2/last/nbbo/{CONTRACT}"
