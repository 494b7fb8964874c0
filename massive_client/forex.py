"""Foreign exchange endpoints.

Forex tickers carry the ``C:`` prefix (``C:EURUSD``). Conversion and last
quote endpoints instead take the two currency codes as separate path segments.
Aggregates and reference tickers share their response types with stocks.
Market status, holidays and the unified snapshot live in ``market``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .market import ExchangesParams, ExchangesResponse, get_exchanges
from .schema import encode_params, json_field, query_field
from .stocks import (
    MOVER_DIRECTIONS,
    BarsParams,
    BarsResponse,
    MarketSummaryResponse,
    TickersResponse,
    TickParams,
)


def get_forex_bars(client: RESTClient, ticker: str, params: BarsParams) -> BarsResponse:
    """Get custom aggregate bars for a currency pair."""
    return client.fetch(params.path(ticker), params.query(), BarsResponse)


def get_forex_market_summary(
    client: RESTClient, date: str, adjusted: bool | None = None
) -> MarketSummaryResponse:
    """Get grouped daily bars for every forex pair on a date."""
    path = f"/v2/aggs/grouped/locale/global/market/fx/{date}"
    return client.fetch(path, {"adjusted": adjusted}, MarketSummaryResponse)


def get_forex_previous_day_bar(
    client: RESTClient, ticker: str, adjusted: bool | None = None
) -> BarsResponse:
    return client.fetch(f"/v2/aggs/ticker/{ticker}/prev", {"adjusted": adjusted}, BarsResponse)


# ============================================
# Conversion and quotes
# ============================================


@dataclass
class ForexLast:
    """Last quote used for conversions. ``timestamp`` is Unix milliseconds."""

    ask: float = 0.0
    bid: float = 0.0
    exchange: int = 0
    timestamp: int = 0


@dataclass
class ForexConversionResponse:
    converted: float = 0.0
    from_: str = json_field("from", default="")
    initial_amount: float = json_field("initialAmount", default=0.0)
    last: ForexLast = field(default_factory=ForexLast)
    request_id: str = ""
    status: str = ""
    symbol: str = ""
    to: str = ""


@dataclass
class ForexConversionParams:
    amount: float | None = query_field("amount")
    precision: int | None = query_field("precision")


@dataclass
class ForexQuote:
    ask_exchange: int = 0
    ask_price: float = 0.0
    bid_exchange: int = 0
    bid_price: float = 0.0
    participant_timestamp: int = 0


@dataclass
class ForexQuotesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[ForexQuote] = field(default_factory=list)


@dataclass
class ForexLastQuoteResponse:
    last: ForexLast = field(default_factory=ForexLast)
    request_id: str = ""
    status: str = ""
    symbol: str = ""


def get_forex_conversion(
    client: RESTClient,
    from_currency: str,
    to_currency: str,
    params: ForexConversionParams | None = None,
) -> ForexConversionResponse:
    """Convert an amount between two currencies at the latest quote."""
    path = f"/v1/conversion/{from_currency}/{to_currency}"
    return client.fetch(path, encode_params(params), ForexConversionResponse)


def get_forex_quotes(
    client: RESTClient, ticker: str, params: TickParams | None = None
) -> ForexQuotesResponse:
    return client.fetch(f"/v3/quotes/{ticker}", encode_params(params), ForexQuotesResponse)


def get_forex_last_quote(
    client: RESTClient, from_currency: str, to_currency: str
) -> ForexLastQuoteResponse:
    path = f"/v1/last_quote/currencies/{from_currency}/{to_currency}"
    return client.fetch(path, None, ForexLastQuoteResponse)


# ============================================
# Snapshots
# ============================================


@dataclass
class ForexSnapshotDay:
    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)


@dataclass
class ForexSnapshotLastQuote:
    ask: float = json_field("a", default=0.0)
    bid: float = json_field("b", default=0.0)
    exchange: int = json_field("x", default=0)
    timestamp: int = json_field("t", default=0)


@dataclass
class ForexSnapshotTicker:
    ticker: str = ""
    todays_change: float = json_field("todaysChange", default=0.0)
    todays_change_pct: float = json_field("todaysChangePerc", default=0.0)
    updated: int = 0
    day: ForexSnapshotDay = field(default_factory=ForexSnapshotDay)
    last_quote: ForexSnapshotLastQuote = json_field("lastQuote", default_factory=ForexSnapshotLastQuote)
    prev_day: ForexSnapshotDay = json_field("prevDay", default_factory=ForexSnapshotDay)


@dataclass
class ForexSnapshotAllResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    tickers: list[ForexSnapshotTicker] = field(default_factory=list)


@dataclass
class ForexSnapshotSingleResponse:
    status: str = ""
    request_id: str = ""
    ticker: ForexSnapshotTicker = field(default_factory=ForexSnapshotTicker)


@dataclass
class ForexGainersLosersResponse:
    status: str = ""
    request_id: str = ""
    tickers: list[ForexSnapshotTicker] = field(default_factory=list)


def get_forex_snapshot_all(client: RESTClient, tickers: str | None = None) -> ForexSnapshotAllResponse:
    """Snapshot every forex pair, or only the comma-separated ``tickers``."""
    path = "/v2/snapshot/locale/global/markets/forex/tickers"
    return client.fetch(path, {"tickers": tickers}, ForexSnapshotAllResponse)


def get_forex_snapshot_ticker(client: RESTClient, ticker: str) -> ForexSnapshotSingleResponse:
    path = f"/v2/snapshot/locale/global/markets/forex/tickers/{ticker}"
    return client.fetch(path, None, ForexSnapshotSingleResponse)


def get_forex_gainers_losers(client: RESTClient, direction: str) -> ForexGainersLosersResponse:
    """Get the top forex movers.

    Raises:
        ValueError: If direction is not "gainers" or "losers".
    """
    if direction not in MOVER_DIRECTIONS:
        raise ValueError(f"direction must be one of {MOVER_DIRECTIONS}, got {direction!r}")
    path = f"/v2/snapshot/locale/global/markets/forex/{direction}"
    return client.fetch(path, None, ForexGainersLosersResponse)


# ============================================
# Reference tickers
# ============================================


@dataclass
class ForexTickersParams:
    search: str | None = query_field("search")
    active: bool | None = query_field("active")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")
    order: str | None = query_field("order")


@dataclass
class ForexTickerOverview:
    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    active: bool = False
    currency_symbol: str = ""
    currency_name: str = ""
    base_currency_symbol: str = ""
    base_currency_name: str = ""


@dataclass
class ForexTickerOverviewResponse:
    status: str = ""
    request_id: str = ""
    results: ForexTickerOverview = field(default_factory=ForexTickerOverview)


def get_forex_tickers(client: RESTClient, params: ForexTickersParams | None = None) -> TickersResponse:
    """List forex tickers. The ``market=fx`` filter is always applied."""
    query = {"market": "fx", **encode_params(params)}
    return client.fetch("/v3/reference/tickers", query, TickersResponse)


def get_forex_ticker_overview(client: RESTClient, ticker: str) -> ForexTickerOverviewResponse:
    return client.fetch(f"/v3/reference/tickers/{ticker}", None, ForexTickerOverviewResponse)


def get_forex_exchanges(client: RESTClient) -> ExchangesResponse:
    """List the venues forex quotes are sourced from."""
    return get_exchanges(client, ExchangesParams(asset_class="fx"))
