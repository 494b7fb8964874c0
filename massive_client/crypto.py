"""Crypto endpoints.

Crypto tickers carry the ``X:`` prefix (``X:BTCUSD``). The daily open/close
and last trade endpoints take the two currency codes as separate path
segments. Aggregates and reference tickers share their types with stocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .market import (
    ConditionsParams,
    ConditionsResponse,
    ExchangesParams,
    ExchangesResponse,
    get_conditions,
    get_exchanges,
)
from .schema import encode_params, json_field, query_field
from .stocks import (
    MOVER_DIRECTIONS,
    BarsParams,
    BarsResponse,
    MarketSummaryResponse,
    SnapshotBar,
    SnapshotMinBar,
    TickersResponse,
    TickParams,
)

ASSET_CLASS = "crypto"


# ============================================
# Aggregates
# ============================================


@dataclass
class CryptoOpenCloseTrade:
    conditions: list[int] = json_field("c", default_factory=list)
    id: str = json_field("i", default="")
    price: float = json_field("p", default=0.0)
    size: float = json_field("s", default=0.0)
    timestamp: int = json_field("t", default=0)
    exchange: int = json_field("x", default=0)


@dataclass
class CryptoOpenCloseResponse:
    """Open and close of a pair for one UTC day, with the trades that set them."""

    symbol: str = ""
    is_utc: bool = json_field("isUTC", default=False)
    day: str = ""
    open: float = 0.0
    close: float = 0.0
    open_trades: list[CryptoOpenCloseTrade] = json_field("openTrades", default_factory=list)
    closing_trades: list[CryptoOpenCloseTrade] = json_field("closingTrades", default_factory=list)


def get_crypto_bars(client: RESTClient, ticker: str, params: BarsParams) -> BarsResponse:
    return client.fetch(params.path(ticker), params.query(), BarsResponse)


def get_crypto_market_summary(
    client: RESTClient, date: str, adjusted: bool | None = None
) -> MarketSummaryResponse:
    """Get grouped daily bars for every crypto pair on a date."""
    path = f"/v2/aggs/grouped/locale/global/market/crypto/{date}"
    return client.fetch(path, {"adjusted": adjusted}, MarketSummaryResponse)


def get_crypto_open_close(
    client: RESTClient,
    from_currency: str,
    to_currency: str,
    date: str,
    adjusted: bool | None = None,
) -> CryptoOpenCloseResponse:
    path = f"/v1/open-close/crypto/{from_currency}/{to_currency}/{date}"
    return client.fetch(path, {"adjusted": adjusted}, CryptoOpenCloseResponse)


def get_crypto_previous_day_bar(
    client: RESTClient, ticker: str, adjusted: bool | None = None
) -> BarsResponse:
    return client.fetch(f"/v2/aggs/ticker/{ticker}/prev", {"adjusted": adjusted}, BarsResponse)


# ============================================
# Snapshots
# ============================================


@dataclass
class CryptoSnapshotLastTrade:
    conditions: list[int] = field(default_factory=list)
    exchange: int = 0
    price: float = 0.0
    size: float = 0.0
    timestamp: int = 0


@dataclass
class CryptoSnapshotTicker:
    ticker: str = ""
    todays_change: float = json_field("todaysChange", default=0.0)
    todays_change_pct: float = json_field("todaysChangePerc", default=0.0)
    updated: int = 0
    day: SnapshotBar = field(default_factory=SnapshotBar)
    prev_day: SnapshotBar = json_field("prevDay", default_factory=SnapshotBar)
    min: SnapshotMinBar = field(default_factory=SnapshotMinBar)
    last_trade: CryptoSnapshotLastTrade = json_field(
        "lastTrade", default_factory=CryptoSnapshotLastTrade
    )
    fmv: float = 0.0


@dataclass
class CryptoSnapshotResponse:
    status: str = ""
    request_id: str = ""
    tickers: list[CryptoSnapshotTicker] = field(default_factory=list)


@dataclass
class CryptoSingleSnapshotResponse:
    status: str = ""
    request_id: str = ""
    ticker: CryptoSnapshotTicker = field(default_factory=CryptoSnapshotTicker)


def get_crypto_snapshot_all(client: RESTClient, tickers: str | None = None) -> CryptoSnapshotResponse:
    """Snapshot every crypto pair, or only the comma-separated ``tickers``."""
    path = "/v2/snapshot/locale/global/markets/crypto/tickers"
    return client.fetch(path, {"tickers": tickers}, CryptoSnapshotResponse)


def get_crypto_snapshot_ticker(client: RESTClient, ticker: str) -> CryptoSingleSnapshotResponse:
    path = f"/v2/snapshot/locale/global/markets/crypto/tickers/{ticker}"
    return client.fetch(path, None, CryptoSingleSnapshotResponse)


def get_crypto_gainers_losers(client: RESTClient, direction: str) -> CryptoSnapshotResponse:
    """Get the top crypto movers.

    Raises:
        ValueError: If direction is not "gainers" or "losers".
    """
    if direction not in MOVER_DIRECTIONS:
        raise ValueError(f"direction must be one of {MOVER_DIRECTIONS}, got {direction!r}")
    path = f"/v2/snapshot/locale/global/markets/crypto/{direction}"
    return client.fetch(path, None, CryptoSnapshotResponse)


# ============================================
# Trades
# ============================================


@dataclass
class CryptoTrade:
    conditions: list[int] = field(default_factory=list)
    exchange: int = 0
    id: str = ""
    participant_timestamp: int = 0
    price: float = 0.0
    size: float = 0.0


@dataclass
class CryptoTradesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[CryptoTrade] = field(default_factory=list)


@dataclass
class CryptoLastTrade:
    price: float = 0.0
    size: float = 0.0
    exchange: int = 0
    conditions: list[int] = field(default_factory=list)
    timestamp: int = 0


@dataclass
class CryptoLastTradeResponse:
    status: str = ""
    request_id: str = ""
    symbol: str = ""
    last: CryptoLastTrade = field(default_factory=CryptoLastTrade)


def get_crypto_trades(
    client: RESTClient, ticker: str, params: TickParams | None = None
) -> CryptoTradesResponse:
    return client.fetch(f"/v3/trades/{ticker}", encode_params(params), CryptoTradesResponse)


def get_crypto_last_trade(
    client: RESTClient, from_currency: str, to_currency: str
) -> CryptoLastTradeResponse:
    path = f"/v1/last/crypto/{from_currency}/{to_currency}"
    return client.fetch(path, None, CryptoLastTradeResponse)


# ============================================
# Reference data
# ============================================


@dataclass
class CryptoTickersParams:
    search: str | None = query_field("search")
    active: bool | None = query_field("active")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")
    order: str | None = query_field("order")


@dataclass
class CryptoTickerOverview:
    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    active: bool = False
    currency_symbol: str = ""
    currency_name: str = ""
    base_currency_symbol: str = ""
    base_currency_name: str = ""
    last_updated_utc: str = ""


@dataclass
class CryptoTickerOverviewResponse:
    status: str = ""
    request_id: str = ""
    results: CryptoTickerOverview = field(default_factory=CryptoTickerOverview)


def get_crypto_tickers(
    client: RESTClient, params: CryptoTickersParams | None = None
) -> TickersResponse:
    """List crypto tickers. The ``market=crypto`` filter is always applied."""
    query = {"market": ASSET_CLASS, **encode_params(params)}
    return client.fetch("/v3/reference/tickers", query, TickersResponse)


def get_crypto_ticker_overview(client: RESTClient, ticker: str) -> CryptoTickerOverviewResponse:
    return client.fetch(f"/v3/reference/tickers/{ticker}", None, CryptoTickerOverviewResponse)


def get_crypto_conditions(client: RESTClient) -> ConditionsResponse:
    return get_conditions(client, ConditionsParams(asset_class=ASSET_CLASS))


def get_crypto_exchanges(client: RESTClient) -> ExchangesResponse:
    return get_exchanges(client, ExchangesParams(asset_class=ASSET_CLASS))
