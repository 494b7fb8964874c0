"""Futures endpoints.

Futures data lives under ``/futures/vX``. Contracts roll up into products
identified by ``product_code`` (e.g. ``ES``), and every session ends on a
``session_end_date``. Aggregates are requested by ``resolution``
(``1min``, ``1session``, ...) rather than a multiplier/timespan pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field

# ============================================
# Aggregates
# ============================================


@dataclass
class FuturesBar:
    close: float = 0.0
    dollar_volume: float = 0.0
    high: float = 0.0
    low: float = 0.0
    open: float = 0.0
    session_end_date: str = ""
    settlement_price: float = 0.0
    ticker: str = ""
    transactions: int = 0
    volume: float = 0.0
    window_start: int = 0


@dataclass
class FuturesBarsResponse:
    request_id: str = ""
    status: str = ""
    next_url: str = ""
    results: list[FuturesBar] = field(default_factory=list)


@dataclass
class FuturesBarsParams:
    resolution: str | None = query_field("resolution")
    window_start: str | None = query_field("window_start")
    window_start_gte: str | None = query_field("window_start.gte")
    window_start_gt: str | None = query_field("window_start.gt")
    window_start_lte: str | None = query_field("window_start.lte")
    window_start_lt: str | None = query_field("window_start.lt")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_futures_bars(
    client: RESTClient, ticker: str, params: FuturesBarsParams | None = None
) -> FuturesBarsResponse:
    """Get OHLC bars with settlement prices for a futures contract."""
    return client.fetch(f"/futures/vX/aggs/{ticker}", encode_params(params), FuturesBarsResponse)


# ============================================
# Reference data
# ============================================


@dataclass
class FuturesContract:
    active: bool = False
    date: str = ""
    days_to_maturity: int = 0
    first_trade_date: str = ""
    group_code: str = ""
    last_trade_date: str = ""
    max_order_quantity: float = 0.0
    min_order_quantity: float = 0.0
    name: str = ""
    product_code: str = ""
    settlement_date: str = ""
    settlement_tick_size: float = 0.0
    spread_tick_size: float = 0.0
    ticker: str = ""
    trade_tick_size: float = 0.0
    trading_venue: str = ""
    type: str = ""


@dataclass
class FuturesContractsResponse:
    next_url: str = ""
    request_id: str = ""
    status: str = ""
    results: list[FuturesContract] = field(default_factory=list)


@dataclass
class FuturesContractsParams:
    """``date`` selects the contracts listed as of that day."""

    date: str | None = query_field("date")
    product_code: str | None = query_field("product_code")
    ticker: str | None = query_field("ticker")
    active: bool | None = query_field("active")
    type: str | None = query_field("type")
    first_trade_date: str | None = query_field("first_trade_date")
    last_trade_date: str | None = query_field("last_trade_date")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class FuturesProduct:
    asset_class: str = ""
    asset_sub_class: str = ""
    date: str = ""
    last_updated: str = ""
    name: str = ""
    price_quotation: str = ""
    product_code: str = ""
    sector: str = ""
    settlement_currency_code: str = ""
    settlement_method: str = ""
    settlement_type: str = ""
    sub_sector: str = ""
    trade_currency_code: str = ""
    trading_venue: str = ""
    type: str = ""
    unit_of_measure: str = ""
    unit_of_measure_qty: float = 0.0


@dataclass
class FuturesProductsResponse:
    request_id: str = ""
    status: str = ""
    next_url: str = ""
    results: list[FuturesProduct] = field(default_factory=list)


@dataclass
class FuturesProductsParams:
    name: str | None = query_field("name")
    product_code: str | None = query_field("product_code")
    date: str | None = query_field("date")
    trading_venue: str | None = query_field("trading_venue")
    sector: str | None = query_field("sector")
    sub_sector: str | None = query_field("sub_sector")
    asset_class: str | None = query_field("asset_class")
    asset_sub_class: str | None = query_field("asset_sub_class")
    type: str | None = query_field("type")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class FuturesSchedule:
    """A session event (open, close, pause) for a product."""

    event: str = ""
    product_code: str = ""
    product_name: str = ""
    session_end_date: str = ""
    timestamp: str = ""
    trading_venue: str = ""


@dataclass
class FuturesSchedulesResponse:
    request_id: str = ""
    status: str = ""
    next_url: str = ""
    results: list[FuturesSchedule] = field(default_factory=list)


@dataclass
class FuturesSchedulesParams:
    product_code: str | None = query_field("product_code")
    session_end_date: str | None = query_field("session_end_date")
    trading_venue: str | None = query_field("trading_venue")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class FuturesExchange:
    id: int = 0
    name: str = ""
    acronym: str = ""
    mic: str = ""
    operating_mic: str = ""
    locale: str = ""
    type: str = ""
    url: str = ""


@dataclass
class FuturesExchangesResponse:
    count: int = 0
    results: list[FuturesExchange] = field(default_factory=list)


def get_futures_contracts(
    client: RESTClient, params: FuturesContractsParams | None = None
) -> FuturesContractsResponse:
    return client.fetch("/futures/vX/contracts", encode_params(params), FuturesContractsResponse)


def get_futures_products(
    client: RESTClient, params: FuturesProductsParams | None = None
) -> FuturesProductsResponse:
    """List futures products with their sector, settlement and unit details."""
    return client.fetch("/futures/vX/products", encode_params(params), FuturesProductsResponse)


def get_futures_schedules(
    client: RESTClient, params: FuturesSchedulesParams | None = None
) -> FuturesSchedulesResponse:
    return client.fetch("/futures/vX/schedules", encode_params(params), FuturesSchedulesResponse)


def get_futures_exchanges(client: RESTClient, limit: int | None = None) -> FuturesExchangesResponse:
    return client.fetch("/futures/vX/exchanges", {"limit": limit}, FuturesExchangesResponse)


# ============================================
# Snapshots
# ============================================


@dataclass
class FuturesSnapshotDetails:
    open_interest: int = 0
    settlement_date: str = ""


@dataclass
class FuturesSnapshotMinute:
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0


@dataclass
class FuturesSnapshotLastQuote:
    ask_price: float = 0.0
    ask_size: float = 0.0
    bid_price: float = 0.0
    bid_size: float = 0.0
    ask_timestamp: int = 0
    bid_timestamp: int = 0


@dataclass
class FuturesSnapshotLastTrade:
    price: float = 0.0
    size: float = 0.0
    timestamp: int = 0


@dataclass
class FuturesSnapshotSession:
    change: float = 0.0
    close: float = 0.0
    high: float = 0.0
    low: float = 0.0
    open: float = 0.0
    settlement_price: float = 0.0
    volume: float = 0.0


@dataclass
class FuturesSnapshot:
    details: FuturesSnapshotDetails = field(default_factory=FuturesSnapshotDetails)
    last_minute: FuturesSnapshotMinute = field(default_factory=FuturesSnapshotMinute)
    last_quote: FuturesSnapshotLastQuote = field(default_factory=FuturesSnapshotLastQuote)
    last_trade: FuturesSnapshotLastTrade = field(default_factory=FuturesSnapshotLastTrade)
    session: FuturesSnapshotSession = field(default_factory=FuturesSnapshotSession)
    product_code: str = ""
    ticker: str = ""


@dataclass
class FuturesSnapshotResponse:
    count: int = 0
    next_url: str = ""
    results: list[FuturesSnapshot] = field(default_factory=list)


@dataclass
class FuturesSnapshotParams:
    product_code: str | None = query_field("product_code")
    ticker: str | None = query_field("ticker")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_futures_snapshot(
    client: RESTClient, params: FuturesSnapshotParams | None = None
) -> FuturesSnapshotResponse:
    """Get the latest trade, quote, minute bar and session for futures contracts."""
    return client.fetch("/futures/vX/snapshot", encode_params(params), FuturesSnapshotResponse)


# ============================================
# Trades and quotes
# ============================================


@dataclass
class FuturesTrade:
    price: float = 0.0
    report_sequence: int = 0
    sequence_number: int = 0
    session_end_date: str = ""
    size: float = 0.0
    ticker: str = ""
    timestamp: int = 0


@dataclass
class FuturesTradesResponse:
    request_id: str = ""
    status: str = ""
    next_url: str = ""
    results: list[FuturesTrade] = field(default_factory=list)


@dataclass
class FuturesQuote:
    ask_price: float = 0.0
    ask_size: float = 0.0
    ask_timestamp: int = 0
    bid_price: float = 0.0
    bid_size: float = 0.0
    bid_timestamp: int = 0
    report_sequence: int = 0
    sequence_number: int = 0
    session_end_date: str = ""
    ticker: str = ""
    timestamp: int = 0


@dataclass
class FuturesQuotesResponse:
    request_id: str = ""
    status: str = ""
    next_url: str = ""
    results: list[FuturesQuote] = field(default_factory=list)


@dataclass
class FuturesTickParams:
    """Timestamp filters for futures trades and quotes, plus the session they belong to."""

    timestamp: str | None = query_field("timestamp")
    timestamp_gte: str | None = query_field("timestamp.gte")
    timestamp_gt: str | None = query_field("timestamp.gt")
    timestamp_lte: str | None = query_field("timestamp.lte")
    timestamp_lt: str | None = query_field("timestamp.lt")
    session_end_date: str | None = query_field("session_end_date")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_futures_trades(
    client: RESTClient, ticker: str, params: FuturesTickParams | None = None
) -> FuturesTradesResponse:
    path = f"/futures/vX/trades/{ticker}"
    return client.fetch(path, encode_params(params), FuturesTradesResponse)


def get_futures_quotes(
    client: RESTClient, ticker: str, params: FuturesTickParams | None = None
) -> FuturesQuotesResponse:
    path = f"/futures/vX/quotes/{ticker}"
    return client.fetch(path, encode_params(params), FuturesQuotesResponse)
