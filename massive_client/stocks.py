"""Stock market endpoints.

Covers aggregates (bars, daily open/close, grouped daily summary), reference
tickers, tick-level trades and quotes, snapshots and corporate actions
(dividends, splits).

Bars and tick types defined here are shared with the forex and options
modules where the provider returns the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, json_field, query_field

MOVER_DIRECTIONS = ("gainers", "losers")


# ============================================
# Aggregates
# ============================================


@dataclass
class OpenCloseResponse:
    """Daily open, close and extended-hours prices for one ticker and date."""

    status: str = ""
    symbol: str = ""
    from_: str = json_field("from", default="")
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: int = 0
    after_hours: float = json_field("afterHours", default=0.0)
    pre_market: float = json_field("preMarket", default=0.0)


@dataclass
class Bar:
    """Single OHLC bar. ``timestamp`` is the Unix millisecond window start."""

    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)
    volume: float = json_field("v", default=0.0)
    vwap: float = json_field("vw", default=0.0)
    timestamp: int = json_field("t", default=0)
    num_trades: int = json_field("n", default=0)
    ticker: str = json_field("T", default="")


@dataclass
class BarsResponse:
    status: str = ""
    ticker: str = ""
    adjusted: bool = False
    query_count: int = json_field("queryCount", default=0)
    results_count: int = json_field("resultsCount", default=0)
    request_id: str = ""
    next_url: str = ""
    results: list[Bar] = field(default_factory=list)


@dataclass
class BarsParams:
    """Custom bar request.

    ``multiplier``, ``timespan``, ``from_date`` and ``to_date`` are embedded in
    the path; the remaining fields are sent as query parameters. Dates may be
    ``YYYY-MM-DD`` strings or Unix millisecond timestamps.
    """

    multiplier: int
    timespan: str
    from_date: str | int
    to_date: str | int
    adjusted: bool | None = query_field("adjusted")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")

    def path(self, ticker: str) -> str:
        return (
            f"/v2/aggs/ticker/{ticker}/range/"
            f"{self.multiplier}/{self.timespan}/{self.from_date}/{self.to_date}"
        )

    def query(self) -> dict[str, object]:
        return {"adjusted": self.adjusted, "sort": self.sort, "limit": self.limit}


@dataclass
class MarketSummary:
    """One ticker's row in a grouped daily summary."""

    ticker: str = json_field("T", default="")
    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)
    volume: float = json_field("v", default=0.0)
    vwap: float = json_field("vw", default=0.0)
    timestamp: int = json_field("t", default=0)
    num_trades: int = json_field("n", default=0)
    otc: bool = False


@dataclass
class MarketSummaryResponse:
    status: str = ""
    adjusted: bool = False
    query_count: int = json_field("queryCount", default=0)
    results_count: int = json_field("resultsCount", default=0)
    request_id: str = ""
    results: list[MarketSummary] = field(default_factory=list)


@dataclass
class MarketSummaryParams:
    adjusted: bool | None = query_field("adjusted")
    include_otc: bool | None = query_field("include_otc")


def get_open_close(
    client: RESTClient, ticker: str, date: str, adjusted: bool | None = None
) -> OpenCloseResponse:
    """Get the open, close, high, low and extended-hours prices for a ticker on a date."""
    path = f"/v1/open-close/{ticker}/{date}"
    return client.fetch(path, {"adjusted": adjusted}, OpenCloseResponse)


def get_bars(client: RESTClient, ticker: str, params: BarsParams) -> BarsResponse:
    """Get custom aggregate bars for a ticker over a date range."""
    return client.fetch(params.path(ticker), params.query(), BarsResponse)


def get_previous_day_bar(
    client: RESTClient, ticker: str, adjusted: bool | None = None
) -> BarsResponse:
    """Get the previous trading day's bar for a ticker."""
    return client.fetch(f"/v2/aggs/ticker/{ticker}/prev", {"adjusted": adjusted}, BarsResponse)


def get_market_summary(
    client: RESTClient, date: str, params: MarketSummaryParams | None = None
) -> MarketSummaryResponse:
    """Get the grouped daily bars of every US stock for a date."""
    path = f"/v2/aggs/grouped/locale/us/market/stocks/{date}"
    return client.fetch(path, encode_params(params), MarketSummaryResponse)


# ============================================
# Reference tickers
# ============================================


@dataclass
class Ticker:
    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    primary_exchange: str = ""
    type: str = ""
    active: bool = False
    currency_name: str = ""
    cik: str = ""
    composite_figi: str = ""
    share_class_figi: str = ""
    last_updated_utc: str = ""


@dataclass
class TickersResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[Ticker] = field(default_factory=list)


@dataclass
class TickersParams:
    """Search and filter options for /v3/reference/tickers."""

    ticker: str | None = query_field("ticker")
    type: str | None = query_field("type")
    market: str | None = query_field("market")
    exchange: str | None = query_field("exchange")
    search: str | None = query_field("search")
    active: bool | None = query_field("active")
    sort: str | None = query_field("sort")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")


def get_tickers(client: RESTClient, params: TickersParams | None = None) -> TickersResponse:
    """List tickers matching the filter criteria. Follow ``next_url`` for more pages."""
    return client.fetch("/v3/reference/tickers", encode_params(params), TickersResponse)


@dataclass
class TickerOverview:
    """Company details for one ticker. ``market_cap`` is in ``currency_name`` units."""

    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    primary_exchange: str = ""
    type: str = ""
    active: bool = False
    currency_name: str = ""
    cik: str = ""
    composite_figi: str = ""
    share_class_figi: str = ""
    description: str = ""
    homepage_url: str = ""
    list_date: str = ""
    market_cap: float = 0.0
    phone_number: str = ""
    sic_code: str = ""
    sic_description: str = ""
    total_employees: int = 0
    share_class_shares_outstanding: int = 0
    weighted_shares_outstanding: int = 0
    round_lot: int = 0


@dataclass
class TickerOverviewResponse:
    status: str = ""
    request_id: str = ""
    results: TickerOverview = field(default_factory=TickerOverview)


def get_ticker_overview(
    client: RESTClient, ticker: str, date: str | None = None
) -> TickerOverviewResponse:
    """Get details for a ticker, optionally as of a past ``date`` (YYYY-MM-DD)."""
    path = f"/v3/reference/tickers/{ticker}"
    return client.fetch(path, {"date": date}, TickerOverviewResponse)


# ============================================
# Trades and quotes
# ============================================


@dataclass
class TickParams:
    """Timestamp filters shared by every /v3/trades and /v3/quotes endpoint."""

    timestamp: str | None = query_field("timestamp")
    timestamp_gte: str | None = query_field("timestamp.gte")
    timestamp_gt: str | None = query_field("timestamp.gt")
    timestamp_lte: str | None = query_field("timestamp.lte")
    timestamp_lt: str | None = query_field("timestamp.lt")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class Trade:
    """Tick-level trade. Timestamps are Unix nanoseconds."""

    conditions: list[int] = field(default_factory=list)
    correction: int = 0
    exchange: int = 0
    id: str = ""
    participant_timestamp: int = 0
    price: float = 0.0
    sequence_number: int = 0
    sip_timestamp: int = 0
    size: float = 0.0
    tape: int = 0
    trf_id: int = 0
    trf_timestamp: int = 0


@dataclass
class TradesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Trade] = field(default_factory=list)


@dataclass
class LastTrade:
    """Most recent trade, keyed by the provider's single-letter names."""

    ticker: str = json_field("T", default="")
    conditions: list[int] = json_field("c", default_factory=list)
    correction: int = json_field("e", default=0)
    trf_timestamp: int = json_field("f", default=0)
    id: str = json_field("i", default="")
    price: float = json_field("p", default=0.0)
    sequence_number: int = json_field("q", default=0)
    trf_id: int = json_field("r", default=0)
    size: float = json_field("s", default=0.0)
    sip_timestamp: int = json_field("t", default=0)
    exchange: int = json_field("x", default=0)
    participant_timestamp: int = json_field("y", default=0)
    tape: int = json_field("z", default=0)


@dataclass
class LastTradeResponse:
    status: str = ""
    request_id: str = ""
    results: LastTrade = field(default_factory=LastTrade)


@dataclass
class Quote:
    """NBBO quote."""

    ask_exchange: int = 0
    ask_price: float = 0.0
    ask_size: float = 0.0
    bid_exchange: int = 0
    bid_price: float = 0.0
    bid_size: float = 0.0
    conditions: list[int] = field(default_factory=list)
    indicators: list[int] = field(default_factory=list)
    participant_timestamp: int = 0
    sequence_number: int = 0
    sip_timestamp: int = 0
    tape: int = 0
    trf_timestamp: int = 0


@dataclass
class QuotesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Quote] = field(default_factory=list)


@dataclass
class LastQuote:
    """Most recent NBBO quote. Upper-case keys are ask side, lower-case bid side."""

    ticker: str = json_field("T", default="")
    ask_price: float = json_field("P", default=0.0)
    ask_size: int = json_field("S", default=0)
    ask_exchange: int = json_field("X", default=0)
    conditions: list[int] = json_field("c", default_factory=list)
    trf_timestamp: int = json_field("f", default=0)
    indicators: list[int] = json_field("i", default_factory=list)
    bid_price: float = json_field("p", default=0.0)
    sequence_number: int = json_field("q", default=0)
    bid_size: int = json_field("s", default=0)
    sip_timestamp: int = json_field("t", default=0)
    bid_exchange: int = json_field("x", default=0)
    participant_timestamp: int = json_field("y", default=0)
    tape: int = json_field("z", default=0)


@dataclass
class LastQuoteResponse:
    status: str = ""
    request_id: str = ""
    results: LastQuote = field(default_factory=LastQuote)


def get_trades(
    client: RESTClient, ticker: str, params: TickParams | None = None
) -> TradesResponse:
    """Get tick-level trades for a ticker."""
    return client.fetch(f"/v3/trades/{ticker}", encode_params(params), TradesResponse)


def get_last_trade(client: RESTClient, ticker: str) -> LastTradeResponse:
    return client.fetch(f"/v2/last/trade/{ticker}", None, LastTradeResponse)


def get_quotes(
    client: RESTClient, ticker: str, params: TickParams | None = None
) -> QuotesResponse:
    """Get tick-level NBBO quotes for a ticker."""
    return client.fetch(f"/v3/quotes/{ticker}", encode_params(params), QuotesResponse)


def get_last_quote(client: RESTClient, ticker: str) -> LastQuoteResponse:
    return client.fetch(f"/v2/last/nbbo/{ticker}", None, LastQuoteResponse)


# ============================================
# Snapshots
# ============================================


@dataclass
class SnapshotBar:
    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)
    volume: float = json_field("v", default=0.0)
    vwap: float = json_field("vw", default=0.0)


@dataclass
class SnapshotMinBar:
    """Latest minute bar with accumulated day volume."""

    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)
    volume: float = json_field("v", default=0.0)
    vwap: float = json_field("vw", default=0.0)
    timestamp: int = json_field("t", default=0)
    num_transactions: int = json_field("n", default=0)
    accumulated_volume: float = json_field("av", default=0.0)


@dataclass
class SnapshotTicker:
    ticker: str = ""
    todays_change: float = json_field("todaysChange", default=0.0)
    todays_change_pct: float = json_field("todaysChangePerc", default=0.0)
    updated: int = 0
    day: SnapshotBar = field(default_factory=SnapshotBar)
    prev_day: SnapshotBar = json_field("prevDay", default_factory=SnapshotBar)
    min: SnapshotMinBar = field(default_factory=SnapshotMinBar)


@dataclass
class SingleTickerSnapshotResponse:
    status: str = ""
    request_id: str = ""
    ticker: SnapshotTicker = field(default_factory=SnapshotTicker)


@dataclass
class AllTickersSnapshotResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    tickers: list[SnapshotTicker] = field(default_factory=list)


@dataclass
class GainersLosersSnapshotResponse:
    status: str = ""
    request_id: str = ""
    tickers: list[SnapshotTicker] = field(default_factory=list)


@dataclass
class AllTickersSnapshotParams:
    tickers: str | None = query_field("tickers")
    include_otc: bool | None = query_field("include_otc")


def get_snapshot_ticker(client: RESTClient, ticker: str) -> SingleTickerSnapshotResponse:
    """Get the current day, previous day and latest minute bars for one ticker."""
    path = f"/v2/snapshot/locale/us/markets/stocks/tickers/{ticker}"
    return client.fetch(path, None, SingleTickerSnapshotResponse)


def get_snapshot_all_tickers(
    client: RESTClient, params: AllTickersSnapshotParams | None = None
) -> AllTickersSnapshotResponse:
    """Get snapshots for the whole market or a comma-separated ticker list."""
    path = "/v2/snapshot/locale/us/markets/stocks/tickers"
    return client.fetch(path, encode_params(params), AllTickersSnapshotResponse)


def get_snapshot_gainers_losers(
    client: RESTClient, direction: str, include_otc: bool | None = None
) -> GainersLosersSnapshotResponse:
    """Get the top 20 gainers or losers of the day.

    Raises:
        ValueError: If direction is not "gainers" or "losers".
    """
    if direction not in MOVER_DIRECTIONS:
        raise ValueError(f"direction must be one of {MOVER_DIRECTIONS}, got {direction!r}")
    path = f"/v2/snapshot/locale/us/markets/stocks/{direction}"
    return client.fetch(path, {"include_otc": include_otc}, GainersLosersSnapshotResponse)


# ============================================
# Corporate actions
# ============================================


@dataclass
class Dividend:
    """Cash dividend distribution. Dates are ``YYYY-MM-DD`` strings."""

    id: str = ""
    ticker: str = ""
    declaration_date: str = ""
    ex_dividend_date: str = ""
    record_date: str = ""
    pay_date: str = ""
    frequency: int = 0
    cash_amount: float = 0.0
    currency: str = ""
    distribution_type: str = ""
    historical_adjustment_factor: float = 0.0
    split_adjusted_cash_amount: float = 0.0


@dataclass
class DividendsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Dividend] = field(default_factory=list)


@dataclass
class DividendsParams:
    ticker: str | None = query_field("ticker")
    ex_dividend_date: str | None = query_field("ex_dividend_date")
    ex_dividend_date_gt: str | None = query_field("ex_dividend_date.gt")
    ex_dividend_date_gte: str | None = query_field("ex_dividend_date.gte")
    ex_dividend_date_lt: str | None = query_field("ex_dividend_date.lt")
    ex_dividend_date_lte: str | None = query_field("ex_dividend_date.lte")
    frequency: int | None = query_field("frequency")
    distribution_type: str | None = query_field("distribution_type")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


@dataclass
class Split:
    """Stock split. ``adjustment_type`` is forward_split, reverse_split or stock_dividend."""

    id: str = ""
    ticker: str = ""
    execution_date: str = ""
    split_from: float = 0.0
    split_to: float = 0.0
    adjustment_type: str = ""
    historical_adjustment_factor: float = 0.0


@dataclass
class SplitsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Split] = field(default_factory=list)


@dataclass
class SplitsParams:
    ticker: str | None = query_field("ticker")
    execution_date: str | None = query_field("execution_date")
    execution_date_gt: str | None = query_field("execution_date.gt")
    execution_date_gte: str | None = query_field("execution_date.gte")
    execution_date_lt: str | None = query_field("execution_date.lt")
    execution_date_lte: str | None = query_field("execution_date.lte")
    adjustment_type: str | None = query_field("adjustment_type")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


def get_dividends(client: RESTClient, params: DividendsParams | None = None) -> DividendsResponse:
    """List historical cash dividends."""
    return client.fetch("/stocks/v1/dividends", encode_params(params), DividendsResponse)


def get_splits(client: RESTClient, params: SplitsParams | None = None) -> SplitsResponse:
    """List historical stock splits."""
    return client.fetch("/stocks/v1/splits", encode_params(params), SplitsResponse)
