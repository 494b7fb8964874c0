"""Options endpoints.

Options contracts are addressed by their OCC-style ticker, e.g.
``O:AAPL260218C00190000``. Trades and quotes reuse the tick types from the
stocks module; snapshot and contract types are specific to options.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, json_field, query_field
from .stocks import BarsParams, LastQuoteResponse, QuotesResponse, TickParams

# ============================================
# Reference contracts
# ============================================


@dataclass
class AdditionalUnderlying:
    underlying: str = ""
    amount: float = 0.0
    type: str = ""


@dataclass
class OptionsContract:
    """Reference data for a single options contract."""

    ticker: str = ""
    underlying_ticker: str = ""
    contract_type: str = ""
    exercise_style: str = ""
    expiration_date: str = ""
    strike_price: float = 0.0
    shares_per_contract: int = 0
    primary_exchange: str = ""
    cfi: str = ""
    correction: int = 0
    additional_underlyings: list[AdditionalUnderlying] = field(default_factory=list)


@dataclass
class OptionsContractsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[OptionsContract] = field(default_factory=list)


@dataclass
class OptionsContractResponse:
    status: str = ""
    request_id: str = ""
    results: OptionsContract = field(default_factory=OptionsContract)


@dataclass
class OptionsContractsParams:
    """Filters for /v3/reference/options/contracts.

    Range filters use the provider's ``.gte``/``.gt``/``.lte``/``.lt`` suffixes.
    """

    underlying_ticker: str | None = query_field("underlying_ticker")
    contract_type: str | None = query_field("contract_type")
    expiration_date: str | None = query_field("expiration_date")
    as_of: str | None = query_field("as_of")
    strike_price: float | None = query_field("strike_price")
    expired: bool | None = query_field("expired")
    underlying_ticker_gte: str | None = query_field("underlying_ticker.gte")
    underlying_ticker_gt: str | None = query_field("underlying_ticker.gt")
    underlying_ticker_lte: str | None = query_field("underlying_ticker.lte")
    underlying_ticker_lt: str | None = query_field("underlying_ticker.lt")
    expiration_date_gte: str | None = query_field("expiration_date.gte")
    expiration_date_gt: str | None = query_field("expiration_date.gt")
    expiration_date_lte: str | None = query_field("expiration_date.lte")
    expiration_date_lt: str | None = query_field("expiration_date.lt")
    strike_price_gte: float | None = query_field("strike_price.gte")
    strike_price_gt: float | None = query_field("strike_price.gt")
    strike_price_lte: float | None = query_field("strike_price.lte")
    strike_price_lt: float | None = query_field("strike_price.lt")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_options_contracts(
    client: RESTClient, params: OptionsContractsParams | None = None
) -> OptionsContractsResponse:
    """List options contracts matching the filters. Results are paginated via ``next_url``."""
    path = "/v3/reference/options/contracts"
    return client.fetch(path, encode_params(params), OptionsContractsResponse)


def get_options_contract(
    client: RESTClient, options_ticker: str, as_of: str | None = None
) -> OptionsContractResponse:
    """Get one contract, optionally as it was on ``as_of`` (YYYY-MM-DD)."""
    path = f"/v3/reference/options/contracts/{options_ticker}"
    return client.fetch(path, {"as_of": as_of}, OptionsContractResponse)


# ============================================
# Aggregates
# ============================================


@dataclass
class OptionsBar:
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
class OptionsBarsResponse:
    status: str = ""
    ticker: str = ""
    adjusted: bool = False
    query_count: int = json_field("queryCount", default=0)
    results_count: int = json_field("resultsCount", default=0)
    request_id: str = ""
    count: int = 0
    results: list[OptionsBar] = field(default_factory=list)


@dataclass
class OptionsDailySummary:
    """Open/close for a contract on one date. Volume is fractional for options."""

    status: str = ""
    symbol: str = ""
    from_: str = json_field("from", default="")
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0
    after_hours: float = json_field("afterHours", default=0.0)
    pre_market: float = json_field("preMarket", default=0.0)


def get_options_bars(client: RESTClient, options_ticker: str, params: BarsParams) -> OptionsBarsResponse:
    """Get custom aggregate bars for an options contract."""
    return client.fetch(params.path(options_ticker), params.query(), OptionsBarsResponse)


def get_options_daily_summary(
    client: RESTClient, options_ticker: str, date: str, adjusted: bool | None = None
) -> OptionsDailySummary:
    path = f"/v1/open-close/{options_ticker}/{date}"
    return client.fetch(path, {"adjusted": adjusted}, OptionsDailySummary)


def get_options_previous_day_bar(
    client: RESTClient, options_ticker: str, adjusted: bool | None = None
) -> OptionsBarsResponse:
    path = f"/v2/aggs/ticker/{options_ticker}/prev"
    return client.fetch(path, {"adjusted": adjusted}, OptionsBarsResponse)


# ============================================
# Snapshots
# ============================================


@dataclass
class OptionSnapshotDay:
    """Session bar. ``last_updated`` is Unix nanoseconds."""

    change: float = 0.0
    change_percent: float = 0.0
    close: float = 0.0
    high: float = 0.0
    last_updated: int = 0
    low: float = 0.0
    open: float = 0.0
    previous_close: float = 0.0
    volume: float = 0.0
    vwap: float = 0.0


@dataclass
class OptionSnapshotDetails:
    contract_type: str = ""
    exercise_style: str = ""
    expiration_date: str = ""
    shares_per_contract: float = 0.0
    strike_price: float = 0.0
    ticker: str = ""


@dataclass
class OptionSnapshotGreeks:
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0


@dataclass
class OptionSnapshotLastQuote:
    ask: float = 0.0
    ask_size: float = 0.0
    bid: float = 0.0
    bid_size: float = 0.0
    last_updated: int = 0
    midpoint: float = 0.0
    timeframe: str = ""


@dataclass
class OptionSnapshotLastTrade:
    conditions: list[int] = field(default_factory=list)
    exchange: int = 0
    price: float = 0.0
    sip_timestamp: int = 0
    size: float = 0.0
    timeframe: str = ""


@dataclass
class OptionSnapshotUnderlyingAsset:
    change_to_break_even: float = 0.0
    last_updated: int = 0
    price: float = 0.0
    ticker: str = ""
    timeframe: str = ""


@dataclass
class OptionSnapshot:
    """Full snapshot of one contract: session bar, Greeks, IV, last quote/trade and underlying."""

    break_even_price: float = 0.0
    day: OptionSnapshotDay = field(default_factory=OptionSnapshotDay)
    details: OptionSnapshotDetails = field(default_factory=OptionSnapshotDetails)
    fmv: float = 0.0
    fmv_last_updated: int = 0
    greeks: OptionSnapshotGreeks = field(default_factory=OptionSnapshotGreeks)
    implied_volatility: float = 0.0
    last_quote: OptionSnapshotLastQuote = field(default_factory=OptionSnapshotLastQuote)
    last_trade: OptionSnapshotLastTrade = field(default_factory=OptionSnapshotLastTrade)
    open_interest: float = 0.0
    underlying_asset: OptionSnapshotUnderlyingAsset = field(
        default_factory=OptionSnapshotUnderlyingAsset
    )


@dataclass
class OptionsChainSnapshotResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[OptionSnapshot] = field(default_factory=list)


@dataclass
class OptionContractSnapshotResponse:
    status: str = ""
    request_id: str = ""
    results: OptionSnapshot = field(default_factory=OptionSnapshot)


@dataclass
class OptionsChainSnapshotParams:
    strike_price: float | None = query_field("strike_price")
    expiration_date: str | None = query_field("expiration_date")
    contract_type: str | None = query_field("contract_type")
    strike_price_gte: float | None = query_field("strike_price.gte")
    strike_price_gt: float | None = query_field("strike_price.gt")
    strike_price_lte: float | None = query_field("strike_price.lte")
    strike_price_lt: float | None = query_field("strike_price.lt")
    expiration_date_gte: str | None = query_field("expiration_date.gte")
    expiration_date_gt: str | None = query_field("expiration_date.gt")
    expiration_date_lte: str | None = query_field("expiration_date.lte")
    expiration_date_lt: str | None = query_field("expiration_date.lt")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_options_chain_snapshot(
    client: RESTClient, underlying: str, params: OptionsChainSnapshotParams | None = None
) -> OptionsChainSnapshotResponse:
    """Get snapshots of every contract on an underlying asset."""
    path = f"/v3/snapshot/options/{underlying}"
    return client.fetch(path, encode_params(params), OptionsChainSnapshotResponse)


def get_option_contract_snapshot(
    client: RESTClient, underlying: str, options_ticker: str
) -> OptionContractSnapshotResponse:
    path = f"/v3/snapshot/options/{underlying}/{options_ticker}"
    return client.fetch(path, None, OptionContractSnapshotResponse)


# ============================================
# Trades and quotes
# ============================================


@dataclass
class OptionsTrade:
    conditions: list[int] = field(default_factory=list)
    correction: int = 0
    exchange: int = 0
    participant_timestamp: int = 0
    price: float = 0.0
    sequence_number: int = 0
    sip_timestamp: int = 0
    size: float = 0.0


@dataclass
class OptionsTradesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[OptionsTrade] = field(default_factory=list)


@dataclass
class OptionsLastTrade:
    ticker: str = json_field("T", default="")
    conditions: list[int] = json_field("c", default_factory=list)
    correction: int = json_field("e", default=0)
    id: str = json_field("i", default="")
    price: float = json_field("p", default=0.0)
    sequence_number: int = json_field("q", default=0)
    size: float = json_field("s", default=0.0)
    sip_timestamp: int = json_field("t", default=0)
    exchange: int = json_field("x", default=0)
    participant_timestamp: int = json_field("y", default=0)


@dataclass
class OptionsLastTradeResponse:
    status: str = ""
    request_id: str = ""
    results: OptionsLastTrade = field(default_factory=OptionsLastTrade)


def get_options_trades(
    client: RESTClient, options_ticker: str, params: TickParams | None = None
) -> OptionsTradesResponse:
    return client.fetch(f"/v3/trades/{options_ticker}", encode_params(params), OptionsTradesResponse)


def get_options_last_trade(client: RESTClient, options_ticker: str) -> OptionsLastTradeResponse:
    return client.fetch(f"/v2/last/trade/{options_ticker}", None, OptionsLastTradeResponse)


def get_options_quotes(
    client: RESTClient, options_ticker: str, params: TickParams | None = None
) -> QuotesResponse:
    """Get tick-level NBBO quotes for a contract."""
    return client.fetch(f"/v3/quotes/{options_ticker}", encode_params(params), QuotesResponse)


def get_options_last_quote(client: RESTClient, options_ticker: str) -> LastQuoteResponse:
    return client.fetch(f"/v2/last/nbbo/{options_ticker}", None, LastQuoteResponse)
