"""Market operations and cross-asset reference endpoints.

Market status and the holiday calendar are served by the same endpoints for
stocks, options, forex, crypto and indices. Exchanges and condition codes are
filtered by ``asset_class``. The unified snapshot accepts tickers of any
market in one request.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, json_field, query_field


@dataclass
class MarketStatusExchanges:
    """Open/closed status of the major US stock exchanges."""

    nasdaq: str = ""
    nyse: str = ""
    otc: str = ""


@dataclass
class MarketStatusCurrencies:
    crypto: str = ""
    fx: str = ""


@dataclass
class MarketStatusIndicesGroups:
    """Open/closed status per index family."""

    s_and_p: str = ""
    societe_generale: str = ""
    msci: str = ""
    ftse_russell: str = ""
    mstar: str = ""
    mstarc: str = ""
    cccy: str = ""
    cgi: str = ""
    nasdaq: str = ""
    dow_jones: str = ""


@dataclass
class MarketStatus:
    """Real-time trading status returned by /v1/marketstatus/now."""

    after_hours: bool = json_field("afterHours", default=False)
    early_hours: bool = json_field("earlyHours", default=False)
    market: str = ""
    server_time: str = json_field("serverTime", default="")
    currencies: MarketStatusCurrencies = field(default_factory=MarketStatusCurrencies)
    exchanges: MarketStatusExchanges = field(default_factory=MarketStatusExchanges)
    indices_groups: MarketStatusIndicesGroups = json_field(
        "indicesGroups", default_factory=MarketStatusIndicesGroups
    )


@dataclass
class MarketHoliday:
    """Upcoming holiday or early close. ``open``/``close`` are set only for early closes."""

    date: str = ""
    exchange: str = ""
    name: str = ""
    status: str = ""
    open: str = ""
    close: str = ""


@dataclass
class Exchange:
    id: int = 0
    type: str = ""
    asset_class: str = ""
    locale: str = ""
    name: str = ""
    acronym: str = ""
    mic: str = ""
    operating_mic: str = ""
    participant_id: str = ""
    url: str = ""


@dataclass
class ExchangesResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    results: list[Exchange] = field(default_factory=list)


@dataclass
class ExchangesParams:
    """Filters for /v3/reference/exchanges."""

    asset_class: str | None = query_field("asset_class")
    locale: str | None = query_field("locale")


def get_market_status(client: RESTClient) -> MarketStatus:
    """Get the current status of exchanges, currency markets and index groups."""
    return client.fetch("/v1/marketstatus/now", None, MarketStatus)


def get_market_holidays(client: RESTClient) -> list[MarketHoliday]:
    """Get upcoming market holidays and early-close days, sorted by date.

    Unlike most endpoints the response is a bare JSON array, not an envelope.
    """
    return client.fetch("/v1/marketstatus/upcoming", None, list[MarketHoliday])


def get_exchanges(client: RESTClient, params: ExchangesParams | None = None) -> ExchangesResponse:
    """List known exchanges, optionally filtered by asset class and locale."""
    return client.fetch("/v3/reference/exchanges", encode_params(params), ExchangesResponse)


# ============================================
# Condition codes
# ============================================


@dataclass
class ConditionCode:
    """Trade or quote condition, e.g. odd lot or average price trade."""

    id: int = 0
    type: str = ""
    name: str = ""
    asset_class: str = ""
    data_types: list[str] = field(default_factory=list)
    legacy: bool = False
    abbreviation: str = ""
    description: str = ""
    exchange_id: int = 0
    sip_mapping: dict[str, str] = field(default_factory=dict)


@dataclass
class ConditionsResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    results: list[ConditionCode] = field(default_factory=list)


@dataclass
class ConditionsParams:
    asset_class: str | None = query_field("asset_class")
    data_type: str | None = query_field("data_type")


def get_conditions(client: RESTClient, params: ConditionsParams | None = None) -> ConditionsResponse:
    return client.fetch("/v3/reference/conditions", encode_params(params), ConditionsResponse)


# ============================================
# Unified snapshot
# ============================================


@dataclass
class SnapshotSession:
    """Current session prices and the change against the previous close."""

    change: float = 0.0
    change_percent: float = 0.0
    close: float = 0.0
    high: float = 0.0
    low: float = 0.0
    open: float = 0.0
    previous_close: float = 0.0


@dataclass
class UnifiedSnapshot:
    """Snapshot of one ticker from any market.

    A ticker the provider cannot resolve comes back with ``error`` and
    ``message`` set instead of failing the whole request. ``fmv`` is only
    populated on plans with fair market value access.
    """

    ticker: str = ""
    name: str = ""
    value: float = 0.0
    type: str = ""
    timeframe: str = ""
    market_status: str = ""
    last_updated: int = 0
    session: SnapshotSession = field(default_factory=SnapshotSession)
    fmv: float = 0.0
    error: str = ""
    message: str = ""


@dataclass
class UnifiedSnapshotResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[UnifiedSnapshot] = field(default_factory=list)


@dataclass
class UnifiedSnapshotParams:
    """``ticker_any_of`` takes a comma-separated list such as ``AAPL,C:EURUSD,X:BTCUSD``."""

    ticker_any_of: str | None = query_field("ticker.any_of")
    ticker: str | None = query_field("ticker")
    ticker_gte: str | None = query_field("ticker.gte")
    ticker_gt: str | None = query_field("ticker.gt")
    ticker_lte: str | None = query_field("ticker.lte")
    ticker_lt: str | None = query_field("ticker.lt")
    type: str | None = query_field("type")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_unified_snapshot(
    client: RESTClient, params: UnifiedSnapshotParams | None = None
) -> UnifiedSnapshotResponse:
    """Get snapshots for tickers across stocks, options, forex, crypto and indices."""
    return client.fetch("/v3/snapshot", encode_params(params), UnifiedSnapshotResponse)
