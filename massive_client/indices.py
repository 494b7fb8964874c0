"""Index endpoints.

Index tickers carry the ``I:`` prefix (``I:SPX``). Index values are computed,
not traded, so bars carry no volume and there is no split adjustment.
Indicators for indices are served by ``massive_client.indicators``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .market import UnifiedSnapshotParams, UnifiedSnapshotResponse
from .schema import encode_params, json_field, query_field
from .stocks import BarsParams

MARKET = "indices"


@dataclass
class IndexBar:
    """OHLC values of an index. ``ticker`` is only set on previous-day bars."""

    open: float = json_field("o", default=0.0)
    high: float = json_field("h", default=0.0)
    low: float = json_field("l", default=0.0)
    close: float = json_field("c", default=0.0)
    timestamp: int = json_field("t", default=0)
    ticker: str = json_field("T", default="")


@dataclass
class IndexBarsResponse:
    status: str = ""
    ticker: str = ""
    query_count: int = json_field("queryCount", default=0)
    results_count: int = json_field("resultsCount", default=0)
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[IndexBar] = field(default_factory=list)


@dataclass
class IndexOpenCloseResponse:
    status: str = ""
    symbol: str = ""
    from_: str = json_field("from", default="")
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    after_hours: float = json_field("afterHours", default=0.0)
    pre_market: float = json_field("preMarket", default=0.0)


def get_index_bars(client: RESTClient, ticker: str, params: BarsParams) -> IndexBarsResponse:
    """Get custom aggregate bars for an index. Leave ``params.adjusted`` unset."""
    return client.fetch(params.path(ticker), params.query(), IndexBarsResponse)


def get_index_open_close(client: RESTClient, ticker: str, date: str) -> IndexOpenCloseResponse:
    return client.fetch(f"/v1/open-close/{ticker}/{date}", None, IndexOpenCloseResponse)


def get_index_previous_day_bar(client: RESTClient, ticker: str) -> IndexBarsResponse:
    return client.fetch(f"/v2/aggs/ticker/{ticker}/prev", None, IndexBarsResponse)


def get_indices_snapshot(
    client: RESTClient, params: UnifiedSnapshotParams | None = None
) -> UnifiedSnapshotResponse:
    """Get current values and session changes for indices.

    The response has the same shape as the unified snapshot. ``params.type``
    is not used by this endpoint.
    """
    return client.fetch("/v3/snapshot/indices", encode_params(params), UnifiedSnapshotResponse)


# ============================================
# Reference tickers
# ============================================


@dataclass
class IndexTicker:
    ticker: str = ""
    name: str = ""
    market: str = ""
    locale: str = ""
    active: bool = False
    source_feed: str = ""


@dataclass
class IndexTickersResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[IndexTicker] = field(default_factory=list)


@dataclass
class IndexTickersParams:
    ticker: str | None = query_field("ticker")
    search: str | None = query_field("search")
    active: bool | None = query_field("active")
    sort: str | None = query_field("sort")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")


def get_index_tickers(
    client: RESTClient, params: IndexTickersParams | None = None
) -> IndexTickersResponse:
    """List index tickers. The ``market=indices`` filter is always applied."""
    query = {"market": MARKET, **encode_params(params)}
    return client.fetch("/v3/reference/tickers", query, IndexTickersResponse)
