"""TMX corporate events: earnings calls, dividends and other scheduled events.

Every filterable column accepts the comparison suffixes ``.gt``, ``.gte``,
``.lt`` and ``.lte``, and most accept ``.any_of`` with a comma-separated list.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class CorporateEvent:
    company_name: str = ""
    date: str = ""
    isin: str = ""
    name: str = ""
    status: str = ""
    ticker: str = ""
    tmx_company_id: int = 0
    tmx_record_id: str = ""
    trading_venue: str = ""
    type: str = ""
    url: str = ""


@dataclass
class CorporateEventsResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[CorporateEvent] = field(default_factory=list)


@dataclass
class CorporateEventsParams:
    date: str | None = query_field("date")
    date_any_of: str | None = query_field("date.any_of")
    date_gt: str | None = query_field("date.gt")
    date_gte: str | None = query_field("date.gte")
    date_lt: str | None = query_field("date.lt")
    date_lte: str | None = query_field("date.lte")
    type: str | None = query_field("type")
    type_any_of: str | None = query_field("type.any_of")
    type_gt: str | None = query_field("type.gt")
    type_gte: str | None = query_field("type.gte")
    type_lt: str | None = query_field("type.lt")
    type_lte: str | None = query_field("type.lte")
    status: str | None = query_field("status")
    status_any_of: str | None = query_field("status.any_of")
    status_gt: str | None = query_field("status.gt")
    status_gte: str | None = query_field("status.gte")
    status_lt: str | None = query_field("status.lt")
    status_lte: str | None = query_field("status.lte")
    ticker: str | None = query_field("ticker")
    ticker_any_of: str | None = query_field("ticker.any_of")
    ticker_gt: str | None = query_field("ticker.gt")
    ticker_gte: str | None = query_field("ticker.gte")
    ticker_lt: str | None = query_field("ticker.lt")
    ticker_lte: str | None = query_field("ticker.lte")
    isin: str | None = query_field("isin")
    isin_any_of: str | None = query_field("isin.any_of")
    isin_gt: str | None = query_field("isin.gt")
    isin_gte: str | None = query_field("isin.gte")
    isin_lt: str | None = query_field("isin.lt")
    isin_lte: str | None = query_field("isin.lte")
    trading_venue: str | None = query_field("trading_venue")
    trading_venue_any_of: str | None = query_field("trading_venue.any_of")
    trading_venue_gt: str | None = query_field("trading_venue.gt")
    trading_venue_gte: str | None = query_field("trading_venue.gte")
    trading_venue_lt: str | None = query_field("trading_venue.lt")
    trading_venue_lte: str | None = query_field("trading_venue.lte")
    tmx_company_id: int | None = query_field("tmx_company_id")
    tmx_company_id_gt: int | None = query_field("tmx_company_id.gt")
    tmx_company_id_gte: int | None = query_field("tmx_company_id.gte")
    tmx_company_id_lt: int | None = query_field("tmx_company_id.lt")
    tmx_company_id_lte: int | None = query_field("tmx_company_id.lte")
    tmx_record_id: str | None = query_field("tmx_record_id")
    tmx_record_id_any_of: str | None = query_field("tmx_record_id.any_of")
    tmx_record_id_gt: str | None = query_field("tmx_record_id.gt")
    tmx_record_id_gte: str | None = query_field("tmx_record_id.gte")
    tmx_record_id_lt: str | None = query_field("tmx_record_id.lt")
    tmx_record_id_lte: str | None = query_field("tmx_record_id.lte")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


def get_corporate_events(
    client: RESTClient, params: CorporateEventsParams | None = None
) -> CorporateEventsResponse:
    """List corporate events from TMX, filtered by any combination of columns."""
    return client.fetch("/tmx/v1/corporate-events", encode_params(params), CorporateEventsResponse)
