"""SEC filings endpoints.

Plain-text 10-K sections and the provider's machine-readable risk factor
disclosures, classified with a three-level taxonomy.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class FilingSection:
    """One section of a 10-K filing, e.g. ``business`` or ``risk_factors``."""

    cik: str = ""
    ticker: str = ""
    section: str = ""
    filing_date: str = ""
    period_end: str = ""
    text: str = ""
    filing_url: str = ""


@dataclass
class FilingSectionsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[FilingSection] = field(default_factory=list)


@dataclass
class FilingSectionsParams:
    ticker: str | None = query_field("ticker")
    cik: str | None = query_field("cik")
    section: str | None = query_field("section")
    filing_date: str | None = query_field("filing_date")
    filing_date_gt: str | None = query_field("filing_date.gt")
    filing_date_lt: str | None = query_field("filing_date.lt")
    period_end: str | None = query_field("period_end")
    period_end_gt: str | None = query_field("period_end.gt")
    period_end_lt: str | None = query_field("period_end.lt")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class RiskFactor:
    cik: str = ""
    ticker: str = ""
    primary_category: str = ""
    secondary_category: str = ""
    tertiary_category: str = ""
    filing_date: str = ""
    supporting_text: str = ""


@dataclass
class RiskFactorsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[RiskFactor] = field(default_factory=list)


@dataclass
class RiskFactorsParams:
    ticker: str | None = query_field("ticker")
    cik: str | None = query_field("cik")
    filing_date: str | None = query_field("filing_date")
    filing_date_gt: str | None = query_field("filing_date.gt")
    filing_date_lt: str | None = query_field("filing_date.lt")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class RiskCategory:
    """Taxonomy entry. ``taxonomy`` is the numeric taxonomy version."""

    primary_category: str = ""
    secondary_category: str = ""
    tertiary_category: str = ""
    description: str = ""
    taxonomy: float = 0.0


@dataclass
class RiskCategoriesResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[RiskCategory] = field(default_factory=list)


@dataclass
class RiskCategoriesParams:
    primary_category: str | None = query_field("primary_category")
    secondary_category: str | None = query_field("secondary_category")
    tertiary_category: str | None = query_field("tertiary_category")
    taxonomy: str | None = query_field("taxonomy")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_filing_sections(
    client: RESTClient, params: FilingSectionsParams | None = None
) -> FilingSectionsResponse:
    """Get plain-text 10-K sections for a ticker or CIK.

    Results are sorted by ``period_end`` descending unless ``sort`` is given.
    """
    path = "/stocks/filings/10-K/vX/sections"
    return client.fetch(path, encode_params(params), FilingSectionsResponse)


def get_risk_factors(
    client: RESTClient, params: RiskFactorsParams | None = None
) -> RiskFactorsResponse:
    """Get categorized risk factor disclosures with their supporting filing text."""
    path = "/stocks/filings/vX/risk-factors"
    return client.fetch(path, encode_params(params), RiskFactorsResponse)


def get_risk_categories(
    client: RESTClient, params: RiskCategoriesParams | None = None
) -> RiskCategoriesResponse:
    path = "/stocks/taxonomies/vX/risk-factors"
    return client.fetch(path, encode_params(params), RiskCategoriesResponse)
