"""ETF Global partner endpoints: fund analytics scores and constituent holdings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class ETFAnalytics:
    """Risk, reward and quant scores for one fund on ``effective_date``.

    ``quant_grade`` is a letter grade derived from ``quant_total_score``.
    """

    composite_ticker: str = ""
    effective_date: str = ""
    processed_date: str = ""
    quant_composite_behavioral: float = 0.0
    quant_composite_fundamental: float = 0.0
    quant_composite_global: float = 0.0
    quant_composite_quality: float = 0.0
    quant_composite_sentiment: float = 0.0
    quant_composite_technical: float = 0.0
    quant_fundamental_div: float = 0.0
    quant_fundamental_pb: float = 0.0
    quant_fundamental_pcf: float = 0.0
    quant_fundamental_pe: float = 0.0
    quant_global_country: float = 0.0
    quant_global_sector: float = 0.0
    quant_grade: str = ""
    quant_quality_diversification: float = 0.0
    quant_quality_firm: float = 0.0
    quant_quality_liquidity: float = 0.0
    quant_sentiment_iv: float = 0.0
    quant_sentiment_pc: float = 0.0
    quant_sentiment_si: float = 0.0
    quant_technical_it: float = 0.0
    quant_technical_lt: float = 0.0
    quant_technical_st: float = 0.0
    quant_total_score: float = 0.0
    reward_score: float = 0.0
    risk_country: float = 0.0
    risk_deviation: float = 0.0
    risk_efficiency: float = 0.0
    risk_liquidity: float = 0.0
    risk_structure: float = 0.0
    risk_total_score: float = 0.0
    risk_volatility: float = 0.0


@dataclass
class ETFAnalyticsResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[ETFAnalytics] = field(default_factory=list)


@dataclass
class ETFAnalyticsParams:
    composite_ticker: str | None = query_field("composite_ticker")
    processed_date: str | None = query_field("processed_date")
    effective_date: str | None = query_field("effective_date")
    risk_total_score: float | None = query_field("risk_total_score")
    reward_score: float | None = query_field("reward_score")
    quant_total_score: float | None = query_field("quant_total_score")
    quant_grade: str | None = query_field("quant_grade")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


@dataclass
class ETFConstituent:
    """One holding of a fund, ranked by ``weight`` within it."""

    asset_class: str = ""
    composite_ticker: str = ""
    constituent_name: str = ""
    constituent_rank: int = 0
    constituent_ticker: str = ""
    country_of_exchange: str = ""
    currency_traded: str = ""
    effective_date: str = ""
    exchange: str = ""
    figi: str = ""
    isin: str = ""
    market_value: float = 0.0
    processed_date: str = ""
    security_type: str = ""
    sedol: str = ""
    shares_held: float = 0.0
    us_code: str = ""
    weight: float = 0.0


@dataclass
class ETFConstituentsResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[ETFConstituent] = field(default_factory=list)


@dataclass
class ETFConstituentsParams:
    """Filter by fund (``composite_ticker``) or find funds holding a security."""

    composite_ticker: str | None = query_field("composite_ticker")
    constituent_ticker: str | None = query_field("constituent_ticker")
    effective_date: str | None = query_field("effective_date")
    processed_date: str | None = query_field("processed_date")
    us_code: str | None = query_field("us_code")
    isin: str | None = query_field("isin")
    figi: str | None = query_field("figi")
    sedol: str | None = query_field("sedol")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


def get_etf_analytics(
    client: RESTClient, params: ETFAnalyticsParams | None = None
) -> ETFAnalyticsResponse:
    return client.fetch("/etf-global/v1/analytics", encode_params(params), ETFAnalyticsResponse)


def get_etf_constituents(
    client: RESTClient, params: ETFConstituentsParams | None = None
) -> ETFConstituentsResponse:
    path = "/etf-global/v1/constituents"
    return client.fetch(path, encode_params(params), ETFConstituentsResponse)
