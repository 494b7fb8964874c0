"""News endpoints: Massive reference news and the Benzinga partner feeds."""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class NewsInsight:
    """Per-ticker sentiment attached to an article."""

    ticker: str = ""
    sentiment: str = ""
    sentiment_reasoning: str = ""


@dataclass
class NewsPublisher:
    name: str = ""
    homepage_url: str = ""
    logo_url: str = ""
    favicon_url: str = ""


@dataclass
class NewsArticle:
    id: str = ""
    title: str = ""
    description: str = ""
    article_url: str = ""
    amp_url: str = ""
    author: str = ""
    published_utc: str = ""
    image_url: str = ""
    keywords: list[str] = field(default_factory=list)
    tickers: list[str] = field(default_factory=list)
    insights: list[NewsInsight] = field(default_factory=list)
    publisher: NewsPublisher = field(default_factory=NewsPublisher)


@dataclass
class NewsResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[NewsArticle] = field(default_factory=list)


@dataclass
class NewsParams:
    """Filters for /v2/reference/news. ``published_utc`` accepts dates or RFC 3339 times."""

    ticker: str | None = query_field("ticker")
    published_utc: str | None = query_field("published_utc")
    published_utc_gte: str | None = query_field("published_utc.gte")
    published_utc_lte: str | None = query_field("published_utc.lte")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_news(client: RESTClient, params: NewsParams | None = None) -> NewsResponse:
    """Get news articles, newest first unless ``order`` says otherwise."""
    return client.fetch("/v2/reference/news", encode_params(params), NewsResponse)


# ============================================
# Benzinga
# ============================================


@dataclass
class BenzingaNewsArticle:
    benzinga_id: int = 0
    title: str = ""
    body: str = ""
    teaser: str = ""
    author: str = ""
    published: str = ""
    last_updated: str = ""
    url: str = ""
    tickers: list[str] = field(default_factory=list)
    channels: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    stocks: list[str] = field(default_factory=list)
    insights: list[NewsInsight] = field(default_factory=list)


@dataclass
class BenzingaNewsResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[BenzingaNewsArticle] = field(default_factory=list)


@dataclass
class BenzingaNewsParams:
    tickers: str | None = query_field("tickers")
    tickers_any_of: str | None = query_field("tickers.any_of")
    published: str | None = query_field("published")
    published_gt: str | None = query_field("published.gt")
    published_gte: str | None = query_field("published.gte")
    published_lt: str | None = query_field("published.lt")
    published_lte: str | None = query_field("published.lte")
    channels: str | None = query_field("channels")
    tags: str | None = query_field("tags")
    author: str | None = query_field("author")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class BenzingaRating:
    """Analyst rating action with current and previous price targets."""

    benzinga_id: str = ""
    ticker: str = ""
    company_name: str = ""
    date: str = ""
    time: str = ""
    analyst: str = ""
    firm: str = ""
    rating: str = ""
    rating_action: str = ""
    previous_rating: str = ""
    price_target: float = 0.0
    price_target_action: str = ""
    previous_price_target: float = 0.0
    adjusted_price_target: float = 0.0
    previous_adjusted_price_target: float = 0.0
    price_percent_change: float = 0.0
    currency: str = ""
    importance: int = 0
    last_updated: str = ""
    notes: str = ""
    benzinga_analyst_id: str = ""
    benzinga_firm_id: str = ""
    benzinga_calendar_url: str = ""
    benzinga_news_url: str = ""


@dataclass
class BenzingaRatingsResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[BenzingaRating] = field(default_factory=list)


@dataclass
class BenzingaRatingsParams:
    ticker: str | None = query_field("ticker")
    ticker_any_of: str | None = query_field("ticker.any_of")
    date: str | None = query_field("date")
    date_gt: str | None = query_field("date.gt")
    date_gte: str | None = query_field("date.gte")
    date_lt: str | None = query_field("date.lt")
    date_lte: str | None = query_field("date.lte")
    importance: int | None = query_field("importance")
    rating_action: str | None = query_field("rating_action")
    price_target_action: str | None = query_field("price_target_action")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_benzinga_news(
    client: RESTClient, params: BenzingaNewsParams | None = None
) -> BenzingaNewsResponse:
    """Get Benzinga articles filtered by tickers, dates, channels, tags or author."""
    return client.fetch("/benzinga/v2/news", encode_params(params), BenzingaNewsResponse)


def get_benzinga_ratings(
    client: RESTClient, params: BenzingaRatingsParams | None = None
) -> BenzingaRatingsResponse:
    return client.fetch("/benzinga/v1/ratings", encode_params(params), BenzingaRatingsResponse)


@dataclass
class BenzingaEarnings:
    """Earnings announcement with actuals, consensus estimates and surprises.

    ``date_status`` is ``confirmed`` or ``projected``. Actual values stay zero
    until the company reports.
    """

    benzinga_id: str = ""
    ticker: str = ""
    company_name: str = ""
    date: str = ""
    time: str = ""
    date_status: str = ""
    actual_eps: float = 0.0
    estimated_eps: float = 0.0
    previous_eps: float = 0.0
    eps_surprise: float = 0.0
    eps_surprise_percent: float = 0.0
    actual_revenue: float = 0.0
    estimated_revenue: float = 0.0
    previous_revenue: float = 0.0
    revenue_surprise: float = 0.0
    revenue_surprise_percent: float = 0.0
    fiscal_period: str = ""
    fiscal_year: int = 0
    importance: int = 0
    currency: str = ""
    eps_method: str = ""
    revenue_method: str = ""
    last_updated: str = ""
    notes: str = ""


@dataclass
class BenzingaEarningsResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[BenzingaEarnings] = field(default_factory=list)


@dataclass
class BenzingaEarningsParams:
    ticker: str | None = query_field("ticker")
    ticker_any_of: str | None = query_field("ticker.any_of")
    date: str | None = query_field("date")
    date_gt: str | None = query_field("date.gt")
    date_gte: str | None = query_field("date.gte")
    date_lt: str | None = query_field("date.lt")
    date_lte: str | None = query_field("date.lte")
    date_status: str | None = query_field("date_status")
    fiscal_year: int | None = query_field("fiscal_year")
    fiscal_period: str | None = query_field("fiscal_period")
    importance: int | None = query_field("importance")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class BenzingaGuidance:
    """Company-issued EPS and revenue guidance with the previous range."""

    benzinga_id: str = ""
    ticker: str = ""
    company_name: str = ""
    date: str = ""
    time: str = ""
    positioning: str = ""
    eps_method: str = ""
    revenue_method: str = ""
    estimated_eps_guidance: float = 0.0
    estimated_revenue_guidance: float = 0.0
    min_eps_guidance: float = 0.0
    max_eps_guidance: float = 0.0
    min_revenue_guidance: float = 0.0
    max_revenue_guidance: float = 0.0
    previous_min_eps_guidance: float = 0.0
    previous_max_eps_guidance: float = 0.0
    previous_min_revenue_guidance: float = 0.0
    previous_max_revenue_guidance: float = 0.0
    fiscal_period: str = ""
    fiscal_year: int = 0
    importance: int = 0
    currency: str = ""
    release_type: str = ""
    last_updated: str = ""
    notes: str = ""


@dataclass
class BenzingaGuidanceResponse:
    status: str = ""
    count: int = 0
    request_id: str = ""
    next_url: str = ""
    results: list[BenzingaGuidance] = field(default_factory=list)


@dataclass
class BenzingaGuidanceParams:
    ticker: str | None = query_field("ticker")
    ticker_any_of: str | None = query_field("ticker.any_of")
    date: str | None = query_field("date")
    date_gt: str | None = query_field("date.gt")
    date_gte: str | None = query_field("date.gte")
    date_lt: str | None = query_field("date.lt")
    date_lte: str | None = query_field("date.lte")
    positioning: str | None = query_field("positioning")
    fiscal_year: int | None = query_field("fiscal_year")
    fiscal_period: str | None = query_field("fiscal_period")
    importance: int | None = query_field("importance")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class BenzingaAnalyst:
    """Analyst track record. ``smart_score`` ranks accuracy across ratings."""

    benzinga_id: str = ""
    benzinga_firm_id: str = ""
    full_name: str = ""
    firm_name: str = ""
    smart_score: float = 0.0
    overall_success_rate: float = 0.0
    overall_avg_return: float = 0.0
    overall_avg_return_percentile: float = 0.0
    total_ratings: float = 0.0
    total_ratings_percentile: float = 0.0
    last_updated: str = ""


@dataclass
class BenzingaAnalystsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[BenzingaAnalyst] = field(default_factory=list)


@dataclass
class BenzingaAnalystsParams:
    benzinga_id: str | None = query_field("benzinga_id")
    benzinga_firm_id: str | None = query_field("benzinga_firm_id")
    full_name: str | None = query_field("full_name")
    firm_name: str | None = query_field("firm_name")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_benzinga_earnings(
    client: RESTClient, params: BenzingaEarningsParams | None = None
) -> BenzingaEarningsResponse:
    """Get earnings dates, reported results and consensus estimates."""
    return client.fetch("/benzinga/v1/earnings", encode_params(params), BenzingaEarningsResponse)


def get_benzinga_guidance(
    client: RESTClient, params: BenzingaGuidanceParams | None = None
) -> BenzingaGuidanceResponse:
    return client.fetch("/benzinga/v1/guidance", encode_params(params), BenzingaGuidanceResponse)


def get_benzinga_analysts(
    client: RESTClient, params: BenzingaAnalystsParams | None = None
) -> BenzingaAnalystsResponse:
    """Look up analysts by name, firm or Benzinga identifier."""
    return client.fetch("/benzinga/v1/analysts", encode_params(params), BenzingaAnalystsResponse)
