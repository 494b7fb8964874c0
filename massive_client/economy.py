"""Federal Reserve economic data: inflation, labor market and treasury yields.

All three series are dated observations filtered by the same ``date`` range
parameters. Rates and yields are percentages.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class EconomyParams:
    date: str | None = query_field("date")
    date_gt: str | None = query_field("date.gt")
    date_gte: str | None = query_field("date.gte")
    date_lt: str | None = query_field("date.lt")
    date_lte: str | None = query_field("date.lte")
    sort: str | None = query_field("sort")
    limit: int | None = query_field("limit")


@dataclass
class Inflation:
    """CPI and PCE price indices, headline and core."""

    date: str = ""
    cpi: float = 0.0
    cpi_core: float = 0.0
    pce: float = 0.0
    pce_core: float = 0.0
    pce_spending: float = 0.0


@dataclass
class InflationResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Inflation] = field(default_factory=list)


@dataclass
class LaborMarket:
    date: str = ""
    unemployment_rate: float = 0.0
    labor_force_participation_rate: float = 0.0
    avg_hourly_earnings: float = 0.0
    job_openings: float = 0.0


@dataclass
class LaborMarketResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[LaborMarket] = field(default_factory=list)


@dataclass
class TreasuryYield:
    """Constant-maturity treasury yields across the curve on ``date``."""

    date: str = ""
    yield_1_month: float = 0.0
    yield_3_month: float = 0.0
    yield_6_month: float = 0.0
    yield_1_year: float = 0.0
    yield_2_year: float = 0.0
    yield_3_year: float = 0.0
    yield_5_year: float = 0.0
    yield_7_year: float = 0.0
    yield_10_year: float = 0.0
    yield_20_year: float = 0.0
    yield_30_year: float = 0.0


@dataclass
class TreasuryYieldsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[TreasuryYield] = field(default_factory=list)


def get_inflation(client: RESTClient, params: EconomyParams | None = None) -> InflationResponse:
    return client.fetch("/fed/v1/inflation", encode_params(params), InflationResponse)


def get_labor_market(
    client: RESTClient, params: EconomyParams | None = None
) -> LaborMarketResponse:
    """Get unemployment, participation, hourly earnings and job openings."""
    return client.fetch("/fed/v1/labor-market", encode_params(params), LaborMarketResponse)


def get_treasury_yields(
    client: RESTClient, params: EconomyParams | None = None
) -> TreasuryYieldsResponse:
    return client.fetch("/fed/v1/treasury-yields", encode_params(params), TreasuryYieldsResponse)
