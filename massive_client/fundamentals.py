"""Stock fundamentals endpoints.

FINRA short interest and short volume, free float, and the financial
statements and ratios the provider derives from SEC filings.

Statement line items are ``float`` because filers report fractional and very
large values alike. Share counts reported by FINRA are integers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field

# ============================================
# Short interest and short volume
# ============================================


@dataclass
class ShortInterest:
    """Bi-monthly short position for a ticker as of a settlement date."""

    ticker: str = ""
    settlement_date: str = ""
    short_interest: int = 0
    avg_daily_volume: int = 0
    days_to_cover: float = 0.0


@dataclass
class ShortInterestResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[ShortInterest] = field(default_factory=list)


@dataclass
class ShortInterestParams:
    ticker: str | None = query_field("ticker")
    settlement_date: str | None = query_field("settlement_date")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


@dataclass
class ShortVolume:
    """Daily off-exchange short sale volume, broken down by reporting venue."""

    ticker: str = ""
    date: str = ""
    total_volume: int = 0
    short_volume: int = 0
    exempt_volume: int = 0
    non_exempt_volume: int = 0
    short_volume_ratio: float = 0.0
    nyse_short_volume: int = 0
    nyse_short_volume_exempt: int = 0
    nasdaq_carteret_short_volume: int = 0
    nasdaq_carteret_short_volume_exempt: int = 0
    nasdaq_chicago_short_volume: int = 0
    nasdaq_chicago_short_volume_exempt: int = 0
    adf_short_volume: int = 0
    adf_short_volume_exempt: int = 0


@dataclass
class ShortVolumeResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[ShortVolume] = field(default_factory=list)


@dataclass
class ShortVolumeParams:
    ticker: str | None = query_field("ticker")
    date: str | None = query_field("date")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_short_interest(
    client: RESTClient, params: ShortInterestParams | None = None
) -> ShortInterestResponse:
    """Get short interest reported to FINRA, with estimated days to cover."""
    return client.fetch("/stocks/v1/short-interest", encode_params(params), ShortInterestResponse)


def get_short_volume(
    client: RESTClient, params: ShortVolumeParams | None = None
) -> ShortVolumeResponse:
    """Get daily short sale volume from off-exchange venues and ATSs."""
    return client.fetch("/stocks/v1/short-volume", encode_params(params), ShortVolumeResponse)


# ============================================
# Float
# ============================================


@dataclass
class Float:
    """Shares available for public trading after strategic and insider holdings."""

    ticker: str = ""
    effective_date: str = ""
    free_float: int = 0
    free_float_percent: float = 0.0


@dataclass
class FloatResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[Float] = field(default_factory=list)


@dataclass
class FloatParams:
    ticker: str | None = query_field("ticker")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_float(client: RESTClient, params: FloatParams | None = None) -> FloatResponse:
    return client.fetch("/stocks/vX/float", encode_params(params), FloatResponse)


# ============================================
# Financial statements
# ============================================


@dataclass
class BalanceSheet:
    cik: str = ""
    tickers: list[str] = field(default_factory=list)
    period_end: str = ""
    filing_date: str = ""
    fiscal_year: int = 0
    fiscal_quarter: int = 0
    timeframe: str = ""
    total_assets: float = 0.0
    total_current_assets: float = 0.0
    total_liabilities: float = 0.0
    total_current_liabilities: float = 0.0
    total_equity: float = 0.0
    total_equity_attributable_to_parent: float = 0.0
    total_liabilities_and_equity: float = 0.0
    cash_and_equivalents: float = 0.0
    short_term_investments: float = 0.0
    receivables: float = 0.0
    inventories: float = 0.0
    other_current_assets: float = 0.0
    property_plant_equipment_net: float = 0.0
    goodwill: float = 0.0
    intangible_assets_net: float = 0.0
    other_assets: float = 0.0
    accounts_payable: float = 0.0
    accrued_and_other_current_liabilities: float = 0.0
    deferred_revenue_current: float = 0.0
    debt_current: float = 0.0
    long_term_debt_and_capital_lease_obligations: float = 0.0
    deferred_revenue_noncurrent: float = 0.0
    other_noncurrent_liabilities: float = 0.0
    commitments_and_contingencies: float = 0.0
    common_stock: float = 0.0
    preferred_stock: float = 0.0
    additional_paid_in_capital: float = 0.0
    retained_earnings_deficit: float = 0.0
    accumulated_other_comprehensive_income: float = 0.0
    other_equity: float = 0.0
    treasury_stock: float = 0.0
    noncontrolling_interest: float = 0.0


@dataclass
class BalanceSheetsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[BalanceSheet] = field(default_factory=list)


@dataclass
class IncomeStatement:
    cik: str = ""
    tickers: list[str] = field(default_factory=list)
    period_end: str = ""
    filing_date: str = ""
    fiscal_year: int = 0
    fiscal_quarter: int = 0
    timeframe: str = ""
    revenue: float = 0.0
    cost_of_revenue: float = 0.0
    gross_profit: float = 0.0
    total_operating_expenses: float = 0.0
    operating_income: float = 0.0
    interest_income: float = 0.0
    interest_expense: float = 0.0
    other_income_expense: float = 0.0
    income_before_income_taxes: float = 0.0
    income_taxes: float = 0.0
    consolidated_net_income_loss: float = 0.0
    net_income_loss_attributable_common_shareholders: float = 0.0
    basic_earnings_per_share: float = 0.0
    diluted_earnings_per_share: float = 0.0
    basic_shares_outstanding: float = 0.0
    diluted_shares_outstanding: float = 0.0
    ebitda: float = 0.0
    depreciation_depletion_amortization: float = 0.0
    research_development: float = 0.0
    selling_general_administrative: float = 0.0
    other_operating_expenses: float = 0.0
    discontinued_operations: float = 0.0
    extraordinary_items: float = 0.0
    equity_in_affiliates: float = 0.0
    noncontrolling_interest: float = 0.0
    preferred_stock_dividends_declared: float = 0.0
    total_other_income_expense: float = 0.0


@dataclass
class IncomeStatementsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[IncomeStatement] = field(default_factory=list)


@dataclass
class CashFlowStatement:
    cik: str = ""
    tickers: list[str] = field(default_factory=list)
    period_end: str = ""
    filing_date: str = ""
    fiscal_year: int = 0
    fiscal_quarter: int = 0
    timeframe: str = ""
    net_cash_from_operating_activities: float = 0.0
    cash_from_operating_activities_continuing_operations: float = 0.0
    net_cash_from_operating_activities_discontinued_operations: float = 0.0
    net_cash_from_investing_activities: float = 0.0
    net_cash_from_investing_activities_continuing_operations: float = 0.0
    net_cash_from_investing_activities_discontinued_operations: float = 0.0
    net_cash_from_financing_activities: float = 0.0
    net_cash_from_financing_activities_continuing_operations: float = 0.0
    net_cash_from_financing_activities_discontinued_operations: float = 0.0
    change_in_cash_and_equivalents: float = 0.0
    net_income: float = 0.0
    depreciation_depletion_and_amortization: float = 0.0
    change_in_other_operating_assets_and_liabilities_net: float = 0.0
    other_operating_activities: float = 0.0
    purchase_of_property_plant_and_equipment: float = 0.0
    sale_of_property_plant_and_equipment: float = 0.0
    other_investing_activities: float = 0.0
    short_term_debt_issuances_repayments: float = 0.0
    long_term_debt_issuances_repayments: float = 0.0
    dividends: float = 0.0
    other_financing_activities: float = 0.0
    effect_of_currency_exchange_rate: float = 0.0
    income_loss_from_discontinued_operations: float = 0.0
    noncontrolling_interests: float = 0.0
    other_cash_adjustments: float = 0.0


@dataclass
class CashFlowStatementsResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: list[CashFlowStatement] = field(default_factory=list)


@dataclass
class StatementParams:
    """Filters shared by balance sheets, income and cash flow statements.

    ``tickers`` matches any filing that lists the ticker. ``timeframe`` is
    ``quarterly``, ``annual`` or ``trailing_twelve_months``.
    """

    tickers: str | None = query_field("tickers")
    cik: str | None = query_field("cik")
    timeframe: str | None = query_field("timeframe")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_balance_sheets(
    client: RESTClient, params: StatementParams | None = None
) -> BalanceSheetsResponse:
    """Get assets, liabilities and equity for each reported period."""
    path = "/stocks/financials/v1/balance-sheets"
    return client.fetch(path, encode_params(params), BalanceSheetsResponse)


def get_income_statements(
    client: RESTClient, params: StatementParams | None = None
) -> IncomeStatementsResponse:
    path = "/stocks/financials/v1/income-statements"
    return client.fetch(path, encode_params(params), IncomeStatementsResponse)


def get_cash_flow_statements(
    client: RESTClient, params: StatementParams | None = None
) -> CashFlowStatementsResponse:
    """Get operating, investing and financing cash flows for each reported period."""
    path = "/stocks/financials/v1/cash-flow-statements"
    return client.fetch(path, encode_params(params), CashFlowStatementsResponse)


# ============================================
# Ratios
# ============================================


@dataclass
class Ratio:
    """Valuation, profitability, liquidity and leverage metrics as of ``date``.

    ``current``, ``quick`` and ``cash`` are the liquidity ratios of those names.
    """

    ticker: str = ""
    cik: str = ""
    date: str = ""
    price: float = 0.0
    market_cap: float = 0.0
    earnings_per_share: float = 0.0
    price_to_earnings: float = 0.0
    price_to_book: float = 0.0
    price_to_sales: float = 0.0
    price_to_cash_flow: float = 0.0
    price_to_free_cash_flow: float = 0.0
    dividend_yield: float = 0.0
    return_on_assets: float = 0.0
    return_on_equity: float = 0.0
    debt_to_equity: float = 0.0
    current: float = 0.0
    quick: float = 0.0
    cash: float = 0.0
    ev_to_sales: float = 0.0
    ev_to_ebitda: float = 0.0
    enterprise_value: float = 0.0
    free_cash_flow: float = 0.0
    average_volume: float = 0.0


@dataclass
class RatiosResponse:
    status: str = ""
    request_id: str = ""
    count: int = 0
    next_url: str = ""
    results: list[Ratio] = field(default_factory=list)


@dataclass
class RatiosParams:
    ticker: str | None = query_field("ticker")
    limit: int | None = query_field("limit")
    sort: str | None = query_field("sort")


def get_ratios(client: RESTClient, params: RatiosParams | None = None) -> RatiosResponse:
    return client.fetch("/stocks/financials/v1/ratios", encode_params(params), RatiosResponse)
