"""Command-line interface for the Massive REST API.

Every subcommand performs one request and prints the decoded result as
indented JSON on stdout. Errors are printed to stderr with exit status 1.

Example:
    massive config init --api-key YOUR_KEY
    massive stocks open-close AAPL 2025-01-06
    massive indicators rsi AAPL --timespan day --window 14 --limit 5
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any

from . import (
    __version__,
    config,
    crypto,
    economy,
    etf_global,
    filings,
    forex,
    fundamentals,
    futures,
    indicators,
    indices,
    market,
    news,
    options,
    stocks,
    tmx,
)
from .client import RESTClient
from .errors import ConfigError, MassiveError

logger = logging.getLogger(__name__)


def json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for dataclasses and date types."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def emit(data: Any) -> None:
    """Print a result to stdout as indented JSON."""
    print(json.dumps(data, default=json_serializer, indent=2), flush=True)


def mask_key(key: str) -> str:
    if not key:
        return "(not set)"
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]


# ============================================
# config
# ============================================


def cmd_config_init(args: argparse.Namespace) -> None:
    cfg = config.load()
    api_key = args.api_key or getpass.getpass("Massive API key: ").strip()
    if not api_key:
        raise ConfigError("API key must not be empty")
    cfg.api_key = api_key
    if args.base_url:
        cfg.base_url = args.base_url
    path = config.save(cfg)
    emit({"saved": str(path), "api_key": mask_key(cfg.api_key), "base_url": cfg.base_url})


def cmd_config_show(args: argparse.Namespace) -> None:
    cfg = config.load()
    emit(
        {
            "path": str(config.config_path()),
            "api_key": mask_key(cfg.api_key),
            "base_url": cfg.base_url,
        }
    )


# ============================================
# stocks
# ============================================


def _bars_params(args: argparse.Namespace) -> stocks.BarsParams:
    return stocks.BarsParams(
        multiplier=args.multiplier,
        timespan=args.timespan,
        from_date=args.from_date,
        to_date=args.to_date,
        adjusted=args.adjusted,
        sort=args.sort,
        limit=args.limit,
    )


def cmd_stocks_open_close(client: RESTClient, args: argparse.Namespace) -> Any:
    return stocks.get_open_close(client, args.ticker, args.date, adjusted=args.adjusted)


def cmd_stocks_bars(client: RESTClient, args: argparse.Namespace) -> Any:
    return stocks.get_bars(client, args.ticker, _bars_params(args))


def cmd_stocks_tickers(client: RESTClient, args: argparse.Namespace) -> Any:
    params = stocks.TickersParams(
        ticker=args.ticker,
        type=args.type,
        market=args.market,
        exchange=args.exchange,
        search=args.search,
        active=args.active,
        sort=args.sort,
        order=args.order,
        limit=args.limit,
    )
    return stocks.get_tickers(client, params)


def cmd_stocks_trades(client: RESTClient, args: argparse.Namespace) -> Any:
    params = stocks.TickParams(
        timestamp=args.timestamp,
        timestamp_gte=args.timestamp_gte,
        timestamp_lte=args.timestamp_lte,
        order=args.order,
        limit=args.limit,
        sort=args.sort,
    )
    return stocks.get_trades(client, args.ticker, params)


def cmd_stocks_snapshot(client: RESTClient, args: argparse.Namespace) -> Any:
    if args.ticker:
        return stocks.get_snapshot_ticker(client, args.ticker)
    params = stocks.AllTickersSnapshotParams(tickers=args.tickers, include_otc=args.include_otc)
    return stocks.get_snapshot_all_tickers(client, params)


def cmd_stocks_dividends(client: RESTClient, args: argparse.Namespace) -> Any:
    params = stocks.DividendsParams(
        ticker=args.ticker,
        ex_dividend_date_gte=args.date_gte,
        ex_dividend_date_lte=args.date_lte,
        sort=args.sort,
        limit=args.limit,
    )
    return stocks.get_dividends(client, params)


def cmd_stocks_splits(client: RESTClient, args: argparse.Namespace) -> Any:
    params = stocks.SplitsParams(
        ticker=args.ticker,
        execution_date_gte=args.date_gte,
        execution_date_lte=args.date_lte,
        sort=args.sort,
        limit=args.limit,
    )
    return stocks.get_splits(client, params)


# ============================================
# fundamentals
# ============================================


def cmd_fundamentals_short_interest(client: RESTClient, args: argparse.Namespace) -> Any:
    params = fundamentals.ShortInterestParams(ticker=args.ticker, limit=args.limit, sort=args.sort)
    return fundamentals.get_short_interest(client, params)


def cmd_fundamentals_short_volume(client: RESTClient, args: argparse.Namespace) -> Any:
    params = fundamentals.ShortVolumeParams(
        ticker=args.ticker, date=args.date, limit=args.limit, sort=args.sort
    )
    return fundamentals.get_short_volume(client, params)


def cmd_fundamentals_float(client: RESTClient, args: argparse.Namespace) -> Any:
    params = fundamentals.FloatParams(ticker=args.ticker, limit=args.limit, sort=args.sort)
    return fundamentals.get_float(client, params)


def cmd_fundamentals_statement(client: RESTClient, args: argparse.Namespace) -> Any:
    params = fundamentals.StatementParams(
        tickers=args.ticker,
        cik=args.cik,
        timeframe=args.timeframe,
        limit=args.limit,
        sort=args.sort,
    )
    fetchers = {
        "balance-sheets": fundamentals.get_balance_sheets,
        "income-statements": fundamentals.get_income_statements,
        "cash-flow-statements": fundamentals.get_cash_flow_statements,
    }
    return fetchers[args.command](client, params)


def cmd_fundamentals_ratios(client: RESTClient, args: argparse.Namespace) -> Any:
    params = fundamentals.RatiosParams(ticker=args.ticker, limit=args.limit, sort=args.sort)
    return fundamentals.get_ratios(client, params)


# ============================================
# options
# ============================================


def cmd_options_contracts(client: RESTClient, args: argparse.Namespace) -> Any:
    params = options.OptionsContractsParams(
        underlying_ticker=args.underlying,
        contract_type=args.contract_type,
        expiration_date=args.expiration_date,
        expired=args.expired,
        order=args.order,
        limit=args.limit,
        sort=args.sort,
    )
    return options.get_options_contracts(client, params)


def cmd_options_chain(client: RESTClient, args: argparse.Namespace) -> Any:
    params = options.OptionsChainSnapshotParams(
        contract_type=args.contract_type,
        expiration_date=args.expiration_date,
        strike_price_gte=args.strike_gte,
        strike_price_lte=args.strike_lte,
        order=args.order,
        limit=args.limit,
        sort=args.sort,
    )
    return options.get_options_chain_snapshot(client, args.underlying, params)


# ============================================
# forex
# ============================================


def cmd_forex_convert(client: RESTClient, args: argparse.Namespace) -> Any:
    params = forex.ForexConversionParams(amount=args.amount, precision=args.precision)
    return forex.get_forex_conversion(client, args.from_currency, args.to_currency, params)


def cmd_forex_bars(client: RESTClient, args: argparse.Namespace) -> Any:
    return forex.get_forex_bars(client, args.ticker, _bars_params(args))


# ============================================
# news
# ============================================


def cmd_news_list(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.NewsParams(
        ticker=args.ticker,
        published_utc_gte=args.published_gte,
        published_utc_lte=args.published_lte,
        order=args.order,
        limit=args.limit,
        sort=args.sort,
    )
    return news.get_news(client, params)


def cmd_news_benzinga(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.BenzingaNewsParams(
        tickers=args.tickers,
        published_gte=args.published_gte,
        published_lte=args.published_lte,
        channels=args.channels,
        author=args.author,
        limit=args.limit,
        sort=args.sort,
    )
    return news.get_benzinga_news(client, params)


def cmd_news_earnings(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.BenzingaEarningsParams(
        ticker=args.ticker,
        date_gte=args.date_gte,
        date_lte=args.date_lte,
        importance=args.importance,
        limit=args.limit,
        sort=args.sort,
    )
    return news.get_benzinga_earnings(client, params)


def cmd_news_guidance(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.BenzingaGuidanceParams(
        ticker=args.ticker,
        date_gte=args.date_gte,
        date_lte=args.date_lte,
        importance=args.importance,
        limit=args.limit,
        sort=args.sort,
    )
    return news.get_benzinga_guidance(client, params)


def cmd_news_ratings(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.BenzingaRatingsParams(
        ticker=args.ticker,
        date_gte=args.date_gte,
        date_lte=args.date_lte,
        importance=args.importance,
        limit=args.limit,
        sort=args.sort,
    )
    return news.get_benzinga_ratings(client, params)


def cmd_news_analysts(client: RESTClient, args: argparse.Namespace) -> Any:
    params = news.BenzingaAnalystsParams(
        full_name=args.name, firm_name=args.firm, limit=args.limit, sort=args.sort
    )
    return news.get_benzinga_analysts(client, params)


# ============================================
# filings
# ============================================


def cmd_filings_sections(client: RESTClient, args: argparse.Namespace) -> Any:
    params = filings.FilingSectionsParams(
        ticker=args.ticker,
        cik=args.cik,
        section=args.section,
        limit=args.limit,
        sort=args.sort,
    )
    return filings.get_filing_sections(client, params)


def cmd_filings_risk_factors(client: RESTClient, args: argparse.Namespace) -> Any:
    params = filings.RiskFactorsParams(
        ticker=args.ticker,
        cik=args.cik,
        limit=args.limit,
        sort=args.sort,
    )
    return filings.get_risk_factors(client, params)


# ============================================
# indicators
# ============================================


def cmd_indicator(client: RESTClient, args: argparse.Namespace) -> Any:
    params = indicators.IndicatorParams(
        timestamp_gte=args.timestamp_gte,
        timestamp_lte=args.timestamp_lte,
        timespan=args.timespan,
        adjusted=args.adjusted,
        window=args.window,
        series_type=args.series_type,
        order=args.order,
        limit=args.limit,
    )
    fetchers = {
        "sma": indicators.get_sma,
        "ema": indicators.get_ema,
        "rsi": indicators.get_rsi,
    }
    return fetchers[args.indicator](client, args.ticker, params)


def cmd_indicator_macd(client: RESTClient, args: argparse.Namespace) -> Any:
    params = indicators.MACDParams(
        timestamp_gte=args.timestamp_gte,
        timestamp_lte=args.timestamp_lte,
        timespan=args.timespan,
        adjusted=args.adjusted,
        short_window=args.short_window,
        long_window=args.long_window,
        signal_window=args.signal_window,
        series_type=args.series_type,
        order=args.order,
        limit=args.limit,
    )
    return indicators.get_macd(client, args.ticker, params)


# ============================================
# crypto
# ============================================


def cmd_crypto_bars(client: RESTClient, args: argparse.Namespace) -> Any:
    return crypto.get_crypto_bars(client, args.ticker, _bars_params(args))


def cmd_crypto_open_close(client: RESTClient, args: argparse.Namespace) -> Any:
    return crypto.get_crypto_open_close(
        client, args.from_currency, args.to_currency, args.date, adjusted=args.adjusted
    )


def cmd_crypto_snapshot(client: RESTClient, args: argparse.Namespace) -> Any:
    if args.ticker:
        return crypto.get_crypto_snapshot_ticker(client, args.ticker)
    return crypto.get_crypto_snapshot_all(client, args.tickers)


def cmd_crypto_last_trade(client: RESTClient, args: argparse.Namespace) -> Any:
    return crypto.get_crypto_last_trade(client, args.from_currency, args.to_currency)


# ============================================
# indices
# ============================================


def cmd_indices_bars(client: RESTClient, args: argparse.Namespace) -> Any:
    return indices.get_index_bars(client, args.ticker, _bars_params(args))


def cmd_indices_snapshot(client: RESTClient, args: argparse.Namespace) -> Any:
    params = market.UnifiedSnapshotParams(ticker_any_of=args.tickers, limit=args.limit)
    return indices.get_indices_snapshot(client, params)


def cmd_indices_tickers(client: RESTClient, args: argparse.Namespace) -> Any:
    params = indices.IndexTickersParams(
        search=args.search, active=args.active, sort=args.sort, order=args.order, limit=args.limit
    )
    return indices.get_index_tickers(client, params)


# ============================================
# futures
# ============================================


def cmd_futures_bars(client: RESTClient, args: argparse.Namespace) -> Any:
    params = futures.FuturesBarsParams(
        resolution=args.resolution,
        window_start_gte=args.window_start_gte,
        window_start_lte=args.window_start_lte,
        limit=args.limit,
        sort=args.sort,
    )
    return futures.get_futures_bars(client, args.ticker, params)


def cmd_futures_contracts(client: RESTClient, args: argparse.Namespace) -> Any:
    params = futures.FuturesContractsParams(
        product_code=args.product_code, active=args.active, limit=args.limit, sort=args.sort
    )
    return futures.get_futures_contracts(client, params)


def cmd_futures_snapshot(client: RESTClient, args: argparse.Namespace) -> Any:
    params = futures.FuturesSnapshotParams(
        product_code=args.product_code, ticker=args.ticker, limit=args.limit, sort=args.sort
    )
    return futures.get_futures_snapshot(client, params)


# ============================================
# economy
# ============================================


def cmd_economy(client: RESTClient, args: argparse.Namespace) -> Any:
    params = economy.EconomyParams(
        date_gte=args.date_gte, date_lte=args.date_lte, sort=args.sort, limit=args.limit
    )
    fetchers = {
        "inflation": economy.get_inflation,
        "labor-market": economy.get_labor_market,
        "treasury-yields": economy.get_treasury_yields,
    }
    return fetchers[args.command](client, params)


# ============================================
# etf / tmx
# ============================================


def cmd_etf_analytics(client: RESTClient, args: argparse.Namespace) -> Any:
    params = etf_global.ETFAnalyticsParams(
        composite_ticker=args.ticker, effective_date=args.date, limit=args.limit, sort=args.sort
    )
    return etf_global.get_etf_analytics(client, params)


def cmd_etf_constituents(client: RESTClient, args: argparse.Namespace) -> Any:
    params = etf_global.ETFConstituentsParams(
        composite_ticker=args.ticker, effective_date=args.date, limit=args.limit, sort=args.sort
    )
    return etf_global.get_etf_constituents(client, params)


def cmd_tmx_events(client: RESTClient, args: argparse.Namespace) -> Any:
    params = tmx.CorporateEventsParams(
        ticker=args.ticker,
        type=args.type,
        date_gte=args.date_gte,
        date_lte=args.date_lte,
        limit=args.limit,
        sort=args.sort,
    )
    return tmx.get_corporate_events(client, params)


# ============================================
# market
# ============================================


def cmd_market_status(client: RESTClient, args: argparse.Namespace) -> Any:
    return market.get_market_status(client)


def cmd_market_holidays(client: RESTClient, args: argparse.Namespace) -> Any:
    return market.get_market_holidays(client)


def cmd_market_exchanges(client: RESTClient, args: argparse.Namespace) -> Any:
    params = market.ExchangesParams(asset_class=args.asset_class, locale=args.locale)
    return market.get_exchanges(client, params)


def cmd_market_snapshot(client: RESTClient, args: argparse.Namespace) -> Any:
    params = market.UnifiedSnapshotParams(ticker_any_of=args.tickers, limit=args.limit)
    return market.get_unified_snapshot(client, params)


# ============================================
# Parser
# ============================================


def _add_listing_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, help="Maximum number of results")
    parser.add_argument("--sort", help="Field to sort by")
    parser.add_argument("--order", choices=["asc", "desc"], help="Sort order")


def _add_adjusted(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--adjusted",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Adjust for splits (provider default: true)",
    )


def _add_bars_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("ticker")
    parser.add_argument("--multiplier", type=int, default=1, help="Timespan multiplier")
    parser.add_argument("--timespan", default="day", help="minute, hour, day, week, month, ...")
    parser.add_argument("--from", dest="from_date", required=True, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="to_date", required=True, help="End date (YYYY-MM-DD)")
    parser.add_argument("--sort", choices=["asc", "desc"], help="Sort by timestamp")
    parser.add_argument("--limit", type=int, help="Maximum number of base aggregates")
    _add_adjusted(parser)


def _add_indicator_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("ticker", help="Ticker, e.g. AAPL, O:..., C:EURUSD, I:SPX, X:BTCUSD")
    parser.add_argument("--timespan", help="Aggregate window size, e.g. day")
    parser.add_argument("--timestamp-gte", help="Only values at or after this date")
    parser.add_argument("--timestamp-lte", help="Only values at or before this date")
    parser.add_argument("--series-type", choices=["close", "open", "high", "low"])
    parser.add_argument("--order", choices=["asc", "desc"])
    parser.add_argument("--limit", type=int)
    _add_adjusted(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the ``massive`` argument parser."""
    parser = argparse.ArgumentParser(prog="massive", description="Query the Massive market data API")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    groups = parser.add_subparsers(dest="group", required=True)

    # config
    cfg = groups.add_parser("config", help="Manage stored configuration")
    cfg_cmds = cfg.add_subparsers(dest="command", required=True)
    p = cfg_cmds.add_parser("init", help="Store the API key")
    p.add_argument("--api-key", help="API key (prompted for when omitted)")
    p.add_argument("--base-url", help="Override the API base URL")
    p.set_defaults(handler=cmd_config_init, needs_client=False)
    p = cfg_cmds.add_parser("show", help="Show the stored configuration")
    p.set_defaults(handler=cmd_config_show, needs_client=False)

    # stocks
    grp = groups.add_parser("stocks", help="Stock market data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("open-close", help="Daily open/close for a ticker")
    p.add_argument("ticker")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_adjusted(p)
    p.set_defaults(handler=cmd_stocks_open_close)

    p = cmds.add_parser("bars", help="Custom aggregate bars")
    _add_bars_options(p)
    p.set_defaults(handler=cmd_stocks_bars)

    p = cmds.add_parser("tickers", help="Search reference tickers")
    p.add_argument("--ticker")
    p.add_argument("--type")
    p.add_argument("--market")
    p.add_argument("--exchange")
    p.add_argument("--search")
    p.add_argument("--active", action=argparse.BooleanOptionalAction, default=None)
    _add_listing_options(p)
    p.set_defaults(handler=cmd_stocks_tickers)

    p = cmds.add_parser("trades", help="Tick-level trades")
    p.add_argument("ticker")
    p.add_argument("--timestamp", help="Date or nanosecond timestamp")
    p.add_argument("--timestamp-gte")
    p.add_argument("--timestamp-lte")
    _add_listing_options(p)
    p.set_defaults(handler=cmd_stocks_trades)

    p = cmds.add_parser("snapshot", help="Snapshot one ticker, or the whole market")
    p.add_argument("ticker", nargs="?")
    p.add_argument("--tickers", help="Comma-separated tickers for the market snapshot")
    p.add_argument("--include-otc", action=argparse.BooleanOptionalAction, default=None)
    p.set_defaults(handler=cmd_stocks_snapshot)

    p = cmds.add_parser("dividends", help="Dividend history")
    p.add_argument("--ticker")
    p.add_argument("--date-gte", help="Ex-dividend date on or after")
    p.add_argument("--date-lte", help="Ex-dividend date on or before")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_stocks_dividends)

    p = cmds.add_parser("splits", help="Split history")
    p.add_argument("--ticker")
    p.add_argument("--date-gte", help="Execution date on or after")
    p.add_argument("--date-lte", help="Execution date on or before")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_stocks_splits)

    # fundamentals
    grp = groups.add_parser("fundamentals", help="Short interest, float and financial statements")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("short-interest", help="Bi-monthly FINRA short interest")
    p.add_argument("--ticker")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_fundamentals_short_interest)

    p = cmds.add_parser("short-volume", help="Daily off-exchange short volume")
    p.add_argument("--ticker")
    p.add_argument("--date", help="YYYY-MM-DD")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_fundamentals_short_volume)

    p = cmds.add_parser("float", help="Free float")
    p.add_argument("--ticker")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_fundamentals_float)

    for name in ("balance-sheets", "income-statements", "cash-flow-statements"):
        p = cmds.add_parser(name, help=name.replace("-", " ").capitalize())
        p.add_argument("--ticker")
        p.add_argument("--cik")
        p.add_argument("--timeframe", choices=["quarterly", "annual", "trailing_twelve_months"])
        p.add_argument("--limit", type=int)
        p.add_argument("--sort")
        p.set_defaults(handler=cmd_fundamentals_statement)

    p = cmds.add_parser("ratios", help="Valuation and profitability ratios")
    p.add_argument("--ticker")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_fundamentals_ratios)

    # options
    grp = groups.add_parser("options", help="Options data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("contracts", help="List options contracts")
    p.add_argument("--underlying", help="Underlying ticker")
    p.add_argument("--contract-type", choices=["call", "put"])
    p.add_argument("--expiration-date")
    p.add_argument("--expired", action=argparse.BooleanOptionalAction, default=None)
    _add_listing_options(p)
    p.set_defaults(handler=cmd_options_contracts)

    p = cmds.add_parser("chain", help="Snapshot the options chain of an underlying")
    p.add_argument("underlying")
    p.add_argument("--contract-type", choices=["call", "put"])
    p.add_argument("--expiration-date")
    p.add_argument("--strike-gte", type=float)
    p.add_argument("--strike-lte", type=float)
    _add_listing_options(p)
    p.set_defaults(handler=cmd_options_chain)

    # forex
    grp = groups.add_parser("forex", help="Foreign exchange data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("convert", help="Convert between currencies")
    p.add_argument("from_currency", metavar="FROM")
    p.add_argument("to_currency", metavar="TO")
    p.add_argument("--amount", type=float)
    p.add_argument("--precision", type=int)
    p.set_defaults(handler=cmd_forex_convert)

    p = cmds.add_parser("bars", help="Custom aggregate bars for a pair, e.g. C:EURUSD")
    _add_bars_options(p)
    p.set_defaults(handler=cmd_forex_bars)

    # news
    grp = groups.add_parser("news", help="News articles")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("list", help="Reference news")
    p.add_argument("--ticker")
    p.add_argument("--published-gte")
    p.add_argument("--published-lte")
    _add_listing_options(p)
    p.set_defaults(handler=cmd_news_list)

    p = cmds.add_parser("benzinga", help="Benzinga news")
    p.add_argument("--tickers")
    p.add_argument("--published-gte")
    p.add_argument("--published-lte")
    p.add_argument("--channels")
    p.add_argument("--author")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_news_benzinga)

    for name, handler, text in (
        ("earnings", cmd_news_earnings, "Benzinga earnings calendar"),
        ("guidance", cmd_news_guidance, "Benzinga company guidance"),
        ("ratings", cmd_news_ratings, "Benzinga analyst ratings"),
    ):
        p = cmds.add_parser(name, help=text)
        p.add_argument("--ticker")
        p.add_argument("--date-gte")
        p.add_argument("--date-lte")
        p.add_argument("--importance", type=int, help="Minimum importance, 0 to 5")
        p.add_argument("--limit", type=int)
        p.add_argument("--sort")
        p.set_defaults(handler=handler)

    p = cmds.add_parser("analysts", help="Benzinga analyst track records")
    p.add_argument("--name", help="Analyst full name")
    p.add_argument("--firm", help="Firm name")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_news_analysts)

    # filings
    grp = groups.add_parser("filings", help="SEC filings")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("sections", help="10-K sections")
    p.add_argument("--ticker")
    p.add_argument("--cik")
    p.add_argument("--section", help="e.g. business, risk_factors")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_filings_sections)

    p = cmds.add_parser("risk-factors", help="Categorized risk factors")
    p.add_argument("--ticker")
    p.add_argument("--cik")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_filings_risk_factors)

    # indicators
    grp = groups.add_parser("indicators", help="Technical indicators")
    cmds = grp.add_subparsers(dest="indicator", required=True)
    for name in ("sma", "ema", "rsi"):
        p = cmds.add_parser(name, help=f"{name.upper()} values")
        _add_indicator_options(p)
        p.add_argument("--window", type=int)
        p.set_defaults(handler=cmd_indicator)

    p = cmds.add_parser("macd", help="MACD values")
    _add_indicator_options(p)
    p.add_argument("--short-window", type=int)
    p.add_argument("--long-window", type=int)
    p.add_argument("--signal-window", type=int)
    p.set_defaults(handler=cmd_indicator_macd)

    # crypto
    grp = groups.add_parser("crypto", help="Crypto data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("bars", help="Custom aggregate bars for a pair, e.g. X:BTCUSD")
    _add_bars_options(p)
    p.set_defaults(handler=cmd_crypto_bars)

    p = cmds.add_parser("open-close", help="Daily open/close for a pair")
    p.add_argument("from_currency", metavar="FROM")
    p.add_argument("to_currency", metavar="TO")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_adjusted(p)
    p.set_defaults(handler=cmd_crypto_open_close)

    p = cmds.add_parser("snapshot", help="Snapshot one pair, or the whole market")
    p.add_argument("ticker", nargs="?")
    p.add_argument("--tickers", help="Comma-separated tickers for the market snapshot")
    p.set_defaults(handler=cmd_crypto_snapshot)

    p = cmds.add_parser("last-trade", help="Last trade for a pair")
    p.add_argument("from_currency", metavar="FROM")
    p.add_argument("to_currency", metavar="TO")
    p.set_defaults(handler=cmd_crypto_last_trade)

    # indices
    grp = groups.add_parser("indices", help="Index data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("bars", help="Custom aggregate bars for an index, e.g. I:SPX")
    _add_bars_options(p)
    p.set_defaults(handler=cmd_indices_bars)

    p = cmds.add_parser("snapshot", help="Current index values")
    p.add_argument("--tickers", help="Comma-separated index tickers")
    p.add_argument("--limit", type=int)
    p.set_defaults(handler=cmd_indices_snapshot)

    p = cmds.add_parser("tickers", help="Search index tickers")
    p.add_argument("--search")
    p.add_argument("--active", action=argparse.BooleanOptionalAction, default=None)
    _add_listing_options(p)
    p.set_defaults(handler=cmd_indices_tickers)

    # futures
    grp = groups.add_parser("futures", help="Futures data")
    cmds = grp.add_subparsers(dest="command", required=True)

    p = cmds.add_parser("bars", help="Aggregate bars for a contract")
    p.add_argument("ticker")
    p.add_argument("--resolution", help="e.g. 1min, 1hour, 1session")
    p.add_argument("--window-start-gte")
    p.add_argument("--window-start-lte")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_futures_bars)

    p = cmds.add_parser("contracts", help="List futures contracts")
    p.add_argument("--product-code")
    p.add_argument("--active", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_futures_contracts)

    p = cmds.add_parser("snapshot", help="Latest trade, quote and session per contract")
    p.add_argument("--product-code")
    p.add_argument("--ticker")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_futures_snapshot)

    # economy
    grp = groups.add_parser("economy", help="Federal Reserve economic data")
    cmds = grp.add_subparsers(dest="command", required=True)
    for name in ("inflation", "labor-market", "treasury-yields"):
        p = cmds.add_parser(name, help=name.replace("-", " ").capitalize())
        p.add_argument("--date-gte")
        p.add_argument("--date-lte")
        p.add_argument("--limit", type=int)
        p.add_argument("--sort")
        p.set_defaults(handler=cmd_economy)

    # etf
    grp = groups.add_parser("etf", help="ETF Global analytics and holdings")
    cmds = grp.add_subparsers(dest="command", required=True)
    for name, handler in (("analytics", cmd_etf_analytics), ("constituents", cmd_etf_constituents)):
        p = cmds.add_parser(name, help=f"Fund {name}")
        p.add_argument("--ticker", help="Fund ticker")
        p.add_argument("--date", help="Effective date")
        p.add_argument("--limit", type=int)
        p.add_argument("--sort")
        p.set_defaults(handler=handler)

    # tmx
    grp = groups.add_parser("tmx", help="TMX corporate events")
    cmds = grp.add_subparsers(dest="command", required=True)
    p = cmds.add_parser("events", help="List corporate events")
    p.add_argument("--ticker")
    p.add_argument("--type")
    p.add_argument("--date-gte")
    p.add_argument("--date-lte")
    p.add_argument("--limit", type=int)
    p.add_argument("--sort")
    p.set_defaults(handler=cmd_tmx_events)

    # market
    grp = groups.add_parser("market", help="Market status and calendar")
    cmds = grp.add_subparsers(dest="command", required=True)
    p = cmds.add_parser("status", help="Current market status")
    p.set_defaults(handler=cmd_market_status)
    p = cmds.add_parser("holidays", help="Upcoming market holidays")
    p.set_defaults(handler=cmd_market_holidays)
    p = cmds.add_parser("exchanges", help="Known exchanges")
    p.add_argument("--asset-class", choices=["stocks", "options", "crypto", "fx", "futures"])
    p.add_argument("--locale")
    p.set_defaults(handler=cmd_market_exchanges)
    p = cmds.add_parser("snapshot", help="Snapshot tickers from any market")
    p.add_argument("tickers", help="Comma-separated tickers, e.g. AAPL,C:EURUSD,X:BTCUSD")
    p.add_argument("--limit", type=int)
    p.set_defaults(handler=cmd_market_snapshot)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which carry the API key
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    try:
        if not getattr(args, "needs_client", True):
            args.handler(args)
            return
        with config.client_from_config() as client:
            emit(args.handler(client, args))
    except MassiveError as e:
        logger.debug(f"{args.group} failed: {e.to_dict()}")
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
