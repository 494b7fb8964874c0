"""Technical indicator endpoints (SMA, EMA, RSI, MACD).

The provider computes indicators server-side from aggregate bars. The same
endpoints serve every asset class, so ``ticker`` may be a stock (``AAPL``),
an options contract (``O:...``), a currency pair (``C:EURUSD``), an index
(``I:SPX``) or a crypto pair (``X:BTCUSD``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import RESTClient
from .schema import encode_params, query_field


@dataclass
class IndicatorValue:
    """One indicator point. ``timestamp`` is the Unix millisecond bar start."""

    timestamp: int = 0
    value: float = 0.0


@dataclass
class MACDValue:
    timestamp: int = 0
    value: float = 0.0
    signal: float = 0.0
    histogram: float = 0.0


@dataclass
class IndicatorUnderlying:
    """Link to the aggregates the values were computed from."""

    url: str = ""


@dataclass
class IndicatorResults:
    underlying: IndicatorUnderlying = field(default_factory=IndicatorUnderlying)
    values: list[IndicatorValue] = field(default_factory=list)


@dataclass
class MACDResults:
    underlying: IndicatorUnderlying = field(default_factory=IndicatorUnderlying)
    values: list[MACDValue] = field(default_factory=list)


@dataclass
class IndicatorResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: IndicatorResults = field(default_factory=IndicatorResults)


@dataclass
class MACDResponse:
    status: str = ""
    request_id: str = ""
    next_url: str = ""
    results: MACDResults = field(default_factory=MACDResults)


@dataclass
class IndicatorParams:
    """Query options shared by SMA, EMA and RSI.

    ``series_type`` picks the bar field (close, open, high, low) the
    indicator is computed over.
    """

    timestamp_gte: str | None = query_field("timestamp.gte")
    timestamp_gt: str | None = query_field("timestamp.gt")
    timestamp_lte: str | None = query_field("timestamp.lte")
    timestamp_lt: str | None = query_field("timestamp.lt")
    timespan: str | None = query_field("timespan")
    adjusted: bool | None = query_field("adjusted")
    window: int | None = query_field("window")
    series_type: str | None = query_field("series_type")
    expand_underlying: bool | None = query_field("expand_underlying")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")


@dataclass
class MACDParams:
    """MACD takes short, long and signal windows instead of a single window."""

    timestamp_gte: str | None = query_field("timestamp.gte")
    timestamp_gt: str | None = query_field("timestamp.gt")
    timestamp_lte: str | None = query_field("timestamp.lte")
    timestamp_lt: str | None = query_field("timestamp.lt")
    timespan: str | None = query_field("timespan")
    adjusted: bool | None = query_field("adjusted")
    short_window: int | None = query_field("short_window")
    long_window: int | None = query_field("long_window")
    signal_window: int | None = query_field("signal_window")
    series_type: str | None = query_field("series_type")
    expand_underlying: bool | None = query_field("expand_underlying")
    order: str | None = query_field("order")
    limit: int | None = query_field("limit")


def _get_indicator(
    client: RESTClient, name: str, ticker: str, params: IndicatorParams | None
) -> IndicatorResponse:
    return client.fetch(f"/v1/indicators/{name}/{ticker}", encode_params(params), IndicatorResponse)


def get_sma(client: RESTClient, ticker: str, params: IndicatorParams | None = None) -> IndicatorResponse:
    """Simple moving average: arithmetic mean of the series over ``window`` bars."""
    return _get_indicator(client, "sma", ticker, params)


def get_ema(client: RESTClient, ticker: str, params: IndicatorParams | None = None) -> IndicatorResponse:
    """Exponential moving average, weighting recent bars more heavily."""
    return _get_indicator(client, "ema", ticker, params)


def get_rsi(client: RESTClient, ticker: str, params: IndicatorParams | None = None) -> IndicatorResponse:
    """Relative strength index, an oscillator between 0 and 100."""
    return _get_indicator(client, "rsi", ticker, params)


def get_macd(client: RESTClient, ticker: str, params: MACDParams | None = None) -> MACDResponse:
    """Moving average convergence/divergence with signal line and histogram."""
    return client.fetch(f"/v1/indicators/macd/{ticker}", encode_params(params), MACDResponse)
