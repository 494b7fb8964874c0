"""Massive Client - Typed access to the Massive market data REST API.

This package provides:
- A synchronous request executor with API key authentication
- Typed endpoint wrappers for stocks, fundamentals, options, forex, crypto,
  indices, futures, news, filings, technical indicators, economic data,
  ETF Global, TMX corporate events and market-wide reference data
- A ``massive`` command-line tool printing results as JSON
"""

__version__ = "0.1.0"

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, RESTClient
from .config import Config, client_from_config, get_api_key
from .errors import (
    APIError,
    ConfigError,
    DecodeError,
    InvalidURLError,
    MassiveError,
    RequestFailedError,
)
from .schema import decode, encode_params, json_field, query_field

__all__ = [
    # Client
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "RESTClient",
    # Config
    "Config",
    "client_from_config",
    "get_api_key",
    # Errors
    "APIError",
    "ConfigError",
    "DecodeError",
    "InvalidURLError",
    "MassiveError",
    "RequestFailedError",
    # Schema
    "decode",
    "encode_params",
    "json_field",
    "query_field",
]
