"""
Bpx Client - Python client for the Backpack exchange REST API.

This package provides typed bindings for the exchange's market data,
account, futures, borrow/lend and history endpoints, plus decoding of
WebSocket stream payloads.
"""

from .client import BpxClient, create_bpx_client
from .api_methods import APIMethods
from .http_client import HttpClient
from .transport import AiohttpTransport, Transport, TransportResponse
from .errors import (
    ApiError,
    BpxError,
    DecodeError,
    InvalidDecimal,
    TransportFailure,
    UnknownVariant,
)
from .decimals import decimal_places, format_decimal, to_decimal
from .query import encode_query
from .models import (
    # Configuration
    ConnectionConfig,
    RetryConfig,
    # Account
    AccountSettings,
    UpdateAccountPayload,
    ConvertDustPayload,
    # Markets
    Market,
    Ticker,
    OrderBookDepth,
    Kline,
    MarkPrice,
    # History
    Fill,
    HistoricOrder,
    FillHistorySearchParams,
    OrderHistorySearchParams,
    Strategy,
    StrategyHistorySearchParams,
    # Streams
    decode_stream_event,
)

__all__ = [
    # Main Client
    "BpxClient",
    "create_bpx_client",
    "APIMethods",
    "HttpClient",
    # Transport
    "Transport",
    "TransportResponse",
    "AiohttpTransport",
    # Errors
    "BpxError",
    "ApiError",
    "DecodeError",
    "InvalidDecimal",
    "TransportFailure",
    "UnknownVariant",
    # Decimals
    "to_decimal",
    "decimal_places",
    "format_decimal",
    "encode_query",
    "ConnectionConfig",
    "RetryConfig",
    "AccountSettings",
    "UpdateAccountPayload",
    "ConvertDustPayload",
    "Market",
    "Ticker",
    "OrderBookDepth",
    "Kline",
    "MarkPrice",
    "Fill",
    "HistoricOrder",
    "FillHistorySearchParams",
    "OrderHistorySearchParams",
    "Strategy",
    "StrategyHistorySearchParams",
    "decode_stream_event",
]
