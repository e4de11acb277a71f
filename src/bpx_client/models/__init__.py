"""
Data models for bpx client.

This package contains all data structures used throughout the bpx client,
following the state-first principle with immutable data structures.
"""

from .config import ConnectionConfig, RetryConfig
from .enums import (
    Blockchain,
    BorrowLendMarketState,
    FillType,
    KlineInterval,
    KlinePriceType,
    MarginFunctionType,
    MarketType,
    OrderBookState,
    OrderExpiryReason,
    OrderStatus,
    OrderType,
    PositionUpdateType,
    SelfTradePrevention,
    Side,
    SlippageToleranceType,
    SortDirection,
    StrategyCancelReason,
    StrategyStatus,
    StreamEventType,
    SystemOrderType,
    TimeInForce,
    WireEnum,
)
from .account import (
    AccountMaxBorrow,
    AccountMaxOrder,
    AccountMaxWithdrawal,
    AccountSettings,
    ConvertDustPayload,
    UpdateAccountPayload,
)
from .markets import (
    Asset,
    FundingRate,
    Kline,
    LeverageFilters,
    MarginFunction,
    Market,
    MarketFilters,
    MarkPrice,
    OrderBookDepth,
    PriceBandMarkPrice,
    PriceBandMeanPremium,
    PriceFilters,
    QuantityFilters,
    Ticker,
    Token,
)
from .futures import FuturePosition
from .borrow_lend import BorrowLendMarket, BorrowLendPosition
from .history import Fill, FillHistorySearchParams, HistoricOrder, OrderHistorySearchParams
from .strategies import Strategy, StrategyHistorySearchParams
from .streams import (
    KlineUpdate,
    MarkPriceUpdate,
    OpenInterestUpdate,
    OrderBookDepthUpdate,
    PositionUpdate,
    StreamUpdate,
    TickerStatisticsUpdate,
    TickerUpdate,
    decode_stream_event,
)

__all__ = [
    # Configuration
    "ConnectionConfig",
    "RetryConfig",
    # Enumerations
    "WireEnum",
    "Blockchain",
    "BorrowLendMarketState",
    "FillType",
    "KlineInterval",
    "KlinePriceType",
    "MarginFunctionType",
    "MarketType",
    "OrderBookState",
    "OrderExpiryReason",
    "OrderStatus",
    "OrderType",
    "PositionUpdateType",
    "SelfTradePrevention",
    "Side",
    "SlippageToleranceType",
    "SortDirection",
    "StrategyCancelReason",
    "StrategyStatus",
    "StreamEventType",
    "SystemOrderType",
    "TimeInForce",
    # Account
    "AccountSettings",
    "AccountMaxBorrow",
    "AccountMaxOrder",
    "AccountMaxWithdrawal",
    "UpdateAccountPayload",
    "ConvertDustPayload",
    # Markets
    "Asset",
    "Token",
    "Market",
    "MarketFilters",
    "PriceFilters",
    "QuantityFilters",
    "LeverageFilters",
    "MarginFunction",
    "PriceBandMarkPrice",
    "PriceBandMeanPremium",
    "Ticker",
    "OrderBookDepth",
    "Kline",
    "FundingRate",
    "MarkPrice",
    # Futures / borrow-lend
    "FuturePosition",
    "BorrowLendPosition",
    "BorrowLendMarket",
    # History
    "Fill",
    "HistoricOrder",
    "FillHistorySearchParams",
    "OrderHistorySearchParams",
    "Strategy",
    "StrategyHistorySearchParams",
    # Streams
    "StreamUpdate",
    "TickerUpdate",
    "TickerStatisticsUpdate",
    "OrderBookDepthUpdate",
    "KlineUpdate",
    "MarkPriceUpdate",
    "OpenInterestUpdate",
    "PositionUpdate",
    "decode_stream_event",
]
