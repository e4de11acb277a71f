"""
Wire enumerations for the bpx client.

Each member's value is its exact wire string. Decoding is an exact,
case-sensitive lookup; strings outside the table raise ``UnknownVariant``
instead of falling back to an existing member.
"""

from enum import Enum
from typing import Any, Optional

from ..errors import UnknownVariant


class WireEnum(Enum):
    """Enumeration with an explicit wire string per member."""

    @classmethod
    def decode(cls, value: Any, field: Optional[str] = None) -> "WireEnum":
        """Decode a wire string into a member."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnknownVariant(cls.__name__, value, field)

    def encode(self) -> str:
        """Wire string of this member."""
        return self.value

    def __str__(self) -> str:
        return self.value


class MarketType(WireEnum):
    """Market type enumeration."""
    SPOT = "SPOT"
    PERP = "PERP"
    IPERP = "IPERP"
    DATED = "DATED"
    PREDICTION = "PREDICTION"
    RFQ = "RFQ"


class OrderBookState(WireEnum):
    """Order book lifecycle state."""
    OPEN = "Open"
    CLOSED = "Closed"
    CANCEL_ONLY = "CancelOnly"
    LIMIT_ONLY = "LimitOnly"
    POST_ONLY = "PostOnly"


class Side(WireEnum):
    """Order side enumeration."""
    BID = "Bid"
    ASK = "Ask"


class OrderType(WireEnum):
    MARKET = "Market"
    LIMIT = "Limit"


class OrderStatus(WireEnum):
    """Order status enumeration."""
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"
    FILLED = "Filled"
    NEW = "New"
    PARTIALLY_FILLED = "PartiallyFilled"
    TRIGGER_PENDING = "TriggerPending"
    TRIGGER_FAILED = "TriggerFailed"


class OrderExpiryReason(WireEnum):
    """Why an order left the book without filling."""
    ACCOUNT_TRADING_SUSPENDED = "AccountTradingSuspended"
    BORROW_REQUIRES_LEND_REDEEM = "BorrowRequiresLendRedeem"
    FILL_OR_KILL = "FillOrKill"
    INSUFFICIENT_BORROWABLE_QUANTITY = "InsufficientBorrowableQuantity"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    INVALID_PRICE = "InvalidPrice"
    INVALID_QUANTITY = "InvalidQuantity"
    IMMEDIATE_OR_CANCEL = "ImmediateOrCancel"
    INSUFFICIENT_MARGIN = "InsufficientMargin"
    LIQUIDATION = "Liquidation"
    NEGATIVE_EQUITY = "NegativeEquity"
    POST_ONLY_MODE = "PostOnlyMode"
    POST_ONLY_TAKER = "PostOnlyTaker"
    PRICE_OUT_OF_BOUNDS = "PriceOutOfBounds"
    REDUCE_ONLY_NOT_REDUCED = "ReduceOnlyNotReduced"
    SELF_TRADE_PREVENTION = "SelfTradePrevention"
    STOP_WITHOUT_POSITION = "StopWithoutPosition"
    PRICE_IMPACT = "PriceImpact"
    UNKNOWN = "Unknown"
    USER_PERMISSIONS = "UserPermissions"


class TimeInForce(WireEnum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


class SelfTradePrevention(WireEnum):
    REJECT_TAKER = "RejectTaker"
    REJECT_MAKER = "RejectMaker"
    REJECT_BOTH = "RejectBoth"


class SlippageToleranceType(WireEnum):
    TICK_SIZE = "TickSize"
    PERCENT = "Percent"


class FillType(WireEnum):
    """Origin of a fill."""
    USER = "User"
    BOOK_LIQUIDATION = "BookLiquidation"
    ADL = "Adl"
    BACKSTOP = "Backstop"
    LIQUIDATION = "Liquidation"
    ALL_LIQUIDATION = "AllLiquidation"
    COLLATERAL_CONVERSION = "CollateralConversion"
    COLLATERAL_CONVERSION_AND_SPOT_LIQUIDATION = "CollateralConversionAndSpotLiquidation"


class SystemOrderType(WireEnum):
    """Type of system order that triggered a fill."""
    COLLATERAL_CONVERSION = "CollateralConversion"
    FUTURE_EXPIRY = "FutureExpiry"
    LIQUIDATE_POSITION_ON_ADL = "LiquidatePositionOnAdl"
    LIQUIDATE_POSITION_ON_BOOK = "LiquidatePositionOnBook"
    LIQUIDATE_POSITION_ON_BACKSTOP = "LiquidatePositionOnBackstop"
    ORDER_BOOK_CLOSED = "OrderBookClosed"


class SortDirection(WireEnum):
    ASC = "Asc"
    DESC = "Desc"


class StrategyStatus(WireEnum):
    """Strategy status enumeration."""
    RUNNING = "Running"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    TERMINATED = "Terminated"


class StrategyCancelReason(WireEnum):
    """Why the system cancelled a strategy."""
    EXPIRED = "Expired"
    FILL_OR_KILL = "FillOrKill"
    INSUFFICIENT_BORROWABLE_QUANTITY = "InsufficientBorrowableQuantity"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    INVALID_PRICE = "InvalidPrice"
    INVALID_QUANTITY = "InvalidQuantity"
    INSUFFICIENT_MARGIN = "InsufficientMargin"
    LIQUIDATION = "Liquidation"
    PRICE_OUT_OF_BOUNDS = "PriceOutOfBounds"
    REDUCE_ONLY_NOT_REDUCED = "ReduceOnlyNotReduced"
    SELF_TRADE_PREVENTION = "SelfTradePrevention"
    UNKNOWN = "Unknown"
    USER_PERMISSIONS = "UserPermissions"


class BorrowLendMarketState(WireEnum):
    OPEN = "Open"
    CLOSED = "Closed"
    REPAY_ONLY = "RepayOnly"


class Blockchain(WireEnum):
    """Blockchains a token can be deposited from or withdrawn to."""
    ARBITRUM = "Arbitrum"
    BASE = "Base"
    BERACHAIN = "Berachain"
    BITCOIN = "Bitcoin"
    BITCOIN_CASH = "BitcoinCash"
    BSC = "Bsc"
    CARDANO = "Cardano"
    DOGECOIN = "Dogecoin"
    ECLIPSE = "Eclipse"
    ETHEREUM = "Ethereum"
    HYPERLIQUID = "Hyperliquid"
    LITECOIN = "Litecoin"
    POLYGON = "Polygon"
    SEI = "Sei"
    SOLANA = "Solana"
    STORY = "Story"
    SUI = "Sui"
    TRON = "Tron"


class KlineInterval(WireEnum):
    """Candlestick interval enumeration."""
    ONE_MINUTE = "1m"
    THREE_MINUTES = "3m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    EIGHT_HOURS = "8h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1d"
    THREE_DAYS = "3d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1month"


class KlinePriceType(WireEnum):
    LAST = "Last"
    INDEX = "Index"
    MARK = "Mark"


class MarginFunctionType(WireEnum):
    SQRT = "sqrt"


class PositionUpdateType(WireEnum):
    """Event names carried by position stream updates."""
    POSITION_ADJUSTED = "positionAdjusted"
    POSITION_OPENED = "positionOpened"
    POSITION_CLOSED = "positionClosed"


class StreamEventType(WireEnum):
    """Event type (``e``) of a WebSocket stream payload."""
    BOOK_TICKER = "bookTicker"
    TICKER = "ticker"
    DEPTH = "depth"
    KLINE = "kline"
    MARK_PRICE = "markPrice"
    OPEN_INTEREST = "openInterest"
    POSITION_ADJUSTED = "positionAdjusted"
    POSITION_OPENED = "positionOpened"
    POSITION_CLOSED = "positionClosed"
