"""
Market-related models for bpx client.

Immutable data structures for market metadata and public market data.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from ..decimals import decimal_places
from .enums import Blockchain, MarginFunctionType, MarketType, OrderBookState
from .fields import FieldReader


@dataclass(frozen=True)
class MarginFunction:
    """Named formula computing a margin fraction from position size."""
    function_type: MarginFunctionType
    base: Decimal
    factor: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarginFunction":
        r = FieldReader(data, cls.__name__)
        return cls(
            function_type=r.enum("type", MarginFunctionType),
            base=r.decimal("base"),
            factor=r.decimal("factor"),
        )


@dataclass(frozen=True)
class PriceBandMarkPrice:
    """Allowed multiplier move from the mean mark price."""
    max_multiplier: Decimal
    min_multiplier: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriceBandMarkPrice":
        r = FieldReader(data, cls.__name__)
        return cls(
            max_multiplier=r.decimal("maxMultiplier"),
            min_multiplier=r.decimal("minMultiplier"),
        )


@dataclass(frozen=True)
class PriceBandMeanPremium:
    """Allowed deviation from the mean premium, e.g. 0.05 for 5%."""
    tolerance_pct: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriceBandMeanPremium":
        r = FieldReader(data, cls.__name__)
        return cls(tolerance_pct=r.decimal("tolerancePct"))


@dataclass(frozen=True)
class PriceFilters:
    """Price rules for an order book."""
    min_price: Decimal
    tick_size: Decimal
    max_price: Optional[Decimal] = None
    max_multiplier: Optional[Decimal] = None  # from last active price
    min_multiplier: Optional[Decimal] = None
    max_impact_multiplier: Optional[Decimal] = None  # from best offer
    min_impact_multiplier: Optional[Decimal] = None  # from best bid
    mean_mark_price_band: Optional[PriceBandMarkPrice] = None
    mean_premium_band: Optional[PriceBandMeanPremium] = None
    borrow_entry_fee_max_multiplier: Optional[Decimal] = None
    borrow_entry_fee_min_multiplier: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriceFilters":
        r = FieldReader(data, cls.__name__)
        return cls(
            min_price=r.decimal("minPrice"),
            tick_size=r.decimal("tickSize"),
            max_price=r.opt_decimal("maxPrice"),
            max_multiplier=r.opt_decimal("maxMultiplier"),
            min_multiplier=r.opt_decimal("minMultiplier"),
            max_impact_multiplier=r.opt_decimal("maxImpactMultiplier"),
            min_impact_multiplier=r.opt_decimal("minImpactMultiplier"),
            mean_mark_price_band=r.opt_nested("meanMarkPriceBand", PriceBandMarkPrice),
            mean_premium_band=r.opt_nested("meanPremiumBand", PriceBandMeanPremium),
            borrow_entry_fee_max_multiplier=r.opt_decimal("borrowEntryFeeMaxMultiplier"),
            borrow_entry_fee_min_multiplier=r.opt_decimal("borrowEntryFeeMinMultiplier"),
        )


@dataclass(frozen=True)
class QuantityFilters:
    """Quantity rules for an order book."""
    min_quantity: Decimal
    step_size: Decimal
    max_quantity: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuantityFilters":
        r = FieldReader(data, cls.__name__)
        return cls(
            min_quantity=r.decimal("minQuantity"),
            step_size=r.decimal("stepSize"),
            max_quantity=r.opt_decimal("maxQuantity"),
        )


@dataclass(frozen=True)
class LeverageFilters:
    """Leverage rules for futures markets."""
    min_leverage: Decimal
    max_leverage: Decimal
    step_size: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeverageFilters":
        r = FieldReader(data, cls.__name__)
        return cls(
            min_leverage=r.decimal("minLeverage"),
            max_leverage=r.decimal("maxLeverage"),
            step_size=r.decimal("stepSize"),
        )


@dataclass(frozen=True)
class MarketFilters:
    price: PriceFilters
    quantity: QuantityFilters
    leverage: Optional[LeverageFilters] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarketFilters":
        r = FieldReader(data, cls.__name__)
        return cls(
            price=r.nested("price", PriceFilters),
            quantity=r.nested("quantity", QuantityFilters),
            leverage=r.opt_nested("leverage", LeverageFilters),
        )


@dataclass(frozen=True)
class Market:
    """
    A market where a base asset is exchanged for a quote asset.

    In ``BTC_USDC`` the base is ``BTC`` and the quote is ``USDC``.

    Attributes:
        symbol: Market identifier
        base_symbol: Base asset
        quote_symbol: Quote asset
        market_type: Spot, perpetual, dated future, etc.
        filters: Price, quantity and leverage rules
        order_book_state: Order book lifecycle state
        created_at: Market creation time (UTC)
        imf_function: Initial margin fraction function
        mmf_function: Maintenance margin fraction function
        funding_interval: Funding interval for perpetuals in milliseconds
        funding_rate_upper_bound: In basis points, e.g. 10 = 10bps
        funding_rate_lower_bound: In basis points, e.g. -10 = -10bps
        open_interest_limit: Maximum open interest for futures
    """
    symbol: str
    base_symbol: str
    quote_symbol: str
    market_type: MarketType
    filters: MarketFilters
    order_book_state: OrderBookState
    created_at: datetime
    imf_function: Optional[MarginFunction] = None
    mmf_function: Optional[MarginFunction] = None
    funding_interval: Optional[int] = None
    funding_rate_upper_bound: Optional[Decimal] = None
    funding_rate_lower_bound: Optional[Decimal] = None
    open_interest_limit: Optional[Decimal] = None

    def price_decimal_places(self) -> int:
        """Decimal places this market accepts on prices.

        Prices with more decimal places are rejected by the exchange.
        """
        return decimal_places(self.filters.price.tick_size)

    def quantity_decimal_places(self) -> int:
        """Decimal places this market accepts on quantities."""
        return decimal_places(self.filters.quantity.step_size)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Market":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            base_symbol=r.string("baseSymbol"),
            quote_symbol=r.string("quoteSymbol"),
            market_type=r.enum("marketType", MarketType),
            filters=r.nested("filters", MarketFilters),
            order_book_state=r.enum("orderBookState", OrderBookState),
            created_at=r.timestamp("createdAt"),
            imf_function=r.opt_nested("imfFunction", MarginFunction),
            mmf_function=r.opt_nested("mmfFunction", MarginFunction),
            funding_interval=r.opt_integer("fundingInterval"),
            funding_rate_upper_bound=r.opt_decimal("fundingRateUpperBound"),
            funding_rate_lower_bound=r.opt_decimal("fundingRateLowerBound"),
            open_interest_limit=r.opt_decimal("openInterestLimit"),
        )


@dataclass(frozen=True)
class Token:
    """Representation of an asset on one blockchain."""
    blockchain: Blockchain
    deposit_enabled: bool
    minimum_deposit: Decimal
    withdraw_enabled: bool
    minimum_withdrawal: Decimal
    withdrawal_fee: Decimal
    maximum_withdrawal: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Token":
        r = FieldReader(data, cls.__name__)
        return cls(
            blockchain=r.enum("blockchain", Blockchain),
            deposit_enabled=r.boolean("depositEnabled"),
            minimum_deposit=r.decimal("minimumDeposit"),
            withdraw_enabled=r.boolean("withdrawEnabled"),
            minimum_withdrawal=r.decimal("minimumWithdrawal"),
            withdrawal_fee=r.decimal("withdrawalFee"),
            maximum_withdrawal=r.opt_decimal("maximumWithdrawal"),
        )


@dataclass(frozen=True)
class Asset:
    """A coin with its per-blockchain token representations, e.g. USDT."""
    symbol: str
    tokens: List[Token]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Asset":
        r = FieldReader(data, cls.__name__)
        return cls(symbol=r.string("symbol"), tokens=r.list_of("tokens", Token))


@dataclass(frozen=True)
class Ticker:
    """24h rolling ticker statistics."""
    symbol: str
    first_price: Decimal
    last_price: Decimal
    price_change: Decimal
    price_change_percent: Decimal
    high: Decimal
    low: Decimal
    volume: Decimal
    trades: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ticker":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            first_price=r.decimal("firstPrice"),
            last_price=r.decimal("lastPrice"),
            price_change=r.decimal("priceChange"),
            price_change_percent=r.decimal("priceChangePercent"),
            high=r.decimal("high"),
            low=r.decimal("low"),
            volume=r.decimal("volume"),
            trades=r.string("trades"),
        )


@dataclass(frozen=True)
class OrderBookDepth:
    """Order book snapshot. Levels are ``(price, quantity)`` in wire order."""
    asks: List[Tuple[Decimal, Decimal]]
    bids: List[Tuple[Decimal, Decimal]]
    last_update_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderBookDepth":
        r = FieldReader(data, cls.__name__)
        return cls(
            asks=r.decimal_pairs("asks"),
            bids=r.decimal_pairs("bids"),
            last_update_id=r.string("lastUpdateId"),
        )


@dataclass(frozen=True)
class Kline:
    """Candlestick. Empty intervals carry no prices."""
    start: str
    volume: Decimal
    trades: int
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None
    close: Optional[Decimal] = None
    end: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Kline":
        r = FieldReader(data, cls.__name__)
        return cls(
            start=r.string("start"),
            volume=r.decimal("volume"),
            trades=r.integer("trades"),
            open=r.opt_decimal("open"),
            high=r.opt_decimal("high"),
            low=r.opt_decimal("low"),
            close=r.opt_decimal("close"),
            end=r.opt_string("end"),
        )


@dataclass(frozen=True)
class FundingRate:
    """Funding rate for one completed interval."""
    symbol: str
    interval_end_timestamp: str
    funding_rate: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FundingRate":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            interval_end_timestamp=r.string("intervalEndTimestamp"),
            funding_rate=r.decimal("fundingRate"),
        )


@dataclass(frozen=True)
class MarkPrice:
    """Mark price data structure."""
    symbol: str
    funding_rate: Decimal
    index_price: Decimal
    mark_price: Decimal
    next_funding_timestamp: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarkPrice":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            funding_rate=r.decimal("fundingRate"),
            index_price=r.decimal("indexPrice"),
            mark_price=r.decimal("markPrice"),
            next_funding_timestamp=r.integer("nextFundingTimestamp"),
        )
