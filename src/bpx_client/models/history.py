"""
History models for bpx client.

Fills and orders no longer on the book, and the search parameters used to
query them. One canonical record type exists per history endpoint.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from .enums import (
    FillType,
    MarketType,
    OrderExpiryReason,
    OrderStatus,
    OrderType,
    SelfTradePrevention,
    Side,
    SortDirection,
    SystemOrderType,
    TimeInForce,
)
from .fields import FieldReader
from .search import SearchParams, search_field


@dataclass
class FillHistorySearchParams(SearchParams):
    """
    Filters for the fill history endpoint.

    Attributes:
        order_id: Filter to the given order
        strategy_id: Filter to the given strategy
        from_: Minimum time in milliseconds (query key ``from``)
        to: Maximum time in milliseconds
        symbol: Filter to the given symbol
        limit: Maximum number to return. Default 100, maximum 1000
        offset: Offset. Default 0
        fill_type: Fill type
        market_type: Market type
        sort_direction: Sort direction
    """
    order_id: Optional[str] = search_field(str)
    strategy_id: Optional[str] = search_field(str)
    from_: Optional[int] = search_field(int, wire="from")
    to: Optional[int] = search_field(int)
    symbol: Optional[str] = search_field(str)
    limit: Optional[int] = search_field(int)
    offset: Optional[int] = search_field(int)
    fill_type: Optional[FillType] = search_field(FillType)
    market_type: Optional[MarketType] = search_field(MarketType)
    sort_direction: Optional[SortDirection] = search_field(SortDirection)


@dataclass
class OrderHistorySearchParams(SearchParams):
    """Filters for the order history endpoint."""
    order_id: Optional[str] = search_field(str)
    strategy_id: Optional[str] = search_field(str)
    symbol: Optional[str] = search_field(str)
    limit: Optional[int] = search_field(int)
    offset: Optional[int] = search_field(int)
    market_type: Optional[MarketType] = search_field(MarketType)
    sort_direction: Optional[SortDirection] = search_field(SortDirection)


@dataclass(frozen=True)
class Fill:
    """
    (Partial) execution of an order.

    Attributes:
        fee: Fee charged on the fill
        fee_symbol: Asset the fee is charged in
        is_maker: Whether the fill was made by the maker
        order_id: Order the fill belongs to
        price: Fill price
        quantity: Fill quantity
        side: Side of the fill
        symbol: Market symbol
        timestamp: Fill time (UTC)
        client_id: Client id of the order
        system_order_type: System order that triggered the fill
        trade_id: Trade id
    """
    fee: Decimal
    fee_symbol: str
    is_maker: bool
    order_id: str
    price: Decimal
    quantity: Decimal
    side: Side
    symbol: str
    timestamp: datetime
    client_id: Optional[str] = None
    system_order_type: Optional[SystemOrderType] = None
    trade_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fill":
        r = FieldReader(data, cls.__name__)
        return cls(
            fee=r.decimal("fee"),
            fee_symbol=r.string("feeSymbol"),
            is_maker=r.boolean("isMaker"),
            order_id=r.string("orderId"),
            price=r.decimal("price"),
            quantity=r.decimal("quantity"),
            side=r.enum("side", Side),
            symbol=r.string("symbol"),
            timestamp=r.timestamp("timestamp"),
            client_id=r.opt_string("clientId"),
            system_order_type=r.opt_enum("systemOrderType", SystemOrderType),
            trade_id=r.opt_integer("tradeId"),
        )


@dataclass(frozen=True)
class HistoricOrder:
    """Order that is no longer (or may still be) on the book."""
    id: str
    order_type: OrderType
    symbol: str
    side: Side
    status: OrderStatus
    created_at: datetime
    self_trade_prevention: SelfTradePrevention
    time_in_force: TimeInForce
    post_only: bool = False
    price: Optional[Decimal] = None
    quantity: Optional[Decimal] = None
    quote_quantity: Optional[Decimal] = None
    executed_quantity: Optional[Decimal] = None
    executed_quote_quantity: Optional[Decimal] = None
    expiry_reason: Optional[OrderExpiryReason] = None
    trigger_price: Optional[Decimal] = None
    stop_loss_trigger_price: Optional[Decimal] = None
    take_profit_trigger_price: Optional[Decimal] = None
    client_id: Optional[int] = None
    strategy_id: Optional[str] = None
    system_order_type: Optional[SystemOrderType] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoricOrder":
        r = FieldReader(data, cls.__name__)
        return cls(
            id=r.string("id"),
            order_type=r.enum("orderType", OrderType),
            symbol=r.string("symbol"),
            side=r.enum("side", Side),
            status=r.enum("status", OrderStatus),
            created_at=r.timestamp("createdAt"),
            self_trade_prevention=r.enum("selfTradePrevention", SelfTradePrevention),
            time_in_force=r.enum("timeInForce", TimeInForce),
            post_only=r.opt_boolean("postOnly") or False,
            price=r.opt_decimal("price"),
            quantity=r.opt_decimal("quantity"),
            quote_quantity=r.opt_decimal("quoteQuantity"),
            executed_quantity=r.opt_decimal("executedQuantity"),
            executed_quote_quantity=r.opt_decimal("executedQuoteQuantity"),
            expiry_reason=r.opt_enum("expiryReason", OrderExpiryReason),
            trigger_price=r.opt_decimal("triggerPrice"),
            stop_loss_trigger_price=r.opt_decimal("stopLossTriggerPrice"),
            take_profit_trigger_price=r.opt_decimal("takeProfitTriggerPrice"),
            client_id=r.opt_integer("clientId"),
            strategy_id=r.opt_string("strategyId"),
            system_order_type=r.opt_enum("systemOrderType", SystemOrderType),
        )
