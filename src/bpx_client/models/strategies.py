"""
Strategy models for bpx client.

A strategy is a server-side, multi-order execution program (e.g. a
time-sliced order) tracked as a single historical record.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from .enums import (
    MarketType,
    SelfTradePrevention,
    Side,
    SlippageToleranceType,
    SortDirection,
    StrategyCancelReason,
    StrategyStatus,
    TimeInForce,
)
from .fields import FieldReader
from .search import SearchParams, search_field


@dataclass
class StrategyHistorySearchParams(SearchParams):
    """Filters for the strategy history endpoint."""
    strategy_id: Optional[str] = search_field(str)
    symbol: Optional[str] = search_field(str)
    limit: Optional[int] = search_field(int)
    offset: Optional[int] = search_field(int)
    market_type: Optional[MarketType] = search_field(MarketType)
    sort_direction: Optional[SortDirection] = search_field(SortDirection)


@dataclass(frozen=True)
class Strategy:
    """
    Completed, cancelled or terminated strategy.

    Attributes:
        id: Strategy identifier
        created_at: Creation time (UTC)
        strategy_type: Strategy kind, e.g. ``Scheduled``
        status: Final or current status
        side: Order side
        symbol: Market symbol
        self_trade_prevention: Self-trade prevention mode
        time_in_force: Time in force of child orders
        duration: Total duration in milliseconds
        interval: Interval between child orders in milliseconds
        randomized_interval_quantity: Whether child quantities are randomized
        quantity: Total quantity
        executed_quantity: Quantity executed so far
        executed_quote_quantity: Quote quantity executed so far
        cancel_reason: Why the system cancelled the strategy
        client_strategy_id: Caller-supplied id
        slippage_tolerance: Allowed slippage
        slippage_tolerance_type: Unit of ``slippage_tolerance``
    """
    id: int
    created_at: datetime
    strategy_type: str
    status: StrategyStatus
    side: Side
    symbol: str
    self_trade_prevention: SelfTradePrevention
    time_in_force: TimeInForce
    duration: int
    interval: int
    randomized_interval_quantity: bool
    quantity: Optional[Decimal] = None
    executed_quantity: Optional[Decimal] = None
    executed_quote_quantity: Optional[Decimal] = None
    cancel_reason: Optional[StrategyCancelReason] = None
    client_strategy_id: Optional[int] = None
    slippage_tolerance: Optional[Decimal] = None
    slippage_tolerance_type: Optional[SlippageToleranceType] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Strategy":
        r = FieldReader(data, cls.__name__)
        return cls(
            id=r.integer("id"),
            created_at=r.timestamp("createdAt"),
            strategy_type=r.string("strategyType"),
            status=r.enum("status", StrategyStatus),
            side=r.enum("side", Side),
            symbol=r.string("symbol"),
            self_trade_prevention=r.enum("selfTradePrevention", SelfTradePrevention),
            time_in_force=r.enum("timeInForce", TimeInForce),
            duration=r.integer("duration"),
            interval=r.integer("interval"),
            randomized_interval_quantity=r.boolean("randomizedIntervalQuantity"),
            quantity=r.opt_decimal("quantity"),
            executed_quantity=r.opt_decimal("executedQuantity"),
            executed_quote_quantity=r.opt_decimal("executedQuoteQuantity"),
            cancel_reason=r.opt_enum("cancelReason", StrategyCancelReason),
            client_strategy_id=r.opt_integer("clientStrategyId"),
            slippage_tolerance=r.opt_decimal("slippageTolerance"),
            slippage_tolerance_type=r.opt_enum("slippageToleranceType", SlippageToleranceType),
        )
