"""
Futures position models for bpx client.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from .fields import FieldReader
from .markets import MarginFunction


@dataclass(frozen=True)
class FuturePosition:
    """Open futures position."""
    break_even_price: Decimal
    cumulative_funding_payment: Decimal
    entry_price: Decimal
    est_liquidation_price: Decimal
    imf: Decimal
    imf_function: MarginFunction
    mark_price: Decimal
    mmf: Decimal
    mmf_function: MarginFunction
    net_cost: Decimal
    net_exposure_notional: Decimal
    net_exposure_quantity: Decimal
    net_quantity: Decimal
    pnl_realized: Decimal
    pnl_unrealized: Decimal
    position_id: str
    symbol: str
    user_id: int
    subaccount_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FuturePosition":
        r = FieldReader(data, cls.__name__)
        return cls(
            break_even_price=r.decimal("breakEvenPrice"),
            cumulative_funding_payment=r.decimal("cumulativeFundingPayment"),
            entry_price=r.decimal("entryPrice"),
            est_liquidation_price=r.decimal("estLiquidationPrice"),
            imf=r.decimal("imf"),
            imf_function=r.nested("imfFunction", MarginFunction),
            mark_price=r.decimal("markPrice"),
            mmf=r.decimal("mmf"),
            mmf_function=r.nested("mmfFunction", MarginFunction),
            net_cost=r.decimal("netCost"),
            net_exposure_notional=r.decimal("netExposureNotional"),
            net_exposure_quantity=r.decimal("netExposureQuantity"),
            net_quantity=r.decimal("netQuantity"),
            pnl_realized=r.decimal("pnlRealized"),
            pnl_unrealized=r.decimal("pnlUnrealized"),
            position_id=r.string("positionId"),
            symbol=r.string("symbol"),
            user_id=r.integer("userId"),
            subaccount_id=r.opt_integer("subaccountId"),
        )
