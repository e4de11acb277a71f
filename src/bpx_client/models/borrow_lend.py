"""
Borrow/lend models for bpx client.

Immutable data structures for money-market positions and markets.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from .enums import BorrowLendMarketState
from .fields import FieldReader
from .markets import MarginFunction


@dataclass(frozen=True)
class BorrowLendPosition:
    """Open borrow or lend position. Negative net quantity is a borrow."""
    id: str
    symbol: str
    cumulative_interest: Decimal
    imf: Decimal
    imf_function: MarginFunction
    mark_price: Decimal
    mmf: Decimal
    mmf_function: MarginFunction
    net_exposure_notional: Decimal
    net_exposure_quantity: Decimal
    net_quantity: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BorrowLendPosition":
        r = FieldReader(data, cls.__name__)
        return cls(
            id=r.string("id"),
            symbol=r.string("symbol"),
            cumulative_interest=r.decimal("cumulativeInterest"),
            imf=r.decimal("imf"),
            imf_function=r.nested("imfFunction", MarginFunction),
            mark_price=r.decimal("markPrice"),
            mmf=r.decimal("mmf"),
            mmf_function=r.nested("mmfFunction", MarginFunction),
            net_exposure_notional=r.decimal("netExposureNotional"),
            net_exposure_quantity=r.decimal("netExposureQuantity"),
            net_quantity=r.decimal("netQuantity"),
        )


@dataclass(frozen=True)
class BorrowLendMarket:
    """Borrow/lend market with its utilization-driven interest rates."""
    symbol: str
    state: BorrowLendMarketState
    asset_mark_price: Decimal
    borrow_interest_rate: Decimal
    borrowed_quantity: Decimal
    fee: Decimal
    lend_interest_rate: Decimal
    lent_quantity: Decimal
    max_utilization: Decimal
    open_borrow_lend_limit: Decimal
    optimal_utilization: Decimal
    timestamp: datetime
    throttle_utilization_threshold: Decimal
    throttle_utilization_bound: Decimal
    throttle_update_fraction: Decimal
    utilization: Decimal
    step_size: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BorrowLendMarket":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            state=r.enum("state", BorrowLendMarketState),
            asset_mark_price=r.decimal("assetMarkPrice"),
            borrow_interest_rate=r.decimal("borrowInterestRate"),
            borrowed_quantity=r.decimal("borrowedQuantity"),
            fee=r.decimal("fee"),
            lend_interest_rate=r.decimal("lendInterestRate"),
            lent_quantity=r.decimal("lentQuantity"),
            max_utilization=r.decimal("maxUtilization"),
            open_borrow_lend_limit=r.decimal("openBorrowLendLimit"),
            optimal_utilization=r.decimal("optimalUtilization"),
            timestamp=r.timestamp("timestamp"),
            throttle_utilization_threshold=r.decimal("throttleUtilizationThreshold"),
            throttle_utilization_bound=r.decimal("throttleUtilizationBound"),
            throttle_update_fraction=r.decimal("throttleUpdateFraction"),
            utilization=r.decimal("utilization"),
            step_size=r.decimal("stepSize"),
        )
