"""
Account-related models for bpx client.

Immutable data structures for account settings and limits, plus the
request payloads used to change them.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from .enums import Side
from .fields import FieldReader


@dataclass(frozen=True)
class AccountSettings:
    """Account settings and fee tier."""
    auto_borrow_settlements: bool
    auto_lend: bool
    auto_realize_pnl: bool
    auto_repay_borrows: bool
    borrow_limit: Decimal
    futures_maker_fee: Decimal
    futures_taker_fee: Decimal
    leverage_limit: Decimal
    limit_orders: int
    liquidating: bool
    position_limit: Decimal
    spot_maker_fee: Decimal
    spot_taker_fee: Decimal
    trigger_orders: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountSettings":
        r = FieldReader(data, cls.__name__)
        return cls(
            auto_borrow_settlements=r.boolean("autoBorrowSettlements"),
            auto_lend=r.boolean("autoLend"),
            auto_realize_pnl=r.boolean("autoRealizePnl"),
            auto_repay_borrows=r.boolean("autoRepayBorrows"),
            borrow_limit=r.decimal("borrowLimit"),
            futures_maker_fee=r.decimal("futuresMakerFee"),
            futures_taker_fee=r.decimal("futuresTakerFee"),
            leverage_limit=r.decimal("leverageLimit"),
            limit_orders=r.integer("limitOrders"),
            liquidating=r.boolean("liquidating"),
            position_limit=r.decimal("positionLimit"),
            spot_maker_fee=r.decimal("spotMakerFee"),
            spot_taker_fee=r.decimal("spotTakerFee"),
            trigger_orders=r.integer("triggerOrders"),
        )


@dataclass(frozen=True)
class AccountMaxBorrow:
    symbol: str
    max_borrow_quantity: Decimal

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountMaxBorrow":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            max_borrow_quantity=r.decimal("maxBorrowQuantity"),
        )


@dataclass(frozen=True)
class AccountMaxOrder:
    """Maximum order quantity given balances, exposure and margin."""
    symbol: str
    side: Side
    max_order_quantity: Decimal
    price: Optional[Decimal] = None
    reduce_only: Optional[bool] = None
    auto_borrow: Optional[bool] = None
    auto_borrow_repay: Optional[bool] = None
    auto_lend_redeem: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountMaxOrder":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            side=r.enum("side", Side),
            max_order_quantity=r.decimal("maxOrderQuantity"),
            price=r.opt_decimal("price"),
            reduce_only=r.opt_boolean("reduceOnly"),
            auto_borrow=r.opt_boolean("autoBorrow"),
            auto_borrow_repay=r.opt_boolean("autoBorrowRepay"),
            auto_lend_redeem=r.opt_boolean("autoLendRedeem"),
        )


@dataclass(frozen=True)
class AccountMaxWithdrawal:
    symbol: str
    max_withdrawal_quantity: Decimal
    auto_borrow: Optional[bool] = None
    auto_lend_redeem: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountMaxWithdrawal":
        r = FieldReader(data, cls.__name__)
        return cls(
            symbol=r.string("symbol"),
            max_withdrawal_quantity=r.decimal("maxWithdrawalQuantity"),
            auto_borrow=r.opt_boolean("autoBorrow"),
            auto_lend_redeem=r.opt_boolean("autoLendRedeem"),
        )


@dataclass(frozen=True)
class UpdateAccountPayload:
    """Account settings update. Unset fields are left unchanged."""
    auto_borrow_settlements: Optional[bool] = None
    auto_lend: Optional[bool] = None
    auto_repay_borrows: Optional[bool] = None
    leverage_limit: Optional[Decimal] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to request body, omitting unset fields."""
        body = {
            "autoBorrowSettlements": self.auto_borrow_settlements,
            "autoLend": self.auto_lend,
            "autoRepayBorrows": self.auto_repay_borrows,
            "leverageLimit": self.leverage_limit,
        }
        return {key: value for key, value in body.items() if value is not None}


@dataclass(frozen=True)
class ConvertDustPayload:
    """Dust conversion to USDC, for one symbol or for all dust balances."""
    symbol: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"symbol": self.symbol} if self.symbol is not None else {}
