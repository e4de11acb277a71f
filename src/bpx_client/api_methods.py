"""
API method implementations for bpx client.

Contains all endpoint implementations organized by resource family. Each
method performs exactly one request and returns typed entities.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from .endpoints import ENDPOINTS
from .http_client import HttpClient, list_of
from .models.account import (
    AccountMaxBorrow,
    AccountMaxOrder,
    AccountMaxWithdrawal,
    AccountSettings,
    ConvertDustPayload,
    UpdateAccountPayload,
)
from .models.borrow_lend import BorrowLendMarket, BorrowLendPosition
from .models.enums import KlineInterval, KlinePriceType, Side
from .models.futures import FuturePosition
from .models.history import (
    Fill,
    FillHistorySearchParams,
    HistoricOrder,
    OrderHistorySearchParams,
)
from .models.markets import (
    Asset,
    FundingRate,
    Kline,
    Market,
    MarkPrice,
    OrderBookDepth,
    Ticker,
)
from .models.strategies import Strategy, StrategyHistorySearchParams
from .query import encode_query
from .utils import validate_symbol

logger = logging.getLogger(__name__)

_ACCOUNT = ENDPOINTS["account"]
_MARKETS = ENDPOINTS["markets"]
_FUTURES = ENDPOINTS["futures"]
_BORROW_LEND = ENDPOINTS["borrow_lend"]
_HISTORY = ENDPOINTS["history"]
_STRATEGIES = ENDPOINTS["strategies"]


def _require_symbol(symbol: str) -> str:
    if not validate_symbol(symbol):
        raise ValueError(f"Invalid symbol: {symbol!r}")
    return symbol


class APIMethods:
    """Container for all API method implementations."""

    def __init__(self, http_client: HttpClient):
        """Initialize API methods with HTTP client."""
        self._http_client = http_client

    # Account

    async def get_account(self) -> AccountSettings:
        """Get account settings."""
        return await self._http_client.call(_ACCOUNT["settings"], AccountSettings.from_dict)

    async def get_account_max_borrow(self, symbol: str) -> AccountMaxBorrow:
        """Get the maximum quantity the account can borrow for an asset."""
        query = encode_query([("symbol", _require_symbol(symbol))])
        return await self._http_client.call(
            _ACCOUNT["max_borrow"], AccountMaxBorrow.from_dict, query
        )

    async def get_account_max_order_quantity(
        self,
        symbol: str,
        side: Side,
        price: Optional[Decimal] = None,
        reduce_only: Optional[bool] = None,
        auto_borrow: Optional[bool] = None,
        auto_borrow_repay: Optional[bool] = None,
        auto_lend_redeem: Optional[bool] = None,
    ) -> AccountMaxOrder:
        """
        Get the maximum tradable quantity for a symbol.

        Accounts for balances, existing exposure and margin requirements.

        Args:
            symbol: Market symbol
            side: Order side
            price: Limit price; market order quantity when unset
            reduce_only: Only reduce an existing position
            auto_borrow: Allow borrowing to fund the order
            auto_borrow_repay: Repay borrows with order proceeds
            auto_lend_redeem: Redeem lent assets to fund the order
        """
        query = encode_query([
            ("symbol", _require_symbol(symbol)),
            ("side", side),
            ("price", price),
            ("reduceOnly", reduce_only),
            ("autoBorrow", auto_borrow),
            ("autoBorrowRepay", auto_borrow_repay),
            ("autoLendRedeem", auto_lend_redeem),
        ])
        return await self._http_client.call(
            _ACCOUNT["max_order"], AccountMaxOrder.from_dict, query
        )

    async def get_account_max_withdrawal(
        self,
        symbol: str,
        auto_borrow: Optional[bool] = None,
        auto_lend_redeem: Optional[bool] = None,
    ) -> AccountMaxWithdrawal:
        """Get the maximum withdrawal quantity for an asset."""
        query = encode_query([
            ("symbol", _require_symbol(symbol)),
            ("autoBorrow", auto_borrow),
            ("autoLendRedeem", auto_lend_redeem),
        ])
        return await self._http_client.call(
            _ACCOUNT["max_withdrawal"], AccountMaxWithdrawal.from_dict, query
        )

    async def update_account(self, payload: UpdateAccountPayload) -> None:
        """Update account settings."""
        await self._http_client.call(_ACCOUNT["update"], payload=payload.to_dict())
        logger.info("Account settings updated")

    async def convert_dust_balance(self, payload: ConvertDustPayload) -> None:
        """
        Convert dust balances to USDC.

        A balance counts as dust when it is below the minimum spot order
        quantity, lend included.
        """
        await self._http_client.call(_ACCOUNT["convert_dust"], payload=payload.to_dict())

    # Markets

    async def get_assets(self) -> List[Asset]:
        """Get all supported assets and their tokens."""
        return await self._http_client.call(_MARKETS["assets"], list_of(Asset.from_dict))

    async def get_market(self, symbol: str) -> Market:
        """Get a single market."""
        query = encode_query([("symbol", _require_symbol(symbol))])
        return await self._http_client.call(_MARKETS["market"], Market.from_dict, query)

    async def get_markets(self) -> List[Market]:
        return await self._http_client.call(_MARKETS["markets"], list_of(Market.from_dict))

    async def get_ticker(self, symbol: str) -> Ticker:
        """Get 24h summary statistics for a market."""
        query = encode_query([("symbol", _require_symbol(symbol))])
        return await self._http_client.call(_MARKETS["ticker"], Ticker.from_dict, query)

    async def get_tickers(self) -> List[Ticker]:
        return await self._http_client.call(_MARKETS["tickers"], list_of(Ticker.from_dict))

    async def get_order_book_depth(self, symbol: str) -> OrderBookDepth:
        """Get the order book for a market, levels in exchange order."""
        query = encode_query([("symbol", _require_symbol(symbol))])
        return await self._http_client.call(_MARKETS["depth"], OrderBookDepth.from_dict, query)

    async def get_funding_interval_rates(self, symbol: str) -> List[FundingRate]:
        """Get funding interval rate history for a futures market."""
        query = encode_query([("symbol", _require_symbol(symbol))])
        return await self._http_client.call(
            _MARKETS["funding_rates"], list_of(FundingRate.from_dict), query
        )

    async def get_all_mark_prices(self) -> List[MarkPrice]:
        """Get mark price, index price and funding rate for every market."""
        return await self._http_client.call(
            _MARKETS["mark_prices"], list_of(MarkPrice.from_dict)
        )

    async def get_k_lines(
        self,
        symbol: str,
        interval: KlineInterval,
        start_time: int,
        end_time: Optional[int] = None,
        price_type: Optional[KlinePriceType] = None,
    ) -> List[Kline]:
        """
        Get candlesticks for a market.

        Args:
            symbol: Market symbol
            interval: Candle width
            start_time: Start time, UTC seconds
            end_time: End time, UTC seconds; now when unset
            price_type: Price series to aggregate; last price when unset
        """
        query = encode_query([
            ("symbol", _require_symbol(symbol)),
            ("interval", interval),
            ("startTime", start_time),
            ("endTime", end_time),
            ("priceType", price_type),
        ])
        return await self._http_client.call(_MARKETS["klines"], list_of(Kline.from_dict), query)

    # Futures

    async def get_open_future_positions(self, symbol: Optional[str] = None) -> List[FuturePosition]:
        """Get open futures positions, optionally for one market."""
        if symbol is not None:
            _require_symbol(symbol)
        query = encode_query([("symbol", symbol)])
        return await self._http_client.call(
            _FUTURES["positions"], list_of(FuturePosition.from_dict), query
        )

    # Borrow / lend

    async def get_borrow_lend_positions(self) -> List[BorrowLendPosition]:
        return await self._http_client.call(
            _BORROW_LEND["positions"], list_of(BorrowLendPosition.from_dict)
        )

    async def get_borrow_lend_markets(self) -> List[BorrowLendMarket]:
        """Get borrow/lend market state and interest rates."""
        return await self._http_client.call(
            _BORROW_LEND["markets"], list_of(BorrowLendMarket.from_dict)
        )

    # History

    async def get_fill_history(
        self, params: Optional[FillHistorySearchParams] = None
    ) -> List[Fill]:
        """Get historical fills matching the given filters."""
        params = params or FillHistorySearchParams()
        return await self._http_client.call(
            _HISTORY["fills"], list_of(Fill.from_dict), params.to_query()
        )

    async def get_order_history(
        self, params: Optional[OrderHistorySearchParams] = None
    ) -> List[HistoricOrder]:
        """Get orders no longer on the book, matching the given filters."""
        params = params or OrderHistorySearchParams()
        return await self._http_client.call(
            _HISTORY["orders"], list_of(HistoricOrder.from_dict), params.to_query()
        )

    # Strategies

    async def get_strategy_history(
        self, params: Optional[StrategyHistorySearchParams] = None
    ) -> List[Strategy]:
        """Get historical strategies matching the given filters."""
        params = params or StrategyHistorySearchParams()
        return await self._http_client.call(
            _STRATEGIES["history"], list_of(Strategy.from_dict), params.to_query()
        )
