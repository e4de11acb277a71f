"""
Endpoint catalog for the exchange REST API.

Static mapping from ``(resource, operation)`` to HTTP method and path.
Query strings are composed by the caller from the operation's arguments.
"""

from dataclasses import dataclass
from typing import Dict

API_ACCOUNT = "/api/v1/account"
API_ACCOUNT_MAX_BORROW = "/api/v1/account/limits/borrow"
API_ACCOUNT_MAX_ORDER = "/api/v1/account/limits/order"
API_ACCOUNT_MAX_WITHDRAWAL = "/api/v1/account/limits/withdrawal"
API_ACCOUNT_CONVERT_DUST = "/api/v1/account/convertDust"

API_ASSETS = "/api/v1/assets"
API_MARKET = "/api/v1/market"
API_MARKETS = "/api/v1/markets"
API_TICKER = "/api/v1/ticker"
API_TICKERS = "/api/v1/tickers"
API_DEPTH = "/api/v1/depth"
API_KLINES = "/api/v1/klines"
API_FUNDING = "/api/v1/fundingRates"
API_MARK_PRICES = "/api/v1/markPrices"

API_FUTURES_POSITION = "/api/v1/position"

API_BORROW_LEND_POSITIONS = "/api/v1/borrowLend/positions"
API_BORROW_LEND_MARKETS = "/api/v1/borrowLend/markets"

API_FILLS_HISTORY = "/wapi/v1/history/fills"
API_ORDERS_HISTORY = "/wapi/v1/history/orders"
API_STRATEGIES_HISTORY = "/wapi/v1/history/strategies"


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str


ENDPOINTS: Dict[str, Dict[str, Endpoint]] = {
    "account": {
        "settings": Endpoint("GET", API_ACCOUNT),
        "update": Endpoint("PATCH", API_ACCOUNT),
        "max_borrow": Endpoint("GET", API_ACCOUNT_MAX_BORROW),
        "max_order": Endpoint("GET", API_ACCOUNT_MAX_ORDER),
        "max_withdrawal": Endpoint("GET", API_ACCOUNT_MAX_WITHDRAWAL),
        "convert_dust": Endpoint("POST", API_ACCOUNT_CONVERT_DUST),
    },
    "markets": {
        "assets": Endpoint("GET", API_ASSETS),
        "market": Endpoint("GET", API_MARKET),
        "markets": Endpoint("GET", API_MARKETS),
        "ticker": Endpoint("GET", API_TICKER),
        "tickers": Endpoint("GET", API_TICKERS),
        "depth": Endpoint("GET", API_DEPTH),
        "klines": Endpoint("GET", API_KLINES),
        "funding_rates": Endpoint("GET", API_FUNDING),
        "mark_prices": Endpoint("GET", API_MARK_PRICES),
    },
    "futures": {
        "positions": Endpoint("GET", API_FUTURES_POSITION),
    },
    "borrow_lend": {
        "positions": Endpoint("GET", API_BORROW_LEND_POSITIONS),
        "markets": Endpoint("GET", API_BORROW_LEND_MARKETS),
    },
    "history": {
        "fills": Endpoint("GET", API_FILLS_HISTORY),
        "orders": Endpoint("GET", API_ORDERS_HISTORY),
    },
    "strategies": {
        "history": Endpoint("GET", API_STRATEGIES_HISTORY),
    },
}
