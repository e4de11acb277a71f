# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing bpx client.
"""

import json
import pytest
from typing import Any, Dict, List
from unittest.mock import AsyncMock

from bpx_client.client import BpxClient
from bpx_client.models.config import ConnectionConfig
from bpx_client.transport import Transport, TransportResponse


TEST_BASE_URL = "https://api.example.com"


def make_response(payload: Any = None, status: int = 200) -> TransportResponse:
    """Build a transport response from a JSON-serializable payload or raw text."""
    if payload is None:
        body = b""
    elif isinstance(payload, (bytes, str)):
        body = payload.encode() if isinstance(payload, str) else payload
    else:
        body = json.dumps(payload).encode()
    return TransportResponse(status=status, body=body)


# Mock data fixtures
@pytest.fixture
def market_response_data() -> Dict[str, Any]:
    """Mock spot market with 4 price and 2 quantity decimal places."""
    return {
        "symbol": "TEST_MARKET",
        "baseSymbol": "TEST",
        "quoteSymbol": "MARKET",
        "marketType": "SPOT",
        "filters": {
            "price": {"minPrice": "0.0001", "tickSize": "0.0001"},
            "quantity": {"minQuantity": "0.01", "stepSize": "0.01"},
        },
        "orderBookState": "Open",
        "createdAt": "2025-01-01T00:00:00",
    }


@pytest.fixture
def perp_market_response_data() -> Dict[str, Any]:
    """Mock perpetual market with leverage and margin functions."""
    return {
        "symbol": "SOL_USDC_PERP",
        "baseSymbol": "SOL",
        "quoteSymbol": "USDC",
        "marketType": "PERP",
        "filters": {
            "price": {
                "minPrice": "0.01",
                "maxPrice": None,
                "tickSize": "0.01",
                "maxMultiplier": "1.25",
                "minMultiplier": "0.75",
                "meanMarkPriceBand": {"maxMultiplier": "1.15", "minMultiplier": "0.9"},
                "meanPremiumBand": {"tolerancePct": "0.05"},
            },
            "quantity": {"minQuantity": "0.01", "stepSize": "0.01", "maxQuantity": None},
            "leverage": {"minLeverage": "1", "maxLeverage": "50", "stepSize": "1"},
        },
        "imfFunction": {"type": "sqrt", "base": "0.02", "factor": "0.00006"},
        "mmfFunction": {"type": "sqrt", "base": "0.0125", "factor": "0.000036"},
        "fundingInterval": 28800000,
        "fundingRateUpperBound": "100",
        "fundingRateLowerBound": "-100",
        "openInterestLimit": "2500000",
        "orderBookState": "Open",
        "createdAt": "2025-01-21T06:34:54.691858",
    }


@pytest.fixture
def depth_response_data() -> Dict[str, Any]:
    """Mock order book depth response data."""
    return {
        "asks": [["50001.10", "0.500"], ["50002.00", "1.25"], ["50010.5", "3"]],
        "bids": [["50000.90", "0.750"], ["49999.00", "2.00"]],
        "lastUpdateId": "1234567890",
    }


@pytest.fixture
def fill_response_data() -> List[Dict[str, Any]]:
    """Mock fill history response data."""
    return [
        {
            "fee": "0.0012",
            "feeSymbol": "USDC",
            "isMaker": False,
            "orderId": "111947144316264448",
            "price": "172.50",
            "quantity": "1.25",
            "side": "Bid",
            "symbol": "SOL_USDC",
            "timestamp": "2025-05-15T06:37:11.914",
            "clientId": None,
            "systemOrderType": None,
            "tradeId": 4417621,
        }
    ]


@pytest.fixture
def historic_order_response_data() -> Dict[str, Any]:
    """Mock historic order response data."""
    return {
        "id": "111947144316264448",
        "orderType": "Limit",
        "symbol": "SOL_USDC",
        "side": "Ask",
        "status": "Filled",
        "createdAt": "2025-05-15T06:37:11.914",
        "selfTradePrevention": "RejectTaker",
        "timeInForce": "GTC",
        "price": "180.00",
        "quantity": "2.00",
        "executedQuantity": "2.00",
        "executedQuoteQuantity": "360.0000",
        "clientId": 42,
    }


@pytest.fixture
def strategy_response_data() -> Dict[str, Any]:
    """Mock strategy history response data."""
    return {
        "id": 9001,
        "createdAt": "2025-05-15T06:37:11",
        "strategyType": "Scheduled",
        "status": "Completed",
        "side": "Bid",
        "symbol": "BTC_USDC",
        "selfTradePrevention": "RejectBoth",
        "timeInForce": "IOC",
        "duration": 3600000,
        "interval": 60000,
        "randomizedIntervalQuantity": True,
        "quantity": "0.60",
        "executedQuantity": "0.60",
        "executedQuoteQuantity": "61234.56",
        "slippageTolerance": "0.5",
        "slippageToleranceType": "Percent",
    }


@pytest.fixture
def margin_function_data() -> Dict[str, Any]:
    return {"type": "sqrt", "base": "0.02", "factor": "0.00006"}


@pytest.fixture
def future_position_response_data(margin_function_data) -> Dict[str, Any]:
    """Mock open futures position response data."""
    return {
        "breakEvenPrice": "172.95",
        "cumulativeFundingPayment": "-0.0123",
        "entryPrice": "172.80",
        "estLiquidationPrice": "0",
        "imf": "0.02",
        "imfFunction": margin_function_data,
        "markPrice": "173.35998175",
        "mmf": "0.0125",
        "mmfFunction": {"type": "sqrt", "base": "0.0125", "factor": "0.000036"},
        "netCost": "172.80",
        "netExposureNotional": "173.36",
        "netExposureQuantity": "1",
        "netQuantity": "1",
        "pnlRealized": "0",
        "pnlUnrealized": "0.56",
        "positionId": "5551234",
        "symbol": "SOL_USDC_PERP",
        "userId": 7,
    }


@pytest.fixture
def mark_price_stream_payload() -> str:
    """Raw ``markPrice`` stream message."""
    return """
{
    "E": 1747291031914525,
    "T": 1747291031910025,
    "e": "markPrice",
    "f": "-0.0000039641039274236048482914",
    "i": "173.44031179",
    "n": 1747296000000,
    "p": "173.35998175",
    "s": "SOL_USDC_PERP"
}
"""


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Transport double returning an empty 200 unless configured per test."""
    transport = AsyncMock(spec=Transport)
    transport.send.return_value = make_response()
    return transport


@pytest.fixture
def client(mock_transport) -> BpxClient:
    """Client bound to the mock transport and test base URL."""
    return BpxClient(ConnectionConfig(base_url=TEST_BASE_URL), transport=mock_transport)


@pytest.fixture
def valid_test_urls() -> List[str]:
    """Valid test URLs."""
    return [
        "https://api.backpack.exchange",
        "https://api.example.com/",
        "http://localhost:8080",
    ]


@pytest.fixture
def invalid_test_urls() -> List[str]:
    """Invalid test URLs."""
    return [
        "",
        "not-a-url",
        "ftp://example.com",
        "https://",
    ]
