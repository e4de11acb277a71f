"""
Market Info Example - Demonstrates market metadata and precision lookup.

This example demonstrates how to:
1. Fetch a market and display its filters
2. Derive price and quantity decimal places from tick and step sizes
3. Round an order price and quantity to what the exchange accepts
4. List recent fills when an API key is configured (BPX_API_KEY)

Prerequisites:
- No API keys required for the market data part
- Fill history needs an authenticating transport; see BpxClient.from_env
"""

import asyncio
import logging
import sys
from decimal import ROUND_DOWN, Decimal
from pathlib import Path

# Add parent directory to path to import bpx_client
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bpx_client import ApiError, BpxClient, FillHistorySearchParams

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def display_market(market):
    """Display market information in a formatted way."""
    print("\n" + "=" * 70)
    print(f"📊 MARKET INFORMATION: {market.symbol}")
    print("=" * 70)

    print(f"\n🔸 BASIC INFO:")
    print(f"   Symbol:              {market.symbol}")
    print(f"   Base Asset:          {market.base_symbol}")
    print(f"   Quote Asset:         {market.quote_symbol}")
    print(f"   Market Type:         {market.market_type}")
    print(f"   Order Book State:    {market.order_book_state}")

    print(f"\n🔸 PRECISION:")
    print(f"   Price Decimals:      {market.price_decimal_places()}")
    print(f"   Quantity Decimals:   {market.quantity_decimal_places()}")

    price = market.filters.price
    print(f"\n🔸 PRICE FILTER:")
    print(f"   Min Price:           {price.min_price}")
    print(f"   Max Price:           {price.max_price or 'N/A'}")
    print(f"   Tick Size:           {price.tick_size}")

    quantity = market.filters.quantity
    print(f"\n🔸 QUANTITY FILTER:")
    print(f"   Min Quantity:        {quantity.min_quantity}")
    print(f"   Step Size:           {quantity.step_size}")

    if market.filters.leverage:
        print(f"\n🔸 LEVERAGE:")
        print(f"   Max Leverage:        {market.filters.leverage.max_leverage}")


def round_to_market(market, price: Decimal, quantity: Decimal):
    """Round price and quantity down to the market's accepted precision."""
    price_step = Decimal(1).scaleb(-market.price_decimal_places())
    quantity_step = Decimal(1).scaleb(-market.quantity_decimal_places())
    return (
        price.quantize(price_step, rounding=ROUND_DOWN),
        quantity.quantize(quantity_step, rounding=ROUND_DOWN),
    )


async def main():
    """Main example function."""
    symbol = "SOL_USDC"

    async with BpxClient.from_env() as client:
        market = await client.get_market(symbol)
        display_market(market)

        price, quantity = round_to_market(market, Decimal("172.123456"), Decimal("1.987654"))
        print(f"\n🔸 ROUNDED ORDER: {quantity} @ {price}")

        if client.config.api_key:
            try:
                fills = await client.get_fill_history(FillHistorySearchParams(symbol=symbol, limit=5))
            except ApiError as e:
                logger.error(f"Fill history request rejected: {e}")
            else:
                print(f"\n🔸 LAST {len(fills)} FILLS:")
                for fill in fills:
                    print(f"   {fill.timestamp} {fill.side} {fill.quantity} @ {fill.price}")

    print("\n✅ Example completed!\n")


if __name__ == "__main__":
    asyncio.run(main())
