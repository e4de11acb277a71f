"""
Order Book Depth Example

This example demonstrates:
- Fetching order book depth for a symbol
- Displaying best bid/ask prices and quantities at exchange precision
- Analyzing spread and liquidity with Decimal arithmetic

No API keys required.
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import bpx_client
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bpx_client import ApiError, BpxClient, TransportFailure


def format_order_book_level(price: Decimal, quantity: Decimal) -> str:
    """Format a single order book level for display."""
    return f"   Price: {price:>14}  |  Quantity: {quantity:>12}"


async def display_order_book(client: BpxClient, symbol: str, levels: int = 5):
    """Fetch and display order book for a symbol."""
    print(f"\n📊 Fetching Order Book for {symbol}...\n")

    try:
        depth = await client.get_order_book_depth(symbol)
    except (ApiError, TransportFailure) as e:
        print(f"❌ Failed to fetch order book for {symbol}: {e}")
        return

    if not depth.bids or not depth.asks:
        print("⚠️  Order book is empty")
        return

    asks = sorted(depth.asks)
    bids = sorted(depth.bids, reverse=True)
    best_ask_price, best_ask_qty = asks[0]
    best_bid_price, best_bid_qty = bids[0]

    spread = best_ask_price - best_bid_price
    spread_pct = (spread / best_bid_price) * 100
    mid_price = (best_bid_price + best_ask_price) / 2

    print("=" * 70)
    print(f"📈 {symbol} Order Book")
    print("=" * 70)

    print("\n💡 MARKET OVERVIEW:")
    print(f"   Mid Price:     {mid_price}")
    print(f"   Spread:        {spread} ({spread_pct:.4f}%)")
    print(f"   Last Update:   {depth.last_update_id}")

    print(f"\n🔴 TOP {min(levels, len(asks))} ASKS (Sell Orders):")
    print("   " + "-" * 60)
    for price, quantity in reversed(asks[:levels]):
        print(format_order_book_level(price, quantity))

    print("\n   " + "=" * 60)
    print(f"   💰 Best Ask: {best_ask_price:>14}  |  {best_ask_qty:>12}")
    print(f"   💵 Best Bid: {best_bid_price:>14}  |  {best_bid_qty:>12}")
    print("   " + "=" * 60)

    total_bid_qty = sum((quantity for _, quantity in depth.bids), Decimal("0"))
    total_ask_qty = sum((quantity for _, quantity in depth.asks), Decimal("0"))
    total_bid_value = sum((price * quantity for price, quantity in depth.bids), Decimal("0"))
    total_ask_value = sum((price * quantity for price, quantity in depth.asks), Decimal("0"))

    print(f"\n📊 LIQUIDITY SUMMARY:")
    print(f"   Total Bid Quantity:  {total_bid_qty} ({total_bid_value} quote)")
    print(f"   Total Ask Quantity:  {total_ask_qty} ({total_ask_value} quote)")

    print("\n" + "=" * 70)


async def main():
    """Main example function."""
    print("\n" + "=" * 70)
    print("📚 ORDER BOOK DEPTH EXAMPLE")
    print("=" * 70)

    async with BpxClient() as client:
        await display_order_book(client, "SOL_USDC")
        await display_order_book(client, "BTC_USDC_PERP", levels=10)

    print("\n✅ Example completed!\n")


if __name__ == "__main__":
    asyncio.run(main())
