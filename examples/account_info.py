#!/usr/bin/env python3
"""
Example: Fetch and display futures account information.

This example demonstrates how to:
1. Create an authenticated client from environment variables
2. Show wallet balances per asset
3. List open positions and open orders

Prerequisites:
- Set FAPI_API_KEY and FAPI_API_SECRET (or put them in a .env file)
- Install the package in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import asyncio
import logging

from fapi_client import FapiError, FuturesClient

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_section_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f" {title.upper()} ".center(70, "="))
    print("=" * 70)


def print_balances(balances):
    print_section_header("Balances")

    if not balances:
        print("No balances found.")
        return

    print(f"{'Asset':<8} {'Wallet':>18} {'Available':>18} {'Cross uPnL':>14}")
    print("-" * 62)
    for balance in balances:
        print(f"{balance.asset:<8} {balance.balance:>18,.8f} "
              f"{balance.available_balance:>18,.8f} {balance.cross_unrealized_pnl:>14,.4f}")


def print_positions(positions):
    open_positions = [p for p in positions if p.position_amount != 0]
    print_section_header(f"Open Positions ({len(open_positions)} total)")

    if not open_positions:
        print("No open positions found.")
        return

    print(f"{'Symbol':<12} {'Side':<6} {'Amount':>12} {'Entry':>12} {'Mark':>12} {'uPnL':>12}")
    print("-" * 70)
    for position in open_positions:
        print(f"{position.symbol:<12} {position.position_side:<6} "
              f"{position.position_amount:>12.4f} {position.entry_price:>12.2f} "
              f"{position.mark_price:>12.2f} {position.unrealized_profit:>12.2f}")


def print_orders(orders):
    print_section_header(f"Open Orders ({len(orders)} total)")

    if not orders:
        print("No open orders found.")
        return

    for order in orders:
        print(f"{order.order_id:<14} {order.symbol:<12} {order.side:<5} {order.order_type:<22} "
              f"{order.orig_qty:>10} @ {order.price}")


async def main():
    try:
        async with FuturesClient.from_env() as client:
            balances = await client.account_balance()
            positions = await client.get_all_positions()
            orders = await client.get_all_open_orders_for_all_symbols()
    except FapiError as e:
        logger.error(f"Failed to fetch account information: {e}")
        return

    print_balances(balances)
    print_positions(positions)
    print_orders(orders)


if __name__ == "__main__":
    asyncio.run(main())
