#!/usr/bin/env python3
"""
Example: Listen to the user data stream.

Creates a listen key, keeps it alive in the background and prints every
decoded event until the stream closes or Ctrl+C is pressed.

Prerequisites:
- Set FAPI_API_KEY and FAPI_API_SECRET (or put them in a .env file)
- Optionally set FAPI_STREAM_URL

Usage:
    python examples/user_stream.py
"""

import asyncio
import logging

from fapi_client import (
    ConnectionConfig,
    DecodeError,
    FuturesClient,
    StreamDisconnected,
)
from fapi_client.models import AccountUpdateEvent, OrderTradeEvent

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

KEEP_ALIVE_INTERVAL = 30 * 60


async def keep_alive(client: FuturesClient):
    while True:
        await asyncio.sleep(KEEP_ALIVE_INTERVAL)
        await client.keep_alive_user_stream()
        logger.info("Listen key extended")


def show(event):
    if isinstance(event, OrderTradeEvent):
        order = event.order
        print(f"ORDER  {order.symbol} {order.side} {order.order_type} "
              f"{order.execution_type}/{order.order_status} filled={order.accumulated_qty_filled_trades}")
    elif isinstance(event, AccountUpdateEvent):
        for balance in event.balances:
            print(f"BAL    {balance.asset} wallet={balance.wallet_balance} change={balance.balance_change}")
        for position in event.positions:
            print(f"POS    {position.symbol} {position.position_side} amount={position.position_amount}")
    else:
        print(f"EVENT  {event}")


async def main():
    config = ConnectionConfig.from_env()

    async with FuturesClient(config) as client:
        listen_key = await client.start_user_stream()
        keeper = asyncio.create_task(keep_alive(client))
        stream = await client.user_data_stream(listen_key)

        try:
            async with stream:
                while True:
                    try:
                        show(await stream.receive())
                    except DecodeError as e:
                        logger.warning(f"Skipping undecodable frame: {e}")
        except StreamDisconnected as e:
            logger.info(f"Stream ended: {e}")
        finally:
            keeper.cancel()
            await client.close_user_stream()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
