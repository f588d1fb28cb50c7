#!/usr/bin/env python3
"""Follow the USD-M futures user data stream.

Reads BINANCE_API_KEY from the environment and refreshes the listen key
every 30 minutes while streaming.
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging

from laakhay.binance import Binance, ClientConfig, UsdMFuturesDecoder
from laakhay.binance.connectors import usdm

KEEPALIVE_SECONDS = 30 * 60


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Binance USD-M futures account events")
    p.add_argument("--testnet", action="store_true")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def keepalive(client: Binance) -> None:
    while True:
        await asyncio.sleep(KEEPALIVE_SECONDS)
        await client.request(usdm.rest.KEEPALIVE_USER_DATA_STREAM)


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = ClientConfig.testnet() if args.testnet else ClientConfig()

    async with Binance.from_env(config=config) as client:
        key = await client.request(usdm.rest.START_USER_DATA_STREAM)
        refresher = asyncio.create_task(keepalive(client))
        try:
            async with await client.stream(
                UsdMFuturesDecoder(), [key.listen_key], emit_keepalive=True
            ) as ws:
                async for message in ws:
                    print(message)
        finally:
            refresher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await refresher
            await client.request(usdm.rest.CLOSE_USER_DATA_STREAM)


if __name__ == "__main__":
    asyncio.run(main())
