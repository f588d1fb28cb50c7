#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.binance import Binance, SpotDecoder
from laakhay.binance.connectors.spot.ws import AggregateTrade, Trade


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Binance spot trades for symbols")
    p.add_argument("symbols", nargs="*", default=["BTCUSDT"])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    topics = [f"{symbol.lower()}@trade" for symbol in args.symbols]

    async with Binance() as client:
        async with await client.stream(SpotDecoder(), topics) as ws:
            async for message in ws:
                if isinstance(message, (Trade, AggregateTrade)):
                    print(f"{message.event_time} | {message.symbol} | price={message.price} qty={message.qty}")


if __name__ == "__main__":
    asyncio.run(main())
