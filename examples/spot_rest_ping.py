#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.binance import Binance
from laakhay.binance.connectors import spot


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ping Binance spot and show symbol filters")
    p.add_argument("symbol", nargs="?", default="BTCUSDT")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with Binance() as client:
        await client.request(spot.rest.PING)
        now = await client.request(spot.rest.SERVER_TIME)
        print(f"Server time: {now.server_time}")

        info = await client.request(spot.rest.EXCHANGE_INFO, symbol=args.symbol.upper())
        symbol = info.get_symbol(args.symbol)
        if symbol is None:
            print(f"{args.symbol} not listed")
            return
        print(f"{symbol.symbol} ({symbol.status}) {symbol.base_asset}/{symbol.quote_asset}")
        for item in symbol.filters:
            print(f"  {item.filter_type}")


if __name__ == "__main__":
    asyncio.run(main())
