"""Live user data stream round trip on the spot testnet.

Needs ``BINANCE_API_KEY`` for a spot testnet account.
"""

import os

import pytest

from laakhay.binance import Binance, ClientConfig
from laakhay.binance.connectors import spot

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1" or not os.environ.get("BINANCE_API_KEY"),
    reason="Requires network access and BINANCE_API_KEY",
)


@pytest.mark.asyncio
async def test_listen_key_lifecycle():
    async with Binance.from_env(config=ClientConfig.testnet()) as client:
        key = await client.request(spot.rest.START_USER_DATA_STREAM)
        assert key.listen_key
        await client.request(spot.rest.KEEPALIVE_USER_DATA_STREAM, listenKey=key.listen_key)
        await client.request(spot.rest.CLOSE_USER_DATA_STREAM, listenKey=key.listen_key)
