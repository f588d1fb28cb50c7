"""Binance spot user data stream (listen key) endpoints.

The listen key returned by ``START_USER_DATA_STREAM`` is used as a topic of
a spot streaming session. It expires after 60 minutes unless refreshed
with ``KEEPALIVE_USER_DATA_STREAM``; refreshing and closing are the
caller's job.
"""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.common import EmptyResponse, ListenKey
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor


class StartUserDataStreamRequest(BinanceRequest):
    pass


class KeepaliveUserDataStreamRequest(BinanceRequest):
    listen_key: str = Field(..., alias="listenKey")


class CloseUserDataStreamRequest(BinanceRequest):
    listen_key: str = Field(..., alias="listenKey")


START_USER_DATA_STREAM = RequestDescriptor(
    id="spot.start_user_data_stream",
    product=Product.SPOT,
    method="POST",
    path="/api/v3/userDataStream",
    request_type=StartUserDataStreamRequest,
    response_type=ListenKey,
    keyed=True,
)

KEEPALIVE_USER_DATA_STREAM = RequestDescriptor(
    id="spot.keepalive_user_data_stream",
    product=Product.SPOT,
    method="PUT",
    path="/api/v3/userDataStream",
    request_type=KeepaliveUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)

CLOSE_USER_DATA_STREAM = RequestDescriptor(
    id="spot.close_user_data_stream",
    product=Product.SPOT,
    method="DELETE",
    path="/api/v3/userDataStream",
    request_type=CloseUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)
