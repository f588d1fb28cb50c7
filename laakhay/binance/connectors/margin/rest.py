"""Binance cross margin user data stream (listen key) endpoints."""

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
    id="margin.start_user_data_stream",
    product=Product.MARGIN,
    method="POST",
    path="/sapi/v1/userDataStream",
    request_type=StartUserDataStreamRequest,
    response_type=ListenKey,
    keyed=True,
)

KEEPALIVE_USER_DATA_STREAM = RequestDescriptor(
    id="margin.keepalive_user_data_stream",
    product=Product.MARGIN,
    method="PUT",
    path="/sapi/v1/userDataStream",
    request_type=KeepaliveUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)

CLOSE_USER_DATA_STREAM = RequestDescriptor(
    id="margin.close_user_data_stream",
    product=Product.MARGIN,
    method="DELETE",
    path="/sapi/v1/userDataStream",
    request_type=CloseUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)
