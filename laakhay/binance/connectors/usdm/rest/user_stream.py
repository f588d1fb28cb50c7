"""Binance USD-M futures user data stream (listen key) endpoints."""

from __future__ import annotations

from laakhay.binance.core.enums import Product
from laakhay.binance.models.common import EmptyResponse, ListenKey
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor


class StartUserDataStreamRequest(BinanceRequest):
    pass


class KeepaliveUserDataStreamRequest(BinanceRequest):
    pass


class CloseUserDataStreamRequest(BinanceRequest):
    pass


START_USER_DATA_STREAM = RequestDescriptor(
    id="usdm.start_user_data_stream",
    product=Product.USDM_FUTURES,
    method="POST",
    path="/fapi/v1/listenKey",
    request_type=StartUserDataStreamRequest,
    response_type=ListenKey,
    keyed=True,
)

KEEPALIVE_USER_DATA_STREAM = RequestDescriptor(
    id="usdm.keepalive_user_data_stream",
    product=Product.USDM_FUTURES,
    method="PUT",
    path="/fapi/v1/listenKey",
    request_type=KeepaliveUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)

CLOSE_USER_DATA_STREAM = RequestDescriptor(
    id="usdm.close_user_data_stream",
    product=Product.USDM_FUTURES,
    method="DELETE",
    path="/fapi/v1/listenKey",
    request_type=CloseUserDataStreamRequest,
    response_type=EmptyResponse,
    keyed=True,
)
