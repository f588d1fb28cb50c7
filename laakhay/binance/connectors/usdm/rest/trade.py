"""Binance USD-M futures order cancellation endpoints."""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.base import WireModel
from laakhay.binance.models.common import CodeMessage
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor


class CancelAllOpenOrdersRequest(BinanceRequest):
    symbol: str


class AutoCancelAllOpenOrdersRequest(BinanceRequest):
    """Countdown in milliseconds; ``0`` cancels the timer."""

    symbol: str
    countdown_time: int = Field(..., alias="countdownTime", ge=0)


class AutoCancelAllOpenOrders(WireModel):
    symbol: str
    countdown_time: int = Field(..., alias="countdownTime")


# Succeeds with {"code": 200, "msg": "The operation of cancel all open order is done."}
CANCEL_ALL_OPEN_ORDERS = RequestDescriptor(
    id="usdm.cancel_all_open_orders",
    product=Product.USDM_FUTURES,
    method="DELETE",
    path="/fapi/v1/allOpenOrders",
    request_type=CancelAllOpenOrdersRequest,
    response_type=CodeMessage,
    signed=True,
)

AUTO_CANCEL_ALL_OPEN_ORDERS = RequestDescriptor(
    id="usdm.auto_cancel_all_open_orders",
    product=Product.USDM_FUTURES,
    method="POST",
    path="/fapi/v1/countdownCancelAll",
    request_type=AutoCancelAllOpenOrdersRequest,
    response_type=AutoCancelAllOpenOrders,
    signed=True,
)
