"""Binance spot signed account endpoints."""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor

from .schemas import AccountInformation, Order


class AccountInformationRequest(BinanceRequest):
    omit_zero_balances: bool | None = Field(None, alias="omitZeroBalances")


class QueryOrderRequest(BinanceRequest):
    """Either ``order_id`` or ``orig_client_order_id`` must be sent."""

    symbol: str
    order_id: int | None = Field(None, alias="orderId")
    orig_client_order_id: str | None = Field(None, alias="origClientOrderId")


ACCOUNT_INFORMATION = RequestDescriptor(
    id="spot.account_information",
    product=Product.SPOT,
    method="GET",
    path="/api/v3/account",
    request_type=AccountInformationRequest,
    response_type=AccountInformation,
    signed=True,
)

QUERY_ORDER = RequestDescriptor(
    id="spot.query_order",
    product=Product.SPOT,
    method="GET",
    path="/api/v3/order",
    request_type=QueryOrderRequest,
    response_type=Order,
    signed=True,
)
