"""Binance spot general and market metadata endpoints."""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.common import EmptyResponse, ServerTime
from laakhay.binance.models.market import ExchangeInfo
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor


class PingRequest(BinanceRequest):
    pass


class ServerTimeRequest(BinanceRequest):
    pass


class ExchangeInfoRequest(BinanceRequest):
    symbol: str | None = None
    permissions: str | None = None
    show_permission_sets: bool | None = Field(None, alias="showPermissionSets")


PING = RequestDescriptor(
    id="spot.ping",
    product=Product.SPOT,
    method="GET",
    path="/api/v3/ping",
    request_type=PingRequest,
    response_type=EmptyResponse,
)

SERVER_TIME = RequestDescriptor(
    id="spot.server_time",
    product=Product.SPOT,
    method="GET",
    path="/api/v3/time",
    request_type=ServerTimeRequest,
    response_type=ServerTime,
)

EXCHANGE_INFO = RequestDescriptor(
    id="spot.exchange_info",
    product=Product.SPOT,
    method="GET",
    path="/api/v3/exchangeInfo",
    request_type=ExchangeInfoRequest,
    response_type=ExchangeInfo,
)
