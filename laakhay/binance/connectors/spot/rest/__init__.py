"""Binance spot REST endpoints."""

from .account import (
    ACCOUNT_INFORMATION,
    QUERY_ORDER,
    AccountInformationRequest,
    QueryOrderRequest,
)
from .general import (
    EXCHANGE_INFO,
    PING,
    SERVER_TIME,
    ExchangeInfoRequest,
    PingRequest,
    ServerTimeRequest,
)
from .schemas import AccountInformation, AssetBalance, Order
from .user_stream import (
    CLOSE_USER_DATA_STREAM,
    KEEPALIVE_USER_DATA_STREAM,
    START_USER_DATA_STREAM,
    CloseUserDataStreamRequest,
    KeepaliveUserDataStreamRequest,
    StartUserDataStreamRequest,
)

__all__ = [
    "PING",
    "SERVER_TIME",
    "EXCHANGE_INFO",
    "ACCOUNT_INFORMATION",
    "QUERY_ORDER",
    "START_USER_DATA_STREAM",
    "KEEPALIVE_USER_DATA_STREAM",
    "CLOSE_USER_DATA_STREAM",
    "PingRequest",
    "ServerTimeRequest",
    "ExchangeInfoRequest",
    "AccountInformationRequest",
    "QueryOrderRequest",
    "StartUserDataStreamRequest",
    "KeepaliveUserDataStreamRequest",
    "CloseUserDataStreamRequest",
    "AccountInformation",
    "AssetBalance",
    "Order",
]
