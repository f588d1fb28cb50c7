"""Binance USD-M futures REST endpoints."""

from .account import GET_CURRENT_POSITION_MODE, GetCurrentPositionModeRequest, PositionMode
from .trade import (
    AUTO_CANCEL_ALL_OPEN_ORDERS,
    CANCEL_ALL_OPEN_ORDERS,
    AutoCancelAllOpenOrders,
    AutoCancelAllOpenOrdersRequest,
    CancelAllOpenOrdersRequest,
)
from .user_stream import (
    CLOSE_USER_DATA_STREAM,
    KEEPALIVE_USER_DATA_STREAM,
    START_USER_DATA_STREAM,
    CloseUserDataStreamRequest,
    KeepaliveUserDataStreamRequest,
    StartUserDataStreamRequest,
)

__all__ = [
    "GET_CURRENT_POSITION_MODE",
    "CANCEL_ALL_OPEN_ORDERS",
    "AUTO_CANCEL_ALL_OPEN_ORDERS",
    "START_USER_DATA_STREAM",
    "KEEPALIVE_USER_DATA_STREAM",
    "CLOSE_USER_DATA_STREAM",
    "GetCurrentPositionModeRequest",
    "CancelAllOpenOrdersRequest",
    "AutoCancelAllOpenOrdersRequest",
    "StartUserDataStreamRequest",
    "KeepaliveUserDataStreamRequest",
    "CloseUserDataStreamRequest",
    "PositionMode",
    "AutoCancelAllOpenOrders",
]
