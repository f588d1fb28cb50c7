"""Response schemas shared across products."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import WireModel


class ExchangeError(WireModel):
    """Structured error body returned by Binance, e.g. ``{"code": -1121, "msg": "Invalid symbol."}``."""

    code: int
    message: str = Field(..., alias="msg")

    @staticmethod
    def matches(payload: Any) -> bool:
        """Whether a successful-status body is really an error envelope.

        Some endpoints answer ``{"code": 200, "msg": "..."}`` on success, so
        only negative codes count.
        """
        if not isinstance(payload, dict) or set(payload) != {"code", "msg"}:
            return False
        code = payload["code"]
        return isinstance(code, int) and not isinstance(code, bool) and code < 0


class EmptyResponse(WireModel):
    """Response of endpoints that answer ``{}``."""

    pass


class CodeMessage(WireModel):
    """Informational ``{"code", "msg"}`` body returned on success."""

    code: int
    msg: str


class ListenKey(WireModel):
    """Token identifying a private user data stream."""

    listen_key: str = Field(..., alias="listenKey")


class ServerTime(WireModel):
    """Exchange server time in milliseconds."""

    server_time: int = Field(..., alias="serverTime")
