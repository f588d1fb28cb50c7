"""Canonical query encoding and HMAC-SHA256 request signing.

Binance verifies the signature over the query string exactly as sent, with
parameters in the order the client chose. Parameters therefore follow the
request model's field declaration order, never alphabetical order.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Collection
from decimal import Decimal
from enum import Enum
from string import Formatter
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel


def current_timestamp_ms() -> int:
    """Wall clock in milliseconds; no skew correction."""
    return int(time.time() * 1000)


def format_value(value: Any) -> str:
    """Render one parameter value the way Binance expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def path_fields(template: str) -> list[str]:
    """Names of the ``{field}`` placeholders in a path template."""
    return [name for _, name, _, _ in Formatter().parse(template) if name]


def render_path(template: str, request: BaseModel) -> str:
    names = path_fields(template)
    if not names:
        return template
    values = {name: quote(format_value(getattr(request, name)), safe="") for name in names}
    return template.format(**values)


def encode_params(request: BaseModel, exclude: Collection[str] = ()) -> list[tuple[str, str]]:
    """Wire ``(name, value)`` pairs in field declaration order.

    Fields set to ``None`` are omitted, not sent as empty strings.
    """
    pairs: list[tuple[str, str]] = []
    for name, info in type(request).model_fields.items():
        if name in exclude:
            continue
        value = getattr(request, name)
        if value is None:
            continue
        pairs.append((info.alias or name, format_value(value)))
    return pairs


def build_query(pairs: list[tuple[str, str]]) -> str:
    return urlencode(pairs)


def sign(secret: str, payload: str) -> str:
    """Lower-case hex HMAC-SHA256 of ``payload``."""
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


def sign_query(
    query: str,
    secret: str,
    timestamp: int,
    recv_window: int | None = None,
) -> str:
    """Append timestamp, optional recvWindow, then the signature of everything before it."""
    extra = [("timestamp", str(timestamp))]
    if recv_window is not None:
        extra.append(("recvWindow", str(recv_window)))
    query = f"{query}&{urlencode(extra)}" if query else urlencode(extra)
    return f"{query}&signature={sign(secret, query)}"
