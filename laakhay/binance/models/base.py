"""Base model and numeric policy shared by every wire schema.

Binance sends prices, quantities and rates as JSON strings (``"0.001"``) to
keep full precision. ``WireDecimal`` turns those into ``Decimal`` without ever
passing through a binary float; integer fields stay plain ``int``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _coerce_decimal(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("boolean is not a decimal value")
    if isinstance(value, float):
        # repr gives the shortest round-tripping literal, not the binary expansion
        return Decimal(repr(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal string: {value!r}") from exc
    return value


WireDecimal = Annotated[Decimal, BeforeValidator(_coerce_decimal)]


class WireModel(BaseModel):
    """Immutable model mapped field-by-field onto Binance wire names.

    Every field that differs from its wire name declares an explicit
    ``alias``; unknown wire fields are ignored so additive API changes do
    not break decoding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
