"""Binance USD-M futures account endpoints."""

from __future__ import annotations

from pydantic import Field

from laakhay.binance.core.enums import Product
from laakhay.binance.models.base import WireModel
from laakhay.binance.runtime.rest import BinanceRequest, RequestDescriptor


class GetCurrentPositionModeRequest(BinanceRequest):
    pass


class PositionMode(WireModel):
    """``True`` means hedge mode, ``False`` one-way mode."""

    dual_side_position: bool = Field(..., alias="dualSidePosition")


GET_CURRENT_POSITION_MODE = RequestDescriptor(
    id="usdm.get_current_position_mode",
    product=Product.USDM_FUTURES,
    method="GET",
    path="/fapi/v1/positionSide/dual",
    request_type=GetCurrentPositionModeRequest,
    response_type=PositionMode,
    signed=True,
)
