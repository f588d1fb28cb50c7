"""Unit tests for the endpoint descriptor catalogue."""

import pytest

from laakhay.binance.connectors import margin, portfolio_margin, spot, usdm
from laakhay.binance.core import Product
from laakhay.binance.models.common import CodeMessage, EmptyResponse, ListenKey


@pytest.mark.parametrize(
    ("descriptor", "product", "method", "path", "keyed", "signed"),
    [
        (spot.rest.PING, Product.SPOT, "GET", "/api/v3/ping", False, False),
        (spot.rest.SERVER_TIME, Product.SPOT, "GET", "/api/v3/time", False, False),
        (spot.rest.EXCHANGE_INFO, Product.SPOT, "GET", "/api/v3/exchangeInfo", False, False),
        (spot.rest.ACCOUNT_INFORMATION, Product.SPOT, "GET", "/api/v3/account", False, True),
        (spot.rest.QUERY_ORDER, Product.SPOT, "GET", "/api/v3/order", False, True),
        (spot.rest.START_USER_DATA_STREAM, Product.SPOT, "POST", "/api/v3/userDataStream", True, False),
        (spot.rest.KEEPALIVE_USER_DATA_STREAM, Product.SPOT, "PUT", "/api/v3/userDataStream", True, False),
        (spot.rest.CLOSE_USER_DATA_STREAM, Product.SPOT, "DELETE", "/api/v3/userDataStream", True, False),
        (margin.rest.START_USER_DATA_STREAM, Product.MARGIN, "POST", "/sapi/v1/userDataStream", True, False),
        (margin.rest.CLOSE_USER_DATA_STREAM, Product.MARGIN, "DELETE", "/sapi/v1/userDataStream", True, False),
        (
            portfolio_margin.rest.START_USER_DATA_STREAM,
            Product.PORTFOLIO_MARGIN, "POST", "/papi/v1/listenKey", True, False,
        ),
        (
            portfolio_margin.rest.KEEPALIVE_USER_DATA_STREAM,
            Product.PORTFOLIO_MARGIN, "PUT", "/papi/v1/listenKey", True, False,
        ),
        (usdm.rest.START_USER_DATA_STREAM, Product.USDM_FUTURES, "POST", "/fapi/v1/listenKey", True, False),
        (usdm.rest.CLOSE_USER_DATA_STREAM, Product.USDM_FUTURES, "DELETE", "/fapi/v1/listenKey", True, False),
        (
            usdm.rest.GET_CURRENT_POSITION_MODE,
            Product.USDM_FUTURES, "GET", "/fapi/v1/positionSide/dual", False, True,
        ),
        (
            usdm.rest.CANCEL_ALL_OPEN_ORDERS,
            Product.USDM_FUTURES, "DELETE", "/fapi/v1/allOpenOrders", False, True,
        ),
        (
            usdm.rest.AUTO_CANCEL_ALL_OPEN_ORDERS,
            Product.USDM_FUTURES, "POST", "/fapi/v1/countdownCancelAll", False, True,
        ),
    ],
    ids=lambda value: getattr(value, "id", None),
)
def test_descriptor(descriptor, product, method, path, keyed, signed):
    assert descriptor.product is product
    assert descriptor.method == method
    assert descriptor.path == path
    assert descriptor.keyed is keyed
    assert descriptor.signed is signed


def test_user_stream_responses():
    assert spot.rest.START_USER_DATA_STREAM.response_type is ListenKey
    assert usdm.rest.KEEPALIVE_USER_DATA_STREAM.response_type is EmptyResponse
    assert usdm.rest.CANCEL_ALL_OPEN_ORDERS.response_type is CodeMessage


def test_spot_keepalive_requires_listen_key():
    request = spot.rest.KEEPALIVE_USER_DATA_STREAM.build_request(listenKey="abc")
    assert request.listen_key == "abc"


def test_futures_keepalive_has_no_fields():
    assert usdm.rest.KeepaliveUserDataStreamRequest.model_fields == {}
    assert portfolio_margin.rest.KeepaliveUserDataStreamRequest.model_fields == {}


def test_descriptor_ids_unique():
    descriptors = [
        value
        for module in (spot.rest, margin.rest, portfolio_margin.rest, usdm.rest)
        for value in vars(module).values()
        if hasattr(value, "request_type") and hasattr(value, "response_type")
    ]
    ids = [descriptor.id for descriptor in descriptors]
    assert len(ids) == len(set(ids))
