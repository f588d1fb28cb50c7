"""Unit tests for RequestDispatcher."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qsl, urlsplit

import aiohttp
import pytest

from laakhay.binance import ClientConfig, Credentials
from laakhay.binance.connectors import spot, usdm
from laakhay.binance.core import (
    BinanceResponseError,
    DeserializationError,
    MissingApiKeyError,
    MissingApiSecretError,
    Product,
)
from laakhay.binance.models.common import CodeMessage
from laakhay.binance.runtime.rest import (
    BinanceRequest,
    HTTPClient,
    HTTPResponse,
    RequestDescriptor,
    RequestDispatcher,
    sign,
)

NOW = 1700000000000


def _transport(status: int = 200, body: str = "{}") -> MagicMock:
    transport = MagicMock(spec=HTTPClient)
    transport.request = AsyncMock(return_value=HTTPResponse(status=status, body=body))
    return transport


def _dispatcher(transport, credentials=None, config=None) -> RequestDispatcher:
    return RequestDispatcher(transport, credentials, config, clock=lambda: NOW)


def _sent(transport):
    call = transport.request.call_args
    method, url = call.args
    return method, url, call.kwargs["headers"]


class TestPublicRequests:
    @pytest.mark.asyncio
    async def test_ping(self):
        transport = _transport(body="{}")
        result = await _dispatcher(transport).run(spot.rest.PING)

        assert result == spot.rest.PING.response_type()
        method, url, headers = _sent(transport)
        assert method == "GET"
        assert url == "https://api.binance.com/api/v3/ping"
        assert headers == {}

    @pytest.mark.asyncio
    async def test_query_params(self):
        transport = _transport(body='{"timezone": "UTC", "serverTime": 1, "symbols": []}')
        await _dispatcher(transport).run(spot.rest.EXCHANGE_INFO, symbol="BNBBTC")
        _, url, _ = _sent(transport)
        assert url == "https://api.binance.com/api/v3/exchangeInfo?symbol=BNBBTC"

    @pytest.mark.asyncio
    async def test_base_url_override(self):
        transport = _transport(body='{"serverTime": 5}')
        config = ClientConfig(rest_base_urls={Product.SPOT: "http://localhost:9000"})
        result = await _dispatcher(transport, config=config).run(spot.rest.SERVER_TIME)
        assert result.server_time == 5
        assert _sent(transport)[1] == "http://localhost:9000/api/v3/time"

    @pytest.mark.asyncio
    async def test_empty_body_is_empty_object(self):
        transport = _transport(body="")
        await _dispatcher(transport).run(spot.rest.PING)


class TestCredentialChecks:
    """Missing credentials fail before any network I/O."""

    @pytest.mark.asyncio
    async def test_signed_without_secret(self):
        transport = _transport()
        with pytest.raises(MissingApiSecretError):
            await _dispatcher(transport, Credentials(api_key="k")).run(
                spot.rest.ACCOUNT_INFORMATION
            )
        transport.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_signed_with_nothing_reports_secret(self):
        transport = _transport()
        with pytest.raises(MissingApiSecretError):
            await _dispatcher(transport).run(spot.rest.ACCOUNT_INFORMATION)
        transport.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_signed_without_key(self):
        transport = _transport()
        with pytest.raises(MissingApiKeyError):
            await _dispatcher(transport, Credentials(api_secret="s")).run(
                spot.rest.ACCOUNT_INFORMATION
            )
        transport.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_keyed_without_key(self):
        transport = _transport()
        with pytest.raises(MissingApiKeyError):
            await _dispatcher(transport).run(spot.rest.START_USER_DATA_STREAM)
        transport.request.assert_not_called()


class TestKeyedAndSignedRequests:
    @pytest.mark.asyncio
    async def test_keyed_sends_header_without_signature(self):
        transport = _transport(body='{"listenKey": "abc"}')
        result = await _dispatcher(transport, Credentials(api_key="key")).run(
            spot.rest.START_USER_DATA_STREAM
        )
        assert result.listen_key == "abc"
        method, url, headers = _sent(transport)
        assert method == "POST"
        assert url == "https://api.binance.com/api/v3/userDataStream"
        assert headers == {"X-MBX-APIKEY": "key"}

    @pytest.mark.asyncio
    async def test_signed_query(self):
        transport = _transport(body='{"symbol": "BTCUSDT", "countdownTime": 120000}')
        creds = Credentials(api_key="key", api_secret="secret")

        result = await _dispatcher(transport, creds).run(
            usdm.rest.AUTO_CANCEL_ALL_OPEN_ORDERS, symbol="BTCUSDT", countdownTime=120000
        )

        assert result.countdown_time == 120000
        method, url, headers = _sent(transport)
        assert method == "POST"
        assert headers == {"X-MBX-APIKEY": "key"}
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://fapi.binance.com/fapi/v1/countdownCancelAll"
        )
        body, _, signature = parts.query.partition("&signature=")
        assert body == (
            f"symbol=BTCUSDT&countdownTime=120000&timestamp={NOW}&recvWindow=5000"
        )
        assert signature == sign("secret", body)

    @pytest.mark.asyncio
    async def test_recv_window_disabled(self):
        transport = _transport(body='{"dualSidePosition": true}')
        creds = Credentials(api_key="key", api_secret="secret")
        config = ClientConfig(recv_window=None)
        await _dispatcher(transport, creds, config).run(usdm.rest.GET_CURRENT_POSITION_MODE)
        params = dict(parse_qsl(urlsplit(_sent(transport)[1]).query))
        assert "recvWindow" not in params
        assert params["timestamp"] == str(NOW)

    @pytest.mark.asyncio
    async def test_product_without_recv_window(self):
        class OptionsAccountRequest(BinanceRequest):
            pass

        descriptor = RequestDescriptor(
            id="options.account",
            product=Product.EUROPEAN_OPTIONS,
            method="GET",
            path="/eapi/v1/account",
            request_type=OptionsAccountRequest,
            response_type=dict,
            signed=True,
        )
        transport = _transport(body="{}")
        creds = Credentials(api_key="key", api_secret="secret")
        await _dispatcher(transport, creds).run(descriptor)
        url = _sent(transport)[1]
        assert url.startswith(f"https://eapi.binance.com/eapi/v1/account?timestamp={NOW}&signature=")


class TestResponseDecoding:
    @pytest.mark.asyncio
    async def test_error_envelope(self):
        transport = _transport(status=400, body='{"code": -1121, "msg": "Invalid symbol."}')
        with pytest.raises(BinanceResponseError) as exc_info:
            await _dispatcher(transport).run(spot.rest.EXCHANGE_INFO, symbol="NOPE")
        assert exc_info.value.code == -1121
        assert exc_info.value.message == "Invalid symbol."
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_error_envelope_with_success_status(self):
        transport = _transport(status=200, body='{"code": -2011, "msg": "Unknown order sent."}')
        creds = Credentials(api_key="key", api_secret="secret")
        with pytest.raises(BinanceResponseError) as exc_info:
            await _dispatcher(transport, creds).run(
                usdm.rest.CANCEL_ALL_OPEN_ORDERS, symbol="BTCUSDT"
            )
        assert exc_info.value.code == -2011

    @pytest.mark.asyncio
    async def test_code_200_is_success(self):
        body = '{"code": 200, "msg": "The operation of cancel all open order is done."}'
        transport = _transport(status=200, body=body)
        creds = Credentials(api_key="key", api_secret="secret")
        result = await _dispatcher(transport, creds).run(
            usdm.rest.CANCEL_ALL_OPEN_ORDERS, symbol="BTCUSDT"
        )
        assert result == CodeMessage(code=200, msg="The operation of cancel all open order is done.")

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        transport = _transport(status=502, body="<html>Bad Gateway</html>")
        with pytest.raises(DeserializationError) as exc_info:
            await _dispatcher(transport).run(spot.rest.PING)
        assert exc_info.value.status_code == 502
        assert exc_info.value.raw == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_failure_status_without_envelope(self):
        transport = _transport(status=503, body='{"message": "maintenance"}')
        with pytest.raises(DeserializationError):
            await _dispatcher(transport).run(spot.rest.PING)

    @pytest.mark.asyncio
    async def test_unexpected_shape(self):
        transport = _transport(body='{"time": 1}')
        with pytest.raises(DeserializationError):
            await _dispatcher(transport).run(spot.rest.SERVER_TIME)

    @pytest.mark.asyncio
    async def test_decimals_keep_precision(self):
        body = (
            '{"symbol": "BTCUSDT", "orderId": 1, "orderListId": -1, "clientOrderId": "x",'
            ' "price": "0.10000000", "origQty": 1.1, "executedQty": "0", '
            '"cummulativeQuoteQty": "0", "status": "NEW", "timeInForce": "GTC",'
            ' "type": "LIMIT", "side": "BUY", "time": 1, "updateTime": 2, "isWorking": true}'
        )
        transport = _transport(body=body)
        creds = Credentials(api_key="key", api_secret="secret")
        order = await _dispatcher(transport, creds).run(
            spot.rest.QUERY_ORDER, symbol="BTCUSDT", orderId=1
        )
        assert order.price == Decimal("0.10000000")
        assert order.orig_qty == Decimal("1.1")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        transport = MagicMock(spec=HTTPClient)
        transport.request = AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))
        with pytest.raises(aiohttp.ClientConnectionError):
            await _dispatcher(transport).run(spot.rest.PING)
