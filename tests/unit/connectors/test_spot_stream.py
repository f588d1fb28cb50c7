"""Unit tests for spot and margin stream decoding."""

from decimal import Decimal

import pytest

from laakhay.binance.connectors.margin import MarginDecoder
from laakhay.binance.connectors.spot import SpotDecoder
from laakhay.binance.connectors.spot.ws import (
    AggregateTrade,
    BookTicker,
    DepthUpdate,
    ExecutionReport,
    Kline,
    ListenKeyExpired,
    OutboundAccountPosition,
    Trade,
)
from laakhay.binance.core import Product, UnknownStreamError

TRADE_FRAME = (
    '{"e":"trade","E":123456789,"s":"BNBBTC","t":12345,"p":"0.001","q":"100",'
    '"T":123456785,"m":true,"M":true}'
)


class TestSpotMarketStreams:
    def test_trade(self):
        message = SpotDecoder().parse("bnbbtc@trade", TRADE_FRAME)
        assert isinstance(message, Trade)
        assert message.symbol == "BNBBTC"
        assert message.trade_id == 12345
        assert message.price == Decimal("0.001")
        assert message.qty == Decimal("100")
        assert message.is_buyer_maker is True

    def test_unknown_event(self):
        with pytest.raises(UnknownStreamError) as exc_info:
            SpotDecoder().parse("x", '{"e":"foo"}')
        assert exc_info.value.stream == "foo"

    def test_agg_trade(self):
        payload = {
            "e": "aggTrade", "E": 1, "s": "BNBBTC", "a": 12345, "p": "0.001",
            "q": "100", "f": 100, "l": 105, "T": 2, "m": True, "M": True,
        }
        message = SpotDecoder().decode("bnbbtc@aggTrade", payload)
        assert isinstance(message, AggregateTrade)
        assert message.last_break_trade_id == 105

    def test_kline(self):
        payload = {
            "e": "kline", "E": 1, "s": "BNBBTC",
            "k": {
                "t": 0, "T": 59999, "s": "BNBBTC", "i": "1m", "f": 100, "L": 200,
                "o": "0.0010", "c": "0.0020", "h": "0.0025", "l": "0.0015",
                "v": "1000", "n": 100, "x": False, "q": "1.0000",
                "V": "500", "Q": "0.500", "B": "123456",
            },
        }
        message = SpotDecoder().decode("bnbbtc@kline_1m", payload)
        assert isinstance(message, Kline)
        assert message.kline_data.interval == "1m"
        assert message.kline_data.is_closed is False
        assert message.kline_data.close_price == Decimal("0.0020")

    def test_book_ticker_routed_by_topic(self):
        """Book ticker frames carry no event tag."""
        payload = {"u": 400900217, "s": "BNBUSDT", "b": "25.35190000", "B": "31.21000000",
                   "a": "25.36520000", "A": "40.66000000"}
        message = SpotDecoder().decode("bnbusdt@bookTicker", payload)
        assert isinstance(message, BookTicker)
        assert message.best_ask_qty == Decimal("40.66000000")

    def test_depth_update_levels(self):
        payload = {
            "e": "depthUpdate", "E": 1, "s": "BNBBTC", "U": 157, "u": 160,
            "b": [["0.0024", "10"]], "a": [["0.0026", "100"], ["0.0027", "0"]],
        }
        message = SpotDecoder().decode("bnbbtc@depth", payload)
        assert isinstance(message, DepthUpdate)
        assert message.bids == [(Decimal("0.0024"), Decimal("10"))]
        assert message.asks[1] == (Decimal("0.0027"), Decimal("0"))


class TestSpotUserDataStream:
    def test_outbound_account_position(self):
        payload = {
            "e": "outboundAccountPosition", "E": 1564034571105, "u": 1564034571073,
            "B": [{"a": "ETH", "f": "10000.000000", "l": "0.000000"}],
        }
        message = SpotDecoder().decode("listenkey", payload)
        assert isinstance(message, OutboundAccountPosition)
        assert message.balances[0].free == Decimal("10000.000000")

    def test_execution_report(self):
        payload = {
            "e": "executionReport", "E": 1499405658658, "s": "ETHBTC", "c": "mUvoqJxFIILMdfAW5iGSOW",
            "S": "BUY", "o": "LIMIT", "f": "GTC", "q": "1.00000000", "p": "0.10264410",
            "P": "0.00000000", "F": "0.00000000", "g": -1, "C": "", "x": "NEW", "X": "NEW",
            "r": "NONE", "i": 4293153, "l": "0.00000000", "z": "0.00000000",
            "L": "0.00000000", "n": "0", "N": None, "T": 1499405658657, "t": -1,
            "I": 8641984, "w": True, "m": False, "M": False, "O": 1499405658657,
            "Z": "0.00000000", "Y": "0.00000000", "Q": "0.00000000", "W": 1499405658657,
            "V": "NONE",
        }
        message = SpotDecoder().decode("listenkey", payload)
        assert isinstance(message, ExecutionReport)
        assert message.commission_asset is None
        assert message.order_price == Decimal("0.10264410")

    def test_listen_key_expired(self):
        payload = {"e": "listenKeyExpired", "E": 1699596037418, "listenKey": "OfYGbUzi3PraNagEkdKuFwUHn48brFsItTdsuiIXrucEvD0rhRXZ7I6URWfE8YE8"}
        message = SpotDecoder().decode("listenkey", payload)
        assert isinstance(message, ListenKeyExpired)
        assert message.listen_key.startswith("OfYGb")


class TestMarginDecoder:
    def test_shares_spot_messages(self):
        decoder = MarginDecoder()
        assert decoder.product is Product.MARGIN
        assert isinstance(decoder.parse("bnbbtc@trade", TRADE_FRAME), Trade)
