"""Unit tests for the shared stream decoding rules."""

import pytest

from laakhay.binance.core import (
    DeserializationError,
    StreamNotImplementedError,
    UnknownStreamError,
    UserDataStreamEventNotImplementedError,
)
from laakhay.binance.runtime.ws import Keepalive, stream_type
from laakhay.binance.connectors.spot import SpotDecoder


class TestStreamType:
    @pytest.mark.parametrize(
        ("topic", "expected"),
        [
            ("bnbbtc@trade", "trade"),
            ("bnbbtc@depth5@100ms", "depth5"),
            ("bnbbtc@kline_1m", "kline_1m"),
            ("!bookTicker", "bookTicker"),
            ("!miniTicker@arr", "miniTicker"),
        ],
    )
    def test_stream_type(self, topic, expected):
        assert stream_type(topic) == expected


class TestMessageDecoderRouting:
    def test_unknown_tag(self):
        with pytest.raises(UnknownStreamError) as exc_info:
            SpotDecoder().decode("x@foo", {"e": "foo"})
        assert exc_info.value.stream == "foo"

    def test_untagged_unknown_topic(self):
        with pytest.raises(UnknownStreamError) as exc_info:
            SpotDecoder().decode("bnbbtc@mystery", {"u": 1})
        assert exc_info.value.stream == "bnbbtc@mystery"

    def test_known_but_unimplemented_stream(self):
        with pytest.raises(StreamNotImplementedError):
            SpotDecoder().decode("bnbbtc@depth5@100ms", {"lastUpdateId": 1, "bids": [], "asks": []})

    def test_known_but_unimplemented_event(self):
        with pytest.raises(UserDataStreamEventNotImplementedError):
            SpotDecoder().decode("listenkey", {"e": "eventStreamTerminated", "E": 1})

    def test_invalid_fields(self):
        payload = {"e": "trade", "E": 1}
        with pytest.raises(DeserializationError) as exc_info:
            SpotDecoder().decode("bnbbtc@trade", payload)
        assert exc_info.value.raw == payload

    def test_non_object_payload(self):
        with pytest.raises(DeserializationError) as exc_info:
            SpotDecoder().decode("bnbbtc@trade", [1, 2])
        assert exc_info.value.raw == [1, 2]

    def test_parse_malformed_json(self):
        with pytest.raises(DeserializationError):
            SpotDecoder().parse("bnbbtc@trade", "{not json")

    def test_keepalive(self):
        assert isinstance(SpotDecoder().keepalive(), Keepalive)
