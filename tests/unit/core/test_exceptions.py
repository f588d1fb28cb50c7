"""Precise unit tests for the exception hierarchy."""

from laakhay.binance.core import (
    BinanceError,
    BinanceResponseError,
    ConfigurationError,
    DeserializationError,
    EmptyTopicsError,
    MissingApiKeyError,
    MissingApiSecretError,
    ProtocolError,
    StartWebsocketError,
    StreamNotImplementedError,
    UnknownStreamError,
    UserDataStreamEventNotImplementedError,
    WebsocketClosedError,
)
from laakhay.binance.models.common import ExchangeError


def test_configuration_errors():
    """Configuration errors carry readable default messages."""
    for error in (MissingApiKeyError(), MissingApiSecretError(), EmptyTopicsError()):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, BinanceError)
    assert str(MissingApiKeyError()) == "No API key set for private API"
    assert str(MissingApiSecretError()) == "No API secret set for private API"
    assert str(EmptyTopicsError()) == "Topics is empty"


def test_start_websocket_error():
    error = StartWebsocketError(451, "Unavailable For Legal Reasons")
    assert isinstance(error, ProtocolError)
    assert error.status == 451
    assert "451" in str(error)


def test_stream_errors_keep_context():
    assert UnknownStreamError("foo").stream == "foo"
    assert StreamNotImplementedError("bnbbtc@depth5").stream == "bnbbtc@depth5"
    assert UserDataStreamEventNotImplementedError("MARGIN_CALL").event == "MARGIN_CALL"
    assert str(UnknownStreamError("foo")) == "Unknown stream foo"


def test_response_error_from_envelope():
    """BinanceResponseError keeps code, message and status."""
    envelope = ExchangeError(code=-1121, msg="Invalid symbol.")
    error = BinanceResponseError.from_error(envelope, status_code=400)
    assert error.code == -1121
    assert error.message == "Invalid symbol."
    assert error.status_code == 400
    assert error.error == envelope
    assert str(error) == "Binance returns error: -1121 - Invalid symbol."


def test_websocket_closed_and_deserialization():
    assert str(WebsocketClosedError()) == "Websocket is closed"
    error = DeserializationError("bad", raw="<html>", status_code=502)
    assert error.raw == "<html>"
    assert error.status_code == 502
    assert isinstance(error, BinanceError)
