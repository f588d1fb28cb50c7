"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.common import ExchangeError


class BinanceError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(BinanceError):
    """Client or session is missing something it needs before any I/O."""

    pass


class MissingApiKeyError(ConfigurationError):
    """Endpoint requires an API key but none was configured."""

    def __init__(self, message: str = "No API key set for private API") -> None:
        super().__init__(message)


class MissingApiSecretError(ConfigurationError):
    """Endpoint requires a signature but no API secret was configured."""

    def __init__(self, message: str = "No API secret set for private API") -> None:
        super().__init__(message)


class EmptyTopicsError(ConfigurationError):
    """Streaming session was created without any topic."""

    def __init__(self, message: str = "Topics is empty") -> None:
        super().__init__(message)


class ProtocolError(BinanceError):
    """Handshake or routing failure while talking to the exchange."""

    pass


class StartWebsocketError(ProtocolError):
    """WebSocket handshake was answered with something other than 101."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Error when trying to connect websocket: {status} - {body}")
        self.status = status
        self.body = body


class UnknownStreamError(ProtocolError):
    """Frame does not map to any message variant of the product."""

    def __init__(self, stream: str) -> None:
        super().__init__(f"Unknown stream {stream}")
        self.stream = stream


class StreamNotImplementedError(ProtocolError):
    """Market stream is known but has no message model yet."""

    def __init__(self, stream: str) -> None:
        super().__init__(f"Stream {stream} not implemented yet")
        self.stream = stream


class UserDataStreamEventNotImplementedError(ProtocolError):
    """User data stream event is known but has no message model yet."""

    def __init__(self, event: str) -> None:
        super().__init__(f"User data stream event {event} not implemented yet")
        self.event = event


class BinanceResponseError(BinanceError):
    """Exchange answered with its structured ``{"code", "msg"}`` error body.

    Transport failures never end up here; they propagate as the HTTP
    library raised them.
    """

    def __init__(self, code: int, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Binance returns error: {code} - {message}")
        self.code = code
        self.message = message
        self.status_code = status_code

    @classmethod
    def from_error(
        cls, error: ExchangeError, status_code: int | None = None
    ) -> BinanceResponseError:
        """Build from a decoded error envelope."""
        return cls(error.code, error.message, status_code=status_code)

    @property
    def error(self) -> ExchangeError:
        """The error envelope as a model."""
        from ..models.common import ExchangeError

        return ExchangeError(code=self.code, message=self.message)


class WebsocketClosedError(BinanceError):
    """Streaming session is closed; no further messages will arrive."""

    def __init__(self, message: str = "Websocket is closed") -> None:
        super().__init__(message)


class DeserializationError(BinanceError):
    """Payload could not be decoded into the expected type.

    ``raw`` holds the offending body or frame: text for HTTP bodies and
    malformed JSON, the parsed object for frames that failed validation.
    """

    def __init__(
        self,
        message: str,
        raw: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.raw = raw
        self.status_code = status_code
