"""Per-product stream message decoding.

A decoder turns one stream payload into the product's message variant.
Variants are chosen by an explicit table keyed on the event tag (``"e"``);
streams whose payload carries no tag are routed by the topic's stream type
instead. JSON numbers are parsed straight into ``Decimal``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError

from ...core.enums import Product
from ...core.exceptions import (
    DeserializationError,
    StreamNotImplementedError,
    UnknownStreamError,
    UserDataStreamEventNotImplementedError,
)
from ...models.base import WireModel

MessageT = TypeVar("MessageT")


class Keepalive(WireModel):
    """Synthetic keepalive tick.

    Never sent by the exchange; a session returns it for transport pings
    when asked to surface them.
    """

    pass


def stream_type(topic: str) -> str:
    """Stream type of a topic: ``bnbbtc@depth5@100ms`` -> ``depth5``, ``!bookTicker`` -> ``bookTicker``."""
    name = topic.split("@", 1)[1] if "@" in topic else topic.lstrip("!")
    return name.split("@", 1)[0]


class MessageDecoder(Generic[MessageT]):
    """Decoding capability for one product's streams.

    Subclasses fill the class-level tables; the routing logic is shared.
    """

    product: ClassVar[Product]
    discriminator: ClassVar[str] = "e"
    # event tag -> model
    events: ClassVar[Mapping[str, type[WireModel]]] = {}
    # stream type -> model, for payloads without an event tag
    topic_variants: ClassVar[Mapping[str, type[WireModel]]] = {}
    # tags / stream types that exist on the exchange but are not modelled yet
    unimplemented_events: ClassVar[frozenset[str]] = frozenset()
    unimplemented_streams: ClassVar[frozenset[str]] = frozenset()

    def parse(self, topic: str, raw: str | bytes) -> MessageT:
        """Decode one raw JSON text for ``topic``."""
        try:
            payload = json.loads(raw, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DeserializationError(f"Malformed message on {topic}: {exc}", raw=raw) from exc
        return self.decode(topic, payload)

    def decode(self, topic: str, payload: Any) -> MessageT:
        """Decode an already-parsed JSON payload for ``topic``."""
        if not isinstance(payload, dict):
            raise DeserializationError(
                f"Expected a JSON object on {topic}, got {type(payload).__name__}",
                raw=payload,
            )
        model = self.resolve(topic, payload)
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DeserializationError(
                f"Invalid {model.__name__} on {topic}: {exc}", raw=payload
            ) from exc

    def resolve(self, topic: str, payload: Mapping[str, Any]) -> type[WireModel]:
        """Pick the variant model for a payload, or raise a routing error."""
        tag = payload.get(self.discriminator)
        if tag is None:
            kind = stream_type(topic)
            if kind in self.topic_variants:
                return self.topic_variants[kind]
            if kind in self.unimplemented_streams:
                raise StreamNotImplementedError(topic)
            raise UnknownStreamError(topic)

        tag = str(tag)
        if tag in self.events:
            return self.events[tag]
        if tag in self.unimplemented_events:
            raise UserDataStreamEventNotImplementedError(tag)
        raise UnknownStreamError(tag)

    @staticmethod
    def keepalive() -> Keepalive:
        return Keepalive()
