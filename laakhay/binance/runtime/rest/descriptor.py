"""Declarative REST endpoint definitions.

Every endpoint is one ``RequestDescriptor``: product, HTTP method, path
template, auth flags, and the request/response types. The dispatcher does
the rest, so endpoint modules contain only data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from ...core.enums import Product

RequestT = TypeVar("RequestT", bound="BinanceRequest")
ResponseT = TypeVar("ResponseT")


class BinanceRequest(BaseModel):
    """Base of every request payload.

    Field declaration order is the order parameters appear in the query
    string, which is also the order the signature covers. Wire names are
    given with explicit aliases; ``None`` fields are left out entirely.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


@dataclass(frozen=True)
class RequestDescriptor(Generic[RequestT, ResponseT]):
    id: str
    product: Product
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    path: str  # may hold {field} placeholders filled from the request
    request_type: type[RequestT]
    response_type: Any  # anything pydantic can validate, e.g. Model or list[Model]
    keyed: bool = False
    signed: bool = False
    _adapter: TypeAdapter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "_adapter", TypeAdapter(self.response_type))

    @property
    def requires_key(self) -> bool:
        """Signed endpoints also authenticate with the key header."""
        return self.keyed or self.signed

    def build_request(self, request: RequestT | None = None, **fields: Any) -> RequestT:
        """Return ``request`` or build one from keyword fields."""
        if request is None:
            return self.request_type(**fields)
        if fields:
            raise TypeError(f"{self.id}: pass a request instance or field values, not both")
        if not isinstance(request, self.request_type):
            raise TypeError(
                f"{self.id} expects {self.request_type.__name__}, got {type(request).__name__}"
            )
        return request

    def decode_response(self, payload: Any) -> ResponseT:
        """Validate a decoded JSON body; raises ``pydantic.ValidationError``."""
        return self._adapter.validate_python(payload)
