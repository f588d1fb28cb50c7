"""REST request runner driven by request descriptors."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from decimal import Decimal
from typing import Any, NoReturn

from pydantic import ValidationError

from ...config import API_KEY_HEADER, ClientConfig
from ...core.credentials import Credentials
from ...core.exceptions import BinanceResponseError, DeserializationError
from ...models.common import ExchangeError
from .descriptor import RequestDescriptor, RequestT, ResponseT
from .http_client import HTTPClient, HTTPResponse
from .signing import (
    build_query,
    current_timestamp_ms,
    encode_params,
    path_fields,
    render_path,
    sign_query,
)

logger = logging.getLogger(__name__)


class RequestDispatcher:
    """Executes one descriptor per call: one round trip, no retries.

    Credential checks happen before any network I/O. Exchange errors become
    ``BinanceResponseError``; transport errors propagate unmodified.
    """

    def __init__(
        self,
        transport: HTTPClient,
        credentials: Credentials | None = None,
        config: ClientConfig | None = None,
        clock: Callable[[], int] = current_timestamp_ms,
    ) -> None:
        self._t = transport
        self._credentials = credentials or Credentials()
        self._config = config or ClientConfig()
        self._clock = clock

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    async def run(
        self,
        descriptor: RequestDescriptor[RequestT, ResponseT],
        request: RequestT | None = None,
        /,
        **fields: Any,
    ) -> ResponseT:
        request = descriptor.build_request(request, **fields)
        url, headers = self.prepare(descriptor, request)
        logger.debug(f"Dispatching {descriptor.id} ({descriptor.method} {descriptor.path})")
        response = await self._t.request(descriptor.method, url, headers=headers)
        return self.decode(descriptor, response)

    def prepare(
        self, descriptor: RequestDescriptor[RequestT, Any], request: RequestT
    ) -> tuple[str, dict[str, str]]:
        """Build the final URL and headers, signing if required."""
        secret = self._credentials.require_secret() if descriptor.signed else None
        key = self._credentials.require_key() if descriptor.requires_key else None

        path = render_path(descriptor.path, request)
        query = build_query(encode_params(request, exclude=path_fields(descriptor.path)))
        if secret is not None:
            recv_window = (
                self._config.recv_window if descriptor.product.uses_recv_window else None
            )
            query = sign_query(query, secret, self._clock(), recv_window)

        url = f"{self._config.rest_base_url(descriptor.product)}{path}"
        if query:
            url = f"{url}?{query}"
        headers = {API_KEY_HEADER: key} if key is not None else {}
        return url, headers

    def decode(
        self, descriptor: RequestDescriptor[Any, ResponseT], response: HTTPResponse
    ) -> ResponseT:
        payload = _load_json(response)
        if not response.ok or ExchangeError.matches(payload):
            _raise_exchange_error(response, payload)
        try:
            return descriptor.decode_response(payload)
        except ValidationError as exc:
            raise DeserializationError(
                f"{descriptor.id}: unexpected response body: {exc}",
                raw=response.body,
                status_code=response.status,
            ) from exc


def _load_json(response: HTTPResponse) -> Any:
    if not response.body.strip():
        return {}
    try:
        return json.loads(response.body, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise DeserializationError(
            f"Response body is not JSON (status {response.status})",
            raw=response.body,
            status_code=response.status,
        ) from exc


def _raise_exchange_error(response: HTTPResponse, payload: Any) -> NoReturn:
    try:
        error = ExchangeError.model_validate(payload)
    except ValidationError as exc:
        raise DeserializationError(
            f"Unexpected error body (status {response.status})",
            raw=response.body,
            status_code=response.status,
        ) from exc
    logger.debug(f"Binance error {error.code} (status {response.status}): {error.message}")
    raise BinanceResponseError.from_error(error, status_code=response.status)
