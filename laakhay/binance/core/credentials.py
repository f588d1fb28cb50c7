"""API credentials shared read-only by every request."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .exceptions import MissingApiKeyError, MissingApiSecretError

API_KEY_ENV = "BINANCE_API_KEY"
API_SECRET_ENV = "BINANCE_API_SECRET"


@dataclass(frozen=True)
class Credentials:
    """Optional API key and secret.

    Set once at construction and never mutated, so one instance can be
    shared by any number of concurrent requests. With neither value set the
    client can only reach public endpoints.
    """

    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Credentials:
        """Read ``BINANCE_API_KEY`` and ``BINANCE_API_SECRET``."""
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(API_KEY_ENV) or None,
            api_secret=env.get(API_SECRET_ENV) or None,
        )

    @property
    def is_public(self) -> bool:
        """True when no key and no secret are configured."""
        return self.api_key is None and self.api_secret is None

    def require_key(self) -> str:
        if self.api_key is None:
            raise MissingApiKeyError()
        return self.api_key

    def require_secret(self) -> str:
        if self.api_secret is None:
            raise MissingApiSecretError()
        return self.api_secret
