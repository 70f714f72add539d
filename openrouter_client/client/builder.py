"""Staged construction of Client.

Building is split across two classes so that a client without credentials
cannot be produced: ClientBuilder has no build() at all, and the only way to
reach AuthenticatedClientBuilder (which does) is to hand over an
AuthStrategy. Type checkers reject ClientBuilder().build(); at runtime it is
an AttributeError.
"""

from dataclasses import dataclass, field, replace

import httpx

from openrouter_client.auth.strategies import AuthStrategy
from openrouter_client.client.client import Client
from openrouter_client.config.settings import DEFAULT_BASE_URL

DEFAULT_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientBuilder:
    """First stage: nothing attached yet."""

    def auth(self, strategy: AuthStrategy) -> "AuthenticatedClientBuilder":
        return AuthenticatedClientBuilder(strategy=strategy)


@dataclass(frozen=True)
class AuthenticatedClientBuilder:
    """Second stage: auth attached, optional settings, then build()."""

    strategy: AuthStrategy
    url: str = DEFAULT_BASE_URL
    request_timeout: httpx.Timeout = field(
        default_factory=lambda: httpx.Timeout(DEFAULT_TIMEOUT, connect=DEFAULT_CONNECT_TIMEOUT)
    )
    transport: httpx.AsyncClient | None = None

    def __post_init__(self):
        if not isinstance(self.strategy, AuthStrategy):
            raise TypeError(
                f"auth strategy must be an AuthStrategy, got {type(self.strategy).__name__}"
            )

    def base_url(self, url: str) -> "AuthenticatedClientBuilder":
        return replace(self, url=url.rstrip("/"))

    def timeout(self, seconds: float, connect: float | None = None) -> "AuthenticatedClientBuilder":
        connect = connect if connect is not None else min(seconds, DEFAULT_CONNECT_TIMEOUT)
        return replace(self, request_timeout=httpx.Timeout(seconds, connect=connect))

    def http_client(self, client: httpx.AsyncClient) -> "AuthenticatedClientBuilder":
        """Use a caller-managed httpx client; Client.aclose() leaves it open."""
        return replace(self, transport=client)

    def build(self) -> Client:
        if self.transport is not None:
            return Client(http=self.transport, auth=self.strategy, base_url=self.url, owns_http=False)
        return Client(
            http=httpx.AsyncClient(timeout=self.request_timeout),
            auth=self.strategy,
            base_url=self.url,
        )
