"""Authentication strategies for OpenRouter requests.

A strategy writes credentials and app identification into the outgoing
headers. One strategy instance is shared by every in-flight request of a
Client, so apply() must only read its own fields.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass, field, replace

from openrouter_client.config.settings import Settings
from openrouter_client.errors import ConfigurationError, InvalidHeaderError

# C0 controls except TAB, plus DEL
_FORBIDDEN_HEADER_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def validate_header_value(name: str, value: str) -> str:
    if _FORBIDDEN_HEADER_CHARS.search(value):
        raise InvalidHeaderError(name, "value contains control characters")
    return value


class AuthStrategy(ABC):
    """Base class for request authentication."""

    @abstractmethod
    async def apply(self, headers: MutableMapping[str, str]) -> None:
        """Inject credentials into the request headers in place.

        Raises:
            InvalidHeaderError: a credential cannot be sent as a header value.
        """
        ...


@dataclass(frozen=True)
class ApiKeyAuth(AuthStrategy):
    """Bearer API key, optionally with the app's URL and display name.

    OpenRouter reads HTTP-Referer and X-Title to attribute usage to an app
    on its dashboard and rankings.
    """

    api_key: str = field(repr=False)
    site_url: str | None = None
    site_name: str | None = None

    def with_site_url(self, url: str) -> "ApiKeyAuth":
        return replace(self, site_url=url)

    def with_site_name(self, name: str) -> "ApiKeyAuth":
        return replace(self, site_name=name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiKeyAuth":
        if not settings.api_key:
            raise ConfigurationError("OPENROUTER_API_KEY is not set")
        return cls(
            api_key=settings.api_key,
            site_url=settings.site_url or None,
            site_name=settings.site_name or None,
        )

    async def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = validate_header_value(
            "Authorization", f"Bearer {self.api_key}"
        )

        if self.site_url is not None:
            headers["HTTP-Referer"] = validate_header_value("HTTP-Referer", self.site_url)

        if self.site_name is not None:
            headers["X-Title"] = validate_header_value("X-Title", self.site_name)
