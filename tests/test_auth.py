"""Tests for openrouter_client/auth/strategies.py — header injection."""

import asyncio
import dataclasses

import httpx
import pytest

from openrouter_client.auth.strategies import ApiKeyAuth, AuthStrategy
from openrouter_client.config.settings import Settings
from openrouter_client.errors import ConfigurationError, InvalidHeaderError


class TestApiKeyAuth:

    async def test_bearer_only(self):
        headers = {}
        await ApiKeyAuth("sk-or-abc").apply(headers)
        assert headers == {"Authorization": "Bearer sk-or-abc"}

    async def test_site_url_only(self):
        headers = {}
        await ApiKeyAuth("k").with_site_url("https://myapp.com").apply(headers)
        assert headers == {"Authorization": "Bearer k", "HTTP-Referer": "https://myapp.com"}

    async def test_site_name_only(self):
        headers = {}
        await ApiKeyAuth("k").with_site_name("My App").apply(headers)
        assert headers == {"Authorization": "Bearer k", "X-Title": "My App"}

    async def test_all_headers(self):
        headers = httpx.Headers()
        auth = ApiKeyAuth("k").with_site_url("https://myapp.com").with_site_name("My App")
        await auth.apply(headers)
        assert headers["authorization"] == "Bearer k"
        assert headers["http-referer"] == "https://myapp.com"
        assert headers["x-title"] == "My App"

    async def test_preserves_existing_headers(self):
        headers = {"Content-Type": "application/json"}
        await ApiKeyAuth("k").apply(headers)
        assert headers["Content-Type"] == "application/json"

    def test_with_methods_return_new_instances(self):
        base = ApiKeyAuth("k")
        named = base.with_site_name("My App")
        assert base.site_name is None
        assert named.site_name == "My App"
        assert named is not base

    def test_frozen(self):
        auth = ApiKeyAuth("k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            auth.api_key = "other"

    def test_repr_hides_key(self):
        assert "sk-or-secret" not in repr(ApiKeyAuth("sk-or-secret"))

    def test_is_auth_strategy(self):
        assert isinstance(ApiKeyAuth("k"), AuthStrategy)

    async def test_concurrent_apply_shares_instance(self):
        auth = ApiKeyAuth("k").with_site_name("My App")
        header_sets = [{} for _ in range(20)]
        await asyncio.gather(*(auth.apply(h) for h in header_sets))
        assert all(h == {"Authorization": "Bearer k", "X-Title": "My App"} for h in header_sets)


class TestInvalidHeaders:

    @pytest.mark.parametrize("key", ["sk\nor", "sk\r\nX-Evil: 1", "sk\x00", "sk\x7f"])
    async def test_control_chars_in_key(self, key):
        with pytest.raises(InvalidHeaderError) as exc_info:
            await ApiKeyAuth(key).apply({})
        assert exc_info.value.header == "Authorization"

    async def test_control_chars_in_site_name(self):
        with pytest.raises(InvalidHeaderError) as exc_info:
            await ApiKeyAuth("k").with_site_name("My\nApp").apply({})
        assert exc_info.value.header == "X-Title"

    async def test_control_chars_in_site_url(self):
        with pytest.raises(InvalidHeaderError) as exc_info:
            await ApiKeyAuth("k").with_site_url("https://x.com/\r").apply({})
        assert exc_info.value.header == "HTTP-Referer"

    async def test_tab_is_allowed(self):
        headers = {}
        await ApiKeyAuth("k").with_site_name("My\tApp").apply(headers)
        assert headers["X-Title"] == "My\tApp"


class TestFromSettings:

    def test_full(self):
        settings = Settings(api_key="sk-or-1", site_url="https://a.io", site_name="A")
        auth = ApiKeyAuth.from_settings(settings)
        assert auth == ApiKeyAuth("sk-or-1", site_url="https://a.io", site_name="A")

    def test_empty_site_fields_are_unset(self):
        auth = ApiKeyAuth.from_settings(Settings(api_key="sk-or-1", site_url="", site_name=""))
        assert auth.site_url is None
        assert auth.site_name is None

    def test_missing_key(self):
        with pytest.raises(ConfigurationError):
            ApiKeyAuth.from_settings(Settings(api_key=""))
