"""OpenRouter API client."""

from typing import Any

import httpx

from openrouter_client.auth.strategies import AuthStrategy, ApiKeyAuth
from openrouter_client.config.settings import Settings, get_settings
from openrouter_client.errors import NotFoundError, TransportError, TransportTimeoutError
from openrouter_client.http.classifier import (
    RecordT,
    classify_error,
    decode_body,
    is_success,
    parse_retry_after,
)
from openrouter_client.logging.audit import (
    RequestTimer,
    generate_request_id,
    get_logger,
    request_id_var,
)
from openrouter_client.models.account import CreditsResponse, GenerationStats
from openrouter_client.models.catalog import Model, ModelList
from openrouter_client.models.chat import CreateChatCompletionRequest, CreateChatCompletionResponse


class Client:
    """Async client for the OpenRouter API.

    Instances are built with Client.builder() and are read-only afterwards:
    the auth strategy and base URL stay fixed for the client's lifetime, and
    one client can serve any number of concurrent calls. Each call is a
    single HTTP attempt; retries are left to the caller.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        auth: AuthStrategy,
        base_url: str,
        owns_http: bool = True,
    ):
        self._http = http
        self._auth = auth
        self._base_url = base_url
        self._owns_http = owns_http

    @staticmethod
    def builder():
        from openrouter_client.client.builder import ClientBuilder
        return ClientBuilder()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Client":
        """Build a client from OPENROUTER_* environment settings."""
        settings = settings or get_settings()
        return (
            cls.builder()
            .auth(ApiKeyAuth.from_settings(settings))
            .base_url(settings.base_url)
            .timeout(settings.timeout, connect=settings.connect_timeout)
            .build()
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> AuthStrategy:
        return self._auth

    async def create_chat_completion(
        self, request: CreateChatCompletionRequest
    ) -> CreateChatCompletionResponse:
        return await self._send(
            "POST",
            "/chat/completions",
            CreateChatCompletionResponse,
            payload=request.to_payload(),
        )

    async def list_models(self) -> ModelList:
        return await self._send("GET", "/models", ModelList)

    async def get_model(self, model_id: str) -> Model:
        """Look up one model in the full catalog.

        There is no single-model endpoint, so this fetches the whole list on
        every call and returns the first entry with a matching id.
        """
        models = await self.list_models()
        for model in models.data:
            if model.id == model_id:
                return model
        raise NotFoundError(f"Model not found: {model_id}")

    async def get_generation(self, generation_id: str) -> GenerationStats:
        return await self._send(
            "GET", "/generation", GenerationStats, params={"id": generation_id}
        )

    async def get_credits(self) -> CreditsResponse:
        return await self._send("GET", "/auth/key", CreditsResponse)

    async def aclose(self) -> None:
        """Close the underlying connection pool if this client created it."""
        if self._owns_http and not self._http.is_closed:
            await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        record_type: type[RecordT],
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> RecordT:
        url = f"{self._base_url}{path}"

        headers = httpx.Headers()
        if payload is not None:
            headers["Content-Type"] = "application/json"
        await self._auth.apply(headers)

        logger = get_logger()
        token = request_id_var.set(generate_request_id())
        try:
            logger.debug(
                f"{method} request",
                extra={"audit_data": {"method": method, "url": url, "params": params or {}}},
            )

            with RequestTimer() as timer:
                try:
                    response = await self._http.request(
                        method, url, headers=headers, json=payload, params=params
                    )
                except httpx.TimeoutException as e:
                    logger.warning("Transport timeout", extra={"audit_data": {"url": url}})
                    raise TransportTimeoutError(f"OpenRouter timed out: {e}") from e
                except httpx.ConnectError as e:
                    logger.warning("Transport connect error", extra={"audit_data": {"url": url}})
                    raise TransportError(f"Cannot reach OpenRouter: {e}") from e
                except httpx.HTTPError as e:
                    logger.warning("Transport error", extra={"audit_data": {"url": url}})
                    raise TransportError(str(e)) from e

            status_code = response.status_code
            if is_success(status_code):
                logger.debug(
                    "Response received",
                    extra={"audit_data": {"status": status_code, "latency_ms": timer.elapsed_ms}},
                )
                return decode_body(response.content, record_type)

            body = response.text
            logger.warning(
                "API error",
                extra={"audit_data": {
                    "status": status_code,
                    "body": body,
                    "latency_ms": timer.elapsed_ms,
                }},
            )
            retry_after = parse_retry_after(response.headers.get("retry-after"))
            raise classify_error(status_code, body, retry_after)
        finally:
            request_id_var.reset(token)
