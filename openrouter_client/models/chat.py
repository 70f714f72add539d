"""Chat completion request and response records."""

from openrouter_client.models.messages import Message, Tool, ToolCall, WireModel


class ProviderPreferences(WireModel):
    """Routing hints for picking the backend provider (OpenRouter-specific)."""

    allow_fallbacks: bool | None = None
    require_parameters: bool | None = None
    data_collection: str | None = None  # "allow" | "deny"
    order: list[str] | None = None
    ignore: list[str] | None = None
    quantizations: list[str] | None = None  # e.g. "int4", "fp8", "bf16"


class CreateChatCompletionRequest(WireModel):
    """Body of POST /chat/completions.

    The with_* helpers return a modified copy and leave the receiver as is,
    so a base request can be reused across calls.
    """

    model: str  # e.g. "openai/gpt-4o", "anthropic/claude-3.5-sonnet"
    messages: list[Message]
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    stop: list[str] | None = None
    tools: list[Tool] | None = None
    stream: bool | None = None
    n: int | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    provider: ProviderPreferences | None = None
    models: list[str] | None = None  # fallback models
    route: str | None = None  # e.g. "fallback"

    @classmethod
    def new(cls, model: str, messages: list[Message]) -> "CreateChatCompletionRequest":
        return cls(model=model, messages=list(messages))

    def with_max_tokens(self, max_tokens: int) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"max_tokens": max_tokens})

    def with_temperature(self, temperature: float) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"temperature": temperature})

    def with_top_p(self, top_p: float) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"top_p": top_p})

    def with_stop(self, stop: list[str]) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"stop": list(stop)})

    def with_tools(self, tools: list[Tool]) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"tools": list(tools)})

    def with_provider(self, provider: ProviderPreferences) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"provider": provider})

    def with_fallback_models(self, models: list[str]) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"models": list(models)})

    def with_route(self, route: str) -> "CreateChatCompletionRequest":
        return self.model_copy(update={"route": route})


class Usage(WireModel):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class Choice(WireModel):
    index: int = 0
    message: Message
    finish_reason: str | None = None


class CreateChatCompletionResponse(WireModel):
    id: str
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice]
    usage: Usage | None = None

    def content(self) -> str | None:
        """Text of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content

    def tool_calls(self) -> list[ToolCall] | None:
        if not self.choices:
            return None
        return self.choices[0].message.tool_calls

    def has_tool_calls(self) -> bool:
        return self.tool_calls() is not None
