"""Async, typed client for the OpenRouter API.

OpenRouter puts many model providers behind one OpenAI-compatible chat
completion API. Typical use:

    auth = ApiKeyAuth("sk-or-...").with_site_name("My App")
    async with Client.builder().auth(auth).build() as client:
        request = CreateChatCompletionRequest.new("openai/gpt-4o", [Message.user("Hello")])
        response = await client.create_chat_completion(request)
        print(response.content())
"""

from openrouter_client.auth.strategies import ApiKeyAuth, AuthStrategy
from openrouter_client.client.builder import AuthenticatedClientBuilder, ClientBuilder
from openrouter_client.client.client import Client
from openrouter_client.config.settings import DEFAULT_BASE_URL, Settings, get_settings
from openrouter_client.errors import (
    APIError,
    ConfigurationError,
    ContextLengthExceededError,
    ForbiddenError,
    InsufficientCreditsError,
    InvalidHeaderError,
    InvalidRequestError,
    JSONDecodeFailure,
    ModelNotAvailableError,
    NotFoundError,
    OpenRouterError,
    RateLimitedError,
    ServerError,
    TransportError,
    TransportTimeoutError,
    UnauthorizedError,
)
from openrouter_client.logging.audit import setup_logging
from openrouter_client.models.account import CreditsData, CreditsResponse, GenerationStats
from openrouter_client.models.catalog import (
    Model,
    ModelArchitecture,
    ModelList,
    ModelPricing,
    TopProvider,
)
from openrouter_client.models.chat import (
    Choice,
    CreateChatCompletionRequest,
    CreateChatCompletionResponse,
    ProviderPreferences,
    Usage,
)
from openrouter_client.models.errors import ErrorDetail, ErrorResponse
from openrouter_client.models.messages import (
    FunctionCall,
    FunctionDefinition,
    Message,
    Role,
    Tool,
    ToolCall,
)

VERSION = "0.1.0"

__all__ = [
    "APIError",
    "ApiKeyAuth",
    "AuthStrategy",
    "AuthenticatedClientBuilder",
    "Choice",
    "Client",
    "ClientBuilder",
    "ConfigurationError",
    "ContextLengthExceededError",
    "CreateChatCompletionRequest",
    "CreateChatCompletionResponse",
    "CreditsData",
    "CreditsResponse",
    "DEFAULT_BASE_URL",
    "ErrorDetail",
    "ErrorResponse",
    "ForbiddenError",
    "FunctionCall",
    "FunctionDefinition",
    "GenerationStats",
    "InsufficientCreditsError",
    "InvalidHeaderError",
    "InvalidRequestError",
    "JSONDecodeFailure",
    "Message",
    "Model",
    "ModelArchitecture",
    "ModelList",
    "ModelNotAvailableError",
    "ModelPricing",
    "NotFoundError",
    "OpenRouterError",
    "ProviderPreferences",
    "RateLimitedError",
    "Role",
    "ServerError",
    "Settings",
    "Tool",
    "ToolCall",
    "TopProvider",
    "TransportError",
    "TransportTimeoutError",
    "UnauthorizedError",
    "Usage",
    "get_settings",
    "setup_logging",
]
