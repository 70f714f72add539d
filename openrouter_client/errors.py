"""Exception hierarchy raised by the OpenRouter client.

Every failure path ends in a subclass of OpenRouterError. The library never
retries or recovers locally; callers decide what to do with each kind.
"""


class OpenRouterError(Exception):
    """Base class for all client errors."""


class TransportError(OpenRouterError):
    """The HTTP exchange could not be completed (DNS, connect, TLS, ...)."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Request failed: {detail}")


class TransportTimeoutError(TransportError):
    """The transport gave up waiting on the upstream."""


class JSONDecodeFailure(OpenRouterError):
    """A response body was not valid JSON for the expected record."""

    def __init__(self, detail: str, body: str = ""):
        self.detail = detail
        self.body = body
        super().__init__(f"JSON error: {detail}")


class APIError(OpenRouterError):
    """Fallback for any status/code combination without a dedicated kind."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error ({status_code}): {message}")


class RateLimitedError(OpenRouterError):
    status_code = 429

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__(f"Rate limited, retry after {retry_after}s")


class UnauthorizedError(OpenRouterError):
    status_code = 401

    def __init__(self):
        self.message = "invalid API key"
        super().__init__("Unauthorized: invalid API key")


class _MessageError(OpenRouterError):
    """Error kind carrying the vendor message verbatim."""

    prefix = ""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class ForbiddenError(_MessageError):
    prefix = "Forbidden"


class NotFoundError(_MessageError):
    prefix = "Not found"


class InvalidRequestError(_MessageError):
    prefix = "Invalid request"


class ServerError(_MessageError):
    prefix = "Server error"


class ContextLengthExceededError(_MessageError):
    # Reserved: no status/code mapping currently produces this kind.
    prefix = "Context length exceeded"


class InsufficientCreditsError(_MessageError):
    prefix = "Insufficient credits"


class ModelNotAvailableError(_MessageError):
    prefix = "Model not available"


class InvalidHeaderError(OpenRouterError):
    """An auth strategy produced a header value the transport cannot send."""

    def __init__(self, header: str, reason: str):
        self.header = header
        self.reason = reason
        super().__init__(f"Invalid header {header}: {reason}")


class ConfigurationError(OpenRouterError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Configuration error: {message}")
