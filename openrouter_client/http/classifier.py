"""Response classification: turn an HTTP outcome into a record or a typed error.

Status codes with well-known HTTP meaning (401/402/403/404/429/5xx) win over
the vendor's `code` field, which is only consulted for the remaining
statuses. An error body that is not the vendor envelope degrades to a
generic APIError carrying the raw text instead of raising a decode error.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from openrouter_client.errors import (
    APIError,
    ForbiddenError,
    InsufficientCreditsError,
    InvalidRequestError,
    JSONDecodeFailure,
    ModelNotAvailableError,
    NotFoundError,
    OpenRouterError,
    RateLimitedError,
    ServerError,
    UnauthorizedError,
)
from openrouter_client.models.errors import ErrorResponse

DEFAULT_RETRY_AFTER = 60  # seconds, when a 429 carries no usable hint

RecordT = TypeVar("RecordT", bound=BaseModel)


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def parse_retry_after(value: str | None) -> int | None:
    """Parse a retry-after header given in whole seconds.

    HTTP-date values and anything else non-numeric yield None.
    """
    if value is None:
        return None
    value = value.strip()
    if not value.isascii() or not value.isdigit():
        return None
    return int(value)


def decode_body(body: str | bytes, record_type: type[RecordT]) -> RecordT:
    """Validate a 2xx body into the endpoint's record type."""
    try:
        return record_type.model_validate_json(body)
    except ValidationError as e:
        text = body.decode(errors="replace") if isinstance(body, bytes) else body
        raise JSONDecodeFailure(str(e), body=text) from e


def classify_error(status_code: int, body: str, retry_after: int | None = None) -> OpenRouterError:
    """Map a non-2xx response to the matching error kind.

    Returns the error rather than raising it, so the caller keeps control
    of the raise site.
    """
    try:
        envelope = ErrorResponse.model_validate_json(body)
    except ValidationError:
        return APIError(status_code, body)

    message = envelope.error.message
    code = envelope.error.code

    if status_code == 401:
        return UnauthorizedError()
    if status_code == 402:
        return InsufficientCreditsError(message)
    if status_code == 403:
        return ForbiddenError(message)
    if status_code == 404:
        return NotFoundError(message)
    if status_code == 429:
        return RateLimitedError(retry_after if retry_after is not None else DEFAULT_RETRY_AFTER)
    if 500 <= status_code <= 599:
        return ServerError(message)

    if code == 400:
        return InvalidRequestError(message)
    if code == 404:
        return ModelNotAvailableError(message)
    return APIError(status_code, message)
