"""The vendor's own error envelope: {"error": {"message", "type"?, "code"?}}."""

from pydantic import Field, StrictInt

from openrouter_client.models.messages import WireModel


class ErrorDetail(WireModel):
    message: str
    error_type: str | None = Field(default=None, alias="type")
    code: StrictInt | None = None


class ErrorResponse(WireModel):
    error: ErrorDetail
