"""Generation stats and credit balance records."""

from openrouter_client.models.messages import WireModel


class GenerationStats(WireModel):
    id: str
    total_cost: float | None = None  # USD
    tokens_prompt: int | None = None
    tokens_completion: int | None = None
    native_tokens_prompt: int | None = None
    native_tokens_completion: int | None = None


class CreditsData(WireModel):
    label: str | None = None
    balance: float | None = None
    usage: float | None = None
    limit: float | None = None
    is_free_tier: bool | None = None


class CreditsResponse(WireModel):
    data: CreditsData | None = None
