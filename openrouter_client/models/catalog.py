"""Model catalog records returned by GET /models."""

from openrouter_client.models.messages import WireModel


class ModelPricing(WireModel):
    # USD per unit, as decimal strings
    prompt: str | None = None
    completion: str | None = None
    image: str | None = None
    request: str | None = None


class TopProvider(WireModel):
    context_length: int | None = None
    max_completion_tokens: int | None = None
    is_moderated: bool | None = None


class ModelArchitecture(WireModel):
    modality: str | None = None  # e.g. "text->text", "text+image->text"
    tokenizer: str | None = None
    instruct_type: str | None = None


class Model(WireModel):
    id: str
    name: str | None = None
    description: str | None = None
    context_length: int | None = None
    pricing: ModelPricing | None = None
    top_provider: TopProvider | None = None
    architecture: ModelArchitecture | None = None


class ModelList(WireModel):
    data: list[Model]
