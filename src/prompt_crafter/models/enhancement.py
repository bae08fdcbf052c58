"""Pydantic models for enhancement requests and results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from prompt_crafter.models.language import DEFAULT_LANGUAGE


class ModelSelector(str, Enum):
    """Which generation backend services a request."""

    FREE = "huggingface"
    PREMIUM = "claude"

    @property
    def requires_credential(self) -> bool:
        return self is ModelSelector.PREMIUM

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ModelSelector.FREE: "Hugging Face (free)",
    ModelSelector.PREMIUM: "Claude (your API key)",
}


class EnhancementRequest(BaseModel):
    prompt: str
    output_language: str = DEFAULT_LANGUAGE
    model: ModelSelector = ModelSelector.FREE
    credential: str | None = Field(default=None, repr=False)


class EnhancementResult(BaseModel):
    enhanced_text: str
    original_text: str
