"""Data models for the prompt enhancement pipeline."""

from prompt_crafter.models.enhancement import (
    EnhancementRequest,
    EnhancementResult,
    ModelSelector,
)
from prompt_crafter.models.language import (
    DEFAULT_LANGUAGE,
    PIVOT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Language,
    get_language,
    is_supported,
    language_name,
    list_supported_languages,
)
from prompt_crafter.models.session import Session
from prompt_crafter.models.tools import AI_TOOLS, AITool

__all__ = [
    "AITool",
    "AI_TOOLS",
    "DEFAULT_LANGUAGE",
    "EnhancementRequest",
    "EnhancementResult",
    "Language",
    "ModelSelector",
    "PIVOT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "Session",
    "get_language",
    "is_supported",
    "language_name",
    "list_supported_languages",
]
