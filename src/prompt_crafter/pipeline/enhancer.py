"""Prompt enhancement over the free and premium generation backends."""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Callable

from prompt_crafter.clients.inference_client import InferenceClient
from prompt_crafter.clients.llm_client import DEFAULT_MODEL, LLMClient
from prompt_crafter.errors import InvalidArgument
from prompt_crafter.models.enhancement import ModelSelector

logger = logging.getLogger(__name__)

ENHANCEMENT_INSTRUCTION = (
    "Enhance this prompt to make it more detailed, specific, and effective for AI "
    "assistants. Make it clearer and more actionable while maintaining the original "
    'intent: "{prompt}"'
)

PREMIUM_SYSTEM = """\
You are an expert prompt engineer. Your task is to enhance user prompts to make \
them more detailed, specific, and effective for AI assistants. Maintain the original \
intent while adding clarity, context, and actionable details. Return only the \
enhanced prompt without any explanations."""

PREMIUM_PROMPT = 'Enhance this prompt to make it more detailed, specific, and effective: "{prompt}"'

FALLBACK_PHRASES: tuple[str, ...] = (
    "Please provide a detailed and comprehensive response to:",
    "I need you to thoroughly explain and elaborate on:",
    "Can you give me an in-depth analysis of:",
    "Please provide step-by-step guidance on:",
    "I would like a detailed breakdown of:",
)

FALLBACK_SUFFIX = "Please include examples, key points, and actionable insights where relevant."

_WRAPPING_QUOTES = re.compile(r"^[\"']|[\"']$")


def fallback_enhancement(text: str, rng: random.Random | None = None) -> str:
    """Local enhancement used when no backend answers. Never fails."""
    phrase = (rng or random).choice(FALLBACK_PHRASES)
    return f"{phrase} {text}. {FALLBACK_SUFFIX}"


def clean_generated_text(generated: str, instruction: str) -> str:
    """Drop the echoed instruction, then one wrapping quote on each side."""
    cleaned = generated.replace(instruction, "").strip()
    return _WRAPPING_QUOTES.sub("", cleaned)


class PromptEnhancer:
    """Enhancement service: one prompt in, one improved prompt out."""

    def __init__(
        self,
        inference: InferenceClient,
        *,
        llm_factory: Callable[[str], LLMClient] = LLMClient,
        premium_model: str = DEFAULT_MODEL,
        premium_max_tokens: int = 500,
        max_new_tokens: int = 250,
        temperature: float = 0.7,
        top_p: float = 0.9,
        rng: random.Random | None = None,
    ):
        self.inference = inference
        self.llm_factory = llm_factory
        self.premium_model = premium_model
        self.premium_max_tokens = premium_max_tokens
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature
        self.top_p = top_p
        self.rng = rng or random.Random()

    async def enhance(
        self,
        text: str,
        model: ModelSelector | str = ModelSelector.FREE,
        credential: str | None = None,
    ) -> str:
        """Enhance text with the selected backend.

        Raises InvalidArgument only for an unknown model or when the premium
        backend is chosen without a credential. Backend failures fall back to local text.
        """
        try:
            model = ModelSelector(model)
        except ValueError as e:
            raise InvalidArgument(f"Unknown model: {model!r}") from e
        if model.requires_credential and not (credential and credential.strip()):
            raise InvalidArgument(f"An API key is required to use {model.label}")

        try:
            if model is ModelSelector.PREMIUM:
                return await self._enhance_premium(text, credential)
            return await self._enhance_free(text)
        except Exception:
            logger.warning("Enhancement via %s failed, using local fallback", model.value, exc_info=True)
            return self.fallback(text)

    def fallback(self, text: str) -> str:
        return fallback_enhancement(text, self.rng)

    async def _enhance_free(self, text: str) -> str:
        instruction = ENHANCEMENT_INSTRUCTION.format(prompt=text)
        generated = await self.inference.generate(
            instruction,
            max_new_tokens=self.max_new_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
        )
        return clean_generated_text(generated, instruction) or text

    async def _enhance_premium(self, text: str, credential: str) -> str:
        llm = self.llm_factory(credential)
        response = await llm.generate(
            prompt=PREMIUM_PROMPT.format(prompt=text),
            system=PREMIUM_SYSTEM,
            model=self.premium_model,
            temperature=self.temperature,
            max_tokens=self.premium_max_tokens,
        )
        return response.text.strip() or text
