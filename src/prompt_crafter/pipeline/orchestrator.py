"""Main pipeline orchestrator - detect, pivot to English, enhance, translate back."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from functools import partial

from prompt_crafter.clients.inference_client import InferenceClient
from prompt_crafter.clients.llm_client import LLMClient
from prompt_crafter.clients.translate_client import TranslateClient
from prompt_crafter.config import AppConfig
from prompt_crafter.errors import InvalidArgument
from prompt_crafter.models.enhancement import (
    EnhancementRequest,
    EnhancementResult,
    ModelSelector,
)
from prompt_crafter.models.language import PIVOT_LANGUAGE, is_supported
from prompt_crafter.models.session import Session
from prompt_crafter.pipeline.enhancer import PromptEnhancer
from prompt_crafter.pipeline.language_service import LanguageService

logger = logging.getLogger(__name__)

DEFAULT_MAX_PROMPT_CHARS = 1000


@dataclass
class PipelineResult:
    """Complete result from one enhancement run."""

    enhancement: EnhancementResult
    detected_language: str
    output_language: str
    model: ModelSelector
    translated_input: bool = False
    translated_output: bool = False
    elapsed_seconds: float = 0.0

    @property
    def enhanced_text(self) -> str:
        return self.enhancement.enhanced_text


class EnhancementPipeline:
    """Sequences language detection, translation and enhancement."""

    def __init__(
        self,
        language: LanguageService,
        enhancer: PromptEnhancer,
        *,
        max_prompt_chars: int = DEFAULT_MAX_PROMPT_CHARS,
    ):
        self.language = language
        self.enhancer = enhancer
        self.max_prompt_chars = max_prompt_chars

    def validate(self, request: EnhancementRequest) -> None:
        """Raise InvalidArgument for requests that must not reach the network."""
        if not request.prompt.strip():
            raise InvalidArgument("Please enter a prompt to enhance")
        if len(request.prompt) > self.max_prompt_chars:
            raise InvalidArgument(
                f"Prompt is {len(request.prompt)} characters; the limit is {self.max_prompt_chars}"
            )
        if not is_supported(request.output_language):
            raise InvalidArgument(f"Unsupported output language: {request.output_language!r}")
        if request.model.requires_credential and not (
            request.credential and request.credential.strip()
        ):
            raise InvalidArgument(f"Please enter your API key to use {request.model.label}")

    async def run(
        self,
        request: EnhancementRequest,
        *,
        session: Session | None = None,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> PipelineResult:
        """Run one enhancement.

        Args:
            request: Prompt, output language, model and optional credential.
            session: Signed-in user, used for log attribution only.
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        self.validate(request)
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        logger.info(
            "Enhancing prompt uid=%s model=%s output=%s",
            session.uid if session else "anonymous",
            request.model.value,
            request.output_language,
        )

        _notify("detect", "Detecting language")
        detected = await self.language.detect_language(request.prompt)

        working = request.prompt
        translated_input = detected != PIVOT_LANGUAGE
        if translated_input:
            _notify("translate_input", f"Translating {detected} -> {PIVOT_LANGUAGE}")
            working = await self.language.translate(
                request.prompt, target=PIVOT_LANGUAGE, source=detected
            )

        _notify("enhance", "Enhancing prompt")
        enhanced = await self.enhancer.enhance(working, request.model, request.credential)

        final = enhanced
        translated_output = request.output_language != PIVOT_LANGUAGE
        if translated_output:
            _notify("translate_output", f"Translating {PIVOT_LANGUAGE} -> {request.output_language}")
            final = await self.language.translate(
                enhanced, target=request.output_language, source=PIVOT_LANGUAGE
            )

        elapsed = time.monotonic() - start
        _notify("done", f"Done in {elapsed:.1f}s")

        return PipelineResult(
            enhancement=EnhancementResult(enhanced_text=final, original_text=request.prompt),
            detected_language=detected,
            output_language=request.output_language,
            model=request.model,
            translated_input=translated_input,
            translated_output=translated_output,
            elapsed_seconds=elapsed,
        )


@asynccontextmanager
async def open_pipeline(
    config: AppConfig,
    *,
    rng: random.Random | None = None,
) -> AsyncIterator[EnhancementPipeline]:
    """Build a pipeline from config, closing its HTTP clients on exit."""
    gen = config.generation
    async with TranslateClient(
        base_url=config.translation.base_url,
        timeout=config.translation.timeout,
        max_retries=config.translation.max_retries,
    ) as translate, InferenceClient(
        model_url=gen.inference_url,
        timeout=gen.timeout,
        max_retries=gen.max_retries,
    ) as inference:
        enhancer = PromptEnhancer(
            inference,
            llm_factory=partial(LLMClient, timeout=gen.timeout),
            premium_model=gen.premium_model,
            premium_max_tokens=gen.premium_max_tokens,
            max_new_tokens=gen.max_new_tokens,
            temperature=gen.temperature,
            top_p=gen.top_p,
            rng=rng,
        )
        yield EnhancementPipeline(
            LanguageService(translate),
            enhancer,
            max_prompt_chars=config.pipeline.max_prompt_chars,
        )
