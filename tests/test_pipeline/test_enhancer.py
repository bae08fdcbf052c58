"""Tests for PromptEnhancer and the local fallback generator."""

from __future__ import annotations

import random

import pytest

from prompt_crafter.clients.llm_client import LLMResponse
from prompt_crafter.errors import InvalidArgument, UpstreamUnavailable
from prompt_crafter.models.enhancement import ModelSelector
from prompt_crafter.pipeline.enhancer import (
    ENHANCEMENT_INSTRUCTION,
    FALLBACK_PHRASES,
    FALLBACK_SUFFIX,
    PREMIUM_SYSTEM,
    PromptEnhancer,
    clean_generated_text,
    fallback_enhancement,
)


class TestFallbackEnhancement:
    def test_format(self):
        result = fallback_enhancement("explain black holes", random.Random(0))
        assert any(result.startswith(p + " explain black holes.") for p in FALLBACK_PHRASES)
        assert result.endswith(FALLBACK_SUFFIX)

    def test_seeded_rng_is_deterministic(self):
        a = fallback_enhancement("topic", random.Random(7))
        b = fallback_enhancement("topic", random.Random(7))
        assert a == b

    def test_stubbed_rng_picks_phrase(self):
        class FirstChoice:
            def choice(self, seq):
                return seq[0]

        result = fallback_enhancement("x", FirstChoice())
        assert result == f"{FALLBACK_PHRASES[0]} x. {FALLBACK_SUFFIX}"

    def test_works_without_rng(self):
        assert "cats" in fallback_enhancement("cats")


class TestCleanGeneratedText:
    def test_strips_echoed_instruction_and_quotes(self):
        instruction = ENHANCEMENT_INSTRUCTION.format(prompt="write a poem")
        generated = f'{instruction} "Write a rhyming poem about autumn"'
        assert clean_generated_text(generated, instruction) == "Write a rhyming poem about autumn"

    def test_strips_single_quotes(self):
        assert clean_generated_text("'quoted'", "instr") == "quoted"

    def test_keeps_inner_quotes(self):
        assert clean_generated_text('Say "hi" politely', "instr") == 'Say "hi" politely'


class TestFreeBackend:
    async def test_returns_cleaned_generation(self, enhancer, mock_inference_client):
        mock_inference_client.generate.return_value = '"A more detailed prompt"'

        result = await enhancer.enhance("Write a blog post about AI")

        assert result == "A more detailed prompt"
        sent = mock_inference_client.generate.call_args.args[0]
        assert sent == ENHANCEMENT_INSTRUCTION.format(prompt="Write a blog post about AI")

    async def test_empty_after_cleaning_returns_input(self, enhancer, mock_inference_client):
        instruction = ENHANCEMENT_INSTRUCTION.format(prompt="hi")
        mock_inference_client.generate.return_value = instruction
        assert await enhancer.enhance("hi") == "hi"

    @pytest.mark.parametrize(
        "error", [UpstreamUnavailable("503"), RuntimeError("boom"), ValueError("bad json")]
    )
    async def test_backend_failure_uses_fallback(self, enhancer, mock_inference_client, error):
        mock_inference_client.generate.side_effect = error
        prompt = "Plan a trip to Kyoto"

        result = await enhancer.enhance(prompt)

        assert any(result.startswith(p) for p in FALLBACK_PHRASES)
        assert prompt in result

    async def test_accepts_string_selector(self, enhancer, mock_inference_client):
        await enhancer.enhance("x", "huggingface")
        mock_inference_client.generate.assert_awaited_once()

    async def test_unknown_selector_is_invalid_argument(self, enhancer, mock_inference_client):
        with pytest.raises(InvalidArgument, match="Unknown model"):
            await enhancer.enhance("x", "gpt-9")
        mock_inference_client.generate.assert_not_awaited()


class TestPremiumBackend:
    async def test_requires_credential(self, enhancer, mock_inference_client, mock_llm_client):
        with pytest.raises(InvalidArgument, match="API key"):
            await enhancer.enhance("x", ModelSelector.PREMIUM, credential="  ")
        mock_llm_client.generate.assert_not_awaited()
        mock_inference_client.generate.assert_not_awaited()

    async def test_uses_llm_built_from_credential(self, mock_inference_client, mock_llm_client):
        credentials = []

        def factory(credential):
            credentials.append(credential)
            return mock_llm_client

        enhancer = PromptEnhancer(mock_inference_client, llm_factory=factory, premium_model="m")
        result = await enhancer.enhance("x", ModelSelector.PREMIUM, credential="sk-ant-1")

        assert result == "A premium enhanced prompt"
        assert credentials == ["sk-ant-1"]
        kwargs = mock_llm_client.generate.call_args.kwargs
        assert kwargs["system"] == PREMIUM_SYSTEM
        assert kwargs["model"] == "m"
        assert '"x"' in kwargs["prompt"]
        mock_inference_client.generate.assert_not_awaited()

    async def test_empty_completion_returns_input(self, enhancer, mock_llm_client):
        mock_llm_client.generate.return_value = LLMResponse(text="  ", input_tokens=1, output_tokens=0)
        assert await enhancer.enhance("x", ModelSelector.PREMIUM, "sk") == "x"

    async def test_failure_uses_fallback(self, enhancer, mock_llm_client):
        mock_llm_client.generate.side_effect = RuntimeError("401 invalid x-api-key")
        result = await enhancer.enhance("Summarize this", ModelSelector.PREMIUM, "sk-bad")
        assert any(result.startswith(p) for p in FALLBACK_PHRASES)
        assert "Summarize this" in result

    async def test_client_construction_failure_uses_fallback(self, mock_inference_client):
        def factory(credential):
            raise RuntimeError("cannot build client")

        enhancer = PromptEnhancer(mock_inference_client, llm_factory=factory)
        result = await enhancer.enhance("y", ModelSelector.PREMIUM, "sk")
        assert "y" in result
