"""Shared test fixtures."""

from __future__ import annotations

import random
from unittest.mock import AsyncMock

import httpx
import pytest

from prompt_crafter.clients.inference_client import InferenceClient
from prompt_crafter.clients.llm_client import LLMClient, LLMResponse
from prompt_crafter.clients.translate_client import TranslateClient
from prompt_crafter.models.session import Session
from prompt_crafter.pipeline.enhancer import PromptEnhancer
from prompt_crafter.pipeline.language_service import LanguageService
from prompt_crafter.pipeline.orchestrator import EnhancementPipeline


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def mock_http():
    """Factory for AsyncClients whose requests are answered by handler(request)."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def unreachable_http(mock_http) -> httpx.AsyncClient:
    """AsyncClient that fails every request with a connection error."""
    return mock_http(_unreachable)


@pytest.fixture
def sample_session() -> Session:
    return Session(uid="uid-123", email="ada@example.com", display_name="Ada")


@pytest.fixture
def mock_translate_client() -> TranslateClient:
    """Translate client that detects English and echoes text back."""
    client = AsyncMock(spec=TranslateClient)
    client.detect = AsyncMock(return_value="en")
    client.translate = AsyncMock(side_effect=lambda text, target, source=None: text)
    return client


@pytest.fixture
def mock_inference_client() -> InferenceClient:
    client = AsyncMock(spec=InferenceClient)
    client.generate = AsyncMock(return_value="An enhanced prompt")
    return client


@pytest.fixture
def mock_llm_client() -> LLMClient:
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="A premium enhanced prompt", input_tokens=100, output_tokens=50)
    )
    return client


@pytest.fixture
def language_service(mock_translate_client) -> LanguageService:
    return LanguageService(mock_translate_client)


@pytest.fixture
def enhancer(mock_inference_client, mock_llm_client) -> PromptEnhancer:
    return PromptEnhancer(
        mock_inference_client,
        llm_factory=lambda credential: mock_llm_client,
        rng=random.Random(42),
    )


@pytest.fixture
def pipeline(language_service, enhancer) -> EnhancementPipeline:
    return EnhancementPipeline(language_service, enhancer)
