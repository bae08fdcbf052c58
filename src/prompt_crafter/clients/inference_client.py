"""Hugging Face Inference API wrapper for the free-tier text generation backend."""

from __future__ import annotations

import logging
import os

import httpx

from prompt_crafter.errors import UpstreamUnavailable
from prompt_crafter.utils.http import post_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL_URL = "https://api-inference.huggingface.co/models/google/flan-t5-base"


class InferenceClient:
    """Async text-generation client for a hosted Hugging Face model."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model_url: str = DEFAULT_MODEL_URL,
        timeout: float = 60.0,
        max_retries: int = 3,
        http_client: httpx.AsyncClient | None = None,
    ):
        # Anonymous calls are rate limited but allowed.
        key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
        self._headers = {"Authorization": f"Bearer {key}"} if key else {}
        self.model_url = model_url
        self.max_retries = max_retries
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> InferenceClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def generate(
        self,
        inputs: str,
        *,
        max_new_tokens: int = 250,
        temperature: float = 0.7,
        top_p: float = 0.9,
    ) -> str:
        """Run text generation and return the generated text."""
        logger.debug("Inference call: %s", self.model_url)
        data = await post_json(
            self.http_client,
            self.model_url,
            json={
                "inputs": inputs,
                "parameters": {
                    "max_new_tokens": max_new_tokens,
                    "temperature": temperature,
                    "do_sample": True,
                    "top_p": top_p,
                },
            },
            headers=self._headers,
            max_retries=self.max_retries,
        )
        return _extract_generated_text(data)


def _extract_generated_text(data) -> str:
    """Normalize the list and object response shapes to a string."""
    if isinstance(data, list) and data and isinstance(data[0], dict):
        text = data[0].get("generated_text")
    elif isinstance(data, dict):
        text = data.get("generated_text")
    else:
        text = None
    if not isinstance(text, str) or not text:
        raise UpstreamUnavailable("Unexpected response format from inference API")
    return text
