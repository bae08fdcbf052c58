"""Google Cloud Translation (v2 REST) wrapper with async support."""

from __future__ import annotations

import logging
import os

import httpx

from prompt_crafter.errors import UpstreamUnavailable
from prompt_crafter.utils.http import post_json

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://translation.googleapis.com/language/translate/v2"


class TranslateClient:
    """Async client for language detection and translation."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        max_retries: int = 2,
        http_client: httpx.AsyncClient | None = None,
    ):
        key = api_key or os.environ.get("GOOGLE_TRANSLATE_API_KEY")
        if not key:
            logger.warning(
                "GOOGLE_TRANSLATE_API_KEY not set; detection and translation are disabled"
            )
        self._api_key = key
        self.base_url = base_url.rstrip("/")
        self.max_retries = max_retries
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> TranslateClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def _post(self, path: str, payload: dict) -> dict:
        if not self._api_key:
            raise UpstreamUnavailable("Google Translate API key not configured")
        data = await post_json(
            self.http_client,
            f"{self.base_url}{path}",
            json=payload,
            params={"key": self._api_key},
            max_retries=self.max_retries,
        )
        if not isinstance(data, dict):
            raise UpstreamUnavailable(f"Expected JSON object, got {type(data).__name__}")
        return data

    async def detect(self, text: str) -> str:
        """Return the language code Google detects for text."""
        logger.debug("Detecting language (%d chars)", len(text))
        data = await self._post("/detect", {"q": text})
        try:
            return data["data"]["detections"][0][0]["language"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailable("Malformed detection response") from e

    async def translate(self, text: str, target: str, source: str | None = None) -> str:
        """Translate text into target. Omitting source lets Google auto-detect."""
        logger.debug("Translating %s -> %s (%d chars)", source or "auto", target, len(text))
        payload = {"q": text, "target": target, "format": "text"}
        if source and source != "auto":
            payload["source"] = source
        data = await self._post("", payload)
        try:
            return data["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailable("Malformed translation response") from e
