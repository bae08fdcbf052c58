"""Language detection and translation with degrade-to-default semantics."""

from __future__ import annotations

import logging

from prompt_crafter.clients.translate_client import TranslateClient
from prompt_crafter.models.language import DEFAULT_LANGUAGE, is_supported

logger = logging.getLogger(__name__)

# Google answers "und" when it cannot tell.
_UNDETERMINED = {"", "und"}


class LanguageService:
    """Wraps TranslateClient so that neither operation ever raises."""

    def __init__(self, client: TranslateClient, default_language: str = DEFAULT_LANGUAGE):
        self.client = client
        self.default_language = default_language

    async def detect_language(self, text: str) -> str:
        """Return the detected language code, or the default on any failure."""
        try:
            code = await self.client.detect(text)
        except Exception:
            logger.warning("Language detection failed, assuming %r", self.default_language, exc_info=True)
            return self.default_language
        code = (code or "").strip().lower()
        if code in _UNDETERMINED:
            return self.default_language
        # "zh-CN" -> "zh" when only the base language is listed.
        base = code.split("-")[0]
        if not is_supported(code) and is_supported(base):
            return base
        return code

    async def translate(self, text: str, target: str, source: str | None = None) -> str:
        """Translate text into target; returns text unchanged on any failure."""
        if not text.strip():
            return text
        try:
            return await self.client.translate(text, target=target, source=source)
        except Exception:
            logger.warning("Translation %s -> %s failed, keeping original text", source, target, exc_info=True)
            return text
