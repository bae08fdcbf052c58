"""Tests for data models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from prompt_crafter.models import (
    AI_TOOLS,
    EnhancementRequest,
    EnhancementResult,
    ModelSelector,
    SUPPORTED_LANGUAGES,
    Session,
    get_language,
    is_supported,
    language_name,
    list_supported_languages,
)


class TestLanguages:
    def test_supported_order_starts_with_english(self):
        codes = [lang.code for lang in list_supported_languages()]
        assert codes[0] == "en"
        assert codes[:4] == ["en", "hi", "te", "ta"]
        assert len(codes) == 15

    def test_codes_are_unique(self):
        codes = [lang.code for lang in SUPPORTED_LANGUAGES]
        assert len(codes) == len(set(codes))

    def test_list_is_a_copy(self):
        langs = list_supported_languages()
        langs.clear()
        assert len(list_supported_languages()) == 15

    def test_language_name_lookup(self):
        assert language_name("ja") == "Japanese"
        assert get_language("fr").name == "French"

    def test_unknown_code_falls_back_to_code(self):
        assert language_name("xx") == "xx"
        assert get_language("xx") is None
        assert not is_supported("xx")

    def test_language_is_frozen(self):
        with pytest.raises(ValidationError):
            SUPPORTED_LANGUAGES[0].name = "Changed"


class TestModelSelector:
    def test_only_premium_requires_credential(self):
        assert ModelSelector.PREMIUM.requires_credential is True
        assert ModelSelector.FREE.requires_credential is False

    def test_from_value(self):
        assert ModelSelector("huggingface") is ModelSelector.FREE
        assert ModelSelector("claude") is ModelSelector.PREMIUM

    def test_labels(self):
        assert "free" in ModelSelector.FREE.label.lower()


class TestEnhancementRequest:
    def test_defaults(self):
        request = EnhancementRequest(prompt="Write a poem")
        assert request.output_language == "en"
        assert request.model is ModelSelector.FREE
        assert request.credential is None

    def test_credential_hidden_from_repr(self):
        request = EnhancementRequest(prompt="p", model="claude", credential="sk-secret")
        assert "sk-secret" not in repr(request)
        assert request.model is ModelSelector.PREMIUM

    def test_invalid_model_rejected(self):
        with pytest.raises(ValidationError):
            EnhancementRequest(prompt="p", model="gpt-99")

    def test_result_fields(self):
        result = EnhancementResult(enhanced_text="better", original_text="good")
        assert result.enhanced_text == "better"
        assert result.original_text == "good"


class TestSession:
    def test_initials_from_email(self):
        session = Session(uid="u1", email="ada.lovelace@example.com")
        assert session.initials == "AD"

    def test_label_prefers_display_name(self):
        session = Session(uid="u1", email="ada@example.com", display_name="Ada L.")
        assert session.label == "Ada L."

    def test_label_falls_back_to_email_local_part(self):
        session = Session(uid="u1", email="ada@example.com")
        assert session.label == "ada"

    def test_label_without_email(self):
        session = Session(uid="u1", email="")
        assert session.label == "User"
        assert session.initials == "U"

    def test_id_token_hidden_from_repr(self):
        session = Session(
            uid="u1",
            email="a@b.c",
            id_token="token-xyz",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        assert "token-xyz" not in repr(session)


class TestAITools:
    def test_catalogue(self):
        names = [tool.name for tool in AI_TOOLS]
        assert "Claude" in names
        assert all(tool.url.startswith("https://") for tool in AI_TOOLS)
