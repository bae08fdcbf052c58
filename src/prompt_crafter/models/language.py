"""Supported languages and lookup helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Language(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str  # ISO-639-1 style, unique key
    name: str


PIVOT_LANGUAGE = "en"
DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language(code="en", name="English"),
    Language(code="hi", name="Hindi"),
    Language(code="te", name="Telugu"),
    Language(code="ta", name="Tamil"),
    Language(code="bn", name="Bengali"),
    Language(code="ur", name="Urdu"),
    Language(code="es", name="Spanish"),
    Language(code="fr", name="French"),
    Language(code="de", name="German"),
    Language(code="zh", name="Chinese"),
    Language(code="ja", name="Japanese"),
    Language(code="ko", name="Korean"),
    Language(code="pt", name="Portuguese"),
    Language(code="ru", name="Russian"),
    Language(code="ar", name="Arabic"),
)

_BY_CODE: dict[str, Language] = {lang.code: lang for lang in SUPPORTED_LANGUAGES}


def list_supported_languages() -> list[Language]:
    """Return the supported languages in display order."""
    return list(SUPPORTED_LANGUAGES)


def get_language(code: str) -> Language | None:
    return _BY_CODE.get(code)


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def language_name(code: str) -> str:
    """Display name for a code, or the code itself when unknown."""
    lang = _BY_CODE.get(code)
    return lang.name if lang else code
