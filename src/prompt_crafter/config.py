"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class TranslationConfig:
    base_url: str = "https://translation.googleapis.com/language/translate/v2"
    timeout: int = 15
    max_retries: int = 2

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_retries", self.max_retries, 1, 10)


@dataclass(frozen=True)
class GenerationConfig:
    inference_url: str = "https://api-inference.huggingface.co/models/google/flan-t5-base"
    max_new_tokens: int = 250
    temperature: float = 0.7
    top_p: float = 0.9
    premium_model: str = "claude-sonnet-4-5-20250929"
    premium_max_tokens: int = 500
    timeout: int = 60
    max_retries: int = 3

    def __post_init__(self) -> None:
        _check_range("max_new_tokens", self.max_new_tokens, 1, 2048)
        _check_range("temperature", self.temperature, 0, 2)
        if not 0 < self.top_p <= 1:
            raise ValueError(f"top_p must be in (0, 1], got {self.top_p}")
        _check_range("premium_max_tokens", self.premium_max_tokens, 1, 8192)
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_retries", self.max_retries, 1, 10)


@dataclass(frozen=True)
class AuthConfig:
    base_url: str = "https://identitytoolkit.googleapis.com/v1"
    timeout: int = 15

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)


@dataclass(frozen=True)
class PipelineConfig:
    max_prompt_chars: int = 1000
    max_suggestions: int = 5

    def __post_init__(self) -> None:
        _check_range("max_prompt_chars", self.max_prompt_chars, 1, 10000)
        _check_range("max_suggestions", self.max_suggestions, 1, 5)


@dataclass(frozen=True)
class AppConfig:
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        translation=TranslationConfig(**raw.get("translation", {})),
        generation=GenerationConfig(**raw.get("generation", {})),
        auth=AuthConfig(**raw.get("auth", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
    )
