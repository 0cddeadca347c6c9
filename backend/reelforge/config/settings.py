"""
Provider and pipeline settings

All values come from environment variables and are read at call time, so
tests (and operators reloading a .env) always see the current configuration.

=== PROVIDER CONFIGURATION ===

LLM (script stage):
    - LLM_PROVIDER=openrouter : OpenRouter chat completions (default, needs OPENROUTER_API_KEY)
    - LLM_PROVIDER=gemini     : Google Gemini via google-genai (needs GEMINI_API_KEY)

Images:
    - TENSORART_API_KEY unset -> placeholder images, no network calls

Voice:
    - Microsoft Edge TTS (no credential needed)
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


def parse_bool_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return max(int(raw), minimum)
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float, minimum: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return max(float(raw), minimum)
    except (TypeError, ValueError):
        return default


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


class LLMProviderType(str, Enum):
    """Supported LLM providers"""
    OPENROUTER = "openrouter"
    GEMINI = "gemini"


def get_active_provider() -> LLMProviderType:
    """Get the active LLM provider from environment

    Priority:
    1. Explicit LLM_PROVIDER env var
    2. If only GEMINI_API_KEY is set, use Gemini
    3. Default to OpenRouter
    """
    provider_env = os.getenv("LLM_PROVIDER", "").strip().lower()

    if provider_env == LLMProviderType.GEMINI.value:
        return LLMProviderType.GEMINI
    elif provider_env == LLMProviderType.OPENROUTER.value:
        return LLMProviderType.OPENROUTER

    if os.getenv("GEMINI_API_KEY") and not os.getenv("OPENROUTER_API_KEY"):
        return LLMProviderType.GEMINI

    return LLMProviderType.OPENROUTER


@dataclass(frozen=True)
class LLMSettings:
    """Configuration for the script-writing LLM"""
    provider: LLMProviderType
    openrouter_api_key: Optional[str]
    openrouter_base_url: str
    openrouter_model: str
    openrouter_referer: str
    openrouter_title: str
    gemini_api_key: Optional[str]
    gemini_model: str
    temperature: float
    max_tokens: int
    timeout_seconds: float

    @property
    def api_key(self) -> Optional[str]:
        """Credential of the active provider"""
        if self.provider == LLMProviderType.GEMINI:
            return self.gemini_api_key
        return self.openrouter_api_key

    @property
    def model(self) -> str:
        if self.provider == LLMProviderType.GEMINI:
            return self.gemini_model
        return self.openrouter_model


@dataclass(frozen=True)
class ImageSettings:
    """Configuration for the job-based image provider"""
    api_key: Optional[str]
    base_url: str
    width: int
    height: int
    poll_interval_seconds: float
    job_timeout_seconds: float
    submit_timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class TTSSettings:
    """Configuration for Edge TTS"""
    default_voice: str
    rate: str
    pitch: str


@dataclass(frozen=True)
class PipelineSettings:
    """Segment pipeline tuning"""
    max_concurrency: int


def get_llm_settings() -> LLMSettings:
    return LLMSettings(
        provider=get_active_provider(),
        openrouter_api_key=_env_str("OPENROUTER_API_KEY"),
        openrouter_base_url=_env_str("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1").rstrip("/"),
        openrouter_model=_env_str("OPENROUTER_MODEL", "meta-llama/llama-4-scout:free"),
        openrouter_referer=_env_str("OPENROUTER_REFERER", "https://vercel.com"),
        openrouter_title=_env_str("OPENROUTER_TITLE", "Social Video Generator"),
        gemini_api_key=_env_str("GEMINI_API_KEY"),
        gemini_model=_env_str("GEMINI_MODEL", "gemini-2.5-flash"),
        temperature=_env_float("LLM_TEMPERATURE", 0.7, 0.0),
        max_tokens=_env_int("LLM_MAX_TOKENS", 2000, 1),
        timeout_seconds=_env_float("LLM_TIMEOUT_SECONDS", 60.0, 1.0),
    )


def get_image_settings() -> ImageSettings:
    return ImageSettings(
        api_key=_env_str("TENSORART_API_KEY"),
        base_url=_env_str("TENSORART_BASE_URL", "https://ap-east-1.tensorart.cloud").rstrip("/"),
        width=_env_int("IMAGE_WIDTH", 1024, 64),
        height=_env_int("IMAGE_HEIGHT", 1024, 64),
        poll_interval_seconds=_env_float("IMAGE_POLL_INTERVAL_SECONDS", 10.0, 0.0),
        job_timeout_seconds=_env_float("IMAGE_JOB_TIMEOUT_SECONDS", 300.0, 0.0),
        submit_timeout_seconds=_env_float("IMAGE_SUBMIT_TIMEOUT_SECONDS", 30.0, 1.0),
    )


def get_tts_settings() -> TTSSettings:
    return TTSSettings(
        default_voice=_env_str("TTS_DEFAULT_VOICE", "en-US-JennyNeural"),
        rate=_env_str("TTS_RATE", "+0%"),
        pitch=_env_str("TTS_PITCH", "+0Hz"),
    )


def get_pipeline_settings() -> PipelineSettings:
    return PipelineSettings(
        max_concurrency=_env_int("SEGMENT_MAX_CONCURRENCY", 1, 1),
    )


__all__ = [
    "parse_bool_env",
    "LLMProviderType",
    "get_active_provider",
    "LLMSettings",
    "ImageSettings",
    "TTSSettings",
    "PipelineSettings",
    "get_llm_settings",
    "get_image_settings",
    "get_tts_settings",
    "get_pipeline_settings",
]
