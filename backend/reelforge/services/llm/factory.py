"""
LLM Provider Factory

Creates LLM provider instances from the current settings.
"""

from typing import Dict, Optional

import httpx

from reelforge.config import LLMProviderType, LLMSettings, get_llm_settings

from .base import LLMProvider
from .gemini_provider import GeminiProvider
from .openrouter_provider import OpenRouterProvider


def get_default_provider_type(settings: Optional[LLMSettings] = None) -> LLMProviderType:
    """Provider selected by LLM_PROVIDER (or auto-detected from credentials)"""
    settings = settings or get_llm_settings()
    return settings.provider


def get_llm_provider(
    settings: Optional[LLMSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> LLMProvider:
    """Get an LLM provider instance

    Providers are cheap to build and settings are read at call time, so no
    instance is cached. The returned provider may be unavailable (missing
    credential); callers check ``is_available()`` before calling out.

    Args:
        settings: LLM settings. If None, read from the environment.
        transport: Optional httpx transport for HTTP-based providers

    Returns:
        LLMProvider instance
    """
    settings = settings or get_llm_settings()
    provider_type = get_default_provider_type(settings)

    if provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(api_key=settings.gemini_api_key)

    return OpenRouterProvider(
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        referer=settings.openrouter_referer,
        title=settings.openrouter_title,
        timeout=settings.timeout_seconds,
        transport=transport,
    )


def get_all_providers(settings: Optional[LLMSettings] = None) -> Dict[str, bool]:
    """Whether each LLM provider has a credential configured"""
    settings = settings or get_llm_settings()
    return {
        LLMProviderType.OPENROUTER.value: bool(settings.openrouter_api_key),
        LLMProviderType.GEMINI.value: bool(settings.gemini_api_key),
    }
