"""
LLM Service - Abstraction layer for script-writing providers

- OpenRouter (OpenAI-compatible chat completions over httpx)
- Gemini (Google's AI models via google-genai)

Usage:
    from reelforge.services.llm import get_llm_provider, LLMConfig

    llm = get_llm_provider()
    response = await llm.generate("Your prompt here", LLMConfig(model="..."))
    print(response.text)
"""

from .base import (
    LLMProvider,
    LLMProviderError,
    LLMResponse,
    LLMConfig,
    UsageStats,
)
from .factory import get_llm_provider, get_default_provider_type, get_all_providers
from .gemini_provider import GeminiProvider
from .openrouter_provider import OpenRouterProvider

__all__ = [
    # Base classes
    "LLMProvider",
    "LLMProviderError",
    "LLMResponse",
    "LLMConfig",
    "UsageStats",
    # Providers
    "GeminiProvider",
    "OpenRouterProvider",
    # Factory
    "get_llm_provider",
    "get_default_provider_type",
    "get_all_providers",
]
