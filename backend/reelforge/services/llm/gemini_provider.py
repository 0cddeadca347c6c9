"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini models, used as the
alternative script writer when LLM_PROVIDER=gemini.
"""

import asyncio
from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from reelforge.config import LLMProviderType

from .base import (
    LLMConfig,
    LLMProvider,
    LLMProviderError,
    LLMResponse,
    UsageStats,
)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = LLMProviderType.GEMINI

    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        """Initialize Gemini provider

        Args:
            api_key: Gemini API key
            client: Pre-built genai client (tests inject a fake)
        """
        self.api_key = api_key
        self.client = client
        if self.client is None and self.api_key:
            self.client = genai.Client(api_key=self.api_key)

    def is_available(self) -> bool:
        return self.client is not None

    def _build_generation_config(self, config: LLMConfig) -> Optional[types.GenerateContentConfig]:
        kwargs = {}
        if config.temperature is not None:
            kwargs["temperature"] = config.temperature
        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens
        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction
        if kwargs:
            return types.GenerateContentConfig(**kwargs)
        return None

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate response using Gemini API (async)"""
        if not self.is_available():
            raise LLMProviderError("Gemini API key is not configured")

        if config is None:
            config = LLMConfig(model=kwargs.get("model", self.DEFAULT_MODEL))

        model = kwargs.get("model", config.model)
        request_kwargs = {
            "model": model,
            "contents": prompt,
        }
        generation_config = self._build_generation_config(config)
        if generation_config is not None:
            request_kwargs["config"] = generation_config

        # The SDK call is blocking
        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                **request_kwargs
            )
        except genai_errors.APIError as e:
            raise LLMProviderError(f"Gemini API error: {e}", status_code=getattr(e, "code", None)) from e

        return LLMResponse(
            text=response.text.strip() if response.text else "",
            model=model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )
