"""
OpenRouter LLM Provider

Implementation of LLMProvider for the OpenAI-compatible chat completions
endpoint exposed by OpenRouter.
"""

from typing import Any, Dict, List, Optional

import httpx

from reelforge.config import LLMProviderType
from reelforge.core import get_logger

from .base import (
    LLMConfig,
    LLMProvider,
    LLMProviderError,
    LLMResponse,
    UsageStats,
)

logger = get_logger(__name__, component="openrouter_provider")


class OpenRouterProvider(LLMProvider):
    """Chat-completion provider backed by OpenRouter"""

    provider_type = LLMProviderType.OPENROUTER

    DEFAULT_MODEL = "meta-llama/llama-4-scout:free"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://openrouter.ai/api/v1",
        referer: Optional[str] = None,
        title: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize OpenRouter provider

        Args:
            api_key: OpenRouter API key (bearer token)
            base_url: API root, without the trailing /chat/completions
            referer: Value of the HTTP-Referer attribution header
            title: Value of the X-Title attribution header
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.referer = referer
        self.title = title
        self.timeout = timeout
        self._transport = transport

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if self.title:
            headers["X-Title"] = self.title
        return headers

    @staticmethod
    def _build_messages(prompt: str, system_instruction: Optional[str]) -> List[Dict[str, str]]:
        messages = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": prompt})
        return messages

    def _parse_response(self, data: Dict[str, Any], model: str) -> LLMResponse:
        choices = data.get("choices") or []
        message = (choices[0] or {}).get("message") or {} if choices else {}
        text = message.get("content") or ""

        usage = None
        if isinstance(data.get("usage"), dict):
            usage = UsageStats(
                input_tokens=data["usage"].get("prompt_tokens", 0) or 0,
                output_tokens=data["usage"].get("completion_tokens", 0) or 0,
            )

        return LLMResponse(
            text=text.strip(),
            model=data.get("model", model),
            provider=self.provider_type,
            usage=usage,
            raw_response=data,
        )

    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion (async)"""
        if not self.is_available():
            raise LLMProviderError("OpenRouter API key is not configured")

        if config is None:
            config = LLMConfig(model=kwargs.get("model", self.DEFAULT_MODEL))

        model = kwargs.get("model", config.model)
        payload: Dict[str, Any] = {
            "model": model,
            "messages": self._build_messages(prompt, config.system_instruction),
            "temperature": config.temperature,
        }
        if config.max_tokens:
            payload["max_tokens"] = config.max_tokens
        payload.update(config.extra_options)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=self._headers(),
            )

        if not response.is_success:
            logger.error("OpenRouter API error", extra={
                "status_code": response.status_code,
                "body": response.text[:500],
            })
            raise LLMProviderError(
                f"OpenRouter API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMProviderError(f"OpenRouter returned a non-JSON body: {e}") from e

        return self._parse_response(data, model)
