"""
Tests for reelforge.services.llm (OpenRouter, Gemini, factory)
"""

import json

import httpx
import pytest
from unittest.mock import MagicMock

from reelforge.config import LLMProviderType, get_llm_settings
from reelforge.services.llm import (
    GeminiProvider,
    LLMConfig,
    LLMProviderError,
    OpenRouterProvider,
    get_all_providers,
    get_default_provider_type,
    get_llm_provider,
)


def completion(content, usage=None):
    body = {"model": "meta-llama/llama-4-scout:free", "choices": [{"message": {"role": "assistant", "content": content}}]}
    if usage:
        body["usage"] = usage
    return httpx.Response(200, json=body)


def make_openrouter(handler, api_key="or-key"):
    return OpenRouterProvider(
        api_key=api_key,
        base_url="https://openrouter.test/api/v1",
        referer="https://vercel.com",
        title="Social Video Generator",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
class TestOpenRouterProvider:

    async def test_request_shape(self):
        captured = []

        def handler(request):
            captured.append(request)
            return completion('{"title": "T"}')

        provider = make_openrouter(handler)
        config = LLMConfig(
            model="meta-llama/llama-4-scout:free",
            temperature=0.7,
            max_tokens=2000,
            system_instruction="Bạn là một chuyên gia viết kịch bản video cho mạng xã hội.",
        )
        response = await provider.generate("Viết kịch bản", config)

        assert response.text == '{"title": "T"}'
        assert response.provider is LLMProviderType.OPENROUTER

        request = captured[0]
        assert str(request.url) == "https://openrouter.test/api/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer or-key"
        assert request.headers["HTTP-Referer"] == "https://vercel.com"
        assert request.headers["X-Title"] == "Social Video Generator"
        body = json.loads(request.content)
        assert body["model"] == "meta-llama/llama-4-scout:free"
        assert body["temperature"] == 0.7
        assert body["max_tokens"] == 2000
        assert body["messages"] == [
            {"role": "system", "content": "Bạn là một chuyên gia viết kịch bản video cho mạng xã hội."},
            {"role": "user", "content": "Viết kịch bản"},
        ]

    async def test_usage_is_parsed(self):
        provider = make_openrouter(lambda r: completion("hi", usage={"prompt_tokens": 12, "completion_tokens": 30}))

        response = await provider.generate("x")

        assert response.usage.input_tokens == 12
        assert response.usage.output_tokens == 30
        assert response.usage.total_tokens == 42

    async def test_error_status_raises(self):
        provider = make_openrouter(lambda r: httpx.Response(429, json={"error": {"message": "rate limited"}}))

        with pytest.raises(LLMProviderError) as exc_info:
            await provider.generate("x")
        assert exc_info.value.status_code == 429

    async def test_missing_choices_gives_empty_text(self):
        provider = make_openrouter(lambda r: httpx.Response(200, json={"choices": []}))

        response = await provider.generate("x")

        assert response.text == ""

    async def test_null_content_gives_empty_text(self):
        provider = make_openrouter(lambda r: completion(None))

        response = await provider.generate("x")

        assert response.text == ""

    async def test_non_json_body_raises(self):
        provider = make_openrouter(lambda r: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(LLMProviderError):
            await provider.generate("x")

    async def test_unavailable_without_key(self):
        provider = make_openrouter(lambda r: completion("x"), api_key=None)

        assert not provider.is_available()
        with pytest.raises(LLMProviderError):
            await provider.generate("x")


@pytest.mark.asyncio
class TestGeminiProvider:

    async def test_generate_uses_injected_client(self):
        fake_response = MagicMock()
        fake_response.text = '  {"title": "G"}  '
        fake_response.usage_metadata.prompt_token_count = 5
        fake_response.usage_metadata.candidates_token_count = 7
        client = MagicMock()
        client.models.generate_content.return_value = fake_response

        provider = GeminiProvider(api_key="g-key", client=client)
        response = await provider.generate(
            "prompt",
            LLMConfig(model="gemini-2.5-flash", temperature=0.7, max_tokens=2000, system_instruction="sys"),
        )

        assert response.text == '{"title": "G"}'
        assert response.provider is LLMProviderType.GEMINI
        assert response.usage.total_tokens == 12
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].system_instruction == "sys"
        assert kwargs["config"].max_output_tokens == 2000

    async def test_unavailable_without_key(self):
        provider = GeminiProvider(api_key=None)

        assert not provider.is_available()
        with pytest.raises(LLMProviderError):
            await provider.generate("x")


class TestFactory:

    def test_defaults_to_openrouter(self, monkeypatch):
        monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")

        provider = get_llm_provider()

        assert isinstance(provider, OpenRouterProvider)
        assert provider.is_available()
        assert provider.base_url == "https://openrouter.ai/api/v1"

    def test_openrouter_without_key_is_unavailable(self):
        provider = get_llm_provider()

        assert isinstance(provider, OpenRouterProvider)
        assert not provider.is_available()

    def test_gemini_selected_explicitly(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "gemini")

        provider = get_llm_provider()

        assert isinstance(provider, GeminiProvider)
        assert not provider.is_available()

    def test_get_all_providers(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")

        assert get_all_providers(get_llm_settings()) == {"openrouter": False, "gemini": True}

    def test_provider_type_comes_from_settings(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "gemini")

        provider = get_llm_provider()

        assert get_default_provider_type() is LLMProviderType.GEMINI
        assert provider.provider_type is LLMProviderType.GEMINI
