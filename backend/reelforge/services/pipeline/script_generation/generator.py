"""
Script generator - LLM call, JSON extraction and normalization.

Turns a topic (or an existing script plus feedback) into a validated
``Script``. Provider failures and unusable replies are mapped onto the
pipeline error taxonomy so routes can render them directly.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from reelforge.config import LLMProviderType, LLMSettings, get_llm_settings
from reelforge.core import LogTimer, ParseError, UpstreamCallError, UpstreamConfigError, get_logger
from reelforge.models import Script
from reelforge.services.infrastructure.parsing import ExtractionError, extract_json_object
from reelforge.services.llm import LLMConfig, LLMProvider, LLMProviderError, get_llm_provider

from .prompts import SYSTEM_INSTRUCTION, build_revision_prompt, build_script_prompt

logger = get_logger(__name__, component="script_generator")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def normalize_script(data: Dict[str, Any]) -> Script:
    """Build a Script from an extracted object.

    Non-object segment entries are dropped and a missing image description
    falls back to the narration. Unknown keys are kept.

    Raises:
        ParseError: If no segment with narration or an image description remains
    """
    raw_segments = data.get("segments")
    if not isinstance(raw_segments, list):
        raise ParseError(detail="Model reply has no 'segments' list")

    segments: List[Dict[str, Any]] = []
    for raw in raw_segments:
        if not isinstance(raw, dict):
            continue
        narration = _as_text(raw.get("script"))
        description = _as_text(raw.get("image_description"))
        if not narration and not description:
            continue
        segments.append({
            **raw,
            "script": narration,
            "image_description": description or narration,
        })

    if not segments:
        raise ParseError(detail="Model reply has no usable segments")

    try:
        return Script.model_validate({
            **data,
            "title": _as_text(data.get("title")),
            "segments": segments,
        })
    except PydanticValidationError as e:
        raise ParseError(detail=f"Script does not match the expected shape: {e}") from e


def parse_script(text: str) -> Script:
    """Extract and normalize the script from a raw model reply."""
    try:
        data = extract_json_object(text)
    except ExtractionError as e:
        logger.error("Error parsing JSON from LLM response", extra={
            "error": str(e),
            "reply_preview": e.raw_text[:300],
        })
        raise ParseError(detail=str(e)) from e
    return normalize_script(data)


class ScriptGenerator:
    """Writes and revises video scripts through the configured LLM"""

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        settings: Optional[LLMSettings] = None,
    ):
        self.settings = settings or get_llm_settings()
        self.provider = provider or get_llm_provider(self.settings)

    def _llm_config(self) -> LLMConfig:
        return LLMConfig(
            model=self.settings.model,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
            system_instruction=SYSTEM_INSTRUCTION,
        )

    async def _complete(self, prompt: str) -> str:
        if not self.provider.is_available():
            if self.settings.provider == LLMProviderType.GEMINI:
                raise UpstreamConfigError("Gemini API key không được cấu hình")
            raise UpstreamConfigError()

        try:
            with LogTimer(logger, f"LLM call ({self.provider.name})"):
                response = await self.provider.generate(prompt, self._llm_config())
        except (LLMProviderError, httpx.HTTPError) as e:
            logger.error("LLM call failed", extra={
                "provider": self.provider.name,
                "error": str(e),
            })
            raise UpstreamCallError(detail=str(e)) from e

        if response.usage:
            logger.info("LLM usage", extra={
                "provider": self.provider.name,
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            })
        return response.text

    async def generate(
        self,
        subject: str,
        summary: str,
        duration: str,
        platform: str,
    ) -> Script:
        """Write a new script for the given topic."""
        prompt = build_script_prompt(subject, summary, duration, platform)
        script = parse_script(await self._complete(prompt))
        logger.info(f"Generated script with {len(script.segments)} segments", extra={
            "platform": platform,
            "segment_count": len(script.segments),
        })
        return script

    async def revise(self, script: Script, feedback: str) -> Script:
        """Rewrite ``script`` according to the user's feedback."""
        prompt = build_revision_prompt(script.to_payload(), feedback)
        revised = parse_script(await self._complete(prompt))
        logger.info(f"Revised script now has {len(revised.segments)} segments", extra={
            "segment_count": len(revised.segments),
        })
        return revised
