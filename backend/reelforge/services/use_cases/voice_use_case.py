"""
Voice stage use cases: narrate a single text, or every segment of a script.
"""

from typing import Optional

from reelforge.config import get_pipeline_settings
from reelforge.config.constants import MSG_VOICE_FAILED, MSG_VOICE_TEXT_REQUIRED
from reelforge.core import UpstreamCallError, ValidationError, get_logger
from reelforge.models import (
    AudioGenerationRequest,
    AudioGenerationResponse,
    VoiceGenerationRequest,
    VoiceGenerationResponse,
)
from reelforge.services.pipeline import AssetResult
from reelforge.services.pipeline.audio import TTSEngine
from reelforge.services.pipeline.segments import AUDIO_BINDING, SegmentPipelineRunner

from .base import UseCase

logger = get_logger(__name__, component="voice_use_case")


class VoiceGenerationUseCase(UseCase[VoiceGenerationRequest, VoiceGenerationResponse]):
    """Synthesize speech for one text and return it as a data URI."""

    def __init__(self, engine: Optional[TTSEngine] = None):
        self.engine = engine or TTSEngine()

    async def execute(self, request: VoiceGenerationRequest) -> VoiceGenerationResponse:
        text = request.text or ""
        if not text.strip():
            raise ValidationError(MSG_VOICE_TEXT_REQUIRED)

        voice = request.voice_id or self.engine.default_voice
        try:
            audio_url = await self.engine.synthesize_data_uri(text, voice)
        except Exception as e:
            logger.error("Edge TTS error", extra={"voice": voice, "error": str(e)})
            raise UpstreamCallError(MSG_VOICE_FAILED, detail=str(e)) from e

        return VoiceGenerationResponse(audio_url=audio_url)


class AudioGenerationUseCase(UseCase[AudioGenerationRequest, AudioGenerationResponse]):
    """Narrate every segment of a script; failures are reported per segment."""

    def __init__(self, engine: Optional[TTSEngine] = None, max_concurrency: Optional[int] = None):
        self.engine = engine or TTSEngine()
        self.max_concurrency = max_concurrency or get_pipeline_settings().max_concurrency

    async def execute(self, request: AudioGenerationRequest) -> AudioGenerationResponse:
        voice = request.voice or self.engine.default_voice
        if request.tts_service and request.tts_service.lower() not in ("edge", "edge-tts", "edge_tts"):
            logger.info("Requested TTS service not available, using Edge TTS", extra={
                "tts_service": request.tts_service,
            })

        async def narrate(text: str) -> AssetResult:
            return await self.engine.generate_segment_audio(text, voice)

        runner = SegmentPipelineRunner(
            generate=narrate,
            binding=AUDIO_BINDING,
            max_concurrency=self.max_concurrency,
        )
        script, batch = await runner.run(request.script)
        return AudioGenerationResponse(
            script=script.to_payload(),
            audio_results=batch.to_list(),
        )
