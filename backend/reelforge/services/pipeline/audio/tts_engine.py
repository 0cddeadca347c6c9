"""
TTS Engine - Text-to-Speech using Edge TTS (free, no credential)

Audio is never written to disk: the MP3 bytes are returned to the client
inline as a base64 ``data:`` URI.
"""

import base64
from typing import Optional

import edge_tts

from reelforge.config import TTSSettings, get_tts_settings
from reelforge.core import get_logger

from ..assets import AssetOutcome, AssetResult

logger = get_logger(__name__, component="tts_engine")

AUDIO_MIME_TYPE = "audio/mpeg"


class TTSError(RuntimeError):
    """Speech synthesis produced no audio or the service failed."""


def to_data_uri(audio: bytes, mime_type: str = AUDIO_MIME_TYPE) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(audio).decode('ascii')}"


class TTSEngine:
    """Text-to-Speech engine using Microsoft Edge TTS"""

    def __init__(self, settings: Optional[TTSSettings] = None):
        self.settings = settings or get_tts_settings()

    @property
    def default_voice(self) -> str:
        return self.settings.default_voice

    async def synthesize_bytes(
        self,
        text: str,
        voice: Optional[str] = None,
        rate: Optional[str] = None,
        pitch: Optional[str] = None,
    ) -> bytes:
        """
        Synthesize text to speech and return the MP3 bytes.

        Raises:
            TTSError: If the text is empty or the service returned no audio
        """
        if not text or not text.strip():
            raise TTSError("Text is empty")

        voice = voice or self.settings.default_voice
        communicate = edge_tts.Communicate(
            text,
            voice,
            rate=rate or self.settings.rate,
            pitch=pitch or self.settings.pitch,
        )

        chunks = []
        try:
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    chunks.append(chunk["data"])
        except edge_tts.exceptions.EdgeTTSException as e:
            raise TTSError(f"Edge TTS failed: {e}") from e

        audio = b"".join(chunks)
        if not audio:
            raise TTSError("No audio was received")

        logger.debug("Synthesized speech", extra={"voice": voice, "bytes": len(audio)})
        return audio

    async def synthesize_data_uri(self, text: str, voice: Optional[str] = None) -> str:
        """Synthesize and return ``data:audio/mpeg;base64,...``"""
        return to_data_uri(await self.synthesize_bytes(text, voice))

    async def generate_segment_audio(self, text: str, voice: Optional[str] = None) -> AssetResult:
        """Narrate one segment. Failures come back as a FAILED result."""
        try:
            uri = await self.synthesize_data_uri(text, voice)
        except Exception as e:
            logger.warning("TTS synthesis failed", extra={"error": str(e)})
            return AssetResult.failed(str(e))
        return AssetResult(url=uri, outcome=AssetOutcome.GENERATED)
