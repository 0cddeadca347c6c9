"""
Audio generation - Edge TTS narration as inline data URIs
"""

from .tts_engine import TTSEngine, TTSError, to_data_uri

__all__ = [
    "TTSEngine",
    "TTSError",
    "to_data_uri",
]
