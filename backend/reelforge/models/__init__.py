"""
Pydantic models for API request/response schemas and the script model
"""

from .script import Script, Segment
from .status import JobStatus
from .generation import (
    ScriptGenerationRequest,
    ScriptRevisionRequest,
    ImageGenerationRequest,
    ImageRegenerationRequest,
    VoiceGenerationRequest,
    AudioGenerationRequest,
    ScriptGenerationResponse,
    ScriptRevisionResponse,
    ImageGenerationResponse,
    ImageRegenerationResponse,
    VoiceGenerationResponse,
    AudioGenerationResponse,
    ErrorResponse,
    ERROR_RESPONSES,
)

__all__ = [
    "Script",
    "Segment",
    "JobStatus",
    "ScriptGenerationRequest",
    "ScriptRevisionRequest",
    "ImageGenerationRequest",
    "ImageRegenerationRequest",
    "VoiceGenerationRequest",
    "AudioGenerationRequest",
    "ScriptGenerationResponse",
    "ScriptRevisionResponse",
    "ImageGenerationResponse",
    "ImageRegenerationResponse",
    "VoiceGenerationResponse",
    "AudioGenerationResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
]
