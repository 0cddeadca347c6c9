"""
API schemas for the generation endpoints

Request/Response models for the script, image and voice stages. Every
response carries ``success`` so the client can branch on a single envelope.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .script import Script, Segment


# === Request Models ===

class ScriptGenerationRequest(BaseModel):
    """Request to write a new video script"""
    subject: Optional[str] = ""
    summary: Optional[str] = ""
    duration: str = "1-2 phút"
    platform: str = "Facebook"


class ScriptRevisionRequest(BaseModel):
    """Request to rewrite a script according to user feedback"""
    script: Script
    feedback: Optional[str] = ""


class ImageGenerationRequest(BaseModel):
    """Request to illustrate every segment of a script"""
    script: Script


class ImageRegenerationRequest(BaseModel):
    """Request to regenerate the illustration of a single segment"""
    segment: Segment
    index: int = Field(default=0, ge=0)


class VoiceGenerationRequest(BaseModel):
    """Request to narrate a single piece of text"""
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = ""
    voice_id: Optional[str] = Field(default=None, alias="voiceId")


class AudioGenerationRequest(BaseModel):
    """Request to narrate every segment of a script"""
    script: Script
    voice: Optional[str] = None
    # Sent by the web client; Edge TTS is the only engine served
    tts_service: Optional[str] = None


# === Response Models ===

class ScriptGenerationResponse(BaseModel):
    success: bool = True
    script: Dict[str, Any]
    session_id: str


class ScriptRevisionResponse(BaseModel):
    success: bool = True
    script: Dict[str, Any]


class ImageGenerationResponse(BaseModel):
    success: bool = True
    script: Dict[str, Any]
    image_results: List[Dict[str, Any]]


class ImageRegenerationResponse(BaseModel):
    success: bool = True
    segment: Dict[str, Any]
    image_result: Dict[str, Any]


class VoiceGenerationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    audio_url: str = Field(alias="audioUrl")


class AudioGenerationResponse(BaseModel):
    success: bool = True
    script: Dict[str, Any]
    audio_results: List[Dict[str, Any]]

    @computed_field
    @property
    def audio(self) -> List[Dict[str, Any]]:
        """Same entries as ``audio_results``, under the key the web client reads"""
        return self.audio_results


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


# OpenAPI documentation of the error envelope shared by every stage router
ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or malformed input"},
    500: {"model": ErrorResponse, "description": "Provider or internal failure"},
}
