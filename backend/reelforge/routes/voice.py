"""
Voice routes - narrate text or a whole script with Edge TTS
"""

from fastapi import APIRouter, Depends, Response

from ..core import SessionContext, attach_session_cookie, resolve_session, set_session_id
from ..models import (
    ERROR_RESPONSES,
    AudioGenerationRequest,
    AudioGenerationResponse,
    VoiceGenerationRequest,
    VoiceGenerationResponse,
)
from ..services.use_cases import AudioGenerationUseCase, VoiceGenerationUseCase

router = APIRouter(prefix="/api", tags=["voice"], responses=ERROR_RESPONSES)


@router.post("/generate-voice", response_model=VoiceGenerationResponse, response_model_by_alias=True)
async def generate_voice(request: VoiceGenerationRequest):
    """Synthesize one text and return it as a data URI"""
    return await VoiceGenerationUseCase().execute(request)


@router.post("/generate-audio", response_model=AudioGenerationResponse)
async def generate_audio(
    request: AudioGenerationRequest,
    response: Response,
    session: SessionContext = Depends(resolve_session),
):
    """Narrate every segment of a script"""
    set_session_id(session.session_id)
    result = await AudioGenerationUseCase().execute(request)

    attach_session_cookie(response, session)
    return result
