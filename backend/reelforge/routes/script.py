"""
Script routes - generate and revise video scripts
"""

from fastapi import APIRouter, Depends, Response

from ..core import SessionContext, attach_session_cookie, resolve_session, set_session_id
from ..models import (
    ERROR_RESPONSES,
    ScriptGenerationRequest,
    ScriptGenerationResponse,
    ScriptRevisionRequest,
    ScriptRevisionResponse,
)
from ..services.use_cases import ScriptGenerationUseCase, ScriptRevisionUseCase

router = APIRouter(prefix="/api", tags=["script"], responses=ERROR_RESPONSES)


@router.post("/generate-script", response_model=ScriptGenerationResponse)
async def generate_script(request: ScriptGenerationRequest, response: Response):
    """Write a segmented script for a topic; starts a new session"""
    result = await ScriptGenerationUseCase().execute(request)

    set_session_id(result.session_id)
    attach_session_cookie(response, SessionContext(session_id=result.session_id, is_new=True))
    return result


@router.post("/update-script", response_model=ScriptRevisionResponse)
async def update_script(
    request: ScriptRevisionRequest,
    response: Response,
    session: SessionContext = Depends(resolve_session),
):
    """Revise a script according to user feedback"""
    set_session_id(session.session_id)
    result = await ScriptRevisionUseCase().execute(request)

    attach_session_cookie(response, session)
    return result
