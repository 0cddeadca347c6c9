"""
Image routes - illustrate a script or regenerate one segment
"""

from fastapi import APIRouter, Depends, Request, Response

from ..core import SessionContext, attach_session_cookie, resolve_session, set_session_id
from ..models import (
    ERROR_RESPONSES,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageRegenerationRequest,
    ImageRegenerationResponse,
)
from ..services.use_cases import ImageGenerationUseCase, ImageRegenerationUseCase
from .cancellation import cancel_on_disconnect

router = APIRouter(prefix="/api", tags=["images"], responses=ERROR_RESPONSES)


@router.post("/generate-images", response_model=ImageGenerationResponse)
async def generate_images(
    body: ImageGenerationRequest,
    request: Request,
    response: Response,
    session: SessionContext = Depends(resolve_session),
):
    """Generate one image per segment; per-segment failures are reported, not raised"""
    set_session_id(session.session_id)
    async with cancel_on_disconnect(request) as cancel_event:
        result = await ImageGenerationUseCase(cancel_event=cancel_event).execute(body)

    attach_session_cookie(response, session)
    return result


@router.post("/regenerate-image", response_model=ImageRegenerationResponse)
async def regenerate_image(
    body: ImageRegenerationRequest,
    request: Request,
    response: Response,
    session: SessionContext = Depends(resolve_session),
):
    """Regenerate the image of a single segment"""
    set_session_id(session.session_id)
    async with cancel_on_disconnect(request) as cancel_event:
        result = await ImageRegenerationUseCase(cancel_event=cancel_event).execute(body)

    attach_session_cookie(response, session)
    return result
