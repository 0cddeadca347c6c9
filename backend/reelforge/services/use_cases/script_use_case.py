"""
Script stage use cases: write a new script, or revise one from feedback.
"""

from typing import Optional

from reelforge.config.constants import MSG_FEEDBACK_REQUIRED, MSG_SCRIPT_FIELDS_REQUIRED
from reelforge.core import ValidationError, get_logger, new_session_id
from reelforge.models import (
    ScriptGenerationRequest,
    ScriptGenerationResponse,
    ScriptRevisionRequest,
    ScriptRevisionResponse,
)
from reelforge.services.pipeline.script_generation import ScriptGenerator

from .base import UseCase

logger = get_logger(__name__, component="script_use_case")


class ScriptGenerationUseCase(UseCase[ScriptGenerationRequest, ScriptGenerationResponse]):
    """Generate a segmented script and start a new creation session."""

    def __init__(self, generator: Optional[ScriptGenerator] = None):
        self._generator = generator

    @property
    def generator(self) -> ScriptGenerator:
        # Built lazily so validation errors never depend on provider settings
        if self._generator is None:
            self._generator = ScriptGenerator()
        return self._generator

    async def execute(self, request: ScriptGenerationRequest) -> ScriptGenerationResponse:
        subject = (request.subject or "").strip()
        summary = (request.summary or "").strip()
        if not subject or not summary:
            raise ValidationError(MSG_SCRIPT_FIELDS_REQUIRED)

        session_id = new_session_id()
        logger.info("Generating script", extra={
            "platform": request.platform,
            "duration": request.duration,
            "new_session_id": session_id,
        })

        script = await self.generator.generate(
            subject=subject,
            summary=summary,
            duration=request.duration,
            platform=request.platform,
        )
        return ScriptGenerationResponse(script=script.to_payload(), session_id=session_id)


class ScriptRevisionUseCase(UseCase[ScriptRevisionRequest, ScriptRevisionResponse]):
    """Rewrite an existing script according to user feedback."""

    def __init__(self, generator: Optional[ScriptGenerator] = None):
        self._generator = generator

    @property
    def generator(self) -> ScriptGenerator:
        if self._generator is None:
            self._generator = ScriptGenerator()
        return self._generator

    async def execute(self, request: ScriptRevisionRequest) -> ScriptRevisionResponse:
        feedback = (request.feedback or "").strip()
        if not feedback:
            raise ValidationError(MSG_FEEDBACK_REQUIRED)

        revised = await self.generator.revise(request.script, feedback)
        return ScriptRevisionResponse(script=revised.to_payload())
