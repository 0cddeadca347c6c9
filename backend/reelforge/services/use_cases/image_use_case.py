"""
Image stage use cases: illustrate a whole script, or regenerate one segment.

Both run the segment pipeline runner with the Asset Job Client. Individual
segment failures are reported in ``image_results``; the stage itself still
succeeds.
"""

import asyncio
from typing import Optional

from reelforge.config import get_pipeline_settings
from reelforge.models import (
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageRegenerationRequest,
    ImageRegenerationResponse,
)
from reelforge.services.pipeline import AssetResult
from reelforge.services.pipeline.images import AssetJobClient
from reelforge.services.pipeline.segments import IMAGE_BINDING, SegmentPipelineRunner

from .base import UseCase


class _ImageStage:
    def __init__(
        self,
        client: Optional[AssetJobClient] = None,
        max_concurrency: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ):
        self.client = client or AssetJobClient()
        self.max_concurrency = max_concurrency or get_pipeline_settings().max_concurrency
        self.cancel_event = cancel_event

    async def _generate(self, prompt: str) -> AssetResult:
        return await self.client.generate(prompt, cancel_event=self.cancel_event)

    def runner(self) -> SegmentPipelineRunner:
        return SegmentPipelineRunner(
            generate=self._generate,
            binding=IMAGE_BINDING,
            max_concurrency=self.max_concurrency,
        )


class ImageGenerationUseCase(_ImageStage, UseCase[ImageGenerationRequest, ImageGenerationResponse]):
    """Generate one image per segment and attach the URLs to the script."""

    async def execute(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        script, batch = await self.runner().run(request.script, cancel_event=self.cancel_event)
        return ImageGenerationResponse(
            script=script.to_payload(),
            image_results=batch.to_list(),
        )


class ImageRegenerationUseCase(_ImageStage, UseCase[ImageRegenerationRequest, ImageRegenerationResponse]):
    """Regenerate the image of a single segment."""

    async def execute(self, request: ImageRegenerationRequest) -> ImageRegenerationResponse:
        segment = request.segment
        result = await self.runner().run_single(segment, request.index, cancel_event=self.cancel_event)
        return ImageRegenerationResponse(
            segment=segment.model_dump(exclude_none=True),
            image_result=result.to_dict(),
        )
