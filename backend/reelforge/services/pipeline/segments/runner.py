"""
Segment Pipeline Runner

Applies one asset generator to every segment of a script and aggregates the
per-segment outcomes. A failing segment never aborts the batch: its fields are
left untouched, the failure is recorded, and the next segment runs.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from reelforge.core import get_logger
from reelforge.models import Script, Segment

from ..assets import AssetOutcome, AssetResult

logger = get_logger(__name__, component="segment_runner")

AssetGenerator = Callable[[str], Awaitable[AssetResult]]

MSG_SEGMENT_CANCELLED = "Cancelled before generation started"


@dataclass(frozen=True)
class ArtifactBinding:
    """Which segment text feeds the generator and which fields get the result"""
    name: str
    source: str
    targets: Tuple[str, ...]

    def prompt_for(self, segment: Segment) -> str:
        return getattr(segment, self.source) or ""

    def attach(self, segment: Segment, url: str) -> Dict[str, str]:
        for target in self.targets:
            setattr(segment, target, url)
        return {target: url for target in self.targets}


IMAGE_BINDING = ArtifactBinding(
    name="image",
    source="image_prompt",
    targets=("image_path", "direct_image_url"),
)

AUDIO_BINDING = ArtifactBinding(
    name="audio",
    source="narration_text",
    targets=("audio_path",),
)


@dataclass
class SegmentResult:
    """Result of processing a single segment"""
    index: int
    success: bool
    url: Optional[str] = None
    error: Optional[str] = None
    degraded: bool = False
    outcome: Optional[AssetOutcome] = None
    fields: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "index": self.index,
            "success": self.success,
            "url": self.url,
            "error": self.error,
            "degraded": self.degraded,
            "outcome": self.outcome.value if self.outcome else None,
        }
        data.update(self.fields)
        return data


@dataclass
class BatchResult:
    """Per-segment results, ordered by segment index"""
    per_segment: List[SegmentResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.per_segment if r.success)

    @property
    def failed(self) -> int:
        return len(self.per_segment) - self.succeeded

    @property
    def all_succeeded(self) -> bool:
        return self.failed == 0

    def to_list(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.per_segment]


class SegmentPipelineRunner:
    """
    Runs an asset generator over the segments of a script.

    Sequential in index order by default. With ``max_concurrency > 1``
    segments run concurrently under a semaphore; results are still placed by
    index, so the batch looks the same whichever segment finishes first.
    """

    def __init__(
        self,
        generate: AssetGenerator,
        binding: ArtifactBinding,
        max_concurrency: int = 1,
    ):
        self._generate = generate
        self.binding = binding
        self.max_concurrency = max(1, max_concurrency)

    async def run(
        self,
        script: Script,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Tuple[Script, BatchResult]:
        """Generate an asset for every segment, mutating the script in place."""
        batch = BatchResult()
        segments = script.segments

        logger.info(f"Generating {self.binding.name} for {len(segments)} segments", extra={
            "stage": self.binding.name,
            "segment_count": len(segments),
            "max_concurrency": self.max_concurrency,
        })

        if self.max_concurrency == 1:
            for i, segment in enumerate(segments):
                batch.per_segment.append(await self._process(i, segment, cancel_event))
        else:
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def bounded(i: int, segment: Segment) -> SegmentResult:
                async with semaphore:
                    return await self._process(i, segment, cancel_event)

            # gather keeps input order regardless of completion order
            batch.per_segment.extend(
                await asyncio.gather(*(bounded(i, s) for i, s in enumerate(segments)))
            )

        logger.info(f"Finished {self.binding.name} stage", extra={
            "stage": self.binding.name,
            "succeeded": batch.succeeded,
            "failed": batch.failed,
        })
        return script, batch

    async def run_single(
        self,
        segment: Segment,
        index: int = 0,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> SegmentResult:
        """Regenerate the asset of one segment; nothing else is touched."""
        return await self._process(index, segment, cancel_event)

    async def _process(
        self,
        index: int,
        segment: Segment,
        cancel_event: Optional[asyncio.Event],
    ) -> SegmentResult:
        if cancel_event is not None and cancel_event.is_set():
            return SegmentResult(
                index=index,
                success=False,
                error=MSG_SEGMENT_CANCELLED,
                degraded=True,
                outcome=AssetOutcome.CANCELLED,
            )

        try:
            result = await self._generate(self.binding.prompt_for(segment))
        except Exception as e:
            logger.error(f"Error generating {self.binding.name} for segment {index + 1}", extra={
                "segment_index": index,
                "error": str(e),
            }, exc_info=True)
            return SegmentResult(
                index=index,
                success=False,
                error=str(e),
                degraded=True,
                outcome=AssetOutcome.FAILED,
            )

        if result.ok and result.url:
            return SegmentResult(
                index=index,
                success=True,
                url=result.url,
                degraded=result.degraded,
                outcome=result.outcome,
                fields=self.binding.attach(segment, result.url),
            )

        error = result.error or f"No {self.binding.name} produced"
        logger.error(f"Error generating {self.binding.name} for segment {index + 1}", extra={
            "segment_index": index,
            "outcome": result.outcome.value,
            "error": error,
        })
        return SegmentResult(
            index=index,
            success=False,
            error=error,
            degraded=True,
            outcome=result.outcome,
        )
