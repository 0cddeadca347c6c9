"""
Segment pipeline - run one asset generator across a script
"""

from .runner import (
    ArtifactBinding,
    AssetGenerator,
    BatchResult,
    SegmentPipelineRunner,
    SegmentResult,
    IMAGE_BINDING,
    AUDIO_BINDING,
)

__all__ = [
    "ArtifactBinding",
    "AssetGenerator",
    "BatchResult",
    "SegmentPipelineRunner",
    "SegmentResult",
    "IMAGE_BINDING",
    "AUDIO_BINDING",
]
