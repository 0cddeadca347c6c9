"""
Pipeline services - asset generation flow.

Pipeline Stages:
1. Script Generation - LLM writes a segmented video script
2. Images - one illustration per segment via a job-based provider
3. Audio - text-to-speech for narration

The segment runner drives stages 2 and 3 over a whole script.
"""

from .assets import AssetOutcome, AssetResult

__all__ = [
    "AssetOutcome",
    "AssetResult",
]
