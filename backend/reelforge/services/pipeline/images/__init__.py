"""
Image generation - job-based text-to-image client with placeholder fallback
"""

from ..assets import AssetOutcome, AssetResult
from .job_client import (
    AssetJobClient,
    GenerationJob,
    JobError,
    PollPolicy,
)
from .placeholder import placeholder_url
from .tensorart import build_job_payload

__all__ = [
    "AssetJobClient",
    "AssetOutcome",
    "AssetResult",
    "GenerationJob",
    "JobError",
    "PollPolicy",
    "placeholder_url",
    "build_job_payload",
]
