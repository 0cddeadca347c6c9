"""
Generation job status constants.

Centralized status definitions for jobs submitted to job-based providers.
"""

from enum import Enum


class JobStatus(Enum):
    """Lifecycle of a provider-side generation job."""

    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if this status is a terminal state (no further progress)."""
        return self in (JobStatus.SUCCESS, JobStatus.FAILED)

    @classmethod
    def from_provider(cls, raw: object) -> "JobStatus":
        """Map a provider status string to a JobStatus.

        Only SUCCESS and FAILED are terminal; queue-like names map to PENDING
        and every other intermediate name the provider invents maps to RUNNING.
        """
        value = str(raw or "").strip().upper()
        if value == "SUCCESS":
            return cls.SUCCESS
        if value == "FAILED":
            return cls.FAILED
        if value in PROVIDER_PENDING_STATUSES:
            return cls.PENDING
        return cls.RUNNING


PROVIDER_PENDING_STATUSES = {"CREATED", "PENDING", "QUEUED", "WAITING"}


__all__ = [
    "JobStatus",
    "PROVIDER_PENDING_STATUSES",
]
