"""
Per-asset outcome shared by the image and voice stages.

A generated asset and a degraded one look the same to the UI (both carry a
URL); ``AssetResult`` keeps the distinction available to the code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AssetOutcome(str, Enum):
    GENERATED = "generated"
    PLACEHOLDER = "placeholder"  # No credential, nothing attempted
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


@dataclass
class AssetResult:
    """Outcome of generating one asset"""
    url: Optional[str]
    outcome: AssetOutcome
    error: Optional[str] = None
    job_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Usable without an error (a real asset or an intentional placeholder)"""
        return self.outcome in (AssetOutcome.GENERATED, AssetOutcome.PLACEHOLDER) and not self.error

    @property
    def degraded(self) -> bool:
        return self.outcome is not AssetOutcome.GENERATED

    @classmethod
    def generated(cls, url: str, job_id: Optional[str] = None) -> "AssetResult":
        return cls(url=url, outcome=AssetOutcome.GENERATED, job_id=job_id)

    @classmethod
    def failed(cls, error: str, url: Optional[str] = None, job_id: Optional[str] = None) -> "AssetResult":
        return cls(url=url, outcome=AssetOutcome.FAILED, error=error, job_id=job_id)
