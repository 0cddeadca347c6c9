"""
Asset Job Client

Submits a text-to-image job to a job-based provider and polls it until it
reaches a terminal state or its deadline passes. The caller may also
cancel. Whatever happens, the caller gets an ``AssetResult`` back: a
generated URL, or a placeholder URL with the reason it was used.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

import httpx

from reelforge.config import ImageSettings, get_image_settings
from reelforge.core import get_logger
from reelforge.models import JobStatus

from ..assets import AssetOutcome, AssetResult
from .placeholder import placeholder_url
from .tensorart import (
    JOBS_PATH,
    build_headers,
    build_job_payload,
    parse_job_id,
    parse_job_status,
    parse_result_url,
)

logger = get_logger(__name__, component="asset_job_client")

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]

MSG_OUTPUT_MISSING = "Output is missing in the job response"
MSG_JOB_FAILED = "Job failed. Please try again with different settings"
MSG_JOB_ID_MISSING = "Job ID is missing in the response"
MSG_CANCELLED = "Job cancelled"


@dataclass(frozen=True)
class PollPolicy:
    """How long and how often to poll a submitted job"""
    interval_seconds: float = 10.0
    max_wait_seconds: float = 300.0
    is_terminal: Callable[[JobStatus], bool] = JobStatus.is_terminal

    @classmethod
    def from_settings(cls, settings: ImageSettings) -> "PollPolicy":
        return cls(
            interval_seconds=settings.poll_interval_seconds,
            max_wait_seconds=settings.job_timeout_seconds,
        )

    def timeout_message(self) -> str:
        return f"Job timed out after {self.max_wait_seconds:g} seconds"


@dataclass
class GenerationJob:
    """A submitted provider job; lives only for one ``generate`` call"""
    id: str
    submitted_at: float
    status: JobStatus = JobStatus.PENDING
    result_url: Optional[str] = None
    history: list = field(default_factory=list)

    def transition(self, status: JobStatus) -> bool:
        """Record a new status. Returns True if it changed."""
        if status is self.status:
            return False
        self.history.append(status)
        self.status = status
        return True


class JobError(RuntimeError):
    """The provider rejected or garbled a job request."""


class AssetJobClient:
    """Submit + poll client for the text-to-image job API"""

    def __init__(
        self,
        settings: Optional[ImageSettings] = None,
        policy: Optional[PollPolicy] = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Provider settings. If None, read from the environment.
            policy: Poll policy. Defaults to the interval/timeout in settings.
            clock: Monotonic time source used for the timeout check
            sleep: Awaitable sleep used between polls
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings or get_image_settings()
        self.policy = policy or PollPolicy.from_settings(self.settings)
        self._clock = clock
        self._sleep = sleep
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    async def generate(
        self,
        prompt: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AssetResult:
        """Generate one image for ``prompt``.

        Never raises for provider problems; every failure comes back as a
        placeholder ``AssetResult`` carrying the error text.
        """
        width = width or self.settings.width
        height = height or self.settings.height
        fallback = placeholder_url(prompt, width, height)

        if not self.is_configured:
            logger.info("Image provider key not configured, using placeholder image")
            return AssetResult(url=fallback, outcome=AssetOutcome.PLACEHOLDER)

        if cancel_event is not None and cancel_event.is_set():
            return AssetResult(url=fallback, outcome=AssetOutcome.CANCELLED, error=MSG_CANCELLED)

        job: Optional[GenerationJob] = None
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                job = await self._submit(client, prompt, width, height)
                return await self._poll(client, job, fallback, cancel_event)
        except Exception as e:
            logger.error("Error generating image", extra={
                "job_id": job.id if job else None,
                "error": str(e),
            })
            return AssetResult.failed(str(e), url=fallback, job_id=job.id if job else None)

    async def _submit(
        self,
        client: httpx.AsyncClient,
        prompt: str,
        width: int,
        height: int,
    ) -> GenerationJob:
        logger.info("Submitting image job", extra={"width": width, "height": height})
        response = await client.post(
            f"{self.settings.base_url}{JOBS_PATH}",
            json=build_job_payload(prompt, width, height),
            headers=build_headers(self.settings.api_key),
            timeout=self.settings.submit_timeout_seconds,
        )
        if response.status_code != 200:
            raise JobError(f"API error: {response.status_code} - {response.text}")

        job_id = parse_job_id(response.json())
        if not job_id:
            raise JobError(MSG_JOB_ID_MISSING)

        logger.info("Job created", extra={"job_id": job_id})
        return GenerationJob(id=job_id, submitted_at=self._clock())

    async def _poll(
        self,
        client: httpx.AsyncClient,
        job: GenerationJob,
        fallback: str,
        cancel_event: Optional[asyncio.Event],
    ) -> AssetResult:
        while True:
            if await self._wait(cancel_event):
                logger.info("Job polling cancelled", extra={"job_id": job.id})
                return AssetResult(
                    url=fallback, outcome=AssetOutcome.CANCELLED, error=MSG_CANCELLED, job_id=job.id
                )

            if self._clock() - job.submitted_at > self.policy.max_wait_seconds:
                logger.warning("Job timed out", extra={"job_id": job.id})
                return AssetResult(
                    url=fallback,
                    outcome=AssetOutcome.TIMED_OUT,
                    error=self.policy.timeout_message(),
                    job_id=job.id,
                )

            response = await client.get(
                f"{self.settings.base_url}{JOBS_PATH}/{job.id}",
                headers=build_headers(self.settings.api_key),
                timeout=self.settings.submit_timeout_seconds,
            )
            if not response.is_success:
                raise JobError(f"API error: {response.status_code} - {response.text}")

            data = response.json()
            if job.transition(parse_job_status(data)):
                logger.info("Job status changed", extra={"job_id": job.id, "status": job.status.value})

            if not self.policy.is_terminal(job.status):
                continue

            if job.status is JobStatus.SUCCESS:
                job.result_url = parse_result_url(data)
                if job.result_url:
                    return AssetResult.generated(job.result_url, job_id=job.id)
                return AssetResult.failed(MSG_OUTPUT_MISSING, url=fallback, job_id=job.id)

            return AssetResult.failed(MSG_JOB_FAILED, url=fallback, job_id=job.id)

    async def _wait(self, cancel_event: Optional[asyncio.Event]) -> bool:
        """Sleep one poll interval. Returns True if cancelled meanwhile."""
        if cancel_event is None:
            await self._sleep(self.policy.interval_seconds)
            return False
        if cancel_event.is_set():
            return True

        sleeper = asyncio.ensure_future(self._sleep(self.policy.interval_seconds))
        canceller = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({sleeper, canceller}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (sleeper, canceller):
                if not task.done():
                    task.cancel()
        return cancel_event.is_set()
