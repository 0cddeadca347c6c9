"""
Tests for reelforge.services.pipeline.images.job_client
"""

import asyncio
import json

import httpx
import pytest

from reelforge.config import ImageSettings
from reelforge.models import JobStatus
from reelforge.services.pipeline import AssetOutcome
from reelforge.services.pipeline.images import AssetJobClient, PollPolicy, placeholder_url

BASE_URL = "https://tensorart.test"
PROMPT = "A steaming cup of pour-over coffee on a wooden table"


def make_settings(api_key="test-key") -> ImageSettings:
    return ImageSettings(
        api_key=api_key,
        base_url=BASE_URL,
        width=1024,
        height=1024,
        poll_interval_seconds=10.0,
        job_timeout_seconds=300.0,
        submit_timeout_seconds=30.0,
    )


class ScriptedProvider:
    """MockTransport handler: answers the submit call, then poll calls in order"""

    def __init__(self, submit=None, polls=()):
        self.submit = submit or httpx.Response(200, json={"job": {"id": "job-1"}})
        self.polls = list(polls)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return self.submit
        if not self.polls:
            return httpx.Response(200, json={"job": {"id": "job-1", "status": "RUNNING"}})
        return self.polls.pop(0)

    @property
    def poll_count(self) -> int:
        return sum(1 for r in self.requests if r.method == "GET")


def job_response(status, url=None):
    job = {"id": "job-1", "status": status}
    if url:
        job["successInfo"] = {"images": [{"url": url}]}
    return httpx.Response(200, json={"job": job})


def make_client(provider, clock, settings=None, policy=None):
    return AssetJobClient(
        settings=settings or make_settings(),
        policy=policy,
        clock=clock,
        sleep=clock.sleep,
        transport=httpx.MockTransport(provider),
    )


@pytest.mark.asyncio
class TestAssetJobClient:

    async def test_success_after_running(self, fake_clock):
        provider = ScriptedProvider(polls=[
            job_response("QUEUED"),
            job_response("RUNNING"),
            job_response("SUCCESS", url="https://cdn.test/img.png"),
        ])
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.GENERATED
        assert result.url == "https://cdn.test/img.png"
        assert result.ok and not result.degraded
        assert result.job_id == "job-1"
        assert provider.poll_count == 3
        # One interval is waited before every poll
        assert fake_clock.sleeps == [10.0, 10.0, 10.0]

    async def test_submit_request_shape(self, fake_clock):
        provider = ScriptedProvider(polls=[job_response("SUCCESS", url="https://cdn.test/a.png")])
        client = make_client(provider, fake_clock)

        await client.generate(PROMPT, 768, 512)

        submit = provider.requests[0]
        assert submit.method == "POST"
        assert str(submit.url) == f"{BASE_URL}/v1/jobs"
        assert submit.headers["Authorization"] == "Bearer test-key"
        body = json.loads(submit.content)
        diffusion = body["stages"][1]["diffusion"]
        assert body["stages"][0] == {"type": "INPUT_INITIALIZE", "inputInitialize": {"seed": -1, "count": 1}}
        assert diffusion["width"] == 768
        assert diffusion["height"] == 512
        assert diffusion["prompts"] == [{"text": PROMPT}]
        assert diffusion["negativePrompts"] == [{"text": "nsfw"}]
        assert len(body["request_id"]) == 32

        poll = provider.requests[1]
        assert poll.method == "GET"
        assert str(poll.url) == f"{BASE_URL}/v1/jobs/job-1"

    async def test_no_credential_returns_placeholder_without_network(self, fake_clock):
        provider = ScriptedProvider()
        client = make_client(provider, fake_clock, settings=make_settings(api_key=None))

        result = await client.generate("Hello world", 1024, 1024)

        assert provider.requests == []
        assert result.outcome is AssetOutcome.PLACEHOLDER
        assert result.ok
        assert result.degraded
        assert result.error is None
        assert result.url == "/placeholder.svg?height=1024&width=1024&text=Hello%20world"

    async def test_submit_non_200(self, fake_clock):
        provider = ScriptedProvider(submit=httpx.Response(401, text="Unauthorized"))
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error == "API error: 401 - Unauthorized"
        assert result.url == placeholder_url(PROMPT, 1024, 1024)
        assert not result.ok
        assert provider.poll_count == 0

    async def test_submit_without_job_id(self, fake_clock):
        provider = ScriptedProvider(submit=httpx.Response(200, json={"job": {}}))
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error == "Job ID is missing in the response"

    async def test_success_without_output(self, fake_clock):
        provider = ScriptedProvider(polls=[job_response("SUCCESS")])
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error == "Output is missing in the job response"
        assert result.url.startswith("/placeholder.svg")

    async def test_failed_job(self, fake_clock):
        provider = ScriptedProvider(polls=[job_response("RUNNING"), job_response("FAILED")])
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error == "Job failed. Please try again with different settings"

    async def test_timeout(self, fake_clock):
        provider = ScriptedProvider()  # RUNNING forever
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.TIMED_OUT
        assert result.error == "Job timed out after 300 seconds"
        assert result.url == placeholder_url(PROMPT, 1024, 1024)
        assert result.degraded and not result.ok
        # Polls at 10..300s; the 31st wait passes the deadline before polling
        assert provider.poll_count == 30

    async def test_custom_policy(self, fake_clock):
        provider = ScriptedProvider()
        policy = PollPolicy(interval_seconds=1.0, max_wait_seconds=3.0)
        client = make_client(provider, fake_clock, policy=policy)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.TIMED_OUT
        assert result.error == "Job timed out after 3 seconds"
        assert provider.poll_count == 3

    async def test_custom_terminal_predicate(self, fake_clock):
        provider = ScriptedProvider(polls=[job_response("RUNNING")])
        policy = PollPolicy(is_terminal=lambda status: status is not JobStatus.PENDING)
        client = make_client(provider, fake_clock, policy=policy)

        result = await client.generate(PROMPT, 1024, 1024)

        # RUNNING is treated as terminal but is neither SUCCESS nor FAILED-with-output
        assert result.outcome is AssetOutcome.FAILED
        assert provider.poll_count == 1

    async def test_poll_error_status(self, fake_clock):
        provider = ScriptedProvider(polls=[httpx.Response(502, text="Bad Gateway")])
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error == "API error: 502 - Bad Gateway"
        assert result.job_id == "job-1"

    async def test_transport_error_never_raises(self, fake_clock):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = AssetJobClient(
            settings=make_settings(),
            clock=fake_clock,
            sleep=fake_clock.sleep,
            transport=httpx.MockTransport(handler),
        )

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert "connection refused" in result.error
        assert result.url == placeholder_url(PROMPT, 1024, 1024)

    async def test_malformed_poll_body(self, fake_clock):
        provider = ScriptedProvider(polls=[httpx.Response(200, text="not json")])
        client = make_client(provider, fake_clock)

        result = await client.generate(PROMPT, 1024, 1024)

        assert result.outcome is AssetOutcome.FAILED
        assert result.error

    async def test_cancel_before_start(self, fake_clock):
        provider = ScriptedProvider()
        client = make_client(provider, fake_clock)
        event = asyncio.Event()
        event.set()

        result = await client.generate(PROMPT, 1024, 1024, cancel_event=event)

        assert result.outcome is AssetOutcome.CANCELLED
        assert provider.requests == []

    async def test_cancel_while_polling(self, fake_clock):
        event = asyncio.Event()

        def handler(request):
            if request.method == "POST":
                return httpx.Response(200, json={"job": {"id": "job-1"}})
            # The client goes away after the first poll
            event.set()
            return job_response("RUNNING")

        client = AssetJobClient(
            settings=make_settings(),
            clock=fake_clock,
            sleep=fake_clock.sleep,
            transport=httpx.MockTransport(handler),
        )

        result = await client.generate(PROMPT, 1024, 1024, cancel_event=event)

        assert result.outcome is AssetOutcome.CANCELLED
        assert result.job_id == "job-1"
        assert result.url == placeholder_url(PROMPT, 1024, 1024)

    async def test_cancel_interrupts_sleep(self):
        event = asyncio.Event()
        sleep_started = asyncio.Event()

        async def slow_sleep(seconds):
            sleep_started.set()
            await asyncio.sleep(3600)

        client = AssetJobClient(
            settings=make_settings(),
            sleep=slow_sleep,
            transport=httpx.MockTransport(ScriptedProvider()),
        )

        task = asyncio.create_task(client.generate(PROMPT, 1024, 1024, cancel_event=event))
        await asyncio.wait_for(sleep_started.wait(), timeout=5)
        event.set()
        result = await asyncio.wait_for(task, timeout=5)

        assert result.outcome is AssetOutcome.CANCELLED

    async def test_defaults_come_from_settings(self, fake_clock):
        provider = ScriptedProvider(polls=[job_response("SUCCESS", url="https://cdn.test/x.png")])
        client = make_client(provider, fake_clock)

        await client.generate(PROMPT)

        diffusion = json.loads(provider.requests[0].content)["stages"][1]["diffusion"]
        assert diffusion["width"] == 1024
        assert diffusion["height"] == 1024


class TestPollPolicy:

    def test_defaults(self):
        policy = PollPolicy()
        assert policy.interval_seconds == 10.0
        assert policy.max_wait_seconds == 300.0
        assert policy.is_terminal(JobStatus.SUCCESS)
        assert policy.is_terminal(JobStatus.FAILED)
        assert not policy.is_terminal(JobStatus.RUNNING)

    def test_from_settings(self):
        policy = PollPolicy.from_settings(make_settings())
        assert policy.interval_seconds == 10.0
        assert policy.max_wait_seconds == 300.0
