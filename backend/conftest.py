"""
Shared fixtures for the backend test suite
"""

import pytest

from reelforge.models import Script

PROVIDER_ENV_VARS = (
    "LLM_PROVIDER",
    "OPENROUTER_API_KEY",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_MODEL",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "TENSORART_API_KEY",
    "TENSORART_BASE_URL",
    "IMAGE_WIDTH",
    "IMAGE_HEIGHT",
    "IMAGE_POLL_INTERVAL_SECONDS",
    "IMAGE_JOB_TIMEOUT_SECONDS",
    "TTS_DEFAULT_VOICE",
    "TTS_RATE",
    "TTS_PITCH",
    "LLM_TEMPERATURE",
    "LLM_MAX_TOKENS",
    "SEGMENT_MAX_CONCURRENCY",
    "ENV",
)


@pytest.fixture(autouse=True)
def clear_provider_env(monkeypatch):
    """No test talks to a real provider unless it sets a key itself"""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_script() -> Script:
    return Script.model_validate({
        "title": "Pha cà phê tại nhà",
        "segments": [
            {"script": "Chào mừng các bạn", "image_description": "A cozy kitchen with a coffee grinder"},
            {"script": "Đầu tiên, xay hạt cà phê", "image_description": "Close-up of ground coffee beans"},
            {"script": "Cuối cùng, thưởng thức", "image_description": "A steaming cup of pour-over coffee"},
        ],
    })


class FakeClock:
    """Manually advanced monotonic clock; ``sleep`` advances it instantly"""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
