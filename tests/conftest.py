"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - relay_config: Valid relay configuration with a fake key
    - fake_service: Generation service stand-in with scripted results
    - async_client: HTTPX client for API testing
    - timers: Manually driven timer factory for the display controller
    - session_state / controller / fake_relay / flow: wired chat components
"""

import asyncio
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from aichatbot.api.app import create_app
from aichatbot.chat.display import ResponseDisplayController
from aichatbot.chat.relay_client import RelayError
from aichatbot.chat.state import SessionState
from aichatbot.chat.submission import SubmissionFlow
from aichatbot.relay.config import RelayConfig
from aichatbot.relay.generator import GenerationError

UI_ORIGIN = "http://localhost:3000"


class FakeGenerationService:
    """Returns a fixed text, or raises GenerationError when ``error`` is set."""

    model = "fake-model"

    def __init__(self, text: str = "Hello from Gemini", error: str | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise GenerationError(self.error)
        return self.text


class ManualTimer:
    """Periodic timer that only fires when the test says so."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.cancelled:
                return
            self.callback()

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimerFactory:
    """Timer factory recording every timer it creates."""

    def __init__(self) -> None:
        self.created: list[ManualTimer] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, callback)
        self.created.append(timer)
        return timer

    @property
    def current(self) -> ManualTimer:
        return self.created[-1]

    @property
    def running(self) -> list[ManualTimer]:
        return [t for t in self.created if not t.cancelled]


class FakeRelay:
    """Relay stand-in. Blocks on ``release`` when ``hold`` is True."""

    def __init__(self, text: str = "Hello", fail: bool = False, hold: bool = False) -> None:
        self.text = text
        self.fail = fail
        self.hold = hold
        self.release = asyncio.Event()
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.hold:
            await self.release.wait()
        if self.fail:
            raise RelayError("HTTP 500")
        return self.text


@pytest.fixture
def relay_config() -> RelayConfig:
    """Return a valid relay configuration."""
    return RelayConfig(gemini_api_key="test-key-12345", allowed_origin=UI_ORIGIN)


@pytest.fixture
def fake_service() -> FakeGenerationService:
    return FakeGenerationService()


@pytest.fixture
async def async_client(
    relay_config: RelayConfig, fake_service: FakeGenerationService
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app(config=relay_config, service=fake_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def timers() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture
def session_state() -> SessionState:
    return SessionState()


@pytest.fixture
def controller(
    session_state: SessionState, timers: ManualTimerFactory
) -> ResponseDisplayController:
    return ResponseDisplayController(session_state, timer_factory=timers)


@pytest.fixture
def fake_relay() -> FakeRelay:
    return FakeRelay()


@pytest.fixture
def flow(
    session_state: SessionState,
    fake_relay: FakeRelay,
    controller: ResponseDisplayController,
) -> SubmissionFlow:
    return SubmissionFlow(session_state, fake_relay, controller)
