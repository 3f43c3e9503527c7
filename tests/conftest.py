"""Pytest configuration and fixtures for ChefGemini tests."""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
import streamlit

from config.settings import Settings
from services.gemini_service import GeminiService


def pytest_configure(config: pytest.Config) -> None:
    """Configure test markers."""
    config.addinivalue_line("markers", "unit: Unit tests")


class FakeSessionState(dict):
    """Dict with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


class FakeLiveSession:
    """Stands in for the SDK live session."""

    def __init__(self, messages: Optional[list] = None, error: Optional[Exception] = None, error_after: float = 0.0):
        self.messages = list(messages or [])
        self.error = error
        self.error_after = error_after
        self.sent: list[dict] = []

    async def send_realtime_input(self, **kwargs) -> None:
        self.sent.append(kwargs)

    async def receive(self):
        for message in self.messages:
            yield message
        self.messages = []
        if self.error is not None:
            await asyncio.sleep(self.error_after)
            raise self.error
        # A real session blocks until the server speaks again
        await asyncio.Event().wait()


class FakeLiveService:
    """GeminiService replacement whose connect_live yields a FakeLiveSession."""

    def __init__(
        self,
        settings: Settings,
        session: Optional[FakeLiveSession] = None,
        error: Optional[Exception] = None,
        connect_delay: float = 0.0,
    ):
        self.settings = settings
        self.session = session or FakeLiveSession()
        self.error = error
        self.connect_delay = connect_delay
        self.voice_names: list[Optional[str]] = []

    def connect_live(self, voice_name: Optional[str] = None):
        self.voice_names.append(voice_name)
        service = self

        @asynccontextmanager
        async def _connect():
            if service.connect_delay:
                await asyncio.sleep(service.connect_delay)
            if service.error is not None:
                raise service.error
            yield service.session

        return _connect()


class FakeMicrophone:
    def __init__(self, settings: Settings, on_chunk: Callable[[bytes], None], fail: bool = False):
        self.on_chunk = on_chunk
        self.fail = fail
        self.started = False
        self.stopped = False

    def start(self) -> None:
        if self.fail:
            from services.capture import DeviceUnavailableError

            raise DeviceUnavailableError("Microphone unavailable: no device")
        self.started = True

    def stop(self) -> None:
        self.stopped = True


class FakeCamera:
    def __init__(self, settings: Settings):
        self.opened = False
        self.released = False

    def open(self) -> None:
        self.opened = True

    def read_jpeg(self) -> Optional[bytes]:
        return b"\xff\xd8jpeg\xff\xd9" if self.opened else None

    def release(self) -> None:
        self.released = True


class FakeSpeaker:
    def __init__(self, queue):
        self.queue = queue
        self.started = False
        self.stopped = False

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True


class DeviceRecorder:
    """Factories that remember the devices they created."""

    def __init__(self, mic_fails: bool = False):
        self.mic_fails = mic_fails
        self.microphones: list[FakeMicrophone] = []
        self.cameras: list[FakeCamera] = []
        self.speakers: list[FakeSpeaker] = []

    def microphone(self, settings, on_chunk):
        mic = FakeMicrophone(settings, on_chunk, fail=self.mic_fails)
        self.microphones.append(mic)
        return mic

    def camera(self, settings):
        camera = FakeCamera(settings)
        self.cameras.append(camera)
        return camera

    def speaker(self, queue):
        speaker = FakeSpeaker(queue)
        self.speakers.append(speaker)
        return speaker


def wait_until(predicate: Callable[[], bool], timeout: float = 3.0) -> bool:
    """Poll until predicate is true or timeout elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def settings() -> Settings:
    """Test settings with short timers and no .env lookup."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        thinking_timeout_seconds=0.05,
        frame_interval_seconds=0.02,
        rate_limit_max_requests=3,
        rate_limit_window_seconds=60,
    )


@pytest.fixture
def genai_client() -> MagicMock:
    """Mock google.genai.Client."""
    return MagicMock()


@pytest.fixture
def gemini_service(genai_client: MagicMock, settings: Settings) -> GeminiService:
    return GeminiService(client=genai_client, settings=settings)


@pytest.fixture
def session_state(monkeypatch: pytest.MonkeyPatch) -> FakeSessionState:
    """Replace st.session_state with a plain dict."""
    state = FakeSessionState()
    monkeypatch.setattr(streamlit, "session_state", state)
    return state


@pytest.fixture
def devices() -> DeviceRecorder:
    return DeviceRecorder()


@pytest.fixture
def sample_jpeg() -> bytes:
    """Small JPEG-looking payload; the service never decodes it."""
    return b"\xff\xd8\xff\xe0" + bytes(64) + b"\xff\xd9"
