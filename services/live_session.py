"""
Live Session Manager - runs the real-time kitchen assistant.

One LiveSessionManager drives one Gemini live session at a time:
- Microphone audio is sent as 16 kHz PCM16 chunks
- With vision enabled, one 320x240 JPEG frame per second is sent
- Streamed reply audio is scheduled gaplessly on the speaker
- Input/output transcriptions build a chat log
- A small status machine tracks what the assistant is doing

The session runs on its own thread with its own asyncio loop, so the
Streamlit script thread only ever calls start(), stop() and snapshot().
Devices are created through factories so tests can run the whole flow
without sound cards or cameras.

Status transitions:
    disconnected --start()--> connecting --open--> listening
    listening --user transcription--> thinking --timeout--> listening
    any --reply audio--> speaking --playback drained--> listening
    any --interrupted--> listening
    any --stop()/close/error--> disconnected
"""

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional

from google.genai import types
from websockets.exceptions import ConnectionClosedOK

from config.settings import Settings
from models.entities import AssistantStatus, ChatMessage, SessionSnapshot
from services.capture import CameraInput, MicrophoneInput
from services.gemini_service import GeminiService
from services.playback import PlaybackQueue, SpeakerOutput

logger = logging.getLogger(__name__)


@dataclass
class _SessionRun:
    """Loop, devices and stop signal owned by one background run."""

    vision: bool
    stop_requested: threading.Event = field(default_factory=threading.Event)
    loop: Optional[asyncio.AbstractEventLoop] = None
    stop_event: Optional[asyncio.Event] = None
    session: Any = None
    microphone: Any = None
    camera: Any = None
    speaker: Any = None

    def request_stop(self) -> None:
        self.stop_requested.set()
        loop, event = self.loop, self.stop_event
        if loop is None or event is None or loop.is_closed():
            return
        try:
            loop.call_soon_threadsafe(event.set)
        except RuntimeError:
            logger.debug("Session loop closed before stop was delivered")


class LiveSessionManager:
    """Owns the live session, its devices and its status."""

    STOP_TIMEOUT_SECONDS = 5.0

    def __init__(
        self,
        service: GeminiService,
        settings: Optional[Settings] = None,
        microphone_factory: Callable[..., MicrophoneInput] = MicrophoneInput,
        camera_factory: Callable[..., CameraInput] = CameraInput,
        speaker_factory: Callable[..., SpeakerOutput] = SpeakerOutput,
    ):
        self.service = service
        self.settings = settings or service.settings
        self.voice_name: Optional[str] = None

        self._microphone_factory = microphone_factory
        self._camera_factory = camera_factory
        self._speaker_factory = speaker_factory

        self.playback = PlaybackQueue(
            sample_rate=self.settings.output_sample_rate,
            on_drained=self._on_playback_drained,
        )

        self._lock = threading.RLock()
        self._status = AssistantStatus.DISCONNECTED
        self._chat_log: list[ChatMessage] = []
        self._vision_enabled = False

        self._thread: Optional[threading.Thread] = None
        self._current_run: Optional[_SessionRun] = None
        self._thinking_timer: Optional[asyncio.TimerHandle] = None

    # State accessors
    @property
    def status(self) -> AssistantStatus:
        with self._lock:
            return self._status

    @property
    def chat_log(self) -> list[ChatMessage]:
        with self._lock:
            return list(self._chat_log)

    @property
    def vision_enabled(self) -> bool:
        with self._lock:
            return self._vision_enabled

    def set_vision(self, enabled: bool) -> None:
        """Turn camera streaming on or off for the next session."""
        with self._lock:
            self._vision_enabled = enabled

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                status=self._status,
                chat_log=list(self._chat_log),
                vision_enabled=self._vision_enabled,
            )

    def _set_status(self, status: AssistantStatus) -> None:
        with self._lock:
            if self._status is not status:
                logger.debug(f"Assistant status {self._status.value} -> {status.value}")
            self._status = status

    def append_to_log(self, type: Literal["user", "ai"], text: str) -> None:
        """Add a transcript line unless it repeats the previous one."""
        with self._lock:
            last = self._chat_log[-1] if self._chat_log else None
            if last and last.type == type and last.text == text:
                return
            self._chat_log.append(ChatMessage(type=type, text=text))

    # Session lifecycle
    def start(self) -> bool:
        """
        Start a live session in the background.

        Returns False if a session is already running or connecting, or
        if the previous session's thread has not finished shutting down.
        """
        with self._lock:
            if self._status is not AssistantStatus.DISCONNECTED:
                return False
            if self._thread is not None and self._thread.is_alive():
                logger.warning("Previous live session is still shutting down")
                return False
            self._status = AssistantStatus.CONNECTING
            self._chat_log = []
            run = _SessionRun(vision=self._vision_enabled)
            self._current_run = run
            self._thread = threading.Thread(
                target=self._run,
                args=(run,),
                name="live-session",
                daemon=True,
            )
            self._thread.start()
        return True

    def stop(self) -> None:
        """Close the session, release devices and go back to disconnected."""
        with self._lock:
            run, thread = self._current_run, self._thread
        if run is not None:
            run.request_stop()

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.STOP_TIMEOUT_SECONDS)
            if thread.is_alive():
                logger.warning("Live session thread did not stop in time")

        self._set_status(AssistantStatus.DISCONNECTED)

    def _run(self, run: _SessionRun) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        run.loop = loop
        try:
            loop.run_until_complete(self._run_session(run))
        except Exception:
            logger.exception("Live session error")
        finally:
            self._release_devices(run)
            run.loop = None
            run.stop_event = None
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.run_until_complete(loop.shutdown_default_executor())
            loop.close()
            with self._lock:
                if self._current_run is run:
                    self._current_run = None
                    self._status = AssistantStatus.DISCONNECTED
            logger.info("Live session closed")

    async def _run_session(self, run: _SessionRun) -> None:
        loop = asyncio.get_running_loop()
        run.stop_event = asyncio.Event()
        if run.stop_requested.is_set():
            return

        audio_queue: asyncio.Queue[bytes] = asyncio.Queue()

        def on_chunk(chunk: bytes) -> None:
            # Runs on the sound device thread
            if run.session is not None and not loop.is_closed():
                loop.call_soon_threadsafe(audio_queue.put_nowait, chunk)

        run.microphone = self._microphone_factory(self.settings, on_chunk)
        run.microphone.start()
        if run.vision:
            run.camera = self._camera_factory(self.settings)
            run.camera.open()
        run.speaker = self._speaker_factory(self.playback)
        run.speaker.start()

        try:
            async with self.service.connect_live(self.voice_name) as session:
                if run.stop_requested.is_set():
                    return
                run.session = session
                self._on_open()

                tasks = [
                    loop.create_task(self._send_audio(session, audio_queue)),
                    loop.create_task(self._receive(session)),
                ]
                if run.vision:
                    tasks.append(loop.create_task(self._send_frames(run)))
                stopper = loop.create_task(run.stop_event.wait())

                done, pending = await asyncio.wait(
                    [*tasks, stopper],
                    return_when=asyncio.FIRST_COMPLETED,
                )
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)

                for task in done:
                    if task is not stopper and task.exception() is not None:
                        raise task.exception()
        finally:
            run.session = None
            self._cancel_thinking()

    def _on_open(self) -> None:
        logger.info("Live session open")
        self._set_status(AssistantStatus.LISTENING)

    def _release_devices(self, run: _SessionRun) -> None:
        for name, device, close in (
            ("microphone", run.microphone, "stop"),
            ("camera", run.camera, "release"),
            ("speaker", run.speaker, "stop"),
        ):
            if device is None:
                continue
            try:
                getattr(device, close)()
            except Exception:
                logger.exception(f"Failed to release {name}")
        run.microphone = None
        run.camera = None
        run.speaker = None
        self.playback.clear()

    # Streaming
    async def _send_audio(self, session, audio_queue: asyncio.Queue) -> None:
        mime_type = f"audio/pcm;rate={self.settings.input_sample_rate}"
        while True:
            chunk = await audio_queue.get()
            await session.send_realtime_input(audio=types.Blob(data=chunk, mime_type=mime_type))

    async def _send_frames(self, run: _SessionRun) -> None:
        while True:
            await asyncio.sleep(self.settings.frame_interval_seconds)
            session, camera = run.session, run.camera
            if session is None or camera is None:
                continue
            frame = await asyncio.to_thread(camera.read_jpeg)
            if frame:
                await session.send_realtime_input(video=types.Blob(data=frame, mime_type="image/jpeg"))

    async def _receive(self, session) -> None:
        try:
            while True:
                async for message in session.receive():
                    self.handle_message(message)
        except ConnectionClosedOK:
            logger.info("Live session closed by server")

    def handle_message(self, message: types.LiveServerMessage) -> None:
        """
        Apply one server message to playback, transcript and status.

        Must run on the session's event loop (the thinking timeout is
        scheduled there).
        """
        content = message.server_content
        if content is None:
            return

        audio = self._first_audio_part(content)
        if audio:
            self._set_status(AssistantStatus.SPEAKING)
            self._cancel_thinking()
            self.playback.schedule(audio)

        if content.input_transcription and content.input_transcription.text:
            self.append_to_log("user", content.input_transcription.text)
            self._set_status(AssistantStatus.THINKING)
            self._arm_thinking_timeout()

        if content.output_transcription and content.output_transcription.text:
            self.append_to_log("ai", content.output_transcription.text)

        if content.interrupted:
            self.playback.clear()
            self._set_status(AssistantStatus.LISTENING)

    @staticmethod
    def _first_audio_part(content: types.LiveServerContent) -> Optional[bytes]:
        parts = content.model_turn.parts if content.model_turn else None
        if not parts:
            return None
        inline = parts[0].inline_data
        return inline.data if inline and inline.data else None

    # Status timers
    def _arm_thinking_timeout(self) -> None:
        self._cancel_thinking()
        loop = asyncio.get_running_loop()
        self._thinking_timer = loop.call_later(
            self.settings.thinking_timeout_seconds,
            self._on_thinking_timeout,
        )

    def _cancel_thinking(self) -> None:
        if self._thinking_timer is not None:
            self._thinking_timer.cancel()
            self._thinking_timer = None

    def _on_thinking_timeout(self) -> None:
        self._thinking_timer = None
        with self._lock:
            if self._status is AssistantStatus.THINKING:
                self._set_status(AssistantStatus.LISTENING)

    def _on_playback_drained(self) -> None:
        # Runs on the sound device thread
        with self._lock:
            if self._status is AssistantStatus.SPEAKING:
                self._set_status(AssistantStatus.LISTENING)
