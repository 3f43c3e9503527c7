"""
Kitchen Controller - the live voice/vision cooking assistant.

The LiveSessionManager lives in session state so the same session
survives Streamlit reruns; the controller only forwards commands and
hands the view a snapshot to render.
"""

import logging

from controllers.base_controller import BaseController
from models.entities import AssistantStatus, SessionSnapshot
from models.presets import SUGGESTED_COMMANDS, VOICE_OPTIONS, KitchenCommand
from services.live_session import LiveSessionManager

logger = logging.getLogger(__name__)


class KitchenController(BaseController):
    """Controller for the kitchen assistant page."""

    STATE_KEY = "kitchen"

    def _default_state(self) -> dict:
        return {
            "manager": None,
        }

    @property
    def manager(self) -> LiveSessionManager:
        """The session manager for this browser session, created on first use."""
        if self.state["manager"] is None:
            manager = LiveSessionManager(self.service, settings=self.settings)
            manager.voice_name = self.settings.live_voice
            self.state["manager"] = manager
        return self.state["manager"]

    def snapshot(self) -> SessionSnapshot:
        return self.manager.snapshot()

    def get_status(self) -> AssistantStatus:
        return self.manager.status

    def is_active(self) -> bool:
        return self.manager.status.is_active

    def is_vision_enabled(self) -> bool:
        return self.manager.vision_enabled

    def toggle_vision(self):
        self.manager.set_vision(not self.manager.vision_enabled)

    def get_voice_name(self) -> str:
        return self.manager.voice_name or self.settings.live_voice

    def set_voice_name(self, voice_name: str):
        """Set the assistant voice; applies from the next session."""
        self.manager.voice_name = voice_name

    def get_available_voices(self) -> dict[str, str]:
        return VOICE_OPTIONS.copy()

    def get_suggested_commands(self) -> list[KitchenCommand]:
        return list(SUGGESTED_COMMANDS)

    def start_session(self) -> bool:
        """Start the live session. Returns False if one is already running."""
        started = self.manager.start()
        if started:
            logger.info(f"Kitchen session starting (vision={self.manager.vision_enabled})")
        return started

    def stop_session(self):
        self.manager.stop()

    def toggle_session(self):
        """Start when disconnected, stop otherwise."""
        if self.manager.status is AssistantStatus.DISCONNECTED:
            self.start_session()
        elif self.manager.status is not AssistantStatus.CONNECTING:
            self.stop_session()
