"""
Base Controller - session state and request throttling shared by all pages.
"""

import logging
from datetime import datetime, timedelta

import streamlit as st

from config.settings import Settings, get_settings
from services.gemini_service import GeminiService

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests. Please wait a moment."


class BaseController:
    """Common plumbing for feature controllers."""

    # Key of this controller's dict in st.session_state
    STATE_KEY: str = ""

    def __init__(self, service: GeminiService | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.service = service or GeminiService(settings=self.settings)
        self._init_session_state()

    def _default_state(self) -> dict:
        return {}

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.STATE_KEY and self.STATE_KEY not in st.session_state:
            st.session_state[self.STATE_KEY] = self._default_state()
        if "request_timestamps" not in st.session_state:
            st.session_state.request_timestamps = []

    @property
    def state(self) -> dict:
        return st.session_state[self.STATE_KEY]

    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return self.settings.is_configured

    def _check_rate_limit(self) -> bool:
        """Check if user has exceeded rate limit. Returns True if allowed."""
        now = datetime.now()
        window_start = now - timedelta(seconds=self.settings.rate_limit_window_seconds)

        # Remove timestamps outside the window
        st.session_state.request_timestamps = [
            ts for ts in st.session_state.request_timestamps if ts > window_start
        ]

        if len(st.session_state.request_timestamps) >= self.settings.rate_limit_max_requests:
            logger.warning("Rate limit reached for this session")
            return False

        # Record this request
        st.session_state.request_timestamps.append(now)
        return True
