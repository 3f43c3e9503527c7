"""Tests for configuration."""

import logging

from config.logging import setup_logging
from config.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None, gemini_api_key="")

        assert settings.analysis_model == "gemini-3-pro-preview"
        assert settings.search_model == "gemini-3-flash-preview"
        assert settings.image_model == "gemini-2.5-flash-image"
        assert settings.live_model == "gemini-2.5-flash-native-audio-preview-09-2025"
        assert settings.live_voice == "Kore"
        assert settings.input_sample_rate == 16000
        assert settings.output_sample_rate == 24000
        assert (settings.frame_width, settings.frame_height) == (320, 240)
        assert settings.thinking_timeout_seconds == 5.0
        assert not settings.is_configured

    def test_api_key_aliases(self, monkeypatch):
        for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("API_KEY", "from-api-key")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == "from-api-key"
        assert settings.is_configured

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LIVE_VOICE", "Puck")
        monkeypatch.setenv("FRAME_INTERVAL_SECONDS", "0.5")

        settings = Settings(_env_file=None)

        assert settings.live_voice == "Puck"
        assert settings.frame_interval_seconds == 0.5


class TestLogging:
    """Tests for logging setup."""

    def test_setup_is_idempotent(self):
        root = logging.getLogger()
        setup_logging("DEBUG")
        handlers = len(root.handlers)

        setup_logging("WARNING")

        assert len(root.handlers) == handlers
        assert root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
