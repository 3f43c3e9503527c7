"""
Application settings loaded from environment variables.

Values come from the process environment or a local `.env` file.
The Gemini API key is accepted under any of the names the Google
tooling uses (GEMINI_API_KEY, GOOGLE_API_KEY, API_KEY).
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Gemini API
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
    )
    analysis_model: str = "gemini-3-pro-preview"
    search_model: str = "gemini-3-flash-preview"
    image_model: str = "gemini-2.5-flash-image"
    live_model: str = "gemini-2.5-flash-native-audio-preview-09-2025"
    live_voice: str = "Kore"

    # Live session audio (mono PCM16)
    input_sample_rate: int = 16000
    output_sample_rate: int = 24000
    mic_chunk_frames: int = 4096

    # Live session vision; lower res keeps latency down
    frame_interval_seconds: float = 1.0
    frame_width: int = 320
    frame_height: int = 240
    frame_jpeg_quality: int = 50
    camera_index: int = 0

    # Seconds to wait for a spoken reply before falling back to "listening"
    thinking_timeout_seconds: float = 5.0

    # Per-session request throttling for the one-shot features
    rate_limit_max_requests: int = 30
    rate_limit_window_seconds: int = 60

    log_level: str = "INFO"

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.gemini_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
