"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.gemini_service import GeminiService, GeminiServiceError, AnalysisError
from services.live_session import LiveSessionManager
from services.playback import PlaybackQueue, SpeakerOutput
from services.capture import MicrophoneInput, CameraInput, DeviceUnavailableError

__all__ = [
    "GeminiService",
    "GeminiServiceError",
    "AnalysisError",
    "LiveSessionManager",
    "PlaybackQueue",
    "SpeakerOutput",
    "MicrophoneInput",
    "CameraInput",
    "DeviceUnavailableError",
]
