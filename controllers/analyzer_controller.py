"""
Analyzer Controller - food photo analysis ("Visual Chef").
"""

import logging
from typing import Optional

from controllers.base_controller import BaseController, RATE_LIMIT_MESSAGE
from models.entities import AnalysisResult
from services.gemini_service import GeminiServiceError
from services.media import to_data_url

logger = logging.getLogger(__name__)


class AnalyzerController(BaseController):
    """Controller for the image analyzer page."""

    STATE_KEY = "analyzer"

    def _default_state(self) -> dict:
        return {
            "image": None,  # data URL of the uploaded photo
            "result": None,
        }

    def get_image(self) -> Optional[str]:
        return self.state["image"]

    def get_result(self) -> Optional[AnalysisResult]:
        return self.state["result"]

    def analyze(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> tuple[bool, Optional[str]]:
        """
        Store the uploaded photo and analyze it.

        Returns (success, error_message)
        """
        if not image_bytes:
            return False, "Upload a photo to analyze."

        if not self._check_rate_limit():
            return False, RATE_LIMIT_MESSAGE

        self.state["image"] = to_data_url(image_bytes, mime_type)
        self.state["result"] = None

        try:
            result = self.service.analyze_image(image_bytes, mime_type)
        except GeminiServiceError as e:
            logger.error(f"Image analysis failed: {e}")
            return False, "Could not analyze this photo. Please try another one."

        self.state["result"] = result
        return True, None
