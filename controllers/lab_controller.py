"""
Image Lab Controller - prompt-driven food photo editing.
"""

import logging
from typing import Optional

from controllers.base_controller import BaseController, RATE_LIMIT_MESSAGE
from models.presets import EDIT_PRESETS
from services.gemini_service import GeminiServiceError
from services.media import parse_data_url, to_data_url

logger = logging.getLogger(__name__)


class ImageLabController(BaseController):
    """Controller for the AI image lab page."""

    STATE_KEY = "lab"

    def _default_state(self) -> dict:
        return {
            "source_image": None,  # data URL
            "edited_image": None,  # data URL
            "prompt": "",
        }

    def get_source_image(self) -> Optional[str]:
        return self.state["source_image"]

    def get_edited_image(self) -> Optional[str]:
        return self.state["edited_image"]

    def get_prompt(self) -> str:
        return self.state["prompt"]

    def set_prompt(self, prompt: str):
        self.state["prompt"] = prompt

    def get_presets(self) -> list[str]:
        return list(EDIT_PRESETS)

    def apply_preset(self, preset: str):
        """Fill the prompt from one of the presets."""
        self.set_prompt(preset)

    def upload(self, image_bytes: bytes, mime_type: str = "image/jpeg"):
        """Replace the source image; any previous edit is discarded."""
        self.state["source_image"] = to_data_url(image_bytes, mime_type)
        self.state["edited_image"] = None

    def can_edit(self) -> bool:
        return bool(self.state["source_image"] and self.state["prompt"].strip())

    def edit(self, prompt: Optional[str] = None) -> tuple[bool, Optional[str]]:
        """
        Edit the source image with the current (or given) prompt.

        Returns (success, error_message)
        """
        if prompt is not None:
            self.set_prompt(prompt)

        if not self.can_edit():
            return False, "Upload a photo and describe the change first."

        if not self._check_rate_limit():
            return False, RATE_LIMIT_MESSAGE

        image_bytes, mime_type = parse_data_url(self.state["source_image"])
        try:
            edited = self.service.edit_food_image(image_bytes, self.state["prompt"], mime_type)
        except GeminiServiceError as e:
            logger.error(f"Image edit failed: {e}")
            return False, "Image editing failed. Please try again."

        if not edited:
            return False, "The model did not return an image. Try a different prompt."

        self.state["edited_image"] = edited
        return True, None
