"""
Explore Controller - grounded recipe search.
"""

import logging
from typing import Optional

from controllers.base_controller import BaseController, RATE_LIMIT_MESSAGE
from models.entities import RecipeSearchResult, RecipeSource
from models.presets import GLOBAL_SUGGESTIONS, SearchSuggestion
from services.gemini_service import GeminiServiceError

logger = logging.getLogger(__name__)


class ExploreController(BaseController):
    """Controller for the recipe explorer page."""

    STATE_KEY = "explore"

    def _default_state(self) -> dict:
        return {
            "query": "",
            "result": None,
        }

    def get_query(self) -> str:
        return self.state["query"]

    def get_result(self) -> Optional[RecipeSearchResult]:
        return self.state["result"]

    def get_sources(self) -> list[RecipeSource]:
        result = self.get_result()
        return result.sources if result else []

    def get_suggestions(self) -> list[SearchSuggestion]:
        return list(GLOBAL_SUGGESTIONS)

    def search(self, query: str) -> tuple[bool, Optional[str]]:
        """
        Run a recipe search and store the result.

        Returns (success, error_message)
        """
        query = (query or "").strip()
        if not query:
            return False, "Type a dish, ingredient or cuisine to search for."

        if not self._check_rate_limit():
            return False, RATE_LIMIT_MESSAGE

        self.state["query"] = query
        try:
            result = self.service.search_recipes(query)
        except GeminiServiceError as e:
            logger.error(f"Recipe search failed for {query!r}: {e}")
            return False, "Recipe search failed. Please try again."

        self.state["result"] = result
        return True, None

    def clear(self):
        self.state["query"] = ""
        self.state["result"] = None
