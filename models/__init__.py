"""
Models Package - domain types and presets.
"""

from models.entities import (
    AppTab,
    AssistantStatus,
    Recipe,
    AnalysisResult,
    RecipeSource,
    RecipeSearchResult,
    ChatMessage,
    SessionSnapshot,
)
from models.presets import (
    SearchSuggestion,
    KitchenCommand,
    GLOBAL_SUGGESTIONS,
    EDIT_PRESETS,
    SUGGESTED_COMMANDS,
    VOICE_OPTIONS,
    DEFAULT_VOICE_NAME,
    get_voice_display_name,
)

__all__ = [
    # Entities
    "AppTab",
    "AssistantStatus",
    "Recipe",
    "AnalysisResult",
    "RecipeSource",
    "RecipeSearchResult",
    "ChatMessage",
    "SessionSnapshot",
    # Presets
    "SearchSuggestion",
    "KitchenCommand",
    "GLOBAL_SUGGESTIONS",
    "EDIT_PRESETS",
    "SUGGESTED_COMMANDS",
    "VOICE_OPTIONS",
    "DEFAULT_VOICE_NAME",
    "get_voice_display_name",
]
