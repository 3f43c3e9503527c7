"""
Domain Models

Pydantic models for the data that flows between the Gemini service,
the controllers and the views. Nothing here is persisted: every value
lives for one browser session at most.

Wire names:
    The image analysis call asks the model for camelCase JSON keys
    (dishName, suggestedAction). AnalysisResult keeps snake_case
    attributes in Python and uses the camelCase names as aliases, so
    the model's JSON validates directly and the HTTP API returns the
    same shape the model produced.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AppTab(str, Enum):
    """Top-level features of the app."""
    EXPLORE = "explore"
    ASSISTANT = "assistant"
    ANALYZER = "analyzer"
    LAB = "lab"


class AssistantStatus(str, Enum):
    """
    Kitchen assistant status.

    disconnected -> connecting -> listening <-> thinking / speaking,
    and back to disconnected on stop, close or error.
    """
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    LISTENING = "listening"
    THINKING = "thinking"
    SPEAKING = "speaking"

    @property
    def is_active(self) -> bool:
        return self is not AssistantStatus.DISCONNECTED


class Recipe(BaseModel):
    """A recipe as shown to the user."""
    id: str
    title: str
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    image: Optional[str] = None
    source_url: Optional[str] = None


class AnalysisResult(BaseModel):
    """Structured answer of the food image analysis."""

    model_config = ConfigDict(populate_by_name=True)

    dish_name: str = Field(alias="dishName")
    ingredients: list[str]
    calories: str
    suggested_action: str = Field(alias="suggestedAction")


class RecipeSource(BaseModel):
    """A web page the recipe search answer was grounded on."""
    title: str
    url: str


class RecipeSearchResult(BaseModel):
    """Free-text answer of the recipe search plus its grounding sources."""
    text: str = ""
    sources: list[RecipeSource] = Field(default_factory=list)


class ChatMessage(BaseModel):
    """One transcript line of the live kitchen session."""
    type: Literal["user", "ai"]
    text: str


class SessionSnapshot(BaseModel):
    """Point-in-time copy of the live session state, for rendering."""
    status: AssistantStatus
    chat_log: list[ChatMessage]
    vision_enabled: bool
