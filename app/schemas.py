"""
Pydantic Schemas (Data Transfer Objects)

Request and response bodies of the HTTP API. Results that already have
a domain model (AnalysisResult, RecipeSearchResult) are returned as-is.
"""

from pydantic import BaseModel, Field


class RecipeSearchRequest(BaseModel):
    """Recipe search input."""
    query: str = Field(..., max_length=500, description="Dish, ingredient or cuisine to search for")


class EditedImageResponse(BaseModel):
    """Edited image returned by the image lab."""
    image: str = Field(..., description="PNG image as a base64 data URL")
