"""
Controllers Package - the API's request handlers.

Each controller is a FastAPI APIRouter for one feature area. They
share the same GeminiService as the Streamlit pages, injected through
app.dependencies so tests can swap it out.
"""

from app.controllers.recipes import router as recipes_router
from app.controllers.analyzer import router as analyzer_router
from app.controllers.lab import router as lab_router

__all__ = ["recipes_router", "analyzer_router", "lab_router"]
