"""
FastAPI dependencies.
"""

from functools import lru_cache

from services.gemini_service import GeminiService


@lru_cache
def get_gemini_service() -> GeminiService:
    """Shared Gemini service; overridden in tests."""
    return GeminiService()
