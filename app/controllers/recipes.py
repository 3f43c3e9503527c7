"""
Recipes Controller

Web-grounded recipe search.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_gemini_service
from app.schemas import RecipeSearchRequest
from models.entities import RecipeSearchResult
from services.gemini_service import GeminiService, GeminiServiceError

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/search", response_model=RecipeSearchResult)
def search_recipes(
    request: RecipeSearchRequest,
    service: GeminiService = Depends(get_gemini_service)
):
    """Search the web for recipes and return a summary with its sources."""
    try:
        return service.search_recipes(request.query)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GeminiServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
