"""
Analyzer Controller

Food photo analysis. The response uses the camelCase field names the
model produces (dishName, suggestedAction).
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.dependencies import get_gemini_service
from models.entities import AnalysisResult
from services.gemini_service import GeminiService, GeminiServiceError

router = APIRouter(prefix="/analyzer", tags=["analyzer"])


@router.post("/analyze", response_model=AnalysisResult, response_model_by_alias=True)
async def analyze_image(
    image: UploadFile = File(...),
    service: GeminiService = Depends(get_gemini_service)
):
    """Identify the dish in an uploaded photo."""
    data = await image.read()
    try:
        return service.analyze_image(data, image.content_type or "image/jpeg")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GeminiServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
