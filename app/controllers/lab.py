"""
Image Lab Controller

Prompt-driven food photo editing.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.dependencies import get_gemini_service
from app.schemas import EditedImageResponse
from services.gemini_service import GeminiService, GeminiServiceError

router = APIRouter(prefix="/lab", tags=["lab"])


@router.post("/edit", response_model=EditedImageResponse)
async def edit_image(
    image: UploadFile = File(...),
    prompt: str = Form(...),
    service: GeminiService = Depends(get_gemini_service)
):
    """Restyle an uploaded photo from a text prompt."""
    data = await image.read()
    try:
        edited = service.edit_food_image(data, prompt, image.content_type or "image/jpeg")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GeminiServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if edited is None:
        raise HTTPException(status_code=404, detail="The model returned no image")
    return EditedImageResponse(image=edited)
