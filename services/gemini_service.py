"""
Gemini API Service - handles all interactions with Gemini.

This service is pure Python with no Streamlit dependencies,
making it easy to test and reuse across the UI and the HTTP API.

Features and the model behind each:
- Image analysis: structured JSON output (analysis_model)
- Image editing: image + prompt in, image out (image_model)
- Recipe search: text answer grounded with Google Search (search_model)
- Kitchen assistant: real-time audio/video live session (live_model)
"""

import json
import logging
from typing import Optional

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from config.settings import Settings, get_settings
from models.entities import AnalysisResult, RecipeSearchResult, RecipeSource
from services.media import to_data_url

logger = logging.getLogger(__name__)


class GeminiServiceError(Exception):
    """A Gemini request failed or returned something unusable."""


class AnalysisError(GeminiServiceError):
    """The image analysis response could not be parsed."""


class GeminiService:
    """Service for interacting with the Gemini API."""

    ANALYSIS_PROMPT = (
        "Analyze this food image. Identify the dish, list possible ingredients, "
        "estimate calories, and suggest a simple cooking tip. Format your response clearly."
    )

    ANALYSIS_SCHEMA = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "dishName": types.Schema(type=types.Type.STRING),
            "ingredients": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.STRING),
            ),
            "calories": types.Schema(type=types.Type.STRING),
            "suggestedAction": types.Schema(type=types.Type.STRING),
        },
        required=["dishName", "ingredients", "calories", "suggestedAction"],
    )

    SEARCH_PROMPT = (
        "Find high quality, diverse global recipes for: {query}. "
        "Look for authentic versions from their country of origin. "
        "Provide a structured list."
    )

    DEFAULT_SOURCE_TITLE = "Recipe Source"

    LIVE_SYSTEM_INSTRUCTION = """You are ChefGemini, a world-class culinary AI assistant with VISION capabilities. You speak English, Hindi, and Tamil.

VISION ASSISTANCE:
- You will receive a stream of image frames from the user's camera.
- OBSERVE their kitchen environment, ingredients, and cooking progress.
- EXPLAIN what you see: "I see you have some fresh basil there," or "Your pan looks a bit too hot, those onions might burn."
- Answer visual questions: "Does this look cooked enough?" or "Which of these vegetables should I chop first?"

LANGUAGE GUIDELINES:
- Respond in the language the user speaks (English, Hindi, or Tamil).
- Tamil example: "வணக்கம், உங்கள் சமையலறை நன்றாக இருக்கிறது!" (Hello, your kitchen looks great!)
- Hindi example: "नमस्ते, आपके पास बहुत अच्छे मसाले हैं।" (Hello, you have very nice spices.)

CORE BEHAVIORS:
1. STEP-BY-STEP: Only provide ONE instruction at a time.
2. CONFIRMATION: Always ask if they are ready before the next step.
3. CONTEXT AWARE: Use the video feed to make your advice more relevant.
4. TONE: Professional, encouraging, and visually observant.

Provide practical, concise spoken responses for a busy kitchen environment."""

    def __init__(self, client: Optional[genai.Client] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> genai.Client:
        """Lazy-load the Gemini client so pages render without an API key."""
        if self._client is None:
            self._client = genai.Client(api_key=self.settings.gemini_api_key or None)
        return self._client

    def analyze_image(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> AnalysisResult:
        """
        Identify a dish from a photo.

        Args:
            image_bytes: Raw image data
            mime_type: MIME type of the image

        Returns:
            AnalysisResult with dish name, ingredients, calories and a tip

        Raises:
            ValueError: If no image data was given
            AnalysisError: If the model's answer is not the expected JSON
            GeminiServiceError: If the request failed
        """
        if not image_bytes:
            raise ValueError("No image to analyze")

        try:
            response = self.client.models.generate_content(
                model=self.settings.analysis_model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    self.ANALYSIS_PROMPT,
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=self.ANALYSIS_SCHEMA,
                ),
            )
        except errors.APIError as e:
            logger.error(f"Image analysis request failed: {e}")
            raise GeminiServiceError(f"Image analysis failed: {e.message or e}") from e

        if not response.text:
            raise AnalysisError("The model returned an empty analysis")

        try:
            return AnalysisResult.model_validate(json.loads(response.text))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Unparseable analysis response: {response.text[:200]!r}")
            raise AnalysisError("The model returned an invalid analysis") from e

    def edit_food_image(
        self,
        image_bytes: bytes,
        prompt: str,
        mime_type: str = "image/jpeg",
    ) -> Optional[str]:
        """
        Restyle a food photo from a text prompt.

        Args:
            image_bytes: Raw source image data
            prompt: Editing instruction (e.g., "Add a rustic wooden table background")
            mime_type: MIME type of the source image

        Returns:
            The edited image as a PNG data URL, or None if the model
            returned no image
        """
        if not image_bytes:
            raise ValueError("No image to edit")
        if not prompt or not prompt.strip():
            raise ValueError("An editing prompt is required")

        try:
            response = self.client.models.generate_content(
                model=self.settings.image_model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    prompt.strip(),
                ],
            )
        except errors.APIError as e:
            logger.error(f"Image edit request failed: {e}")
            raise GeminiServiceError(f"Image editing failed: {e.message or e}") from e

        candidates = response.candidates or []
        content = candidates[0].content if candidates else None
        for part in (content.parts if content and content.parts else []):
            if part.inline_data and part.inline_data.data:
                return to_data_url(part.inline_data.data, "image/png")

        logger.warning("Image edit response contained no image")
        return None

    def search_recipes(self, query: str) -> RecipeSearchResult:
        """
        Search the web for recipes and summarise them.

        Args:
            query: Dish, ingredient or cuisine to search for

        Returns:
            RecipeSearchResult with the answer text and the web sources
            it was grounded on
        """
        if not query or not query.strip():
            raise ValueError("A search query is required")

        try:
            response = self.client.models.generate_content(
                model=self.settings.search_model,
                contents=self.SEARCH_PROMPT.format(query=query.strip()),
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                ),
            )
        except errors.APIError as e:
            logger.error(f"Recipe search request failed: {e}")
            raise GeminiServiceError(f"Recipe search failed: {e.message or e}") from e

        return RecipeSearchResult(
            text=response.text or "",
            sources=self._extract_sources(response),
        )

    def _extract_sources(self, response: types.GenerateContentResponse) -> list[RecipeSource]:
        """Collect web sources from the first candidate's grounding chunks."""
        candidates = response.candidates or []
        metadata = candidates[0].grounding_metadata if candidates else None
        chunks = (metadata.grounding_chunks if metadata else None) or []

        sources = []
        for chunk in chunks:
            web = chunk.web
            if not web or not web.uri:
                continue
            sources.append(RecipeSource(title=web.title or self.DEFAULT_SOURCE_TITLE, url=web.uri))
        return sources

    def live_config(self, voice_name: Optional[str] = None) -> types.LiveConnectConfig:
        """Build the kitchen assistant live session configuration."""
        return types.LiveConnectConfig(
            response_modalities=[types.Modality.AUDIO],
            input_audio_transcription=types.AudioTranscriptionConfig(),
            output_audio_transcription=types.AudioTranscriptionConfig(),
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=voice_name or self.settings.live_voice,
                    )
                )
            ),
            system_instruction=self.LIVE_SYSTEM_INSTRUCTION,
        )

    def connect_live(self, voice_name: Optional[str] = None):
        """
        Open a kitchen assistant live session.

        Returns:
            Async context manager yielding the SDK live session
        """
        logger.info(f"Connecting live session ({self.settings.live_model})")
        return self.client.aio.live.connect(
            model=self.settings.live_model,
            config=self.live_config(voice_name),
        )
