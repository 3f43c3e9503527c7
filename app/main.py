"""
ChefGemini API - Application Entry Point

HTTP access to the one-shot Gemini features, for clients other than
the Streamlit UI. The live kitchen assistant needs local audio and
camera devices and is only available from the Streamlit app.

Endpoints:
- POST /recipes/search: web-grounded recipe search
- POST /analyzer/analyze: food photo analysis
- POST /lab/edit: prompt-driven photo editing
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.controllers import recipes_router, analyzer_router, lab_router
from config.logging import setup_logging
from config.settings import get_settings

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(
    title="ChefGemini API",
    description="Recipe search, food photo analysis and photo editing powered by Gemini.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)
app.include_router(analyzer_router)
app.include_router(lab_router)


@app.get("/", tags=["health"])
def root():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "ChefGemini API",
        "version": "1.0.0"
    }


@app.get("/health", tags=["health"])
def health_check():
    """Reports whether the Gemini API key is configured."""
    return {
        "status": "healthy",
        "gemini": "configured" if get_settings().is_configured else "missing_api_key"
    }
