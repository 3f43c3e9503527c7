"""Tests for the HTTP API."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_gemini_service
from app.main import app
from models.entities import AnalysisResult, RecipeSearchResult, RecipeSource
from services.gemini_service import AnalysisError, GeminiService, GeminiServiceError


@pytest.fixture
def service() -> MagicMock:
    return MagicMock(spec=GeminiService)


@pytest.fixture
def client(service: MagicMock):
    app.dependency_overrides[get_gemini_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestRecipeSearch:
    def test_search(self, client, service):
        service.search_recipes.return_value = RecipeSearchResult(
            text="Paella...",
            sources=[RecipeSource(title="Paella", url="https://example.com/paella")],
        )

        response = client.post("/recipes/search", json={"query": "paella"})

        assert response.status_code == 200
        assert response.json() == {
            "text": "Paella...",
            "sources": [{"title": "Paella", "url": "https://example.com/paella"}],
        }

    def test_empty_query_is_400(self, client, service):
        service.search_recipes.side_effect = ValueError("A search query is required")

        response = client.post("/recipes/search", json={"query": ""})

        assert response.status_code == 400

    def test_upstream_failure_is_502(self, client, service):
        service.search_recipes.side_effect = GeminiServiceError("down")

        response = client.post("/recipes/search", json={"query": "paella"})

        assert response.status_code == 502


class TestAnalyze:
    def test_returns_camel_case(self, client, service, sample_jpeg):
        service.analyze_image.return_value = AnalysisResult(
            dish_name="Pho", ingredients=["noodles"], calories="450", suggested_action="Add lime"
        )

        response = client.post("/analyzer/analyze", files={"image": ("pho.jpg", sample_jpeg, "image/jpeg")})

        assert response.status_code == 200
        assert response.json() == {
            "dishName": "Pho",
            "ingredients": ["noodles"],
            "calories": "450",
            "suggestedAction": "Add lime",
        }
        service.analyze_image.assert_called_once_with(sample_jpeg, "image/jpeg")

    def test_unparseable_analysis_is_502(self, client, service, sample_jpeg):
        service.analyze_image.side_effect = AnalysisError("invalid")

        response = client.post("/analyzer/analyze", files={"image": ("pho.jpg", sample_jpeg, "image/jpeg")})

        assert response.status_code == 502


class TestEdit:
    def test_returns_data_url(self, client, service, sample_jpeg):
        service.edit_food_image.return_value = "data:image/png;base64,AAAA"

        response = client.post(
            "/lab/edit",
            files={"image": ("dish.jpg", sample_jpeg, "image/jpeg")},
            data={"prompt": "Add steam"},
        )

        assert response.status_code == 200
        assert response.json() == {"image": "data:image/png;base64,AAAA"}

    def test_no_image_is_404(self, client, service, sample_jpeg):
        service.edit_food_image.return_value = None

        response = client.post(
            "/lab/edit",
            files={"image": ("dish.jpg", sample_jpeg, "image/jpeg")},
            data={"prompt": "Add steam"},
        )

        assert response.status_code == 404
