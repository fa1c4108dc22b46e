"""Global error handler tests."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from coursebuilder.config import settings
from coursebuilder.core.errors import NotFoundError, _validation_message, register_error_handlers


def _app_with_failing_routes() -> FastAPI:
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    @test_app.get("/missing")
    async def missing():
        raise NotFoundError("Lesson", "lesson_404")

    return test_app


async def _get(path: str):
    transport = ASGITransport(app=_app_with_failing_routes(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


@pytest.mark.asyncio
async def test_internal_error_shows_message_outside_production(monkeypatch):
    monkeypatch.setattr(settings, "app_env", "development")
    response = await _get("/boom")
    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Internal Server Error"
    assert data["message"] == "database exploded"


@pytest.mark.asyncio
async def test_internal_error_hidden_in_production(monkeypatch):
    monkeypatch.setattr(settings, "app_env", "production")
    response = await _get("/boom")
    assert response.status_code == 500
    assert "exploded" not in response.text
    assert response.json()["message"] == "Something went wrong!"


@pytest.mark.asyncio
async def test_not_found_error_mapped_to_404():
    response = await _get("/missing")
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "Lesson not found"
    assert data["message"] == "Lesson with ID lesson_404 does not exist"
    assert data["request_id"] is None


def test_validation_message_names_each_failing_part():
    errors = [
        {"loc": ("query", "courseType")},
        {"loc": ("body", "rating")},
        {"loc": ("body", "learnerId")},
    ]
    assert _validation_message(errors) == "Query parameters and Request body failed validation"
    assert _validation_message([]) == "Request failed validation"
