"""Async HTTP client for the Catalog Service.

Every call returns an ApiResponse. Non-2xx responses and transport failures
come back as success=False with the server's error text; nothing here
raises on network trouble, so callers treat a failed read as "not loaded".
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from coursebuilder.config import settings

logger = logging.getLogger("coursebuilder.client")


class ApiResponse(BaseModel):
    success: bool
    data: Any = None
    error: str | None = None
    status_code: int | None = None


class CatalogClient:
    """Thin wrapper over httpx.AsyncClient speaking the /api envelope."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: dict | None = None) -> ApiResponse:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("API request failed: %s %s: %s", method, path, exc)
            return ApiResponse(success=False, error=str(exc))

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if not response.is_success:
            error = body.get("message") or f"HTTP error! status: {response.status_code}"
            logger.warning("API request failed: %s %s: %s", method, path, error)
            return ApiResponse(success=False, error=error, status_code=response.status_code)

        return ApiResponse(
            success=bool(body.get("success", True)),
            data=body.get("data"),
            status_code=response.status_code,
        )

    # --- courses ---

    async def get_courses(self) -> ApiResponse:
        return await self._request("GET", "/api/courses")

    async def get_course(self, course_id: str) -> ApiResponse:
        return await self._request("GET", f"/api/courses/{course_id}")

    async def get_course_lessons(self, course_id: str) -> ApiResponse:
        return await self._request("GET", f"/api/courses/{course_id}/lessons")

    # --- learner writes ---

    async def register_learner(self, course_id: str, learner_id: str) -> ApiResponse:
        return await self._request(
            "POST", f"/api/courses/{course_id}/enroll", json={"learnerId": learner_id}
        )

    async def submit_feedback(
        self,
        course_id: str,
        learner_id: str,
        rating: int,
        comments: str | None = None,
    ) -> ApiResponse:
        return await self._request(
            "POST",
            f"/api/courses/{course_id}/feedback",
            json={"learnerId": learner_id, "rating": rating, "comments": comments},
        )

    async def update_lesson_progress(
        self,
        learner_id: str,
        course_id: str,
        lesson_id: str,
        completed: bool = True,
    ) -> ApiResponse:
        return await self._request(
            "PUT",
            f"/api/user/{learner_id}/progress",
            json={"courseId": course_id, "lessonId": lesson_id, "completed": completed},
        )

    # --- learner reads ---

    async def get_user_progress(self, learner_id: str) -> ApiResponse:
        return await self._request("GET", f"/api/user/{learner_id}/progress")

    async def get_user_achievements(self, learner_id: str) -> ApiResponse:
        return await self._request("GET", f"/api/user/{learner_id}/achievements")

    async def get_learning_paths(self) -> ApiResponse:
        return await self._request("GET", "/api/learning-paths")

    async def get_learning_path(self, path_id: str) -> ApiResponse:
        return await self._request("GET", f"/api/learning-paths/{path_id}")
