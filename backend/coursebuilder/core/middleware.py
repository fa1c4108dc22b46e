"""Middleware: request ID injection, structured access logging."""

import hashlib
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("coursebuilder.access")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Inject a unique request ID into each request and response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Access log line per request.

    Learner ids never appear in clear: the learner is logged as a hash and
    the path as the matched route template (``/api/user/{learner_id}/progress``).
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        elapsed_ms = round((time.monotonic() - start) * 1000, 1)

        request_id = getattr(request.state, "request_id", "-")
        learner_raw = getattr(request.state, "learner_id", None)
        learner = hash_learner_id(learner_raw) if learner_raw else "-"

        logger.info(
            "request_id=%s learner=%s method=%s route=%s status=%d elapsed_ms=%.1f",
            request_id,
            learner,
            request.method,
            route_template(request),
            response.status_code,
            elapsed_ms,
        )
        return response


def route_template(request: Request) -> str:
    """Path template of the matched route, or "-" when nothing matched."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "-"


def hash_learner_id(learner_id: str) -> str:
    """First 12 hex chars of the learner id's SHA-256."""
    return hashlib.sha256(str(learner_id).encode()).hexdigest()[:12]
