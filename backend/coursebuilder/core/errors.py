"""Structured error responses: the same JSON envelope for every failure."""

from collections.abc import Sequence
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coursebuilder.config import settings


class NotFoundError(Exception):
    """A course, lesson or learning path id that is absent from the snapshot."""

    def __init__(self, resource: str, resource_id: str) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with ID {resource_id} does not exist")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    **extra,
) -> JSONResponse:
    content = {
        "success": False,
        "error": error,
        "message": message,
        "status_code": status_code,
        "request_id": getattr(request.state, "request_id", None),
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


_LOCATION_LABELS = {
    "body": "Request body",
    "query": "Query parameters",
    "path": "Path parameters",
    "header": "Headers",
    "cookie": "Cookies",
}


def _validation_message(errors: Sequence[dict]) -> str:
    """Name the request part(s) that failed, taken from each error's loc."""
    labels: list[str] = []
    for error in errors:
        loc = error.get("loc") or ()
        label = _LOCATION_LABELS.get(loc[0] if loc else None, "Request")
        if label not in labels:
            labels.append(label)
    if not labels:
        return "Request failed validation"
    return f"{' and '.join(labels)} failed validation"


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(
            request,
            status.HTTP_404_NOT_FOUND,
            f"{exc.resource} not found",
            str(exc),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = "The requested resource was not found"
        else:
            message = str(exc.detail)
        return _error_response(
            request,
            exc.status_code,
            HTTPStatus(exc.status_code).phrase,
            message,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Validation error",
            _validation_message(exc.errors()),
            errors=exc.errors(),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        message = "Something went wrong!" if settings.is_production else str(exc)
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            message,
        )
