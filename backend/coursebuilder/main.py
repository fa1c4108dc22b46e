import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from coursebuilder.config import settings
from coursebuilder.core.errors import register_error_handlers
from coursebuilder.core.middleware import AccessLogMiddleware, RequestIDMiddleware
from coursebuilder.routers import courses, learning_paths, users
from coursebuilder.services.catalog_loader import load_catalog

logger = logging.getLogger("coursebuilder")


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Load the static catalog snapshot once at startup."""
    application.state.catalog = load_catalog(settings.data_dir)
    logger.info(
        "%s running on port %d (%s)", settings.app_name, settings.port, settings.app_env
    )
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Middleware order matters (last added = outermost = first to execute)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(AccessLogMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-request-id"],
)

# Error handlers
register_error_handlers(app)

# Routers
app.include_router(courses.router)
app.include_router(users.router)
app.include_router(learning_paths.router)


@app.get("/health")
async def health_check():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.app_name,
        "version": settings.version,
    }
