"""User routes: learner list, progress snapshots, achievements."""

from fastapi import APIRouter, Depends, Request

from coursebuilder.dependencies import get_catalog
from coursebuilder.schemas.common import Envelope
from coursebuilder.schemas.progress import CourseProgress, ProgressUpdateRequest, UserProgress
from coursebuilder.schemas.user import Achievement, User
from coursebuilder.services import user_service
from coursebuilder.services.catalog_loader import CatalogSnapshot

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users", response_model=Envelope[list[User]])
async def list_users(catalog: CatalogSnapshot = Depends(get_catalog)):
    return Envelope(data=user_service.list_users(catalog))


@router.get("/user/{learner_id}/progress", response_model=Envelope[UserProgress])
async def get_user_progress(
    learner_id: str,
    request: Request,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Progress snapshot; unknown learners get the default snapshot."""
    request.state.learner_id = learner_id
    progress = user_service.get_user_progress(catalog, learner_id=learner_id)
    return Envelope(data=progress)


@router.put("/user/{learner_id}/progress", response_model=Envelope[CourseProgress])
async def update_user_progress(
    learner_id: str,
    body: ProgressUpdateRequest,
    request: Request,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Apply a lesson completion and return the resulting course progress."""
    request.state.learner_id = learner_id
    progress = user_service.update_user_progress(catalog, learner_id=learner_id, body=body)
    return Envelope(data=progress)


@router.get("/user/{learner_id}/achievements", response_model=Envelope[list[Achievement]])
async def get_user_achievements(
    learner_id: str,
    request: Request,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    request.state.learner_id = learner_id
    achievements = user_service.get_user_achievements(catalog, learner_id=learner_id)
    return Envelope(data=achievements)
