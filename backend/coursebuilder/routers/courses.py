"""Course routes: catalog reads plus the enroll and feedback writes."""

from fastapi import APIRouter, Depends, Query, Request

from coursebuilder.dependencies import get_catalog
from coursebuilder.models.catalog import CourseType
from coursebuilder.schemas.catalog import Course, Lesson
from coursebuilder.schemas.common import Envelope
from coursebuilder.schemas.enrollment import (
    EnrollmentRead,
    EnrollRequest,
    FeedbackRead,
    FeedbackRequest,
)
from coursebuilder.services import catalog_service, enrollment_service
from coursebuilder.services.catalog_loader import CatalogSnapshot

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=Envelope[list[Course]])
async def list_courses(
    course_type: CourseType | None = Query(default=None, alias="courseType"),
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """List all courses, optionally filtered by course type."""
    courses = catalog_service.list_courses(catalog, course_type=course_type)
    return Envelope(data=courses)


@router.get("/{course_id}", response_model=Envelope[Course])
async def get_course(
    course_id: str,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    return Envelope(data=catalog_service.get_course(catalog, course_id=course_id))


@router.get("/{course_id}/lessons", response_model=Envelope[list[Lesson]])
async def get_course_lessons(
    course_id: str,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    lessons = catalog_service.get_course_lessons(catalog, course_id=course_id)
    return Envelope(data=lessons)


@router.post("/{course_id}/enroll", response_model=Envelope[EnrollmentRead])
async def enroll(
    course_id: str,
    body: EnrollRequest,
    request: Request,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Register a learner for a course. Nothing is persisted."""
    request.state.learner_id = body.learner_id
    enrollment = enrollment_service.enroll(
        catalog, course_id=course_id, learner_id=body.learner_id
    )
    return Envelope(data=enrollment)


@router.post("/{course_id}/feedback", response_model=Envelope[FeedbackRead])
async def submit_feedback(
    course_id: str,
    body: FeedbackRequest,
    request: Request,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    """Submit a 1-5 rating with optional comments."""
    request.state.learner_id = body.learner_id
    feedback = enrollment_service.submit_feedback(catalog, course_id=course_id, body=body)
    return Envelope(data=feedback)
