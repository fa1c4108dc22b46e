"""Enrollment and feedback writes.

Both endpoints synthesize their response: nothing outlives the request.
The learner-side store keeps the authoritative session state.
"""

import logging
import uuid
from datetime import datetime, timezone

from coursebuilder.core.middleware import hash_learner_id
from coursebuilder.schemas.enrollment import EnrollmentRead, FeedbackRead, FeedbackRequest
from coursebuilder.services import catalog_service
from coursebuilder.services.catalog_loader import CatalogSnapshot

logger = logging.getLogger("coursebuilder")


def enroll(
    catalog: CatalogSnapshot,
    *,
    course_id: str,
    learner_id: str,
) -> EnrollmentRead:
    """Register a learner for a course."""
    course = catalog_service.get_course(catalog, course_id=course_id)
    enrollment = EnrollmentRead(
        enrollment_id=f"enrollment_{uuid.uuid4().hex}",
        course_id=course.id,
        learner_id=learner_id,
        enrolled_at=datetime.now(timezone.utc),
    )
    logger.info(
        "enrollment.created course=%s learner=%s", course.id, hash_learner_id(learner_id)
    )
    return enrollment


def submit_feedback(
    catalog: CatalogSnapshot,
    *,
    course_id: str,
    body: FeedbackRequest,
) -> FeedbackRead:
    """Accept a course rating. Rating bounds are enforced by FeedbackRequest."""
    course = catalog_service.get_course(catalog, course_id=course_id)
    feedback = FeedbackRead(
        feedback_id=f"feedback_{uuid.uuid4().hex}",
        course_id=course.id,
        learner_id=body.learner_id,
        rating=body.rating,
        comments=body.comments,
        submitted_at=datetime.now(timezone.utc),
    )
    logger.info(
        "feedback.submitted course=%s learner=%s rating=%d",
        course.id,
        hash_learner_id(body.learner_id),
        body.rating,
    )
    return feedback
