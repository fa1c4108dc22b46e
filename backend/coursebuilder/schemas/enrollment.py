from datetime import datetime

from pydantic import Field

from coursebuilder.models.catalog import EnrollmentStatus, FeedbackStatus
from coursebuilder.schemas.common import CamelModel


class EnrollRequest(CamelModel):
    learner_id: str = Field(..., min_length=1, max_length=100)


class EnrollmentRead(CamelModel):
    enrollment_id: str
    course_id: str
    learner_id: str
    enrolled_at: datetime
    status: EnrollmentStatus = EnrollmentStatus.active


class FeedbackRequest(CamelModel):
    learner_id: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(..., ge=1, le=5, description="1 (poor) to 5 (excellent)")
    comments: str | None = Field(default=None, max_length=2000)


class FeedbackRead(CamelModel):
    feedback_id: str
    course_id: str
    learner_id: str
    rating: int
    comments: str | None = None
    submitted_at: datetime
    status: FeedbackStatus = FeedbackStatus.submitted
