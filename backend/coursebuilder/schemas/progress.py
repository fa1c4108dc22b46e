from datetime import datetime

from pydantic import Field

from coursebuilder.schemas.common import CamelModel


class Enrollment(CamelModel):
    """A learner's record of having joined a general course."""

    course_id: str
    enrolled_at: datetime


class CourseProgress(CamelModel):
    """Completion state of one course for one learner."""

    course_id: str
    progress_percentage: float = 0.0
    completed_lesson_ids: set[str] = Field(default_factory=set)
    last_accessed: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.progress_percentage >= 100


class UserProgress(CamelModel):
    """Progress snapshot served for one learner."""

    learner_id: str
    courses: list[CourseProgress] = Field(default_factory=list)

    def for_course(self, course_id: str) -> CourseProgress | None:
        for record in self.courses:
            if record.course_id == course_id:
                return record
        return None


class ProgressUpdateRequest(CamelModel):
    course_id: str = Field(..., min_length=1)
    lesson_id: str = Field(..., min_length=1)
    completed: bool = True


class LibraryStats(CamelModel):
    total: int
    completed: int
    in_progress: int
