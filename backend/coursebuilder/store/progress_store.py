"""Learner-side enrollment and progress state for one session.

The store is the single source of truth for "which courses has this learner
joined" and "how far have they gotten". It never reads or mutates catalog
data: callers pass in whatever catalog context an operation needs (course
type, lesson count).

Invariants:
  - at most one enrollment per course; enrolling again returns the original
  - progress_percentage never decreases and always lies in [0, 100]
  - progress records are created on first write, never on read
"""

import math
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from coursebuilder.models.catalog import CourseType
from coursebuilder.schemas.progress import CourseProgress, Enrollment, UserProgress

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clamp_percentage(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


class ProgressStore:
    """In-memory enrollment/progress container for a single learner."""

    def __init__(
        self,
        *,
        enrollments: Iterable[Enrollment] = (),
        progress: Iterable[CourseProgress] = (),
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or _utcnow
        self._enrollments: dict[str, Enrollment] = {}
        self._progress: dict[str, CourseProgress] = {}
        for enrollment in enrollments:
            self._enrollments.setdefault(enrollment.course_id, enrollment.model_copy())
        for record in progress:
            self._progress[record.course_id] = record.model_copy(
                update={
                    "progress_percentage": _clamp_percentage(record.progress_percentage),
                    "completed_lesson_ids": set(record.completed_lesson_ids),
                }
            )

    @classmethod
    def from_snapshot(cls, snapshot: UserProgress, *, clock: Clock | None = None) -> "ProgressStore":
        """Seed a store from a served progress snapshot (progress only, no enrollments)."""
        return cls(progress=snapshot.courses, clock=clock)

    def __len__(self) -> int:
        return len(self._enrollments)

    # --- enrollment ---

    def enroll(self, course_id: str, timestamp: datetime | None = None) -> Enrollment:
        """Join a course. Re-enrolling is a no-op that returns the first enrollment."""
        if not course_id:
            raise ValueError("course_id must be a non-empty string")
        existing = self._enrollments.get(course_id)
        if existing is not None:
            return existing.model_copy()

        enrollment = Enrollment(course_id=course_id, enrolled_at=timestamp or self._clock())
        self._enrollments[course_id] = enrollment
        self._ensure_progress(course_id)
        return enrollment.model_copy()

    def is_enrolled(self, course_id: str, course_type: CourseType | str | None = None) -> bool:
        """Explicitly enrolled, or the caller says the course is personalized."""
        if course_id in self._enrollments:
            return True
        return course_type == CourseType.personalized

    @property
    def enrolled_course_ids(self) -> list[str]:
        """Enrolled course ids in enrollment order."""
        return list(self._enrollments)

    def enrollments(self) -> list[Enrollment]:
        return [e.model_copy() for e in self._enrollments.values()]

    # --- progress ---

    def get_progress(self, course_id: str) -> CourseProgress:
        """Return the course record, or a zero-value default without storing it."""
        record = self._progress.get(course_id)
        if record is None:
            return CourseProgress(course_id=course_id)
        return record.model_copy(update={"completed_lesson_ids": set(record.completed_lesson_ids)})

    def update_progress(
        self,
        course_id: str,
        new_percentage: float,
        timestamp: datetime | None = None,
    ) -> CourseProgress:
        """Raise progress to new_percentage; lower values never regress it.

        Out-of-range values are clamped to [0, 100]. A NaN percentage only
        refreshes last_accessed.
        """
        record = self._ensure_progress(course_id)
        candidate = float(new_percentage)
        if not math.isnan(candidate):
            record.progress_percentage = _clamp_percentage(
                max(record.progress_percentage, candidate)
            )
        record.last_accessed = timestamp or self._clock()
        return self.get_progress(course_id)

    def mark_lesson_complete(
        self,
        course_id: str,
        lesson_id: str,
        total_lessons: int | None = None,
        timestamp: datetime | None = None,
    ) -> CourseProgress:
        """Add lesson_id to the completed set.

        The percentage is only recomputed (completed / total * 100) when the
        caller knows the course's lesson count; otherwise it is left as is.
        """
        record = self._ensure_progress(course_id)
        record.completed_lesson_ids.add(lesson_id)
        if total_lessons is not None and total_lessons > 0:
            completed = len(record.completed_lesson_ids)
            return self.update_progress(course_id, completed / total_lessons * 100, timestamp)
        record.last_accessed = timestamp or self._clock()
        return self.get_progress(course_id)

    def progress_records(self) -> list[CourseProgress]:
        return [self.get_progress(course_id) for course_id in self._progress]

    def reset(self) -> None:
        """Drop all enrollments and progress."""
        self._enrollments.clear()
        self._progress.clear()

    def _ensure_progress(self, course_id: str) -> CourseProgress:
        record = self._progress.get(course_id)
        if record is None:
            record = CourseProgress(course_id=course_id)
            self._progress[course_id] = record
        return record
