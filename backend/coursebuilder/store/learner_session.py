"""Learner session: feeds catalog data into the progress store.

Local state is written first (optimistically) and the paired network write
is fired afterwards. A failed write is logged and never rolled back, so the
local store can run ahead of the server.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from pydantic import ValidationError

from coursebuilder.clients.catalog_client import CatalogClient
from coursebuilder.config import settings
from coursebuilder.core.middleware import hash_learner_id
from coursebuilder.schemas.assessment import AssessmentQuestion, AssessmentScore
from coursebuilder.schemas.catalog import Course, Lesson
from coursebuilder.schemas.progress import CourseProgress, Enrollment, LibraryStats
from coursebuilder.services.assessment_service import score_assessment
from coursebuilder.store.progress_store import ProgressStore

logger = logging.getLogger("coursebuilder.client")


class LearnerSession:
    """One learner's view of the catalog, backed by a ProgressStore."""

    def __init__(
        self,
        learner_id: str,
        client: CatalogClient,
        store: ProgressStore | None = None,
        *,
        passing_score: int | None = None,
    ):
        self.learner_id = learner_id
        self.client = client
        self.store = store if store is not None else ProgressStore()
        self.passing_score = passing_score if passing_score is not None else settings.passing_score
        self._courses: dict[str, Course] = {}
        self._lesson_totals: dict[str, int] = {}

    # --- catalog reads ---

    async def load_courses(self) -> list[Course]:
        """Fetch the catalog; an unavailable catalog reads as no courses."""
        response = await self.client.get_courses()
        if not response.success:
            return []
        try:
            courses = [Course.model_validate(item) for item in response.data or []]
        except ValidationError as exc:
            logger.warning("Discarding malformed course list: %s", exc)
            return []
        self._courses = {c.id: c for c in courses}
        for course in courses:
            lesson_ids = course.lesson_ids()
            if lesson_ids:
                self._lesson_totals.setdefault(course.id, len(lesson_ids))
        return courses

    def marketplace_courses(self) -> list[Course]:
        return [c for c in self._courses.values() if not c.is_personalized]

    def personalized_courses(self) -> list[Course]:
        return [c for c in self._courses.values() if c.is_personalized]

    async def load_lessons(self, course_id: str) -> list[Lesson]:
        """Fetch a course's lessons and remember how many there are."""
        response = await self.client.get_course_lessons(course_id)
        if not response.success:
            return []
        try:
            lessons = [Lesson.model_validate(item) for item in response.data or []]
        except ValidationError as exc:
            logger.warning("Discarding malformed lessons for %s: %s", course_id, exc)
            return []
        if lessons:
            self._lesson_totals[course_id] = len(lessons)
        return lessons

    def lesson_total(self, course_id: str) -> int | None:
        return self._lesson_totals.get(course_id)

    # --- enrollment ---

    def is_enrolled(self, course: Course) -> bool:
        return self.store.is_enrolled(course.id, course.course_type)

    async def enroll(self, course: Course) -> Enrollment | None:
        """Join a general course. Personalized courses need no enrollment."""
        if course.is_personalized:
            return None
        enrollment = self.store.enroll(course.id)
        response = await self.client.register_learner(course.id, self.learner_id)
        if not response.success:
            logger.warning(
                "Enrollment not confirmed by server (course=%s learner=%s): %s",
                course.id,
                hash_learner_id(self.learner_id),
                response.error,
            )
        return enrollment

    # --- progress ---

    def course_progress(self, course_id: str) -> CourseProgress:
        return self.store.get_progress(course_id)

    async def complete_lesson(self, course_id: str, lesson_id: str) -> CourseProgress:
        progress = self.store.mark_lesson_complete(
            course_id, lesson_id, total_lessons=self.lesson_total(course_id)
        )
        response = await self.client.update_lesson_progress(
            self.learner_id, course_id, lesson_id, completed=True
        )
        if not response.success:
            logger.warning(
                "Lesson completion not confirmed by server (course=%s lesson=%s): %s",
                course_id,
                lesson_id,
                response.error,
            )
        return progress

    def library_stats(self, courses: Iterable[Course] | None = None) -> LibraryStats:
        """Counts over enrolled courses, as shown on the learner's library page."""
        if courses is None:
            course_ids = self.store.enrolled_course_ids
        else:
            course_ids = [c.id for c in courses if self.is_enrolled(c)]
        completed = sum(1 for cid in course_ids if self.store.get_progress(cid).is_complete)
        return LibraryStats(
            total=len(course_ids),
            completed=completed,
            in_progress=len(course_ids) - completed,
        )

    # --- feedback and assessment ---

    async def submit_feedback(self, course_id: str, rating: int, comments: str | None = None) -> bool:
        response = await self.client.submit_feedback(course_id, self.learner_id, rating, comments)
        return response.success

    def score_assessment(
        self,
        questions: Sequence[AssessmentQuestion],
        answers: Mapping[str, int],
    ) -> AssessmentScore:
        return score_assessment(questions, answers, passing_threshold=self.passing_score)
