"""User service: learners, achievements, and served progress snapshots."""

from datetime import datetime

from coursebuilder.core.errors import NotFoundError
from coursebuilder.schemas.progress import CourseProgress, ProgressUpdateRequest, UserProgress
from coursebuilder.schemas.user import Achievement, User
from coursebuilder.services import catalog_service
from coursebuilder.services.catalog_loader import DEFAULT_PROGRESS_KEY, CatalogSnapshot
from coursebuilder.store.progress_store import ProgressStore

SHARED_ACHIEVEMENT_OWNER = "default"


def list_users(catalog: CatalogSnapshot) -> list[User]:
    return list(catalog.users)


def get_user_progress(catalog: CatalogSnapshot, *, learner_id: str) -> UserProgress:
    """Snapshot for the learner, or the default snapshot for unknown learners."""
    snapshot = catalog.user_progress.get(learner_id)
    if snapshot is not None:
        return snapshot
    default = catalog.user_progress.get(DEFAULT_PROGRESS_KEY)
    if default is None:
        return UserProgress(learner_id=learner_id)
    return default.model_copy(update={"learner_id": learner_id})


def get_user_achievements(catalog: CatalogSnapshot, *, learner_id: str) -> list[Achievement]:
    return [
        a for a in catalog.achievements
        if a.earned_by in (learner_id, SHARED_ACHIEVEMENT_OWNER)
    ]


def update_user_progress(
    catalog: CatalogSnapshot,
    *,
    learner_id: str,
    body: ProgressUpdateRequest,
    timestamp: datetime | None = None,
) -> CourseProgress:
    """Apply a lesson completion on top of the learner's snapshot.

    The snapshot itself is left untouched: the change is applied to a
    throwaway store and the resulting course progress is returned. Raises
    NotFoundError for an unknown course or a lesson outside the course.
    """
    lesson_ids = catalog_service.course_lesson_ids(catalog, course_id=body.course_id)
    if body.lesson_id not in lesson_ids:
        raise NotFoundError("Lesson", body.lesson_id)
    total = len(lesson_ids)
    store = ProgressStore.from_snapshot(get_user_progress(catalog, learner_id=learner_id))
    if body.completed:
        return store.mark_lesson_complete(
            body.course_id, body.lesson_id, total_lessons=total, timestamp=timestamp
        )
    # An un-complete cannot regress progress; it only refreshes last_accessed.
    return store.update_progress(body.course_id, 0, timestamp)
