"""User service tests: progress snapshots, achievements, progress updates."""

from datetime import datetime, timezone

import pytest

from coursebuilder.core.errors import NotFoundError
from coursebuilder.schemas.progress import ProgressUpdateRequest
from coursebuilder.services import user_service


def test_list_users(catalog):
    assert [u.id for u in user_service.list_users(catalog)] == [
        "learner_001", "learner_002", "trainer_001",
    ]


def test_get_user_progress_known_learner(catalog):
    progress = user_service.get_user_progress(catalog, learner_id="learner_002")
    assert progress.learner_id == "learner_002"
    assert progress.for_course("course_002").is_complete


def test_get_user_progress_unknown_learner_gets_default(catalog):
    progress = user_service.get_user_progress(catalog, learner_id="learner_999")
    assert progress.learner_id == "learner_999"
    assert progress.courses == []
    # the shared default entry is untouched
    assert catalog.user_progress["default"].learner_id == "default"


def test_get_user_achievements_includes_shared(catalog):
    ids = [a.id for a in user_service.get_user_achievements(catalog, learner_id="learner_001")]
    assert ids == ["ach_welcome", "ach_first_lesson"]
    ids = [a.id for a in user_service.get_user_achievements(catalog, learner_id="learner_999")]
    assert ids == ["ach_welcome"]


def test_update_user_progress_completes_lesson(catalog):
    ts = datetime(2025, 3, 1, tzinfo=timezone.utc)
    body = ProgressUpdateRequest(course_id="course_001", lesson_id="lesson_003")
    progress = user_service.update_user_progress(
        catalog, learner_id="learner_001", body=body, timestamp=ts
    )
    assert progress.completed_lesson_ids == {"lesson_001", "lesson_002", "lesson_003"}
    assert progress.progress_percentage == 75
    assert progress.last_accessed == ts


def test_update_user_progress_is_not_persisted(catalog):
    body = ProgressUpdateRequest(course_id="course_001", lesson_id="lesson_003")
    user_service.update_user_progress(catalog, learner_id="learner_001", body=body)
    snapshot = user_service.get_user_progress(catalog, learner_id="learner_001")
    assert snapshot.for_course("course_001").progress_percentage == 50


def test_update_user_progress_uncomplete_does_not_regress(catalog):
    body = ProgressUpdateRequest(course_id="course_001", lesson_id="lesson_001", completed=False)
    progress = user_service.update_user_progress(catalog, learner_id="learner_001", body=body)
    assert progress.progress_percentage == 50
    assert "lesson_001" in progress.completed_lesson_ids


def test_update_user_progress_new_learner(catalog):
    body = ProgressUpdateRequest(course_id="course_003", lesson_id="lesson_008")
    progress = user_service.update_user_progress(catalog, learner_id="learner_999", body=body)
    assert progress.progress_percentage == 50


def test_update_user_progress_unknown_course(catalog):
    body = ProgressUpdateRequest(course_id="missing", lesson_id="lesson_001")
    with pytest.raises(NotFoundError):
        user_service.update_user_progress(catalog, learner_id="learner_001", body=body)


def test_update_user_progress_lesson_from_other_course(catalog):
    body = ProgressUpdateRequest(course_id="course_001", lesson_id="lesson_005")
    with pytest.raises(NotFoundError) as exc_info:
        user_service.update_user_progress(catalog, learner_id="learner_001", body=body)
    assert exc_info.value.resource == "Lesson"
    assert exc_info.value.resource_id == "lesson_005"


def test_update_user_progress_unknown_lesson(catalog):
    body = ProgressUpdateRequest(course_id="course_001", lesson_id="bogus")
    with pytest.raises(NotFoundError):
        user_service.update_user_progress(catalog, learner_id="learner_001", body=body)
