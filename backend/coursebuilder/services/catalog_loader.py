"""Load the static catalog snapshot from JSON files.

The snapshot is read once at boot and never mutated afterwards. A missing or
malformed file is logged and served as an empty collection so the API keeps
answering with empty results instead of failing to start.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from coursebuilder.schemas.catalog import Course, LearningPath, Lesson
from coursebuilder.schemas.progress import UserProgress
from coursebuilder.schemas.user import Achievement, User

logger = logging.getLogger("coursebuilder")

DEFAULT_PROGRESS_KEY = "default"

# file name -> top-level key holding the collection
DATA_FILES = {
    "courses": ("courses.json", "courses"),
    "lessons": ("lessons.json", "lessons"),
    "users": ("users.json", "users"),
    "achievements": ("achievements.json", "achievements"),
    "learning_paths": ("learning-paths.json", "learningPaths"),
}
USER_PROGRESS_FILE = "user-progress.json"


class CatalogSnapshot:
    """Immutable in-memory view of the catalog data."""

    def __init__(
        self,
        *,
        courses: list[Course] | None = None,
        lessons: list[Lesson] | None = None,
        users: list[User] | None = None,
        achievements: list[Achievement] | None = None,
        learning_paths: list[LearningPath] | None = None,
        user_progress: dict[str, UserProgress] | None = None,
    ):
        self.courses = tuple(courses or ())
        self.lessons = tuple(lessons or ())
        self.users = tuple(users or ())
        self.achievements = tuple(achievements or ())
        self.learning_paths = tuple(learning_paths or ())
        self.user_progress = dict(user_progress or {})
        self._courses_by_id = {c.id: c for c in self.courses}

    def find_course(self, course_id: str) -> Course | None:
        return self._courses_by_id.get(course_id)

    def __repr__(self) -> str:
        return (
            f"CatalogSnapshot(courses={len(self.courses)}, lessons={len(self.lessons)}, "
            f"users={len(self.users)}, learning_paths={len(self.learning_paths)})"
        )


def _read_json(path: Path):
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _load_collection(data_dir: Path, name: str, model) -> list:
    filename, key = DATA_FILES[name]
    path = data_dir / filename
    try:
        raw = _read_json(path)
        return [model.model_validate(item) for item in raw.get(key, [])]
    except (OSError, ValueError, AttributeError, ValidationError) as exc:
        logger.error("Could not load %s from %s: %s", name, path, exc)
        return []


def _load_user_progress(data_dir: Path) -> dict[str, UserProgress]:
    path = data_dir / USER_PROGRESS_FILE
    try:
        raw = _read_json(path)
        return {
            learner_id: UserProgress.model_validate({"learnerId": learner_id, **entry})
            for learner_id, entry in raw.items()
        }
    except (OSError, ValueError, AttributeError, TypeError, ValidationError) as exc:
        logger.error("Could not load user progress from %s: %s", path, exc)
        return {}


def load_catalog(data_dir: Path | str) -> CatalogSnapshot:
    """Read every data file under data_dir into a CatalogSnapshot."""
    data_dir = Path(data_dir)
    snapshot = CatalogSnapshot(
        courses=_load_collection(data_dir, "courses", Course),
        lessons=_load_collection(data_dir, "lessons", Lesson),
        users=_load_collection(data_dir, "users", User),
        achievements=_load_collection(data_dir, "achievements", Achievement),
        learning_paths=_load_collection(data_dir, "learning_paths", LearningPath),
        user_progress=_load_user_progress(data_dir),
    )
    logger.info("Catalog snapshot loaded from %s: %r", data_dir, snapshot)
    return snapshot
