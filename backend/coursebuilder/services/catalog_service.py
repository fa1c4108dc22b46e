"""Catalog service: read-only lookups over the loaded snapshot."""

from coursebuilder.core.errors import NotFoundError
from coursebuilder.models.catalog import CourseType
from coursebuilder.schemas.catalog import Course, LearningPath, Lesson
from coursebuilder.services.catalog_loader import CatalogSnapshot


def list_courses(
    catalog: CatalogSnapshot,
    *,
    course_type: CourseType | None = None,
) -> list[Course]:
    """List all courses, optionally filtered by course type."""
    courses = list(catalog.courses)
    if course_type is not None:
        courses = [c for c in courses if c.course_type == course_type]
    return courses


def get_course(catalog: CatalogSnapshot, *, course_id: str) -> Course:
    """Get a single course. Raises NotFoundError if absent."""
    course = catalog.find_course(course_id)
    if course is None:
        raise NotFoundError("Course", course_id)
    return course


def get_course_lessons(catalog: CatalogSnapshot, *, course_id: str) -> list[Lesson]:
    """Lessons belonging to a course, in display order."""
    get_course(catalog, course_id=course_id)
    lessons = [l for l in catalog.lessons if l.course_id == course_id]
    return sorted(lessons, key=lambda l: l.order)


def course_lesson_ids(catalog: CatalogSnapshot, *, course_id: str) -> list[str]:
    """Lesson ids of a course: the lesson table first, else its structure."""
    lessons = get_course_lessons(catalog, course_id=course_id)
    if lessons:
        return [l.id for l in lessons]
    return get_course(catalog, course_id=course_id).lesson_ids()


def count_course_lessons(catalog: CatalogSnapshot, *, course_id: str) -> int:
    return len(course_lesson_ids(catalog, course_id=course_id))


def list_learning_paths(catalog: CatalogSnapshot) -> list[LearningPath]:
    return list(catalog.learning_paths)


def get_learning_path(catalog: CatalogSnapshot, *, path_id: str) -> LearningPath:
    for path in catalog.learning_paths:
        if path.id == path_id:
            return path
    raise NotFoundError("Learning path", path_id)
