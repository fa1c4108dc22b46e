from pydantic import Field

from coursebuilder.models.catalog import CourseType, Difficulty, LessonType
from coursebuilder.schemas.common import CamelModel


class LessonRef(CamelModel):
    """Lesson entry nested inside a course structure."""

    id: str
    module_id: str | None = None
    title: str = ""
    type: LessonType | None = None
    duration: int | None = None


class CourseModule(CamelModel):
    id: str
    topic_id: str | None = None
    title: str = ""
    lessons: list[LessonRef] = Field(default_factory=list)


class Topic(CamelModel):
    id: str
    title: str = ""
    modules: list[CourseModule] = Field(default_factory=list)


class CourseStructure(CamelModel):
    topics: list[Topic] = Field(default_factory=list)
    lessons: list[LessonRef] = Field(default_factory=list)

    def lesson_ids(self) -> list[str]:
        """All lesson ids, flat list first then topics -> modules -> lessons."""
        seen: dict[str, None] = {}
        for ref in self.lessons:
            seen.setdefault(ref.id, None)
        for topic in self.topics:
            for module in topic.modules:
                for ref in module.lessons:
                    seen.setdefault(ref.id, None)
        return list(seen)


class CourseMetadata(CamelModel):
    difficulty: Difficulty | None = None
    duration: str | None = None
    skills: list[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class Course(CamelModel):
    id: str
    title: str
    description: str = ""
    instructor: str | None = None
    skills: list[str] = Field(default_factory=list)
    course_type: CourseType = CourseType.general
    metadata: CourseMetadata = Field(default_factory=CourseMetadata)
    structure: CourseStructure = Field(default_factory=CourseStructure)

    model_config = {"extra": "allow"}

    @property
    def is_personalized(self) -> bool:
        return self.course_type == CourseType.personalized

    def lesson_ids(self) -> list[str]:
        return self.structure.lesson_ids()


class Lesson(CamelModel):
    id: str
    course_id: str
    module_id: str | None = None
    title: str
    type: LessonType = LessonType.video
    duration: int = 0
    order: int = 0


class LearningPath(CamelModel):
    id: str
    title: str
    description: str = ""
    course_ids: list[str] = Field(default_factory=list)
    difficulty: Difficulty | None = None
    estimated_duration: str | None = None
