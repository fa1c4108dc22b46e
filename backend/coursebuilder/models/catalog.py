"""Catalog enums shared by the API schemas and the learner-side store.

Courses are either marketplace ("general") courses a learner has to join,
or personalized courses that every learner can study without enrolling.
"""

import enum


class CourseType(str, enum.Enum):
    general = "general"
    personalized = "personalized"


class LessonType(str, enum.Enum):
    video = "video"
    interactive = "interactive"
    coding = "coding"


class Difficulty(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class EnrollmentStatus(str, enum.Enum):
    active = "active"


class FeedbackStatus(str, enum.Enum):
    submitted = "submitted"
