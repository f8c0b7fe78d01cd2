"""
Catalog schemas for Mini eLearn.

Defines Pydantic models for the read-only course catalog:
- Lessons (atomic units that can be marked done)
- Courses (ordered lessons)
- Catalog (ordered courses with id lookup)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str


class Course(BaseModel):
    """A course with an ordered sequence of lessons."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    lessons: tuple[Lesson, ...] = ()

    @field_validator('lessons')
    @classmethod
    def lesson_ids_unique(cls, v):
        seen = set()
        for lesson in v:
            if lesson.id in seen:
                raise ValueError(f'Duplicate lesson id: {lesson.id}')
            seen.add(lesson.id)
        return v

    @property
    def lesson_ids(self) -> list[str]:
        """Lesson IDs in catalog order."""
        return [lesson.id for lesson in self.lessons]


class Catalog(BaseModel):
    """
    Ordered course catalog.

    Immutable for the lifetime of the process; course IDs are unique.
    """
    model_config = ConfigDict(frozen=True)

    courses: tuple[Course, ...] = ()

    @field_validator('courses')
    @classmethod
    def course_ids_unique(cls, v):
        seen = set()
        for course in v:
            if course.id in seen:
                raise ValueError(f'Duplicate course id: {course.id}')
            seen.add(course.id)
        return v

    def get_course(self, course_id: str) -> Optional[Course]:
        """Get a course by ID, or None if the catalog has no such course."""
        for course in self.courses:
            if course.id == course_id:
                return course
        return None

    @property
    def course_ids(self) -> list[str]:
        return [course.id for course in self.courses]
