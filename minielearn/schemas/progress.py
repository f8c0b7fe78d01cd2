"""
Progress tracking schemas for Mini eLearn.

Defines Pydantic models for per-course completion state. The persisted
form uses the camelCase keys of the stored JSON object:

    {"<course_id>": {"completedLessons": [...], "isCompleted": false}}
"""

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class CourseProgress(BaseModel):
    """
    Completion state for one course.

    completed_lessons is a set from construction through persistence, so
    duplicate IDs in stored data collapse on load.

    Validation never fails on stored data: an entry that is not an object
    loads as the default, non-string lesson IDs are dropped and isCompleted
    is read by truthiness.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    completed_lessons: frozenset[str] = Field(default_factory=frozenset, alias="completedLessons")
    is_completed: bool = Field(default=False, alias="isCompleted")

    @model_validator(mode='before')
    @classmethod
    def non_object_as_default(cls, data):
        if isinstance(data, (dict, BaseModel)):
            return data
        return {}

    @field_validator('completed_lessons', mode='before')
    @classmethod
    def string_ids_only(cls, v):
        if isinstance(v, (list, tuple, set, frozenset)):
            return [item for item in v if isinstance(item, str)]
        return ()

    @field_validator('is_completed', mode='before')
    @classmethod
    def truthy(cls, v):
        return bool(v)

    @field_serializer('completed_lessons')
    def serialize_completed(self, v: frozenset[str]) -> list[str]:
        # sorted so identical tables serialize identically
        return sorted(v)


# course_id -> CourseProgress; absent course means default CourseProgress()
ProgressTable = dict[str, CourseProgress]
