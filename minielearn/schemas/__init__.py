"""
Mini eLearn Schemas - Pydantic models for the course tracker.

This module exports all schema classes for:
- Catalog: courses and lessons
- Progress: per-course completion state
"""

# Catalog schemas
from .catalog import (
    Lesson,
    Course,
    Catalog,
)

# Progress schemas
from .progress import (
    CourseProgress,
    ProgressTable,
)

__all__ = [
    # Catalog
    'Lesson',
    'Course',
    'Catalog',
    # Progress
    'CourseProgress',
    'ProgressTable',
]
