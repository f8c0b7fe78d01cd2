"""
Progress metrics - derive display numbers from a course and its progress.

Pure functions; nothing here touches storage.
"""

import math
from dataclasses import dataclass

from minielearn.schemas import Course, CourseProgress


@dataclass(frozen=True)
class CourseMetrics:
    """Display metrics for one course."""
    total: int
    done: int
    percent: int          # 0-100
    is_completed: bool


def clamp_percent(value: float) -> int:
    """Round half up to an int in [0, 100]; NaN and infinities become 0."""
    if not math.isfinite(value):
        return 0
    return max(0, min(100, math.floor(value + 0.5)))


def compute_metrics(course: Course, progress: CourseProgress) -> CourseMetrics:
    """
    Compute lesson counts and completion percentage for a course.

    Only lessons that exist in the catalog count towards done, so stale IDs
    left in storage never push the count past total. is_completed is taken
    from progress as-is: a course marked complete stays complete even if
    lessons are later unchecked.
    """
    total = len(course.lessons)
    done = len(progress.completed_lessons.intersection(course.lesson_ids))
    percent = clamp_percent(done / total * 100) if total > 0 else 0

    return CourseMetrics(
        total=total,
        done=done,
        percent=percent,
        is_completed=progress.is_completed,
    )


def is_lesson_done(progress: CourseProgress, lesson_id: str) -> bool:
    """Check if a lesson is in the completed set."""
    return lesson_id in progress.completed_lessons
