"""
ProgressStore - Persist per-course completion state under a single storage key.

The whole ProgressTable is one JSON object:

    {"<course_id>": {"completedLessons": ["<lesson_id>", ...], "isCompleted": bool}}

Reads and writes fail open: unreadable data loads as an empty table and a
failed write is dropped, so the UI never sees a storage error.
"""

import json
import logging
from typing import Callable

from minielearn.schemas import Course, CourseProgress, ProgressTable

from .errors import ProgressError, StorageReadError
from .storage import KeyValueStorage


logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "mini-elearn-progress-v1"


class ProgressStore:
    """
    Read and update course progress through a key-value storage backend.

    set_course_state is the only mutation path for a single course: it loads,
    applies an updater and saves within one call, so a caller never holds a
    stale table between a read and a write.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize progress store.

        Args:
            storage: Backend implementing get/set/delete of string values
            key: Storage key holding the serialized ProgressTable
        """
        self.storage = storage
        self.key = key

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    @staticmethod
    def serialize(table: ProgressTable) -> str:
        """Serialize a table deterministically (sorted course and lesson IDs)."""
        data = {
            course_id: progress.model_dump(mode="json", by_alias=True)
            for course_id, progress in table.items()
        }
        return json.dumps(data, sort_keys=True, ensure_ascii=False)

    def _read(self) -> ProgressTable:
        raw = self.storage.get(self.key)
        if not raw:
            return {}

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise StorageReadError(self.key, f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(self.key, f"expected object, got {type(data).__name__}")

        # entries are validated leniently so no course is ever dropped on resave
        return {course_id: CourseProgress.model_validate(entry) for course_id, entry in data.items()}

    # -------------------------------------------------------------------------
    # Table operations
    # -------------------------------------------------------------------------

    def load(self) -> ProgressTable:
        """Load the full table; returns an empty table if storage is unreadable."""
        try:
            return self._read()
        except ProgressError as e:
            logger.warning(f"Progress unreadable, starting empty: {e}")
            return {}

    def save(self, table: ProgressTable):
        """Persist the full table, replacing whatever was stored before."""
        try:
            self.storage.set(self.key, self.serialize(table))
        except ProgressError as e:
            logger.warning(f"Progress not saved: {e}")

    def reset(self):
        """Delete all progress for every course in one operation."""
        try:
            self.storage.delete(self.key)
        except ProgressError as e:
            logger.warning(f"Progress not reset: {e}")
        else:
            logger.info("All progress reset")

    # -------------------------------------------------------------------------
    # Course state
    # -------------------------------------------------------------------------

    def get_course_state(self, course_id: str) -> tuple[ProgressTable, CourseProgress]:
        """
        Get progress for a course along with the table it was read from.

        Returns the default CourseProgress if the course has no entry yet.
        """
        table = self.load()
        return table, table.get(course_id, CourseProgress())

    def set_course_state(
        self,
        course_id: str,
        updater: Callable[[CourseProgress], CourseProgress],
    ) -> CourseProgress:
        """
        Apply updater to a course's progress and persist the whole table.

        Args:
            course_id: Course to update
            updater: Function from current (or default) progress to new progress

        Returns:
            The new CourseProgress
        """
        table, current = self.get_course_state(course_id)
        updated = updater(current)
        table[course_id] = updated
        self.save(table)
        return updated

    # -------------------------------------------------------------------------
    # Lesson actions
    # -------------------------------------------------------------------------

    def toggle_lesson(self, course: Course, lesson_id: str, checked: bool) -> CourseProgress:
        """
        Mark a lesson done or not done.

        Finishing the last lesson completes the course. Unchecking a lesson
        never clears an existing completion. Lesson IDs that are not part of
        the course are ignored.
        """
        if lesson_id not in course.lesson_ids:
            logger.warning(f"Ignoring unknown lesson '{lesson_id}' for course '{course.id}'")
            _, current = self.get_course_state(course.id)
            return current

        def update(prev: CourseProgress) -> CourseProgress:
            completed = set(prev.completed_lessons)
            if checked:
                completed.add(lesson_id)
            else:
                completed.discard(lesson_id)
            all_done = bool(course.lessons) and completed.issuperset(course.lesson_ids)
            return CourseProgress(
                completed_lessons=frozenset(completed),
                is_completed=True if all_done else prev.is_completed,
            )

        return self.set_course_state(course.id, update)

    def mark_course_complete(self, course: Course) -> CourseProgress:
        """Mark every lesson of a course done and flag the course completed."""
        logger.info(f"Course '{course.id}' marked complete")
        return self.set_course_state(
            course.id,
            lambda _prev: CourseProgress(
                completed_lessons=frozenset(course.lesson_ids),
                is_completed=True,
            ),
        )
