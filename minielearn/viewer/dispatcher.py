"""
ViewDispatcher - Turn the current location and stored progress into a view.

render() is the only way a view reaches the screen. Every action that
changes progress finishes by calling render(), so what is displayed is
always a function of the current location and the persisted progress.
Navigation actions only change the location and let its change
notification trigger the render.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from minielearn.classroom import (
    CourseMetrics,
    ProgressStore,
    Router,
    ViewKind,
    compute_metrics,
    is_lesson_done,
)
from minielearn.schemas import Catalog, Course, Lesson


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CourseCard:
    """Course summary for the home view."""
    course: Course
    metrics: CourseMetrics


@dataclass(frozen=True)
class LessonRow:
    lesson: Lesson
    is_done: bool


@dataclass(frozen=True)
class CourseView:
    """Everything the course detail view displays."""
    course: Course
    metrics: CourseMetrics
    lessons: list[LessonRow]


class ViewRenderer(Protocol):
    """Draws views. Implementations own all markup and widgets."""

    def show_home(self, cards: list[CourseCard]) -> None:
        ...

    def show_course_detail(self, view: CourseView) -> None:
        ...

    def show_not_found(self) -> None:
        ...


class ViewDispatcher:
    """
    Route the current location to a view and handle user actions.

    Combines Catalog (content), ProgressStore (user state) and Router
    (location) and hands view models to a ViewRenderer.
    """

    def __init__(self, catalog: Catalog, store: ProgressStore, router: Router, renderer: ViewRenderer):
        self.catalog = catalog
        self.store = store
        self.router = router
        self.renderer = renderer
        self._started = False

    def start(self):
        """
        Subscribe to location changes and draw the initial view.

        An empty location is redirected to "/"; the resulting change
        notification performs the first render.
        """
        if not self._started:
            self.router.location.subscribe(self.render)
            self._started = True

        if not self.router.location.get():
            self.router.navigate_to("/")
        else:
            self.render()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self):
        """Resolve the current location and show the matching view."""
        match = self.router.current_match()
        logger.debug(f"Rendering {match.view.value} {match.params}")

        if match.view == ViewKind.HOME:
            self.render_home()
        elif match.view == ViewKind.COURSE_DETAIL:
            self.render_course_detail(match.params.get("id", ""))
        else:
            self.render_not_found()

    def render_home(self):
        cards = [
            CourseCard(course=course, metrics=self.course_metrics(course))
            for course in self.catalog.courses
        ]
        self.renderer.show_home(cards)

    def render_course_detail(self, course_id: str):
        """Show a course, or the not-found view if the catalog lacks it."""
        course = self.catalog.get_course(course_id)
        if course is None:
            logger.info(f"Unknown course '{course_id}'")
            self.render_not_found()
            return

        _, progress = self.store.get_course_state(course.id)
        view = CourseView(
            course=course,
            metrics=compute_metrics(course, progress),
            lessons=[
                LessonRow(lesson=lesson, is_done=is_lesson_done(progress, lesson.id))
                for lesson in course.lessons
            ],
        )
        self.renderer.show_course_detail(view)

    def render_not_found(self):
        self.renderer.show_not_found()

    def course_metrics(self, course: Course) -> CourseMetrics:
        _, progress = self.store.get_course_state(course.id)
        return compute_metrics(course, progress)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def navigate(self, path: str):
        """Go to path; rendering happens through the location notification."""
        self.router.navigate_to(path)

    def toggle_lesson(self, course_id: str, lesson_id: str, checked: bool):
        course = self.catalog.get_course(course_id)
        if course is not None:
            self.store.toggle_lesson(course, lesson_id, checked)
        self.render()

    def mark_course_complete(self, course_id: str):
        course = self.catalog.get_course(course_id)
        if course is not None:
            self.store.mark_course_complete(course)
        self.render()

    def reset_progress(self):
        self.store.reset()
        self.render()
