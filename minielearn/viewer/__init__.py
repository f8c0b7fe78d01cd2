"""
Mini eLearn Viewer - View dispatch and rendering components.

This module provides:
- ViewDispatcher: location + progress -> view, user actions
- View models handed to renderers
- HTML fragments for course cards and progress bars

Streamlit bindings live in minielearn.viewer.streamlit_views.
"""

from .dispatcher import (
    CourseCard,
    CourseView,
    LessonRow,
    ViewDispatcher,
    ViewRenderer,
)

from .cards import (
    get_course_css,
    render_progress_bar,
    render_completed_badge,
    render_course_card,
    render_course_header,
    complete_button_label,
)

__all__ = [
    # Dispatcher
    "CourseCard",
    "CourseView",
    "LessonRow",
    "ViewDispatcher",
    "ViewRenderer",
    # Cards
    "get_course_css",
    "render_progress_bar",
    "render_completed_badge",
    "render_course_card",
    "render_course_header",
    "complete_button_label",
]
