"""
Streamlit host bindings - location and renderer for the dispatcher.

Streamlit reruns the whole script on every interaction, so one script run
is one event. The fragment route lives in the "route" query parameter.
When a second render is requested during the same run (after a click
changed progress or the location) the renderer asks Streamlit to rerun
instead of drawing below the first view.
"""

from typing import Callable, Optional

import streamlit as st

from minielearn.classroom import course_path

from .cards import (
    complete_button_label,
    get_course_css,
    render_course_card,
    render_course_header,
)
from .dispatcher import CourseCard, CourseView, ViewDispatcher


ROUTE_PARAM = "route"
HOME_COLUMNS = 3


class QueryParamLocation:
    """Location stored in the page's query string."""

    def __init__(self, param: str = ROUTE_PARAM):
        self.param = param
        self._subscribers: list[Callable[[], None]] = []

    def get(self) -> Optional[str]:
        return st.query_params.get(self.param)

    def set(self, value: str) -> None:
        if value == self.get():
            return
        st.query_params[self.param] = value
        for callback in list(self._subscribers):
            callback()

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)


class StreamlitRenderer:
    """Draw dispatcher views with Streamlit widgets."""

    def __init__(self):
        self.dispatcher: Optional[ViewDispatcher] = None
        self._drawn = False

    def bind(self, dispatcher: ViewDispatcher):
        self.dispatcher = dispatcher

    def _begin(self):
        # only one view per script run; later renders restart the run
        if self._drawn:
            st.rerun()
        self._drawn = True
        st.markdown(get_course_css(), unsafe_allow_html=True)

    def show_home(self, cards: list[CourseCard]) -> None:
        self._begin()

        col1, col2 = st.columns([4, 1])
        with col1:
            st.title("Courses")
            st.caption("Start learning: " + ", ".join(card.course.title for card in cards) + ".")
        with col2:
            if st.button("Reset progress", help="Reset all progress", use_container_width=True):
                self.dispatcher.reset_progress()

        columns = st.columns(HOME_COLUMNS)
        for idx, card in enumerate(cards):
            with columns[idx % HOME_COLUMNS]:
                st.markdown(render_course_card(card), unsafe_allow_html=True)
                if st.button("View course", key=f"view_{card.course.id}", type="primary"):
                    self.dispatcher.navigate(course_path(card.course.id))

    def show_course_detail(self, view: CourseView) -> None:
        self._begin()
        course = view.course

        if st.button("← Back"):
            self.dispatcher.navigate("/")

        st.markdown(render_course_header(view), unsafe_allow_html=True)

        if st.button(
            complete_button_label(view.metrics),
            type="primary",
            disabled=view.metrics.is_completed,
        ):
            self.dispatcher.mark_course_complete(course.id)

        st.divider()

        for row in view.lessons:
            # key includes the stored state so a re-render starts from storage
            checked = st.checkbox(
                row.lesson.title,
                value=row.is_done,
                key=f"lesson_{course.id}_{row.lesson.id}_{int(row.is_done)}",
            )
            if checked != row.is_done:
                self.dispatcher.toggle_lesson(course.id, row.lesson.id, checked)

    def show_not_found(self) -> None:
        self._begin()
        st.header("Page not found")
        st.write("The page you are looking for does not exist.")
        if st.button("Go home", type="primary"):
            self.dispatcher.navigate("/")
