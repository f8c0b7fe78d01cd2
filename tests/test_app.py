"""
Streamlit app tests: the real renderer and query-param location driven
through streamlit's AppTest harness.
"""

from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from minielearn.classroom import ProgressStore, SqliteStorage


APP_PATH = str(Path(__file__).parent.parent / "app.py")
TIMEOUT = 30


@pytest.fixture
def progress_db(monkeypatch, tmp_path):
    db_path = tmp_path / "progress.db"
    monkeypatch.setenv("MINIELEARN_PROGRESS_DB", str(db_path))
    # settings, catalog and store are cached per process
    st.cache_resource.clear()
    yield db_path
    st.cache_resource.clear()


def run_app(route=None) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
    if route is not None:
        at.query_params["route"] = route
    at.run()
    assert not at.exception
    return at


def button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


def checkbox_values(at: AppTest) -> dict[str, bool]:
    return {cb.label: cb.value for cb in at.checkbox}


class TestHomeView:

    def test_first_run_shows_courses(self, progress_db):
        at = run_app()
        assert at.title[0].value == "Courses"
        view_keys = [b.key for b in at.button if b.label == "View course"]
        assert view_keys == ["view_graphics", "view_data-analytics", "view_writing"]

    def test_view_course_navigates(self, progress_db):
        at = run_app()
        at.button(key="view_data-analytics").click().run()
        assert not at.exception
        assert len(at.checkbox) == 5
        assert len(at.title) == 0


class TestRoutes:

    def test_course_route(self, progress_db):
        at = run_app("#/course/graphics")
        assert list(checkbox_values(at)) == [
            "Color Theory Basics",
            "Typography Principles",
            "Layout and Composition",
            "Practical Project: Poster",
        ]

    def test_unknown_course_not_found(self, progress_db):
        at = run_app("#/course/nope")
        assert at.header[0].value == "Page not found"
        assert len(at.checkbox) == 0

    def test_not_found_go_home(self, progress_db):
        at = run_app("#/bogus/path")
        button(at, "Go home").click().run()
        assert not at.exception
        assert at.title[0].value == "Courses"


class TestProgressActions:

    def test_toggle_complete_and_reset(self, progress_db):
        at = run_app("#/course/graphics")

        at.checkbox[0].check().run()
        assert not at.exception
        assert checkbox_values(at)["Color Theory Basics"] is True
        assert sum(checkbox_values(at).values()) == 1

        button(at, "Mark course as completed").click().run()
        assert not at.exception
        assert all(checkbox_values(at).values())
        assert button(at, "Course completed").disabled

        # unchecking keeps the course completed
        next(cb for cb in at.checkbox if cb.label == "Color Theory Basics").uncheck().run()
        assert not at.exception
        assert checkbox_values(at)["Color Theory Basics"] is False
        assert button(at, "Course completed").disabled

        _, progress = ProgressStore(SqliteStorage(progress_db)).get_course_state("graphics")
        assert progress.completed_lessons == {"g-2", "g-3", "g-4"}
        assert progress.is_completed is True

        button(at, "← Back").click().run()
        assert not at.exception
        button(at, "Reset progress").click().run()
        assert not at.exception
        assert at.title[0].value == "Courses"
        assert ProgressStore(SqliteStorage(progress_db)).load() == {}
