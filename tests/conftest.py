"""Shared fixtures for Mini eLearn tests."""

import pytest

from minielearn.classroom import (
    MemoryLocation,
    MemoryStorage,
    ProgressStore,
    Router,
    StorageReadError,
    StorageWriteError,
)
from minielearn.schemas import Catalog, Course, Lesson
from minielearn.viewer import ViewDispatcher


class FailingStorage:
    """Storage whose every operation fails."""

    def get(self, key):
        raise StorageReadError(key, "disk unavailable")

    def set(self, key, value):
        raise StorageWriteError(key, "disk full")

    def delete(self, key):
        raise StorageWriteError(key, "disk full")


class RecordingRenderer:
    """Renderer that records which views were shown."""

    def __init__(self):
        self.calls = []

    def show_home(self, cards):
        self.calls.append(("home", cards))

    def show_course_detail(self, view):
        self.calls.append(("course_detail", view))

    def show_not_found(self):
        self.calls.append(("not_found", None))

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def graphics():
    return Course(
        id="graphics",
        title="Graphics",
        description="Color, typography, and layout.",
        lessons=[
            Lesson(id="g-1", title="Color Theory Basics"),
            Lesson(id="g-2", title="Typography Principles"),
            Lesson(id="g-3", title="Layout and Composition"),
            Lesson(id="g-4", title="Practical Project: Poster"),
        ],
    )


@pytest.fixture
def data_analytics():
    return Course(
        id="data-analytics",
        title="Data Analytics",
        description="Descriptive statistics and visualization.",
        lessons=[
            Lesson(id="d-1", title="Intro to Analytics"),
            Lesson(id="d-2", title="Data Cleaning Essentials"),
        ],
    )


@pytest.fixture
def catalog(graphics, data_analytics):
    return Catalog(courses=[graphics, data_analytics])


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return ProgressStore(storage)


@pytest.fixture
def location():
    return MemoryLocation()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def dispatcher(catalog, store, location, renderer):
    return ViewDispatcher(catalog, store, Router(location), renderer)


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def writing_course():
    return Course(
        id="writing",
        title="Writing",
        lessons=[
            Lesson(id="w-1", title="Clarity and Concision"),
            Lesson(id="w-2", title="Structuring Arguments"),
        ],
    )
