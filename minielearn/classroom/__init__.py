"""
Mini eLearn Classroom - Runtime components for the catalog and progress.

This module provides:
- CatalogLoader: Load the course catalog from YAML
- ProgressStore: Persist per-course completion state
- compute_metrics: Derive done/total/percent for display
- Router: Map fragment locations to views
"""

from .errors import (
    ProgressError,
    StorageReadError,
    StorageWriteError,
    CatalogError,
)

from .storage import (
    KeyValueStorage,
    MemoryStorage,
    SqliteStorage,
    DEFAULT_PROGRESS_DIR,
    DEFAULT_PROGRESS_DB,
)

from .loader import (
    CatalogLoader,
    DEFAULT_CATALOG_PATH,
)

from .progress import (
    ProgressStore,
    DEFAULT_STORAGE_KEY,
)

from .metrics import (
    CourseMetrics,
    clamp_percent,
    compute_metrics,
    is_lesson_done,
)

from .navigator import (
    Location,
    MemoryLocation,
    RouteMatch,
    Router,
    ViewKind,
    course_path,
    match_route,
    parse_location,
)

__all__ = [
    # Errors
    "ProgressError",
    "StorageReadError",
    "StorageWriteError",
    "CatalogError",
    # Storage
    "KeyValueStorage",
    "MemoryStorage",
    "SqliteStorage",
    "DEFAULT_PROGRESS_DIR",
    "DEFAULT_PROGRESS_DB",
    # Loader
    "CatalogLoader",
    "DEFAULT_CATALOG_PATH",
    # Progress
    "ProgressStore",
    "DEFAULT_STORAGE_KEY",
    # Metrics
    "CourseMetrics",
    "clamp_percent",
    "compute_metrics",
    "is_lesson_done",
    # Navigator
    "Location",
    "MemoryLocation",
    "RouteMatch",
    "Router",
    "ViewKind",
    "course_path",
    "match_route",
    "parse_location",
]
