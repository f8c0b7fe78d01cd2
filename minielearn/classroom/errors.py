"""Exceptions raised inside the classroom layer."""


class ProgressError(Exception):
    """Base class for progress persistence failures."""


class StorageReadError(ProgressError):
    """Persisted progress could not be read or is malformed."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Could not read progress from '{key}': {reason}")


class StorageWriteError(ProgressError):
    """Persisted progress could not be written or deleted."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Could not write progress to '{key}': {reason}")


class CatalogError(Exception):
    """Catalog file is missing or does not describe a valid catalog."""
