"""Mini eLearn - course catalog with locally persisted lesson progress."""

__version__ = "0.1.0"
