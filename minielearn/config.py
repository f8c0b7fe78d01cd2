"""
Runtime configuration for Mini eLearn.

Settings come from environment variables, optionally loaded from a .env
file in the working directory:

    MINIELEARN_PROGRESS_DB   Path to the SQLite progress database
    MINIELEARN_CATALOG       Path to the catalog YAML file
    MINIELEARN_STORAGE_KEY   Key under which the progress table is stored
    MINIELEARN_LOG_LEVEL     Logging level name (default: INFO)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from minielearn.classroom import DEFAULT_CATALOG_PATH, DEFAULT_PROGRESS_DB, DEFAULT_STORAGE_KEY


DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    progress_db: Path = DEFAULT_PROGRESS_DB
    catalog_path: Path = DEFAULT_CATALOG_PATH
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional .env file to load first (default: search from cwd)
    """
    load_dotenv(env_file)

    return Settings(
        progress_db=Path(os.environ.get("MINIELEARN_PROGRESS_DB") or DEFAULT_PROGRESS_DB).expanduser(),
        catalog_path=Path(os.environ.get("MINIELEARN_CATALOG") or DEFAULT_CATALOG_PATH).expanduser(),
        storage_key=os.environ.get("MINIELEARN_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
        log_level=(os.environ.get("MINIELEARN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL):
    """Set up root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
