"""
CatalogLoader - Load the read-only course catalog from a YAML file.

The catalog is read once and cached; it is never modified at runtime.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from minielearn.schemas import Catalog, Course

from .errors import CatalogError


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "catalog.yaml"


class CatalogLoader:
    """Load and cache a Catalog from YAML."""

    def __init__(self, catalog_path: Optional[str | Path] = None):
        """
        Initialize loader.

        Args:
            catalog_path: Path to catalog YAML (default: bundled data/catalog.yaml)
        """
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH
        self._catalog: Optional[Catalog] = None

    def load(self) -> Catalog:
        """
        Parse and validate the catalog file.

        Raises:
            CatalogError: If the file is missing, not YAML, or fails validation
        """
        if self._catalog is not None:
            return self._catalog

        if not self.catalog_path.exists():
            raise CatalogError(f"Catalog not found: {self.catalog_path}")

        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog is not valid YAML: {self.catalog_path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog must be a mapping with a 'courses' list: {self.catalog_path}")

        try:
            self._catalog = Catalog.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog {self.catalog_path}: {e}") from e

        logger.info(
            f"Loaded {len(self._catalog.courses)} courses "
            f"({sum(len(c.lessons) for c in self._catalog.courses)} lessons) from {self.catalog_path}"
        )
        return self._catalog

    def get_courses(self) -> list[Course]:
        """Get all courses in catalog order."""
        return list(self.load().courses)

    def get_course(self, course_id: str) -> Optional[Course]:
        """Get a single course by ID."""
        return self.load().get_course(course_id)
