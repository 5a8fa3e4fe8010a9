"""Process-wide catalog, loaded on first use.

Follows the same lazy singleton pattern as the other shared services.
"""

import logging
from pathlib import Path

from config import settings
from services.catalog.base import JobCatalog
from services.catalog.memory import InMemoryCatalog

logger = logging.getLogger(__name__)

_catalog: JobCatalog | None = None


def get_catalog() -> JobCatalog:
    """Return the shared catalog, loading it from settings.catalog_path if needed."""
    global _catalog
    if _catalog is None:
        path = Path(settings.catalog_path)
        if path.exists():
            _catalog = InMemoryCatalog.from_file(path)
            if _catalog.is_empty:
                logger.warning("Catalog file %s holds no jobs", path)
        else:
            logger.warning("Catalog file %s not found - serving an empty catalog", path)
            _catalog = InMemoryCatalog()
    return _catalog


def set_catalog(catalog: JobCatalog) -> None:
    """Install a catalog explicitly (e.g. a database-backed one)."""
    global _catalog
    _catalog = catalog


def clear() -> None:
    """Forget the shared catalog. Useful for testing."""
    global _catalog
    _catalog = None
