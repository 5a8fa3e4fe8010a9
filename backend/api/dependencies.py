"""Shared dependencies for API routes."""

from services.catalog.base import JobCatalog
from services.catalog.provider import get_catalog


def get_job_catalog() -> JobCatalog:
    return get_catalog()
