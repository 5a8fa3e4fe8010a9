"""In-memory catalog, loadable from a JSON snapshot of the job board."""

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel

from models.requests import SearchFilters
from models.schemas.job_posting import Company, JobPosting
from models.schemas.user import User
from services.catalog.base import JobCatalog
from services.skill_matcher import skills_match

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class CatalogSnapshot(BaseModel):
    """On-disk layout of a catalog file."""
    users: list[User] = []
    companies: list[Company] = []
    jobs: list[JobPosting] = []


def _posted_key(job: JobPosting) -> tuple[datetime, int]:
    posted = job.posted_at or _EPOCH
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    return posted, job.id


class InMemoryCatalog(JobCatalog):
    """Catalog held in dictionaries. Jobs are listed newest first."""

    def __init__(
        self,
        users: list[User] | None = None,
        companies: list[Company] | None = None,
        jobs: list[JobPosting] | None = None,
    ) -> None:
        self._users = {u.id: u for u in users or []}
        self._companies = {c.id: c for c in companies or []}
        self._jobs = {j.id: j for j in jobs or []}
        # Undated jobs sort last; ties fall back to the higher id first
        self._ordered_jobs = sorted(self._jobs.values(), key=_posted_key, reverse=True)

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryCatalog":
        """Load a catalog from a JSON file with users, companies and jobs."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        snapshot = CatalogSnapshot.model_validate(raw)
        logger.info(
            "Loaded catalog from %s: %d users, %d companies, %d jobs",
            path, len(snapshot.users), len(snapshot.companies), len(snapshot.jobs),
        )
        return cls(snapshot.users, snapshot.companies, snapshot.jobs)

    @property
    def is_empty(self) -> bool:
        return not self._jobs

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_job(self, job_id: int) -> JobPosting | None:
        return self._jobs.get(job_id)

    async def get_company(self, company_id: int) -> Company | None:
        return self._companies.get(company_id)

    async def get_companies(self, company_ids: Iterable[int]) -> dict[int, Company]:
        return {
            cid: self._companies[cid]
            for cid in set(company_ids)
            if cid in self._companies
        }

    async def get_jobs(self) -> list[JobPosting]:
        return list(self._ordered_jobs)

    async def search_jobs(self, query: str, filters: SearchFilters | None = None) -> list[JobPosting]:
        needle = (query or "").strip().lower()
        results = []
        for job in self._ordered_jobs:
            if not job.is_active:
                continue
            if needle and not self._matches_query(job, needle):
                continue
            if filters is not None and not self._passes_filters(job, filters):
                continue
            results.append(job)
        return results

    @staticmethod
    def _matches_query(job: JobPosting, needle: str) -> bool:
        return (
            needle in job.title.lower()
            or needle in job.description.lower()
            or any(needle in skill.lower() for skill in job.skills)
        )

    def _passes_filters(self, job: JobPosting, filters: SearchFilters) -> bool:
        if filters.location and filters.location.strip().lower() not in job.location.lower():
            return False

        if filters.experience and (job.experience or "").strip().lower() != filters.experience.strip().lower():
            return False

        # Band overlap; a job missing the relevant end of its band is kept
        if filters.salary_min is not None and job.salary_max is not None:
            if job.salary_max < filters.salary_min:
                return False
        if filters.salary_max is not None and job.salary_min is not None:
            if job.salary_min > filters.salary_max:
                return False

        if filters.company_type:
            company = self._companies.get(job.company_id)
            company_type = (company.company_type or "") if company else ""
            if company_type.strip().lower() != filters.company_type.strip().lower():
                return False

        if filters.skills and not any(
            skills_match(wanted, skill) for wanted in filters.skills for skill in job.skills
        ):
            return False

        return True
