"""Abstract boundary to the job board's data store."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from models.requests import SearchFilters
from models.schemas.job_posting import Company, JobPosting
from models.schemas.user import User


class JobCatalog(ABC):
    """Read-only lookups the ranking core needs.

    Subclasses must implement the single-record lookups, ``get_jobs`` and
    ``search_jobs``. Lookups for records that do not exist return ``None``
    rather than raising.
    """

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        """Fetch a user by id."""

    @abstractmethod
    async def get_job(self, job_id: int) -> JobPosting | None:
        """Fetch a job by id, active or not."""

    @abstractmethod
    async def get_company(self, company_id: int) -> Company | None:
        """Fetch a company by id."""

    @abstractmethod
    async def get_jobs(self) -> list[JobPosting]:
        """All jobs, including inactive ones."""

    @abstractmethod
    async def search_jobs(self, query: str, filters: SearchFilters | None = None) -> list[JobPosting]:
        """Active jobs matching a text query and optional filters."""

    async def get_companies(self, company_ids: Iterable[int]) -> dict[int, Company]:
        """Resolve several companies at once. Unknown ids are left out.

        Backends that can fetch in one round trip should override this.
        """
        found: dict[int, Company] = {}
        for company_id in set(company_ids):
            company = await self.get_company(company_id)
            if company is not None:
                found[company_id] = company
        return found
