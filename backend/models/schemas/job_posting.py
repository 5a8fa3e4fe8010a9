"""Catalog records: companies and job postings as the job board stores them."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Company(BaseModel):
    """An employer profile, embedded into ranked results."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    description: str | None = None
    industry: str | None = None
    website: str | None = None
    location: str | None = None
    logo: str | None = None
    employee_count: str | None = None
    rating: float | None = None
    review_count: int = 0
    company_type: str | None = None  # MNC, Startup, Product, ...


class JobPosting(BaseModel):
    """A job as read from the catalog. Treated as immutable by the scorer."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str = ""
    company_id: int
    location: str = ""
    experience: str | None = None  # entry, mid, senior, ... (free text)
    salary_min: float | None = None
    salary_max: float | None = None
    job_type: str | None = None  # Full-time, Part-time, Contract, ...
    skills: list[str] = []  # required skills, order irrelevant, duplicates kept
    requirements: list[str] = []
    benefits: list[str] = []
    is_active: bool = True
    posted_at: datetime | None = None
    application_count: int = 0

    @field_validator("skills", "requirements", "benefits", mode="before")
    @classmethod
    def _null_list_as_empty(cls, value):
        return [] if value is None else value


class JobWithCompany(JobPosting):
    """A job with its resolved company attached."""
    company: Company
