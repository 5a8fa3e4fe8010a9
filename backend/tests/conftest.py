"""Shared fixtures: a small catalog whose scores are easy to work out by hand."""

from datetime import datetime, timezone

import pytest

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import Company, JobPosting
from models.schemas.user import User
from services.catalog import provider
from services.catalog.memory import InMemoryCatalog


def _posted(day: int) -> datetime:
    return datetime(2024, 1, day, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def companies() -> list[Company]:
    return [
        Company(id=1, name="Acme Labs", location="Bangalore", company_type="Startup"),
        Company(id=2, name="Globex", location="Hyderabad", company_type="MNC"),
    ]


@pytest.fixture
def jobs() -> list[JobPosting]:
    return [
        JobPosting(
            id=1, title="Frontend Developer", description="Build React apps",
            company_id=1, location="Bangalore, India", experience="mid",
            salary_min=900000, salary_max=1300000, job_type="Full-time",
            skills=["React", "TypeScript"], posted_at=_posted(5),
        ),
        JobPosting(
            id=2, title="Backend Engineer", description="Python APIs with FastAPI",
            company_id=2, location="Hyderabad", experience="senior",
            salary_min=1200000, salary_max=1800000, job_type="Full-time",
            skills=["Python", "Django", "PostgreSQL"], posted_at=_posted(4),
        ),
        JobPosting(
            id=3, title="React Native Developer", description="Mobile apps",
            company_id=1, location="Bangalore", experience="mid",
            salary_min=800000, salary_max=1200000, job_type="Full-time",
            skills=["React", "JavaScript", "Redux"], posted_at=_posted(3),
        ),
        JobPosting(
            id=4, title="Frontend Lead", description="Lead the React team",
            company_id=1, location="Bangalore", experience="mid",
            salary_min=900000, salary_max=1300000, job_type="Full-time",
            skills=["React", "TypeScript"], is_active=False, posted_at=_posted(6),
        ),
        # Company 99 does not exist
        JobPosting(
            id=5, title="Data Analyst", description="Dashboards and reporting",
            company_id=99, location="Bangalore", experience="mid",
            job_type="Full-time", skills=["SQL", "Excel"], posted_at=_posted(2),
        ),
    ]


@pytest.fixture
def users() -> list[User]:
    return [
        User(
            id=1, email="dev@example.com", first_name="Asha", last_name="K",
            skills=["React", "Node.js"], experience="mid",
            expected_salary=1000000, location="Bangalore",
        ),
        User(id=2, email="blank@example.com"),
    ]


@pytest.fixture
def catalog(users, companies, jobs) -> InMemoryCatalog:
    return InMemoryCatalog(users=users, companies=companies, jobs=jobs)


@pytest.fixture
def react_profile() -> CandidateProfile:
    return CandidateProfile(
        skills=["React", "Node.js"],
        experience_bucket="mid",
        expected_salary=1000000,
        preferred_locations=["Bangalore"],
    )


@pytest.fixture(autouse=True)
def _reset_catalog_provider():
    """Clear the shared catalog before and after each test."""
    provider.clear()
    yield
    provider.clear()
