"""Pydantic contracts shared by the catalog, the scorer and the API."""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import Company, JobPosting, JobWithCompany
from models.schemas.match_result import JobMatch, MatchResult
from models.schemas.user import User

__all__ = [
    "CandidateProfile",
    "Company",
    "JobPosting",
    "JobWithCompany",
    "JobMatch",
    "MatchResult",
    "User",
]
