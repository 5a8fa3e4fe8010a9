"""Canonical matching profile derived from a user record."""

from pydantic import BaseModel, ConfigDict


class CandidateProfile(BaseModel):
    """What the scorer knows about a candidate.

    Built fresh for every ranking request and discarded afterwards.
    ``experience_bucket`` keeps the user's original casing; it is
    lower-cased only when compared against a job's level.
    """
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    experience_bucket: str = "entry"
    expected_salary: float | None = None
    preferred_locations: list[str] = []
    accepted_job_types: frozenset[str] = frozenset({"full-time"})
