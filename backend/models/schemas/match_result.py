"""Scorer output: a bounded score with explanations."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.schemas.job_posting import JobWithCompany


class MatchResult(BaseModel):
    """Structured output of the Match Scorer.

    ``match_reasons`` is in evaluation order: skills, experience, salary,
    location. ``skills_matched`` and ``skills_missing`` partition the job's
    required skills.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    match_score: float = Field(0.0, ge=0.0, le=1.0)
    match_reasons: list[str] = []
    skills_matched: list[str] = []
    skills_missing: list[str] = []


class JobMatch(MatchResult):
    """A scored job as returned by recommendations and search."""
    job: JobWithCompany
