"""Profile Extractor: user record -> CandidateProfile."""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.user import User

DEFAULT_EXPERIENCE = "entry"
DEFAULT_JOB_TYPES = frozenset({"full-time"})


def extract_profile(user: User) -> CandidateProfile:
    """Build the matching profile for a user.

    Absent fields fall back to defaults instead of failing: no skills,
    entry level, no salary expectation, no preferred location. Job types
    are always full-time for now.
    """
    return CandidateProfile(
        skills=list(user.skills or []),
        experience_bucket=user.experience or DEFAULT_EXPERIENCE,
        expected_salary=user.expected_salary,
        preferred_locations=[user.location] if user.location else [],
        accepted_job_types=DEFAULT_JOB_TYPES,
    )
