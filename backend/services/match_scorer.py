"""Match Scorer: deterministic weighted-sum relevance of a job for a candidate.

Profile scoring:
    skills      0.40  share of the job's required skills the candidate has
    experience  0.25  distance between experience levels
    salary      0.20  expected salary against the job's band
    location    0.15  any preferred location matches the job's

A component whose inputs are missing (no required skills, no expected
salary or band, no preferred location) contributes nothing and the other
weights are not rescaled.
"""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult
from services.skill_matcher import locations_match, skills_match

W_SKILLS = 0.40
W_EXPERIENCE = 0.25
W_SALARY = 0.20
W_LOCATION = 0.15

# Job-to-job similarity weights
SIM_W_SKILLS = 0.5
SIM_W_EXPERIENCE = 0.25
SIM_JOB_TYPE_BONUS = 0.15
SIM_LOCATION_BONUS = 0.10

EXPERIENCE_LEVELS: dict[str, int] = {
    "entry": 1,
    "junior": 1,
    "mid": 2,
    "senior": 3,
    "lead": 4,
    "executive": 5,
    "director": 5,
}
_UNKNOWN_LEVEL = 1

# Level distance -> sub-score; anything further apart scores 0.1
_EXPERIENCE_BY_DISTANCE = {0: 1.0, 1: 0.7, 2: 0.4}
_EXPERIENCE_FLOOR = 0.1

SALARY_TOLERANCE_BELOW = 0.2
SALARY_TOLERANCE_ABOVE = 0.3

RELEVANCE_TITLE = 0.4
RELEVANCE_DESCRIPTION = 0.3
RELEVANCE_SKILLS = 0.3


def experience_level(level: str | None) -> int:
    return EXPERIENCE_LEVELS.get((level or "").strip().lower(), _UNKNOWN_LEVEL)


def experience_subscore(level_a: str | None, level_b: str | None) -> float:
    """Closeness of two experience levels, 0.1-1.0. Symmetric."""
    distance = abs(experience_level(level_a) - experience_level(level_b))
    return _EXPERIENCE_BY_DISTANCE.get(distance, _EXPERIENCE_FLOOR)


def salary_subscore(expected: float, salary_min: float, salary_max: float) -> float:
    """Fit of an expected salary against a band, 0.0-1.0.

    Inside the band (ends inclusive) scores 1.0. Below it the score falls
    to zero over 20% of the minimum; above it over 30% of the maximum.
    A band ending at 0 gives nothing above it.
    """
    if salary_min <= expected <= salary_max:
        return 1.0

    if expected < salary_min:
        gap = salary_min - expected
        return max(0.0, 1 - gap / (salary_min * SALARY_TOLERANCE_BELOW))

    if salary_max <= 0:
        return 0.0
    gap = expected - salary_max
    return max(0.0, 1 - gap / (salary_max * SALARY_TOLERANCE_ABOVE))


def classify_skills(candidate_skills: list[str], required: list[str]) -> tuple[list[str], list[str]]:
    """Split the job's required skills into (matched, missing)."""
    matched: list[str] = []
    missing: list[str] = []
    for skill in required:
        if any(skills_match(skill, have) for have in candidate_skills):
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing


def score_job(profile: CandidateProfile, job: JobPosting) -> MatchResult:
    """Score one job against a candidate profile."""
    score = 0.0
    reasons: list[str] = []

    # --- Skills ---
    required = job.skills
    matched, missing = classify_skills(profile.skills, required)
    if required:
        skills_score = len(matched) / len(required)
        score += skills_score * W_SKILLS
        if skills_score > 0.7:
            reasons.append(f"Strong skills match ({len(matched)}/{len(required)} skills)")
        elif skills_score > 0.4:
            reasons.append(f"Good skills match ({len(matched)}/{len(required)} skills)")

    # --- Experience ---
    exp_score = experience_subscore(profile.experience_bucket, job.experience)
    score += exp_score * W_EXPERIENCE
    if exp_score > 0.8:
        reasons.append("Perfect experience level match")
    elif exp_score > 0.5:
        reasons.append("Good experience level fit")

    # --- Salary ---
    # A band starting (or ending) at 0 is still a band
    if (
        profile.expected_salary is not None
        and job.salary_min is not None
        and job.salary_max is not None
    ):
        salary_score = salary_subscore(profile.expected_salary, job.salary_min, job.salary_max)
        score += salary_score * W_SALARY
        if salary_score > 0.8:
            reasons.append("Salary aligns with expectations")

    # --- Location ---
    if profile.preferred_locations:
        location_hit = any(
            locations_match(loc, job.location) for loc in profile.preferred_locations
        )
        if location_hit:
            score += W_LOCATION
            reasons.append("Location matches preference")

    return MatchResult(
        match_score=min(score, 1.0),
        match_reasons=reasons,
        skills_matched=matched,
        skills_missing=missing,
    )


def score_by_relevance(query: str, job: JobPosting) -> MatchResult:
    """Score a job against a free-text query, for callers without a profile."""
    query_lower = query.lower()
    score = 0.0
    reasons: list[str] = []

    if query_lower in job.title.lower():
        score += RELEVANCE_TITLE
        reasons.append("Title matches search")

    if query_lower in job.description.lower():
        score += RELEVANCE_DESCRIPTION
        reasons.append("Description matches search")

    skill_hits = [skill for skill in job.skills if query_lower in skill.lower()]
    if skill_hits:
        score += RELEVANCE_SKILLS
        reasons.append("Skills match search")

    return MatchResult(
        match_score=min(score, 1.0),
        match_reasons=reasons,
        skills_matched=skill_hits,
        skills_missing=[],
    )


def job_similarity(job_a: JobPosting, job_b: JobPosting) -> float:
    """How alike two postings are, 0.0-1.0, for "similar jobs"."""
    similarity = 0.0

    # Shared skills counted from job_a's list, over the distinct union
    common = [skill for skill in job_a.skills if skill in job_b.skills]
    union = set(job_a.skills) | set(job_b.skills)
    if union:
        similarity += len(common) / len(union) * SIM_W_SKILLS

    similarity += experience_subscore(job_a.experience, job_b.experience) * SIM_W_EXPERIENCE

    if job_a.job_type == job_b.job_type:
        similarity += SIM_JOB_TYPE_BONUS

    if locations_match(job_a.location, job_b.location):
        similarity += SIM_LOCATION_BONUS

    return similarity
