"""Ranking orchestrator: recommendations, similar jobs, ranked search.

Flow:
    catalog.get_user / get_job / get_jobs / search_jobs
      ├─ extract_profile(user)                      → CandidateProfile
      ├─ catalog.get_companies(distinct company ids) → one batched lookup
      ├─ score_job / score_by_relevance per job     → MatchResult
      └─ filter → stable sort by score desc → truncate

Missing users or jobs yield an empty list instead of an error. Jobs whose
company cannot be resolved are left out. Equal scores keep the order the
catalog returned the jobs in.
"""

import logging

from models.requests import SearchFilters
from models.schemas.job_posting import Company, JobPosting, JobWithCompany
from models.schemas.match_result import JobMatch, MatchResult
from services.catalog.base import JobCatalog
from services.match_scorer import job_similarity, score_by_relevance, score_job
from services.profile_extractor import extract_profile

logger = logging.getLogger(__name__)

MIN_RECOMMENDATION_SCORE = 0.3
MIN_SIMILARITY = 0.4
DEFAULT_RECOMMENDATIONS = 10
DEFAULT_SIMILAR_JOBS = 5


def _with_company(job: JobPosting, company: Company) -> JobWithCompany:
    return JobWithCompany(**job.model_dump(), company=company)


def _to_job_match(job: JobPosting, company: Company, result: MatchResult) -> JobMatch:
    return JobMatch(job=_with_company(job, company), **result.model_dump())


def _rank(matches: list[JobMatch]) -> list[JobMatch]:
    return sorted(matches, key=lambda m: m.match_score, reverse=True)


async def get_recommendations(
    catalog: JobCatalog,
    user_id: int,
    limit: int = DEFAULT_RECOMMENDATIONS,
) -> list[JobMatch]:
    """Best-matching active jobs for a user, scoring above 0.3."""
    user = await catalog.get_user(user_id)
    if user is None:
        logger.info("Recommendations requested for unknown user %s", user_id)
        return []

    profile = extract_profile(user)
    active_jobs = [job for job in await catalog.get_jobs() if job.is_active]
    companies = await catalog.get_companies({job.company_id for job in active_jobs})

    matches: list[JobMatch] = []
    for job in active_jobs:
        company = companies.get(job.company_id)
        if company is None:
            logger.debug("Skipping job %s: company %s not found", job.id, job.company_id)
            continue

        result = score_job(profile, job)
        if result.match_score > MIN_RECOMMENDATION_SCORE:
            matches.append(_to_job_match(job, company, result))

    logger.debug(
        "User %s: %d of %d active jobs above threshold",
        user_id, len(matches), len(active_jobs),
    )
    return _rank(matches)[:limit]


async def get_similar_jobs(
    catalog: JobCatalog,
    job_id: int,
    limit: int = DEFAULT_SIMILAR_JOBS,
) -> list[JobPosting]:
    """Other active jobs resembling the given one (similarity above 0.4)."""
    target = await catalog.get_job(job_id)
    if target is None:
        logger.info("Similar jobs requested for unknown job %s", job_id)
        return []

    scored: list[tuple[float, JobPosting]] = []
    for job in await catalog.get_jobs():
        if job.id == job_id or not job.is_active:
            continue
        similarity = job_similarity(target, job)
        if similarity > MIN_SIMILARITY:
            scored.append((similarity, job))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [job for _, job in scored[:limit]]


async def search_jobs_with_ranking(
    catalog: JobCatalog,
    query: str,
    user_id: int | None = None,
    filters: SearchFilters | None = None,
) -> list[JobMatch]:
    """Catalog search results ordered by relevance.

    Known users get profile-based scores; anyone else gets query relevance.
    Every result is returned, however low it scores.
    """
    profile = None
    if user_id is not None:
        user = await catalog.get_user(user_id)
        if user is not None:
            profile = extract_profile(user)
        else:
            logger.info("Search by unknown user %s, ranking by query relevance", user_id)

    jobs = await catalog.search_jobs(query, filters)
    companies = await catalog.get_companies({job.company_id for job in jobs})

    matches: list[JobMatch] = []
    for job in jobs:
        company = companies.get(job.company_id)
        if company is None:
            continue

        if profile is not None:
            result = score_job(profile, job)
        else:
            result = score_by_relevance(query, job)
        matches.append(_to_job_match(job, company, result))

    return _rank(matches)
