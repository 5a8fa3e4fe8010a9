from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_job_catalog
from config import settings
from models.requests import SearchFilters
from models.responses import HealthResponse
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import JobMatch
from services import ranking
from services.catalog.base import JobCatalog

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(catalog: JobCatalog = Depends(get_job_catalog)):
    jobs = await catalog.get_jobs()
    return HealthResponse(status="ok", catalog_loaded=bool(jobs))


@router.get("/recommendations", response_model=list[JobMatch])
@limiter.limit(settings.rate_limit)
async def recommendations(
    request: Request,
    user_id: int = Query(..., alias="userId"),
    limit: int = Query(settings.recommendations_limit, ge=1, le=100),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    return await ranking.get_recommendations(catalog, user_id, limit=limit)


@router.get("/jobs/{job_id}/similar", response_model=list[JobPosting])
@limiter.limit(settings.rate_limit)
async def similar_jobs(
    request: Request,
    job_id: int,
    limit: int = Query(settings.similar_jobs_limit, ge=1, le=100),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    return await ranking.get_similar_jobs(catalog, job_id, limit=limit)


@router.get("/search", response_model=list[JobMatch])
@limiter.limit(settings.rate_limit)
async def search(
    request: Request,
    query: str = Query("", max_length=200),
    user_id: int | None = Query(None, alias="userId"),
    location: str | None = Query(None, max_length=200),
    experience: str | None = Query(None, max_length=50),
    salary_min: float | None = Query(None, alias="salaryMin", ge=0),
    salary_max: float | None = Query(None, alias="salaryMax", ge=0),
    company_type: str | None = Query(None, alias="companyType", max_length=50),
    skills: list[str] | None = Query(None),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    filters = SearchFilters(
        location=location,
        experience=experience,
        salary_min=salary_min,
        salary_max=salary_max,
        company_type=company_type,
        skills=skills or [],
    )
    return await ranking.search_jobs_with_ranking(catalog, query, user_id=user_id, filters=filters)
