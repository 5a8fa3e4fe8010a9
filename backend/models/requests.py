from pydantic import BaseModel, Field


class SearchFilters(BaseModel):
    """Optional narrowing applied by the catalog's text search."""
    location: str | None = Field(None, max_length=200, description="Substring of the job location")
    experience: str | None = Field(None, max_length=50, description="Experience level, e.g. mid")
    salary_min: float | None = Field(None, ge=0, description="Lowest acceptable band maximum")
    salary_max: float | None = Field(None, ge=0, description="Highest acceptable band minimum")
    company_type: str | None = Field(None, max_length=50, description="MNC, Startup, ...")
    skills: list[str] = Field(default_factory=list, description="Job must require at least one")
