import os
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).parent


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:5000",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Catalog snapshot served by the in-memory job catalog
    catalog_path: str = str(_BACKEND_DIR / "data" / "catalog.json")

    rate_limit: str = "60/minute"
    recommendations_limit: int = 10  # default page size for /recommendations
    similar_jobs_limit: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
