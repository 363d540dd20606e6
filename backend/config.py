import os
from pydantic_settings import BaseSettings


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

    # Career catalog and matching
    career_catalog_path: str = ""  # empty = built-in catalog
    max_recommendations: int = 5
    min_match_score: float = 0.3
    job_openings_seed: int | None = None  # None = unseeded placeholder counts

    # slowapi limit strings
    recommendations_rate_limit: str = "30/minute"
    lookup_rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
