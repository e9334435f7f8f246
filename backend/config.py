import os
from typing import Literal

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
        "http://localhost:8080",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Matching engine
    skill_match_mode: Literal["substring", "word_boundary"] = "substring"
    job_match_case_insensitive: bool = False  # exact skill names by default

    # Auth tokens
    jwt_secret: str = "change-me-in-production"
    jwt_ttl_minutes: int = 60 * 24 * 30

    # Catalog seeding and dashboard limits
    seed_file: str = ""  # YAML catalog loaded into the store at startup
    recommendation_limit: int = 5
    analyze_rate_limit: str = "10/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
