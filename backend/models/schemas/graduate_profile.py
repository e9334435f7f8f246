"""Matching engine output and the per-graduate profile snapshot that stores it."""

from pydantic import BaseModel

from models.schemas.catalog import Job


class MatchResult(BaseModel):
    """One job scored against an extracted skill set.

    ``matched_skills`` and ``missing_skills`` partition the job's required
    skills and follow the job's declared order.
    """
    job: Job
    match_percentage: float = 0.0  # 0-100, unrounded
    matched_skills: list[str] = []
    missing_skills: list[str] = []


class GraduateProfile(BaseModel):
    id: str = ""
    user_id: str
    resume_text: str = ""
    extracted_skills: list[str] = []
    job_matches: list[MatchResult] = []
    created_at: str = ""
    updated_at: str = ""
