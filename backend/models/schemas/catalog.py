"""Catalog records managed by admins and read by the matching engine."""

from pydantic import BaseModel


class Skill(BaseModel):
    """Canonical skill; ``name`` is the matching key."""
    id: str = ""
    name: str
    domain: str = ""


class Job(BaseModel):
    id: str = ""
    title: str = ""
    description: str = ""
    required_skills: list[str] = []  # declared order is preserved in match output


class Certification(BaseModel):
    id: str = ""
    title: str
    platform: str = ""
    url: str = ""
    skill_tags: list[str] = []


class Internship(BaseModel):
    id: str = ""
    title: str
    platform: str = ""
    url: str = ""
    job_role: str = ""
    required_skills: list[str] = []
