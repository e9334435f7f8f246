"""Certification and internship suggestions for a graduate's skill set."""

from collections.abc import Iterable

from models.schemas import Certification, Internship
from services.record_store import RecordStore
from services.skill_extractor import normalize_skill


def _overlap(tags: Iterable[str], have: set[str]) -> int:
    return len({normalize_skill(t) for t in tags} & have)


def _top(records: list[dict], tag_field: str, skills: Iterable[str], limit: int) -> list[dict]:
    """Order by skill overlap, best first; store order breaks ties."""
    have = {normalize_skill(s) for s in skills}
    if have:
        records = sorted(records, key=lambda r: _overlap(r.get(tag_field) or [], have), reverse=True)
    return records[:limit]


def recommend_certifications(
    store: RecordStore, skills: Iterable[str], limit: int = 5
) -> list[Certification]:
    rows = _top(store.read("certifications"), "skill_tags", skills, limit)
    return [Certification(**r) for r in rows]


def recommend_internships(
    store: RecordStore, skills: Iterable[str], limit: int = 5
) -> list[Internship]:
    rows = _top(store.read("internships"), "required_skills", skills, limit)
    return [Internship(**r) for r in rows]
