"""Admin dashboard operations: counts, user removal, catalog upkeep."""

import logging
from collections import Counter

from models.responses import AdminStats
from models.schemas import Identity, Job, Skill
from services.errors import RecordNotFound, ValidationError
from services.identity import IdentityProvider
from services.record_store import RecordStore
from services.validation import require_text

logger = logging.getLogger(__name__)


def stats(store: RecordStore) -> AdminStats:
    users = store.read("users")
    roles = Counter(u.get("role") for u in users)
    return AdminStats(
        total_users=len(users),
        students=roles["student"],
        graduates=roles["graduate"],
        mentors=roles["mentor"],
        admins=roles["admin"],
        skills=len(store.read("skills")),
        jobs=len(store.read("jobs")),
        certifications=len(store.read("certifications")),
        internships=len(store.read("internships")),
    )


def list_users(store: RecordStore) -> list[Identity]:
    return [Identity(**u) for u in store.read("users")]


def delete_user(store: RecordStore, identity_provider: IdentityProvider, user_id: str) -> None:
    """Remove a user, their credentials and every record they own."""
    store.delete("users", user_id)
    identity_provider.forget(user_id)
    owned = [
        ("graduate_profiles", {"user_id": user_id}),
        ("quiz_results", {"user_id": user_id}),
        ("mentor_feedback", {"graduate_id": user_id}),
        ("mentor_feedback", {"mentor_id": user_id}),
    ]
    for table, filter in owned:
        for record in store.read(table, filter):
            store.delete(table, record["id"])
    logger.info("Deleted user %s", user_id)


def create_skill(store: RecordStore, name: str, domain: str = "") -> Skill:
    name = require_text("name", name, "skill name").strip()
    existing = {s["name"].casefold() for s in store.read("skills")}
    if name.casefold() in existing:
        raise ValidationError("name", f"Skill '{name}' already exists")
    return Skill(**store.insert("skills", {"name": name, "domain": domain.strip()}))


def create_job(
    store: RecordStore, title: str, description: str, required_skills: list[str]
) -> Job:
    title = require_text("title", title, "job title").strip()
    skills = [s.strip() for s in required_skills if s.strip()]
    if not skills:
        raise ValidationError("required_skills", "A job needs at least one required skill")
    record = store.insert(
        "jobs",
        {"title": title, "description": description, "required_skills": skills},
    )
    return Job(**record)


def delete_record(store: RecordStore, table: str, record_id: str) -> None:
    if store.get(table, record_id) is None:
        raise RecordNotFound(f"No record {record_id} in {table}")
    store.delete(table, record_id)
    logger.info("Deleted %s record %s", table, record_id)
