"""Mentor review of graduates and their feedback records."""

import logging

from models.responses import GraduateSummary
from models.schemas import GraduateProfile, Identity, MentorFeedback
from services.errors import RecordNotFound, ValidationError
from services.record_store import RecordStore
from services.validation import require_text

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def list_graduates(store: RecordStore) -> list[GraduateSummary]:
    """Every graduate joined with their profile, if they have one."""
    profiles = {p["user_id"]: p for p in store.read("graduate_profiles")}
    summaries = []
    for user in store.read("users", {"role": "graduate"}):
        profile = profiles.get(user["id"])
        summaries.append(
            GraduateSummary(
                user=Identity(**user),
                profile=GraduateProfile(**profile) if profile else None,
            )
        )
    return summaries


def submit_feedback(
    store: RecordStore,
    mentor: Identity,
    graduate_id: str,
    feedback: str,
    score: int,
) -> MentorFeedback:
    require_text("feedback", feedback)
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValidationError("score", f"Score must be between {MIN_SCORE} and {MAX_SCORE}")

    graduate = store.get("users", graduate_id)
    if graduate is None or graduate.get("role") != "graduate":
        raise RecordNotFound(f"No graduate with id {graduate_id}")

    record = store.insert(
        "mentor_feedback",
        {
            "graduate_id": graduate_id,
            "mentor_id": mentor.id,
            "feedback": feedback.strip(),
            "score": score,
        },
    )
    logger.info("Mentor %s left feedback for %s", mentor.id, graduate_id)
    return MentorFeedback(**record)


def feedback_for(store: RecordStore, graduate_id: str) -> list[MentorFeedback]:
    return [MentorFeedback(**r) for r in store.read("mentor_feedback", {"graduate_id": graduate_id})]
