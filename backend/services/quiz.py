"""Subject quizzes for students: questions, scoring and program advice."""

import logging

from models.schemas import Identity, QuizQuestion, QuizResult, Recommendation
from services.errors import RecordNotFound, ValidationError
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

# (minimum percentage, recommendation), checked top-down
RECOMMENDATION_TIERS: list[tuple[float, Recommendation]] = [
    (
        80.0,
        Recommendation(
            title="Excellent Performance!",
            programs=["AI & Data Science", "Computer Science", "Engineering"],
            message="You show strong aptitude in this area. Consider advanced programs!",
        ),
    ),
    (
        60.0,
        Recommendation(
            title="Good Progress",
            programs=["Information Technology", "Business Analytics", "Applied Sciences"],
            message="You're on the right track. Focus on building more skills.",
        ),
    ),
    (
        0.0,
        Recommendation(
            title="Keep Learning",
            programs=["Foundation Programs", "Skill Development Courses"],
            message="Consider strengthening your fundamentals in this subject.",
        ),
    ),
]


def percentage(score: int, total: int) -> float:
    return score / total * 100 if total > 0 else 0.0


def recommend(score: int, total: int) -> Recommendation:
    pct = percentage(score, total)
    for threshold, rec in RECOMMENDATION_TIERS:
        if pct >= threshold:
            return rec.model_copy(deep=True)
    return RECOMMENDATION_TIERS[-1][1].model_copy(deep=True)


def list_subjects(store: RecordStore) -> list[str]:
    return sorted({r["subject"] for r in store.read("quiz_questions") if r.get("subject")})


def get_questions(store: RecordStore, subject: str) -> list[QuizQuestion]:
    rows = store.read("quiz_questions", {"subject": subject})
    if not rows:
        raise RecordNotFound(f"No quiz found for subject '{subject}'")
    return [QuizQuestion(**r) for r in rows]


def score_answers(questions: list[QuizQuestion], answers: dict[str, str]) -> int:
    return sum(1 for q in questions if answers.get(q.id) == q.correct_answer)


def submit(
    store: RecordStore,
    identity: Identity,
    subject: str,
    answers: dict[str, str],
) -> QuizResult:
    """Score a completed quiz and save the result."""
    questions = get_questions(store, subject)
    known = {q.id for q in questions}
    unknown = sorted(set(answers) - known)
    if unknown:
        raise ValidationError("answers", f"Unknown question ids: {', '.join(unknown)}")

    score = score_answers(questions, answers)
    record = store.insert(
        "quiz_results",
        {
            "user_id": identity.id,
            "subject": subject,
            "score": score,
            "total_questions": len(questions),
            "answers": dict(answers),
        },
    )
    logger.info("Saved %s quiz result for %s: %d/%d", subject, identity.id, score, len(questions))
    return QuizResult(**record)


def history(store: RecordStore, user_id: str) -> list[QuizResult]:
    return [QuizResult(**r) for r in store.read("quiz_results", {"user_id": user_id})]
