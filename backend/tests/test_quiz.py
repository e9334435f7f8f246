"""Tests for student quizzes."""

import pytest

from models.schemas import Identity
from services import quiz
from services.errors import RecordNotFound, ValidationError

STUDENT = Identity(id="stu-1", email="stu@example.com", name="Sam", role="student")


def _answer_key(store, subject):
    return {q.id: q.correct_answer for q in quiz.get_questions(store, subject)}


def test_list_subjects_sorted_unique(seeded_store):
    assert quiz.list_subjects(seeded_store) == ["Computer Science", "Mathematics", "Science"]


def test_get_questions_unknown_subject(seeded_store):
    with pytest.raises(RecordNotFound):
        quiz.get_questions(seeded_store, "Astrology")


def test_submit_perfect_score_saved(seeded_store):
    answers = _answer_key(seeded_store, "Mathematics")
    result = quiz.submit(seeded_store, STUDENT, "Mathematics", answers)
    assert result.score == result.total_questions == 3
    assert quiz.history(seeded_store, STUDENT.id) == [result]


def test_submit_partial_and_missing_answers(seeded_store):
    key = _answer_key(seeded_store, "Mathematics")
    first, second, _ = key
    answers = {first: key[first], second: "wrong"}
    result = quiz.submit(seeded_store, STUDENT, "Mathematics", answers)
    assert result.score == 1
    assert result.total_questions == 3


def test_submit_rejects_foreign_question_ids(seeded_store):
    with pytest.raises(ValidationError):
        quiz.submit(seeded_store, STUDENT, "Science", {"not-a-question": "H2O"})
    assert quiz.history(seeded_store, STUDENT.id) == []


@pytest.mark.parametrize(
    "score,total,title",
    [
        (4, 5, "Excellent Performance!"),
        (5, 5, "Excellent Performance!"),
        (3, 5, "Good Progress"),
        (2, 5, "Keep Learning"),
        (0, 0, "Keep Learning"),
    ],
)
def test_recommend_tiers(score, total, title):
    assert quiz.recommend(score, total).title == title


def test_percentage_handles_empty_quiz():
    assert quiz.percentage(0, 0) == 0.0
    assert quiz.percentage(1, 4) == 25.0
