"""Tests for admin operations."""

import pytest

from services import admin
from services.errors import RecordNotFound, ValidationError
from services.identity import IdentityProvider


def test_stats_counts(seeded_store):
    for role in ["student", "student", "graduate", "mentor", "admin"]:
        seeded_store.insert("users", {"role": role})
    s = admin.stats(seeded_store)
    assert s.total_users == 5
    assert s.students == 2
    assert s.graduates == 1
    assert s.mentors == 1
    assert s.admins == 1
    assert s.skills == len(seeded_store.read("skills"))
    assert s.jobs == len(seeded_store.read("jobs"))
    assert s.certifications > 0
    assert s.internships > 0


def test_delete_user_removes_profile_and_credentials(store):
    provider = IdentityProvider(store, "secret")
    grad = provider.sign_up("g@example.com", "password123", "Grace", "graduate")
    store.upsert("graduate_profiles", {"user_id": grad.id, "resume_text": "x"}, "user_id")

    admin.delete_user(store, provider, grad.id)

    assert store.get("users", grad.id) is None
    assert store.read("graduate_profiles") == []
    with pytest.raises(RecordNotFound):
        admin.delete_user(store, provider, grad.id)


def test_create_skill_rejects_duplicates(store):
    skill = admin.create_skill(store, " Python ", "Programming")
    assert skill.name == "Python"
    with pytest.raises(ValidationError):
        admin.create_skill(store, "python")


def test_create_job_requires_skills(store):
    with pytest.raises(ValidationError) as exc:
        admin.create_job(store, "Dev", "", ["  ", ""])
    assert exc.value.field == "required_skills"

    job = admin.create_job(store, "Dev", "Build things", ["Python", " SQL "])
    assert job.required_skills == ["Python", "SQL"]


def test_delete_record(store):
    skill = admin.create_skill(store, "Go")
    admin.delete_record(store, "skills", skill.id)
    with pytest.raises(RecordNotFound):
        admin.delete_record(store, "skills", skill.id)


def test_delete_user_removes_quiz_results_and_feedback(store):
    provider = IdentityProvider(store, "secret")
    grad = provider.sign_up("g@example.com", "password123", "Grace", "graduate")
    mentor = provider.sign_up("m@example.com", "password123", "Morgan", "mentor")
    store.insert("quiz_results", {"user_id": grad.id, "subject": "Science", "score": 1})
    store.insert("mentor_feedback", {"graduate_id": grad.id, "mentor_id": mentor.id, "feedback": "ok"})
    kept = store.insert("quiz_results", {"user_id": mentor.id, "subject": "Science", "score": 2})

    admin.delete_user(store, provider, grad.id)

    assert store.read("mentor_feedback") == []
    assert [r["id"] for r in store.read("quiz_results")] == [kept["id"]]


def test_delete_mentor_removes_their_feedback(store):
    provider = IdentityProvider(store, "secret")
    grad = provider.sign_up("g@example.com", "password123", "Grace", "graduate")
    mentor = provider.sign_up("m@example.com", "password123", "Morgan", "mentor")
    store.insert("mentor_feedback", {"graduate_id": grad.id, "mentor_id": mentor.id, "feedback": "ok"})

    admin.delete_user(store, provider, mentor.id)

    assert store.read("mentor_feedback") == []
    assert store.get("users", grad.id) is not None
