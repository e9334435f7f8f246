"""Tests for job scoring and filtering."""

import pytest

from models.schemas import Job
from services.job_matcher import match, rank, score_job


def _job(title: str, skills: list[str]) -> Job:
    return Job(id=title.lower(), title=title, required_skills=skills)


def test_partial_match_percentage_and_missing():
    [result] = match({"Python", "SQL"}, [_job("Backend", ["Python", "SQL", "React"])])
    assert result.match_percentage == pytest.approx(66.67, abs=0.01)
    assert result.matched_skills == ["Python", "SQL"]
    assert result.missing_skills == ["React"]


def test_full_match():
    [result] = match({"Python", "SQL"}, [_job("Data", ["SQL", "Python"])])
    assert result.match_percentage == 100.0
    assert result.missing_skills == []


def test_job_without_required_skills_is_excluded():
    assert match({"Python"}, [_job("Empty", [])]) == []
    assert score_job({"Python"}, _job("Empty", [])) is None


def test_zero_match_jobs_are_dropped():
    jobs = [_job("Frontend", ["React", "CSS"]), _job("Backend", ["Python"])]
    results = match({"Python"}, jobs)
    assert [r.job.title for r in results] == ["Backend"]


def test_empty_extracted_set_matches_nothing():
    jobs = [_job("Frontend", ["React"]), _job("Backend", ["Python", "SQL"])]
    assert match(set(), jobs) == []


def test_input_order_preserved():
    jobs = [
        _job("Low", ["Python", "A", "B", "C"]),
        _job("High", ["Python"]),
        _job("Mid", ["Python", "Z"]),
    ]
    results = match({"Python"}, jobs)
    assert [r.job.title for r in results] == ["Low", "High", "Mid"]


def test_rank_sorts_best_first_stable_on_ties():
    jobs = [
        _job("Low", ["Python", "A", "B", "C"]),
        _job("High", ["Python"]),
        _job("AlsoHigh", ["Python", "SQL"]),
        _job("Mid", ["Python", "Z"]),
    ]
    results = rank(match({"Python", "SQL"}, jobs))
    assert [r.job.title for r in results] == ["High", "AlsoHigh", "Mid", "Low"]


def test_matched_and_missing_partition_required_skills():
    job = _job("Mixed", ["Python", "Docker", "SQL", "AWS"])
    [result] = match({"SQL", "AWS", "Rust"}, [job])
    assert set(result.matched_skills) | set(result.missing_skills) == set(job.required_skills)
    assert not set(result.matched_skills) & set(result.missing_skills)
    assert result.missing_skills == ["Python", "Docker"]


def test_match_compares_exact_names():
    assert match({"Python"}, [_job("Backend", ["python", "SQL"])]) == []


def test_case_insensitive_matching_is_opt_in():
    [result] = match({"python"}, [_job("Backend", ["Python", "SQL"])], case_insensitive=True)
    assert result.matched_skills == ["Python"]
    assert result.missing_skills == ["SQL"]


def test_duplicate_required_skills_count_each_time():
    [result] = match({"Python"}, [_job("Dup", ["Python", "Python", "SQL"])])
    assert result.match_percentage == pytest.approx(66.67, abs=0.01)
    assert result.matched_skills == ["Python", "Python"]
    assert result.missing_skills == ["SQL"]


def test_percentages_stay_in_range():
    jobs = [_job(str(i), ["Python", "SQL", "React"][: i + 1]) for i in range(3)]
    for result in match({"Python", "React"}, jobs):
        assert 0 <= result.match_percentage <= 100


def test_match_is_deterministic():
    jobs = [_job("A", ["Python", "SQL"]), _job("B", ["SQL"])]
    assert match({"SQL"}, jobs) == match({"SQL"}, jobs)
