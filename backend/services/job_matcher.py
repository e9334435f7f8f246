"""Score job postings against an extracted skill set.

match_percentage = |required ∩ extracted| / |required| * 100

Skill names are the matching key and are compared exactly unless
``case_insensitive`` is set. Every entry of ``required_skills`` counts,
repeats included. Jobs without required skills are skipped, and so are
jobs with no matched skill at all; only actionable matches are returned.
Results keep the order of the input job catalog. Use ``rank`` for
score-ordered display.
"""

import logging
from collections.abc import Iterable

from models.schemas.catalog import Job
from models.schemas.graduate_profile import MatchResult
from services.skill_extractor import normalize_skill

logger = logging.getLogger(__name__)


def score_job(
    extracted: Iterable[str], job: Job, case_insensitive: bool = False
) -> MatchResult | None:
    """Score one job. Returns None when the job has no required skills."""
    required = job.required_skills
    if not required:
        return None

    if case_insensitive:
        have = {normalize_skill(s) for s in extracted}
        key = normalize_skill
    else:
        have = set(extracted)
        key = str

    matched = [s for s in required if key(s) in have]
    missing = [s for s in required if key(s) not in have]

    return MatchResult(
        job=job,
        match_percentage=len(matched) / len(required) * 100,
        matched_skills=matched,
        missing_skills=missing,
    )


def match(
    extracted: Iterable[str], jobs: Iterable[Job], case_insensitive: bool = False
) -> list[MatchResult]:
    """Return a MatchResult for every job sharing at least one skill."""
    extracted = set(extracted)
    results: list[MatchResult] = []
    skipped_empty = 0

    for job in jobs:
        result = score_job(extracted, job, case_insensitive=case_insensitive)
        if result is None:
            skipped_empty += 1
            continue
        if result.matched_skills:
            results.append(result)

    if skipped_empty:
        logger.debug("Skipped %d jobs with no required skills", skipped_empty)
    return results


def rank(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Sort by match percentage, best first. Ties keep their input order."""
    return sorted(results, key=lambda r: r.match_percentage, reverse=True)
