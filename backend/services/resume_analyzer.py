"""Orchestrator: resume text -> extracted skills -> job matches -> profile.

Pipeline:
1. Validate the resume text (blank text stops here, nothing is read or written)
2. Load the skill and job catalogs from the record store
3. Skill extraction against the skill catalog
4. Job matching against the job catalog
5. Upsert the graduate profile, keyed on user_id (last write wins)

If step 5 fails the computed result is still returned, flagged as
degraded, so the caller can display it.
"""

import logging

from models.responses import AnalysisResponse
from models.schemas import GraduateProfile, Identity, Job, Skill
from services import job_matcher, skill_extractor
from services.errors import StoreError
from services.record_store import RecordStore
from services.validation import require_text

logger = logging.getLogger(__name__)


def analyze(
    resume_text: str,
    skill_catalog: list[Skill],
    job_catalog: list[Job],
    mode: str = "substring",
    case_insensitive: bool = False,
) -> AnalysisResponse:
    """Run extraction and matching without touching any store."""
    require_text("resume_text", resume_text, "resume text")

    extracted = skill_extractor.extract(resume_text, skill_catalog, mode=mode)
    matches = job_matcher.match(extracted, job_catalog, case_insensitive=case_insensitive)

    return AnalysisResponse(
        extracted_skills=sorted(extracted),
        job_matches=matches,
    )


def analyze_and_save(
    identity: Identity,
    resume_text: str,
    store: RecordStore,
    mode: str = "substring",
    case_insensitive: bool = False,
) -> AnalysisResponse:
    """Analyze a graduate's resume and save the snapshot to their profile."""
    require_text("resume_text", resume_text, "resume text")

    skills = [Skill(**r) for r in store.read("skills")]
    jobs = [Job(**r) for r in store.read("jobs")]

    result = analyze(
        resume_text, skills, jobs, mode=mode, case_insensitive=case_insensitive
    )
    logger.info(
        "Analyzed resume for %s: %d skills, %d job matches",
        identity.id,
        len(result.extracted_skills),
        len(result.job_matches),
    )

    try:
        store.upsert(
            "graduate_profiles",
            {
                "user_id": identity.id,
                "resume_text": resume_text,
                "extracted_skills": result.extracted_skills,
                "job_matches": [m.model_dump() for m in result.job_matches],
            },
            conflict_key="user_id",
        )
    except StoreError as e:
        logger.warning("Could not save profile for %s: %s", identity.id, e.message)
        result.degraded = True
        result.error = f"Analysis completed but could not be saved: {e.message}"
        return result

    result.saved = True
    return result


def get_profile(store: RecordStore, user_id: str) -> GraduateProfile | None:
    record = store.read_one("graduate_profiles", {"user_id": user_id})
    return GraduateProfile(**record) if record else None
