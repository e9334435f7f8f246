from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_current_identity,
    get_identity_provider,
    get_store,
    get_token,
    require_role,
)
from config import settings
from models.requests import (
    AnalyzeResumeRequest,
    FeedbackRequest,
    JobCreate,
    QuizSubmission,
    SignInRequest,
    SignUpRequest,
    SkillCreate,
)
from models.responses import (
    AdminStats,
    AnalysisResponse,
    FeedbackResponse,
    GraduateSummary,
    PublicQuestion,
    QuizSubmissionResponse,
    RecommendationsResponse,
    SessionResponse,
)
from models.schemas import (
    GraduateProfile,
    Identity,
    Job,
    MentorFeedback,
    QuizResult,
    Skill,
)
from services import admin, mentoring, quiz, recommendations, resume_analyzer
from services.identity import IdentityProvider
from services.record_store import RecordStore

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

graduate_only = require_role("graduate")
student_only = require_role("student")
mentor_only = require_role("mentor")
admin_only = require_role("admin")


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "skill_match_mode": settings.skill_match_mode,
    }


# --- Auth ---


@router.post("/auth/signup", response_model=Identity, status_code=201)
def sign_up(
    body: SignUpRequest,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    return identity_provider.sign_up(body.email, body.password, body.name, body.role)


@router.post("/auth/signin", response_model=SessionResponse)
def sign_in(
    body: SignInRequest,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    session = identity_provider.sign_in(body.email, body.password)
    return SessionResponse(access_token=session.token, user=session.identity)


@router.post("/auth/signout", status_code=204)
def sign_out(
    token: str = Depends(get_token),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    identity_provider.sign_out(token)


@router.get("/auth/me", response_model=Identity)
def me(identity: Identity = Depends(get_current_identity)):
    return identity


# --- Graduate ---


@router.post("/graduate/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.analyze_rate_limit)
def analyze_resume(
    request: Request,
    body: AnalyzeResumeRequest,
    identity: Identity = Depends(graduate_only),
    store: RecordStore = Depends(get_store),
):
    return resume_analyzer.analyze_and_save(
        identity,
        body.resume_text,
        store,
        mode=settings.skill_match_mode,
        case_insensitive=settings.job_match_case_insensitive,
    )


@router.get("/graduate/profile", response_model=GraduateProfile | None)
def graduate_profile(
    identity: Identity = Depends(graduate_only),
    store: RecordStore = Depends(get_store),
):
    return resume_analyzer.get_profile(store, identity.id)


@router.get("/graduate/recommendations", response_model=RecommendationsResponse)
def graduate_recommendations(
    identity: Identity = Depends(graduate_only),
    store: RecordStore = Depends(get_store),
):
    profile = resume_analyzer.get_profile(store, identity.id)
    skills = profile.extracted_skills if profile else []
    limit = settings.recommendation_limit
    return RecommendationsResponse(
        certifications=recommendations.recommend_certifications(store, skills, limit),
        internships=recommendations.recommend_internships(store, skills, limit),
    )


@router.get("/graduate/feedback", response_model=FeedbackResponse)
def graduate_feedback(
    identity: Identity = Depends(graduate_only),
    store: RecordStore = Depends(get_store),
):
    return FeedbackResponse(feedback=mentoring.feedback_for(store, identity.id))


# --- Student quizzes ---


@router.get("/quiz/subjects", response_model=list[str])
def quiz_subjects(
    identity: Identity = Depends(student_only),
    store: RecordStore = Depends(get_store),
):
    return quiz.list_subjects(store)


@router.get("/quiz/results", response_model=list[QuizResult])
def quiz_results(
    identity: Identity = Depends(student_only),
    store: RecordStore = Depends(get_store),
):
    return quiz.history(store, identity.id)


@router.get("/quiz/{subject}", response_model=list[PublicQuestion])
def quiz_questions(
    subject: str,
    identity: Identity = Depends(student_only),
    store: RecordStore = Depends(get_store),
):
    return [PublicQuestion(**q.model_dump()) for q in quiz.get_questions(store, subject)]


@router.post("/quiz/{subject}/submit", response_model=QuizSubmissionResponse)
def quiz_submit(
    subject: str,
    body: QuizSubmission,
    identity: Identity = Depends(student_only),
    store: RecordStore = Depends(get_store),
):
    result = quiz.submit(store, identity, subject, body.answers)
    return QuizSubmissionResponse(
        subject=subject,
        score=result.score,
        total_questions=result.total_questions,
        percentage=quiz.percentage(result.score, result.total_questions),
        recommendation=quiz.recommend(result.score, result.total_questions),
    )


# --- Mentor ---


@router.get("/mentor/graduates", response_model=list[GraduateSummary])
def mentor_graduates(
    identity: Identity = Depends(mentor_only),
    store: RecordStore = Depends(get_store),
):
    return mentoring.list_graduates(store)


@router.post("/mentor/feedback", response_model=MentorFeedback, status_code=201)
def mentor_feedback(
    body: FeedbackRequest,
    identity: Identity = Depends(mentor_only),
    store: RecordStore = Depends(get_store),
):
    return mentoring.submit_feedback(store, identity, body.graduate_id, body.feedback, body.score)


# --- Admin ---


@router.get("/admin/stats", response_model=AdminStats)
def admin_stats(
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return admin.stats(store)


@router.get("/admin/users", response_model=list[Identity])
def admin_users(
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return admin.list_users(store)


@router.delete("/admin/users/{user_id}", status_code=204)
def admin_delete_user(
    user_id: str,
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    admin.delete_user(store, identity_provider, user_id)


@router.get("/admin/skills", response_model=list[Skill])
def admin_skills(
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return [Skill(**r) for r in store.read("skills")]


@router.post("/admin/skills", response_model=Skill, status_code=201)
def admin_create_skill(
    body: SkillCreate,
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return admin.create_skill(store, body.name, body.domain)


@router.delete("/admin/skills/{skill_id}", status_code=204)
def admin_delete_skill(
    skill_id: str,
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    admin.delete_record(store, "skills", skill_id)


@router.get("/admin/jobs", response_model=list[Job])
def admin_jobs(
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return [Job(**r) for r in store.read("jobs")]


@router.post("/admin/jobs", response_model=Job, status_code=201)
def admin_create_job(
    body: JobCreate,
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    return admin.create_job(store, body.title, body.description, body.required_skills)


@router.delete("/admin/jobs/{job_id}", status_code=204)
def admin_delete_job(
    job_id: str,
    identity: Identity = Depends(admin_only),
    store: RecordStore = Depends(get_store),
):
    admin.delete_record(store, "jobs", job_id)
