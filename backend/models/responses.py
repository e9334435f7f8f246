from pydantic import BaseModel

from models.schemas import (
    Certification,
    GraduateProfile,
    Identity,
    Internship,
    MatchResult,
    MentorFeedback,
    Recommendation,
)


class AnalysisResponse(BaseModel):
    extracted_skills: list[str] = []
    job_matches: list[MatchResult] = []
    saved: bool = False
    # Set when the result was computed but could not be persisted
    degraded: bool = False
    error: str = ""


class SessionResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Identity


class RecommendationsResponse(BaseModel):
    certifications: list[Certification] = []
    internships: list[Internship] = []


class PublicQuestion(BaseModel):
    """Quiz question as served to students, without the answer key."""
    id: str
    subject: str
    question: str
    options: list[str] = []


class QuizSubmissionResponse(BaseModel):
    subject: str
    score: int = 0
    total_questions: int = 0
    percentage: float = 0.0
    recommendation: Recommendation


class GraduateSummary(BaseModel):
    user: Identity
    profile: GraduateProfile | None = None


class FeedbackResponse(BaseModel):
    feedback: list[MentorFeedback] = []


class AdminStats(BaseModel):
    total_users: int = 0
    students: int = 0
    graduates: int = 0
    mentors: int = 0
    admins: int = 0
    skills: int = 0
    jobs: int = 0
    certifications: int = 0
    internships: int = 0
