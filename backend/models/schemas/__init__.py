"""Domain records shared by services and API responses."""

from models.schemas.catalog import Certification, Internship, Job, Skill
from models.schemas.graduate_profile import GraduateProfile, MatchResult
from models.schemas.identity import ROLES, Identity, Role, Session
from models.schemas.mentor_feedback import MentorFeedback
from models.schemas.quiz import QuizQuestion, QuizResult, Recommendation

__all__ = [
    "Certification",
    "GraduateProfile",
    "Identity",
    "Internship",
    "Job",
    "MatchResult",
    "MentorFeedback",
    "QuizQuestion",
    "QuizResult",
    "ROLES",
    "Recommendation",
    "Role",
    "Session",
    "Skill",
]
