from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)
    name: str = Field(..., max_length=200)
    role: str = Field(..., description="student | graduate | mentor | admin")


class SignInRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class AnalyzeResumeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class QuizSubmission(BaseModel):
    answers: dict[str, str] = Field(default_factory=dict, description="question id -> chosen option")


class FeedbackRequest(BaseModel):
    graduate_id: str
    feedback: str = Field(..., max_length=5000)
    score: int = Field(75, description="0-100")


class SkillCreate(BaseModel):
    name: str = Field(..., max_length=100)
    domain: str = Field("", max_length=100)


class JobCreate(BaseModel):
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=10000)
    required_skills: list[str] = []
