from pydantic import BaseModel


class MentorFeedback(BaseModel):
    id: str = ""
    graduate_id: str
    mentor_id: str
    feedback: str
    score: int = 0  # 0-100
    created_at: str = ""
