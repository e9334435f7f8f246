"""Student quiz questions, results and program recommendations."""

from pydantic import BaseModel


class QuizQuestion(BaseModel):
    id: str = ""
    subject: str
    question: str
    options: list[str] = []
    correct_answer: str = ""


class QuizResult(BaseModel):
    id: str = ""
    user_id: str
    subject: str
    score: int = 0
    total_questions: int = 0
    answers: dict[str, str] = {}
    created_at: str = ""


class Recommendation(BaseModel):
    title: str
    programs: list[str] = []
    message: str = ""
