from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.base import CamelModel


class QuestionOut(BaseModel):
    id: int
    topic_id: int
    question_text: str
    question_type: str
    options: list[str] | None = None
    correct_answer: str
    explanation: str | None = None
    difficulty_level: int
    points: int
    exam_type: str | None = None
    created_at: datetime | None = None


class SubmitAnswerRequest(CamelModel):
    student_answer: str
    time_spent: int | None = Field(default=None, ge=0)


class FeedbackOut(BaseModel):
    type: str
    message: str
    suggestion: str


class SubmitAnswerResponse(CamelModel):
    is_correct: bool
    points_earned: int
    correct_answer: str
    explanation: str | None = None
    feedback: FeedbackOut


class StartSessionRequest(CamelModel):
    session_type: str = "practice"
    subject_id: int | None = None
    topic_id: int | None = None


class StartSessionResponse(CamelModel):
    session_id: int


class CompleteSessionRequest(CamelModel):
    questions_answered: int
    correct_answers: int
    points_earned: int
    session_duration: int | None = None


class SuccessResponse(BaseModel):
    success: bool = True
