from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.base import CamelModel


class HelpStepOut(BaseModel):
    order: int
    title: str
    content: str
    hint: str


class RelatedConceptOut(BaseModel):
    name: str
    difficulty: str
    description: str


class HomeworkHelpResponse(CamelModel):
    session_id: int
    response: str
    steps: list[HelpStepOut]
    related_concepts: list[RelatedConceptOut]
    points_earned: int
    usage_remaining: int


class HomeworkHistoryItem(BaseModel):
    id: int
    question_text: str
    subject: str
    created_at: datetime | None = None
    student_rating: int | None = None


class RateRequest(BaseModel):
    rating: int = Field(ge=1, le=5)
