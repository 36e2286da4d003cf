from pydantic import BaseModel, Field

from app.schemas.base import CamelModel


class StartDiagnosticRequest(CamelModel):
    subject: str = Field(min_length=1)
    test_type: str = "adaptive"


class DiagnosticQuestion(BaseModel):
    id: int
    question: str
    type: str
    options: list[str]
    correct_answer: str
    difficulty: int
    topic: str


class StartDiagnosticResponse(CamelModel):
    test_id: int
    questions: list[DiagnosticQuestion]
    estimated_time: int


class DiagnosticAnswer(CamelModel):
    question_id: int | str | None = None
    answer: str | None = None
    is_correct: bool
    topic: str


class SubmitDiagnosticRequest(CamelModel):
    responses: list[DiagnosticAnswer]
    test_duration: int = Field(default=0, ge=0)


class DiagnosticResultResponse(CamelModel):
    ability_estimate: float
    recommendations: list[str]
    strengths: list[str]
    weaknesses: list[str]


class LearningPathResponse(CamelModel):
    path_name: str
    target_goals: list[str]
    path_structure: list[dict]
    estimated_completion_time: int
    current_position: int
