from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.base import CamelModel


class SubjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    grade_level: str
    description: str | None = None


class TopicOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    subject_id: int
    name: str
    description: str | None = None
    difficulty_level: int


class PetItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: str
    cost: int
    description: str | None = None
    unlock_level: int


class PurchaseRequest(CamelModel):
    item_id: int


class PurchaseResponse(CamelModel):
    success: bool = True
    points_remaining: int


class GoalCreateRequest(CamelModel):
    goal_type: str = Field(min_length=1)
    target_value: str = Field(min_length=1)
    target_date: date | None = None


class GoalCreateResponse(CamelModel):
    goal_id: int


class GoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    goal_type: str
    target_value: str
    current_value: str
    target_date: date | None = None
    is_completed: bool
    created_at: datetime | None = None
