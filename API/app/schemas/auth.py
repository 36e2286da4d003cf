from pydantic import BaseModel, Field

from app.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    username: str = Field(min_length=2, max_length=128)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=72)
    grade_level: str = Field(min_length=1, max_length=32)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=128)
    password: str = Field(min_length=1, max_length=128)


class StudentOut(CamelModel):
    id: str
    username: str
    grade_level: str
    total_points: int = 0
    level: int = 1
    pet_name: str | None = None
    pet_type: str | None = None
    pet_level: int | None = None


class AuthResponse(BaseModel):
    token: str
    student: StudentOut


class ProfileResponse(BaseModel):
    id: str
    username: str
    email: str
    grade_level: str
    total_points: int
    level: int
    pet_name: str
    pet_type: str
    pet_level: int
