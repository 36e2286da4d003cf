"""Auth API: registration, login and the student profile."""
import json
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.core.errors import AuthError, NotFoundError, ValidationError
from app.core.security import create_token, hash_password, verify_password
from app.core.logging import DOMAIN_AUTH, get_domain_logger
from app.db.database import get_db
from app.models.entities import Student
from app.schemas.auth import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest, StudentOut

router = APIRouter(tags=["auth"])
logger = get_domain_logger(__name__, DOMAIN_AUTH)


def _student_out(student: Student) -> StudentOut:
    return StudentOut(
        id=str(student.id),
        username=student.username,
        grade_level=student.grade_level,
        total_points=student.total_points,
        level=student.level,
        pet_name=student.pet_name,
        pet_type=student.pet_type,
        pet_level=student.pet_level,
    )


@router.post("/auth/register", response_model=AuthResponse)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    username = payload.username.strip()
    email = payload.email.strip().lower()
    existing = (
        await db.execute(select(Student.id).where(or_(Student.username == username, Student.email == email)))
    ).first()
    if existing:
        raise ValidationError("Username or email already exists")

    student = Student(
        username=username,
        email=email,
        password_hash=hash_password(payload.password),
        grade_level=payload.grade_level.strip(),
        total_points=0,
        level=1,
    )
    db.add(student)
    await db.commit()
    logger.info(json.dumps({"type": "student_registered", "student_id": str(student.id)}))

    token = create_token(student.id, student.username, student.grade_level)
    return AuthResponse(token=token, student=_student_out(student))


@router.post("/auth/login", response_model=AuthResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    student = (
        await db.execute(select(Student).where(Student.username == payload.username.strip()))
    ).scalar_one_or_none()
    if not student or not verify_password(payload.password, student.password_hash):
        raise AuthError("Invalid credentials", status_code=401)

    token = create_token(student.id, student.username, student.grade_level)
    return AuthResponse(token=token, student=_student_out(student))


@router.get("/student/profile", response_model=ProfileResponse)
async def get_profile(
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    student = (await db.execute(select(Student).where(Student.id == student_id))).scalar_one_or_none()
    if student is None:
        raise NotFoundError("Student not found")
    return ProfileResponse(
        id=str(student.id),
        username=student.username,
        email=student.email,
        grade_level=student.grade_level,
        total_points=student.total_points,
        level=student.level,
        pet_name=student.pet_name,
        pet_type=student.pet_type,
        pet_level=student.pet_level,
    )
