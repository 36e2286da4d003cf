"""Catalog API: subjects, topics, practice questions and exam question sets."""
from __future__ import annotations

import json
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.core.logging import DOMAIN_PRACTICE, get_domain_logger
from app.core.settings import settings
from app.db.database import get_db
from app.models.entities import Question, Subject, Topic
from app.schemas.catalog import SubjectOut, TopicOut
from app.schemas.session import QuestionOut

router = APIRouter(tags=["catalog"])
logger = get_domain_logger(__name__, DOMAIN_PRACTICE)


def _parse_options(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.warning("Question options are not valid JSON: %r", raw[:80])
        return None
    return [str(option) for option in parsed] if isinstance(parsed, list) else None


def question_out(question: Question) -> QuestionOut:
    return QuestionOut(
        id=question.id,
        topic_id=question.topic_id,
        question_text=question.question_text,
        question_type=question.question_type,
        options=_parse_options(question.options),
        correct_answer=question.correct_answer,
        explanation=question.explanation,
        difficulty_level=question.difficulty_level,
        points=question.points,
        exam_type=question.exam_type,
        created_at=question.created_at,
    )


@router.get("/subjects", response_model=list[SubjectOut])
async def list_subjects(db: AsyncSession = Depends(get_db)):
    rows = (await db.execute(select(Subject).order_by(Subject.name))).scalars().all()
    return [SubjectOut.model_validate(row) for row in rows]


@router.get("/subjects/{subject_id}/topics", response_model=list[TopicOut])
async def list_topics(subject_id: int, db: AsyncSession = Depends(get_db)):
    rows = (
        await db.execute(
            select(Topic)
            .where(Topic.subject_id == subject_id)
            .order_by(Topic.difficulty_level, Topic.name)
        )
    ).scalars().all()
    return [TopicOut.model_validate(row) for row in rows]


@router.get("/topics/{topic_id}/questions", response_model=list[QuestionOut])
async def list_topic_questions(
    topic_id: int,
    difficulty: int | None = None,
    exam_type: str | None = Query(default=None, alias="examType"),
    limit: int = Query(default=settings.default_question_limit, ge=1, le=100),
    _student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    stmt = select(Question).where(Question.topic_id == topic_id)
    if difficulty is not None:
        stmt = stmt.where(Question.difficulty_level == difficulty)
    if exam_type:
        stmt = stmt.where(Question.exam_type == exam_type)
    rows = (await db.execute(stmt.order_by(func.random()).limit(limit))).scalars().all()
    return [question_out(row) for row in rows]


@router.get("/exams/{exam_type}/questions", response_model=list[QuestionOut])
async def list_exam_questions(
    exam_type: str,
    subject: int | None = None,
    limit: int = Query(default=settings.default_exam_question_limit, ge=1, le=100),
    _student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    stmt = select(Question).where(Question.exam_type == exam_type.upper())
    if subject is not None:
        stmt = stmt.where(Question.topic_id.in_(select(Topic.id).where(Topic.subject_id == subject)))
    rows = (await db.execute(stmt.order_by(func.random()).limit(limit))).scalars().all()
    return [question_out(row) for row in rows]
