"""Homework help API: rate-limited canned explanations, history and ratings."""
from __future__ import annotations

import json
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.core.errors import NotFoundError, QuotaExceededError, ValidationError
from app.core.logging import DOMAIN_HOMEWORK, get_domain_logger
from app.core.settings import settings
from app.db.database import get_db
from app.models.entities import HomeworkHelpSession
from app.schemas.homework import HomeworkHelpResponse, HomeworkHistoryItem, RateRequest
from app.schemas.session import SuccessResponse
from app.services import homework, usage
from app.services.scoring import award_points

router = APIRouter(prefix="/homework-help", tags=["homework"])
logger = get_domain_logger(__name__, DOMAIN_HOMEWORK)


@router.post("", response_model=HomeworkHelpResponse)
async def request_help(
    question_text: str | None = Form(default=None, alias="questionText"),
    subject: str | None = Form(default=None),
    question_type: str = Form(default="text", alias="questionType"),
    image: UploadFile | None = File(default=None),
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    if not (question_text or "").strip() or not (subject or "").strip():
        raise ValidationError("Question text and subject are required")

    decision = await usage.check_and_reserve(db, student_id, usage.FEATURE_HOMEWORK_HELP)
    if not decision.allowed:
        await db.rollback()
        raise QuotaExceededError(
            "Daily limit reached",
            limit=decision.limit,
            used=decision.used,
            reset_time=decision.reset_time,
        )

    answer = homework.respond(subject, question_text)
    image_bytes = await image.read() if image is not None else None
    help_session = HomeworkHelpSession(
        student_id=student_id,
        question_text=question_text,
        question_image=image_bytes or None,
        subject=subject,
        question_type=question_type,
        ai_response=answer.response,
        steps_guidance=answer.steps_payload(),
        related_concepts=answer.concepts_payload(),
    )
    db.add(help_session)
    await db.flush()
    await award_points(db, student_id, settings.homework_help_points)
    await db.commit()

    logger.info(
        json.dumps(
            {
                "type": "homework_help_served",
                "session_id": help_session.id,
                "student_id": str(student_id),
                "subject": subject,
                "has_image": image_bytes is not None,
            }
        )
    )
    return HomeworkHelpResponse(
        session_id=help_session.id,
        response=answer.response,
        steps=answer.steps_payload(),
        related_concepts=answer.concepts_payload(),
        points_earned=settings.homework_help_points,
        usage_remaining=max(0, decision.limit - decision.used - 1),
    )


@router.get("/history", response_model=list[HomeworkHistoryItem])
async def help_history(
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    rows = (
        await db.execute(
            select(
                HomeworkHelpSession.id,
                HomeworkHelpSession.question_text,
                HomeworkHelpSession.subject,
                HomeworkHelpSession.created_at,
                HomeworkHelpSession.student_rating,
            )
            .where(HomeworkHelpSession.student_id == student_id)
            .order_by(desc(HomeworkHelpSession.created_at), desc(HomeworkHelpSession.id))
            .limit(limit)
            .offset(offset)
        )
    ).all()
    return [HomeworkHistoryItem(**row._asdict()) for row in rows]


@router.post("/{session_id}/rate", response_model=SuccessResponse)
async def rate_help(
    session_id: int,
    payload: RateRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        update(HomeworkHelpSession)
        .where(HomeworkHelpSession.id == session_id, HomeworkHelpSession.student_id == student_id)
        .values(student_rating=payload.rating)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFoundError("Session not found")
    await db.commit()
    return SuccessResponse()
