"""
Practice API: answer submission and study-session lifecycle.

A session is opened when practice starts and closed once with the totals the
client accumulated; individual answers are scored and recorded independently.
"""
from __future__ import annotations

import random
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.core.errors import NotFoundError
from app.db.database import get_db
from app.models.entities import Question
from app.schemas.session import (
    CompleteSessionRequest,
    StartSessionRequest,
    StartSessionResponse,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SuccessResponse,
)
from app.services.scoring import record_answer
from app.services.sessions import SessionSummary, close_session, open_session

router = APIRouter(tags=["practice"])

feedback_rng = random.Random()


@router.post("/questions/{question_id}/answer", response_model=SubmitAnswerResponse)
async def submit_answer(
    question_id: int,
    payload: SubmitAnswerRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    question = (await db.execute(select(Question).where(Question.id == question_id))).scalar_one_or_none()
    if question is None:
        raise NotFoundError("Question not found")

    result = await record_answer(
        db,
        student_id=student_id,
        question=question,
        submitted=payload.student_answer,
        time_spent=payload.time_spent,
        rng=feedback_rng,
    )
    await db.commit()
    return SubmitAnswerResponse.model_validate(result.to_dict())


@router.post("/sessions", response_model=StartSessionResponse)
async def start_session(
    payload: StartSessionRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    session_id = await open_session(
        db,
        student_id=student_id,
        session_type=payload.session_type,
        subject_id=payload.subject_id,
        topic_id=payload.topic_id,
    )
    await db.commit()
    return StartSessionResponse(session_id=session_id)


@router.put("/sessions/{session_id}", response_model=SuccessResponse)
async def complete_session(
    session_id: int,
    payload: CompleteSessionRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    await close_session(
        db,
        student_id=student_id,
        session_id=session_id,
        summary=SessionSummary(
            questions_answered=payload.questions_answered,
            correct_answers=payload.correct_answers,
            points_earned=payload.points_earned,
            duration_seconds=payload.session_duration,
        ),
    )
    await db.commit()
    return SuccessResponse()
