"""Diagnostic test, knowledge graph and learning path endpoints."""
from __future__ import annotations

import json
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.core.errors import NotFoundError
from app.core.logging import DOMAIN_DIAGNOSTIC, get_domain_logger
from app.db.database import get_db
from app.models.entities import DiagnosticTest
from app.schemas.diagnostic import (
    DiagnosticResultResponse,
    LearningPathResponse,
    StartDiagnosticRequest,
    StartDiagnosticResponse,
    SubmitDiagnosticRequest,
)
from app.services.diagnostic import diagnostic_questions, flag_weak_topics, score_responses
from app.services.knowledge import knowledge_graph, learning_path

router = APIRouter(tags=["diagnostic"])
logger = get_domain_logger(__name__, DOMAIN_DIAGNOSTIC)


@router.post("/diagnostic-test", response_model=StartDiagnosticResponse)
async def start_diagnostic(
    payload: StartDiagnosticRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    questions, estimated_minutes = diagnostic_questions(payload.subject)
    test = DiagnosticTest(
        student_id=student_id,
        subject=payload.subject,
        test_type=payload.test_type,
        questions_answered=[],
        responses=[],
        test_duration=0,
    )
    db.add(test)
    await db.commit()
    return StartDiagnosticResponse(test_id=test.id, questions=questions, estimated_time=estimated_minutes)


@router.post("/diagnostic-test/{test_id}/submit", response_model=DiagnosticResultResponse)
async def submit_diagnostic(
    test_id: int,
    payload: SubmitDiagnosticRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    responses = [r.model_dump(by_alias=True) for r in payload.responses]
    result = score_responses(responses)

    updated = await db.execute(
        update(DiagnosticTest)
        .where(DiagnosticTest.id == test_id, DiagnosticTest.student_id == student_id)
        .values(
            responses=responses,
            questions_answered=[r["questionId"] for r in responses],
            ability_estimate=result.ability_estimate,
            recommended_topics=result.recommendations,
            test_duration=payload.test_duration,
            completed_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    if updated.rowcount == 0:
        raise NotFoundError("Diagnostic test not found")

    await flag_weak_topics(db, student_id, result.weaknesses)
    await db.commit()
    logger.info(
        json.dumps(
            {
                "type": "diagnostic_scored",
                "test_id": test_id,
                "student_id": str(student_id),
                "ability_estimate": result.ability_estimate,
                "weaknesses": result.weaknesses,
            }
        )
    )
    return DiagnosticResultResponse(
        ability_estimate=result.ability_estimate,
        recommendations=result.recommendations,
        strengths=result.strengths,
        weaknesses=result.weaknesses,
    )


@router.get("/knowledge-graph/{subject}")
async def get_knowledge_graph(
    subject: str,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    return await knowledge_graph(db, student_id, subject)


@router.get("/learning-path/{subject}", response_model=LearningPathResponse)
async def get_learning_path(
    subject: str,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    path = await learning_path(db, student_id, subject)
    await db.commit()
    return LearningPathResponse(
        path_name=path.path_name,
        target_goals=list(path.target_goals or []),
        path_structure=list(path.path_structure or []),
        estimated_completion_time=path.estimated_completion_time,
        current_position=path.current_position,
    )
