from __future__ import annotations

import json
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.core.logging import DOMAIN_PRACTICE, get_domain_logger
from app.models.entities import StudySession, Subject, Topic

logger = get_domain_logger(__name__, DOMAIN_PRACTICE)


@dataclass(frozen=True)
class SessionSummary:
    questions_answered: int
    correct_answers: int
    points_earned: int
    duration_seconds: int | None = None


async def open_session(
    db: AsyncSession,
    *,
    student_id: UUID,
    session_type: str,
    subject_id: int | None,
    topic_id: int | None,
) -> int:
    if subject_id is not None and await db.get(Subject, subject_id) is None:
        raise NotFoundError("Subject not found")
    if topic_id is not None and await db.get(Topic, topic_id) is None:
        raise NotFoundError("Topic not found")
    session = StudySession(
        student_id=student_id,
        session_type=session_type,
        subject_id=subject_id,
        topic_id=topic_id,
    )
    db.add(session)
    await db.flush()
    logger.info(
        json.dumps(
            {
                "type": "session_opened",
                "session_id": session.id,
                "student_id": str(student_id),
                "topic_id": topic_id,
            }
        )
    )
    return session.id


async def close_session(
    db: AsyncSession,
    *,
    student_id: UUID,
    session_id: int,
    summary: SessionSummary,
) -> None:
    """Write the final aggregates exactly as reported; counts are not cross-checked.

    Only an open session (no ``completed_at``) can be closed, and only once.
    """
    result = await db.execute(
        update(StudySession)
        .where(
            StudySession.id == session_id,
            StudySession.student_id == student_id,
            StudySession.completed_at.is_(None),
        )
        .values(
            questions_answered=summary.questions_answered,
            correct_answers=summary.correct_answers,
            points_earned=summary.points_earned,
            session_duration=summary.duration_seconds,
            completed_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        owned = (
            await db.execute(
                select(StudySession.id).where(
                    StudySession.id == session_id, StudySession.student_id == student_id
                )
            )
        ).first()
        if owned is None:
            raise NotFoundError("Session not found")
        raise ValidationError("Session already completed")
    logger.info(
        json.dumps(
            {
                "type": "session_closed",
                "session_id": session_id,
                "student_id": str(student_id),
                "questions_answered": summary.questions_answered,
                "correct_answers": summary.correct_answers,
                "points_earned": summary.points_earned,
            }
        )
    )
