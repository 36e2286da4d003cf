import pytest
from sqlalchemy import select

from app.core.errors import NotFoundError, ValidationError
from app.models.entities import Student, StudySession
from app.services.sessions import SessionSummary, close_session, open_session


async def _student(db, name: str) -> Student:
    student = Student(username=name, email=f"{name}@example.com", password_hash="x", grade_level="6th Grade")
    db.add(student)
    await db.commit()
    return student


@pytest.mark.asyncio
async def test_close_session_persists_reported_totals_verbatim(db):
    student = await _student(db, "sessioner")
    session_id = await open_session(db, student_id=student.id, session_type="practice", subject_id=None, topic_id=None)
    await db.commit()

    # Totals are taken as reported, even when inconsistent.
    await close_session(
        db,
        student_id=student.id,
        session_id=session_id,
        summary=SessionSummary(questions_answered=2, correct_answers=5, points_earned=70, duration_seconds=300),
    )
    await db.commit()

    row = (await db.execute(select(StudySession).where(StudySession.id == session_id))).scalar_one()
    await db.refresh(row)
    assert (row.questions_answered, row.correct_answers, row.points_earned) == (2, 5, 70)
    assert row.session_duration == 300
    assert row.completed_at is not None


@pytest.mark.asyncio
async def test_new_session_starts_empty(db):
    student = await _student(db, "fresh")
    session_id = await open_session(db, student_id=student.id, session_type="exam", subject_id=None, topic_id=None)
    row = (await db.execute(select(StudySession).where(StudySession.id == session_id))).scalar_one()
    assert (row.questions_answered, row.correct_answers, row.points_earned) == (0, 0, 0)
    assert row.completed_at is None


@pytest.mark.asyncio
async def test_close_session_of_another_student_is_not_found(db):
    owner = await _student(db, "owner")
    other = await _student(db, "other")
    session_id = await open_session(db, student_id=owner.id, session_type="practice", subject_id=None, topic_id=None)
    await db.commit()

    with pytest.raises(NotFoundError):
        await close_session(
            db,
            student_id=other.id,
            session_id=session_id,
            summary=SessionSummary(questions_answered=1, correct_answers=1, points_earned=10),
        )
    with pytest.raises(NotFoundError):
        await close_session(
            db,
            student_id=owner.id,
            session_id=session_id + 1000,
            summary=SessionSummary(questions_answered=1, correct_answers=1, points_earned=10),
        )


@pytest.mark.asyncio
async def test_completed_session_cannot_be_closed_again(db):
    student = await _student(db, "closer")
    session_id = await open_session(db, student_id=student.id, session_type="practice", subject_id=None, topic_id=None)
    await close_session(
        db,
        student_id=student.id,
        session_id=session_id,
        summary=SessionSummary(questions_answered=5, correct_answers=4, points_earned=40, duration_seconds=600),
    )
    await db.commit()

    with pytest.raises(ValidationError, match="already completed"):
        await close_session(
            db,
            student_id=student.id,
            session_id=session_id,
            summary=SessionSummary(questions_answered=99, correct_answers=99, points_earned=9999, duration_seconds=1),
        )
    await db.rollback()

    row = (await db.execute(select(StudySession).where(StudySession.id == session_id))).scalar_one()
    await db.refresh(row)
    assert (row.questions_answered, row.correct_answers, row.points_earned) == (5, 4, 40)
    assert row.session_duration == 600


@pytest.mark.asyncio
async def test_open_session_with_unknown_topic_or_subject_is_not_found(db):
    student = await _student(db, "wanderer")
    with pytest.raises(NotFoundError, match="Topic not found"):
        await open_session(db, student_id=student.id, session_type="practice", subject_id=None, topic_id=999999)
    with pytest.raises(NotFoundError, match="Subject not found"):
        await open_session(db, student_id=student.id, session_type="practice", subject_id=999999, topic_id=None)
