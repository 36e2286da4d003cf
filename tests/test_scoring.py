import random

import pytest
from sqlalchemy import select

from app.models.entities import Question, Student, StudentAttempt, Subject, Topic
from app.services.scoring import (
    ENCOURAGING_MESSAGES,
    HELPFUL_MESSAGES,
    evaluate,
    generate_feedback,
    is_correct_answer,
    record_answer,
)


def _question(**overrides) -> Question:
    fields = {
        "id": 1,
        "topic_id": 1,
        "question_text": "What is 2x + 5 = 13?",
        "question_type": "multiple_choice",
        "correct_answer": "x = 4",
        "explanation": "Subtract 5, then divide by 2.",
        "points": 10,
    }
    fields.update(overrides)
    return Question(**fields)


def test_answer_match_ignores_case_and_surrounding_whitespace():
    assert is_correct_answer("  X = 4 ", "x = 4")
    assert is_correct_answer("photosynthesis", "Photosynthesis")
    assert not is_correct_answer("x=4", "x = 4")
    assert not is_correct_answer(None, "4")
    assert is_correct_answer("", None)


def test_correct_answer_earns_question_points():
    result = evaluate(_question(), "x = 4", random.Random(1))
    assert result.is_correct is True
    assert result.points_earned == 10
    assert result.feedback.type == "success"
    assert result.feedback.message in ENCOURAGING_MESSAGES


def test_wrong_answer_earns_nothing_and_reveals_answer():
    result = evaluate(_question(points=25), "x = 5", random.Random(1))
    assert result.is_correct is False
    assert result.points_earned == 0
    assert result.correct_answer == "x = 4"
    assert result.explanation == "Subtract 5, then divide by 2."
    assert result.feedback.type == "helpful"
    assert result.feedback.message in HELPFUL_MESSAGES


def test_feedback_selection_is_reproducible_with_seeded_rng():
    first = [generate_feedback(False, random.Random(42)).message for _ in range(3)]
    second = [generate_feedback(False, random.Random(42)).message for _ in range(3)]
    assert first == second
    rng = random.Random(3)
    picked = {generate_feedback(True, rng).message for _ in range(50)}
    assert picked <= set(ENCOURAGING_MESSAGES)


@pytest.mark.asyncio
async def test_record_answer_writes_attempt_and_points_together(db):
    student = Student(username="s1", email="s1@example.com", password_hash="x", grade_level="9th Grade")
    subject = Subject(name="Mathematics", grade_level="K-12")
    db.add_all([student, subject])
    await db.flush()
    topic = Topic(subject_id=subject.id, name="Algebra Basics", difficulty_level=1)
    db.add(topic)
    await db.flush()
    question = Question(
        topic_id=topic.id,
        question_text="Solve 4x - 7 = 9",
        question_type="short_answer",
        correct_answer="4",
        points=15,
    )
    db.add(question)
    await db.commit()

    await record_answer(
        db, student_id=student.id, question=question, submitted=" 4 ", time_spent=12, rng=random.Random(0)
    )
    await record_answer(
        db, student_id=student.id, question=question, submitted="5", time_spent=8, rng=random.Random(0)
    )
    await db.commit()

    points = (await db.execute(select(Student.total_points).where(Student.id == student.id))).scalar_one()
    assert points == 15
    attempts = (
        await db.execute(select(StudentAttempt).where(StudentAttempt.student_id == student.id))
    ).scalars().all()
    assert sorted(a.is_correct for a in attempts) == [False, True]
    assert {a.time_spent for a in attempts} == {8, 12}

