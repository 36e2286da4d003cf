"""
Answer evaluation for practice questions.

Correctness is a trimmed, case-insensitive string comparison against the
stored answer; there is no partial credit. Feedback is picked from a fixed
pool with a caller-supplied RNG so selection is reproducible in tests.
"""
from __future__ import annotations

import json
import random
from dataclasses import asdict, dataclass
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import DOMAIN_PRACTICE, get_domain_logger
from app.models.entities import Question, Student, StudentAttempt

logger = get_domain_logger(__name__, DOMAIN_PRACTICE)

ENCOURAGING_MESSAGES = (
    "Excellent! You totally understood this concept! 🚀",
    "Perfect! Your reasoning is crystal clear! ✨",
    "Well done! Keep up this learning momentum! 💪",
    "Outstanding! You've mastered this point! 🎯",
)
HELPFUL_MESSAGES = (
    "Don't give up! Let's look at what can be improved 🤔",
    "That's okay, mistakes are part of learning! Let's analyze it together 💡",
    "Nice try! Let me help you understand the right approach 🧠",
    "This is a common mistake, let's work through it step by step 🔍",
)
SUCCESS_SUGGESTION = "Take on the next question, your study pet will be proud of you!"
HELPFUL_SUGGESTION = "Read the explanation carefully, then try a similar question to reinforce your understanding."


@dataclass(frozen=True)
class Feedback:
    type: str  # success | helpful
    message: str
    suggestion: str


@dataclass(frozen=True)
class Evaluation:
    is_correct: bool
    points_earned: int
    correct_answer: str
    explanation: str | None
    feedback: Feedback

    def to_dict(self) -> dict:
        return asdict(self)


def _normalize_answer(value: str | None) -> str:
    return (value or "").strip().lower()


def is_correct_answer(submitted: str | None, correct: str | None) -> bool:
    return _normalize_answer(submitted) == _normalize_answer(correct)


def generate_feedback(is_correct: bool, rng: random.Random) -> Feedback:
    if is_correct:
        return Feedback(type="success", message=rng.choice(ENCOURAGING_MESSAGES), suggestion=SUCCESS_SUGGESTION)
    return Feedback(type="helpful", message=rng.choice(HELPFUL_MESSAGES), suggestion=HELPFUL_SUGGESTION)


def evaluate(question: Question, submitted: str, rng: random.Random) -> Evaluation:
    correct = is_correct_answer(submitted, question.correct_answer)
    return Evaluation(
        is_correct=correct,
        points_earned=question.points if correct else 0,
        correct_answer=question.correct_answer,
        explanation=question.explanation,
        feedback=generate_feedback(correct, rng),
    )


async def award_points(db: AsyncSession, student_id: UUID, points: int) -> None:
    """Relative single-statement increment; never read-modify-write."""
    if points <= 0:
        return
    await db.execute(
        update(Student)
        .where(Student.id == student_id)
        .values(total_points=Student.total_points + points)
        .execution_options(synchronize_session=False)
    )


async def record_answer(
    db: AsyncSession,
    *,
    student_id: UUID,
    question: Question,
    submitted: str,
    time_spent: int | None,
    rng: random.Random,
) -> Evaluation:
    """Evaluate, insert the attempt and award points; the caller commits both writes together."""
    result = evaluate(question, submitted, rng)
    db.add(
        StudentAttempt(
            student_id=student_id,
            question_id=question.id,
            student_answer=submitted,
            is_correct=result.is_correct,
            time_spent=time_spent,
        )
    )
    await db.flush()
    await award_points(db, student_id, result.points_earned)
    logger.info(
        json.dumps(
            {
                "type": "answer_evaluated",
                "student_id": str(student_id),
                "question_id": question.id,
                "is_correct": result.is_correct,
                "points_earned": result.points_earned,
            }
        )
    )
    return result
