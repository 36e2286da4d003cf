"""
Diagnostic test scoring.

The ability estimate is the plain share of correct responses. Topics from
wrong answers become weaknesses (and recommendations); topics from right
answers become strengths. Each weakness is flagged in the mastery table at a
fixed "needs practice" level.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Mapping
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import DOMAIN_DIAGNOSTIC, get_domain_logger
from app.core.settings import settings
from app.data.diagnostic_question_sets import get_diagnostic_set
from app.models.entities import KnowledgeMastery, KnowledgeNode

logger = get_domain_logger(__name__, DOMAIN_DIAGNOSTIC)

WEAK_TOPIC_MASTERY = 0.3
WEAK_TOPIC_CONFIDENCE = 0.5


@dataclass
class DiagnosticResult:
    ability_estimate: float
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)

    @property
    def recommendations(self) -> list[str]:
        return list(self.weaknesses)


def _unique_in_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


def score_responses(responses: list[Mapping]) -> DiagnosticResult:
    if not responses:
        return DiagnosticResult(ability_estimate=0.0)
    correct = [r for r in responses if r.get("isCorrect")]
    wrong = [r for r in responses if not r.get("isCorrect")]
    return DiagnosticResult(
        ability_estimate=len(correct) / len(responses),
        strengths=_unique_in_order(r.get("topic") for r in correct),
        weaknesses=_unique_in_order(r.get("topic") for r in wrong),
    )


def diagnostic_questions(subject: str) -> tuple[list[dict], int]:
    """Return the fixed question set for ``subject`` and its estimated minutes."""
    questions = get_diagnostic_set(subject)
    return questions, len(questions) * settings.diagnostic_minutes_per_question


async def flag_weak_topics(db: AsyncSession, student_id: UUID, weaknesses: list[str]) -> int:
    """Upsert mastery rows for every knowledge node matching a weak topic; returns rows touched."""
    if not weaknesses:
        return 0
    now = datetime.now(timezone.utc)
    node_ids = (
        await db.execute(select(KnowledgeNode.id).where(KnowledgeNode.topic.in_(weaknesses)))
    ).scalars().all()

    touched = 0
    for node_id in node_ids:
        entry = (
            await db.execute(
                select(KnowledgeMastery).where(
                    KnowledgeMastery.student_id == student_id,
                    KnowledgeMastery.knowledge_node_id == node_id,
                )
            )
        ).scalar_one_or_none()
        if entry is None:
            entry = KnowledgeMastery(student_id=student_id, knowledge_node_id=node_id)
            db.add(entry)
        entry.mastery_level = WEAK_TOPIC_MASTERY
        entry.confidence_score = WEAK_TOPIC_CONFIDENCE
        entry.last_practiced = now
        entry.practice_count = 1
        touched += 1

    await db.flush()
    logger.info(
        json.dumps(
            {
                "type": "weak_topics_flagged",
                "student_id": str(student_id),
                "topics": weaknesses,
                "nodes_updated": touched,
            }
        )
    )
    return touched
