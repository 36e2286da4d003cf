from __future__ import annotations

import json
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import DOMAIN_DIAGNOSTIC, get_domain_logger
from app.models.entities import KnowledgeMastery, KnowledgeNode, LearningPath

logger = get_domain_logger(__name__, DOMAIN_DIAGNOSTIC)

PATH_TEMPLATE = [
    {"step": 1, "topic": "Basic Concepts", "difficulty": 1, "estimatedTime": 30},
    {"step": 2, "topic": "Intermediate Skills", "difficulty": 2, "estimatedTime": 45},
    {"step": 3, "topic": "Advanced Applications", "difficulty": 3, "estimatedTime": 60},
    {"step": 4, "topic": "Mastery Practice", "difficulty": 3, "estimatedTime": 45},
]
PATH_GOALS = [
    "Master basic concepts",
    "Apply intermediate skills",
    "Solve complex problems",
    "Achieve subject mastery",
]
PATH_ESTIMATED_MINUTES = 180


def _mastery_payload(entry: KnowledgeMastery | None) -> dict:
    if entry is None:
        return {"level": 0.0, "confidence": 0.0, "lastPracticed": None, "practiceCount": 0}
    return {
        "level": entry.mastery_level,
        "confidence": entry.confidence_score,
        "lastPracticed": entry.last_practiced,
        "practiceCount": entry.practice_count,
    }


async def knowledge_graph(db: AsyncSession, student_id: UUID, subject: str) -> list[dict]:
    nodes = (
        await db.execute(
            select(KnowledgeNode)
            .where(KnowledgeNode.subject == subject)
            .order_by(KnowledgeNode.difficulty_level, KnowledgeNode.topic)
        )
    ).scalars().all()
    if not nodes:
        return []

    entries = (
        await db.execute(
            select(KnowledgeMastery).where(
                KnowledgeMastery.student_id == student_id,
                KnowledgeMastery.knowledge_node_id.in_([n.id for n in nodes]),
            )
        )
    ).scalars().all()
    by_node = {e.knowledge_node_id: e for e in entries}

    return [
        {
            "id": node.id,
            "subject": node.subject,
            "topic": node.topic,
            "prerequisite_topics": list(node.prerequisite_topics or []),
            "related_topics": list(node.related_topics or []),
            "learning_objectives": list(node.learning_objectives or []),
            "difficulty_level": node.difficulty_level,
            "mastery_threshold": node.mastery_threshold,
            "description": node.description,
            "mastery": _mastery_payload(by_node.get(node.id)),
        }
        for node in nodes
    ]


async def learning_path(db: AsyncSession, student_id: UUID, subject: str) -> LearningPath:
    """Return the active path for (student, subject), creating the fixed template path if none exists."""
    path = (
        await db.execute(
            select(LearningPath)
            .where(
                LearningPath.student_id == student_id,
                LearningPath.subject == subject,
                LearningPath.is_active.is_(True),
            )
            .order_by(LearningPath.id.desc())
        )
    ).scalars().first()
    if path is not None:
        return path

    path = LearningPath(
        student_id=student_id,
        subject=subject,
        path_name=f"{subject} Learning Path",
        target_goals=list(PATH_GOALS),
        path_structure=[dict(step) for step in PATH_TEMPLATE],
        current_position=0,
        estimated_completion_time=PATH_ESTIMATED_MINUTES,
        is_active=True,
    )
    db.add(path)
    await db.flush()
    logger.info(
        json.dumps({"type": "learning_path_created", "student_id": str(student_id), "subject": subject})
    )
    return path
