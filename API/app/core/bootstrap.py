import json
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import hash_password
from app.core.settings import settings
from app.data.seed_data import DEMO_STUDENT, KNOWLEDGE_NODES, PET_ITEMS, QUESTIONS, SUBJECTS, TOPICS
from app.models.base import Base
from app.models.entities import KnowledgeNode, PetItem, Question, Student, Subject, Topic

logger = logging.getLogger(__name__)


async def _is_empty(session: AsyncSession, model) -> bool:
    count = (await session.execute(select(func.count()).select_from(model))).scalar_one()
    return int(count) == 0


async def seed_catalog(session: AsyncSession) -> None:
    if not await _is_empty(session, Subject):
        return

    subjects = [Subject(**row) for row in SUBJECTS]
    session.add_all(subjects)
    await session.flush()

    topics = []
    for row in TOPICS:
        data = dict(row)
        parent = subjects[data.pop("subject") - 1]
        topics.append(Topic(subject_id=parent.id, **data))
    session.add_all(topics)
    await session.flush()

    for row in QUESTIONS:
        data = dict(row)
        parent = topics[data.pop("topic") - 1]
        options = data.pop("options")
        session.add(
            Question(
                topic_id=parent.id,
                options=json.dumps(options) if options is not None else None,
                **data,
            )
        )
    await session.commit()
    logger.info("Seeded catalog: subjects=%s topics=%s questions=%s", len(SUBJECTS), len(TOPICS), len(QUESTIONS))


async def seed_rewards_and_graph(session: AsyncSession) -> None:
    if await _is_empty(session, PetItem):
        session.add_all(PetItem(**row) for row in PET_ITEMS)
        logger.info("Seeded pet items: %s", len(PET_ITEMS))
    if await _is_empty(session, KnowledgeNode):
        session.add_all(KnowledgeNode(**row) for row in KNOWLEDGE_NODES)
        logger.info("Seeded knowledge graph nodes: %s", len(KNOWLEDGE_NODES))
    await session.commit()


async def seed_demo_student(session: AsyncSession) -> None:
    existing = (
        await session.execute(select(Student.id).where(Student.username == DEMO_STUDENT["username"]))
    ).first()
    if existing:
        return
    session.add(
        Student(
            username=DEMO_STUDENT["username"],
            email=DEMO_STUDENT["email"],
            password_hash=hash_password(DEMO_STUDENT["password"]),
            grade_level=DEMO_STUDENT["grade_level"],
        )
    )
    await session.commit()
    logger.info("Seeded demo student: %s", DEMO_STUDENT["username"])


async def initialize_database(session: AsyncSession, engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not settings.seed_on_start:
        return
    await seed_catalog(session)
    await seed_rewards_and_graph(session)
    await seed_demo_student(session)
