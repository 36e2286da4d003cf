from __future__ import annotations

import json
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.core.logging import DOMAIN_REWARDS, get_domain_logger
from app.models.entities import PetItem, Student, StudentPetItem

logger = get_domain_logger(__name__, DOMAIN_REWARDS)


async def purchase_item(db: AsyncSession, student_id: UUID, item_id: int) -> int:
    """Buy a pet item with points; returns the student's remaining points.

    The deduction is a conditional UPDATE so the balance can never go negative.
    """
    item = (await db.execute(select(PetItem).where(PetItem.id == item_id))).scalar_one_or_none()
    if item is None:
        raise NotFoundError("Item not found")

    student = (
        await db.execute(select(Student.total_points, Student.level).where(Student.id == student_id))
    ).one_or_none()
    if student is None:
        raise NotFoundError("Student not found")
    if student.level < item.unlock_level:
        raise ValidationError("Item not unlocked yet")

    result = await db.execute(
        update(Student)
        .where(Student.id == student_id, Student.total_points >= item.cost)
        .values(total_points=Student.total_points - item.cost)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise ValidationError("Not enough points")

    db.add(StudentPetItem(student_id=student_id, item_id=item.id))
    await db.flush()
    remaining = (
        await db.execute(select(Student.total_points).where(Student.id == student_id))
    ).scalar_one()
    logger.info(
        json.dumps(
            {
                "type": "pet_item_purchased",
                "student_id": str(student_id),
                "item_id": item.id,
                "cost": item.cost,
                "points_remaining": remaining,
            }
        )
    )
    return int(remaining)
