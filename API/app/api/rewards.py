"""Pet shop and learning goals."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_student
from app.db.database import get_db
from app.models.entities import LearningGoal, PetItem
from app.schemas.catalog import (
    GoalCreateRequest,
    GoalCreateResponse,
    GoalOut,
    PetItemOut,
    PurchaseRequest,
    PurchaseResponse,
)
from app.services.rewards import purchase_item

router = APIRouter(tags=["rewards"])


@router.get("/pet/items", response_model=list[PetItemOut])
async def list_pet_items(db: AsyncSession = Depends(get_db)):
    rows = (await db.execute(select(PetItem).order_by(PetItem.unlock_level, PetItem.cost))).scalars().all()
    return [PetItemOut.model_validate(row) for row in rows]


@router.post("/pet/purchase", response_model=PurchaseResponse)
async def purchase_pet_item(
    payload: PurchaseRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    remaining = await purchase_item(db, student_id, payload.item_id)
    await db.commit()
    return PurchaseResponse(points_remaining=remaining)


@router.get("/learning-goals", response_model=list[GoalOut])
async def list_goals(
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    rows = (
        await db.execute(
            select(LearningGoal)
            .where(LearningGoal.student_id == student_id)
            .order_by(desc(LearningGoal.created_at), desc(LearningGoal.id))
        )
    ).scalars().all()
    return [GoalOut.model_validate(row) for row in rows]


@router.post("/learning-goals", response_model=GoalCreateResponse)
async def create_goal(
    payload: GoalCreateRequest,
    student_id: UUID = Depends(get_current_student),
    db: AsyncSession = Depends(get_db),
):
    goal = LearningGoal(
        student_id=student_id,
        goal_type=payload.goal_type,
        target_value=payload.target_value,
        target_date=payload.target_date,
    )
    db.add(goal)
    await db.commit()
    return GoalCreateResponse(goal_id=goal.id)
