"""
Per-student, per-feature usage limits.

Daily counters reset lazily: the first check on a new UTC calendar day zeroes
the counter and stamps the date. The record itself is created on first use
with an insert that ignores a concurrent duplicate. Monthly counters are incremented alongside daily
ones but never reset and never consulted for admission.

``check`` plus ``record_usage`` is the two-step form (decide, then count).
``check_and_reserve`` performs the increment as one conditional UPDATE, so
two concurrent requests cannot both take the last slot.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import DOMAIN_USAGE, get_domain_logger
from app.core.settings import settings
from app.models.entities import UsageLimit

logger = get_domain_logger(__name__, DOMAIN_USAGE)

FEATURE_HOMEWORK_HELP = "homework_help"
RESET_TIME = "midnight"

# Dialect inserts that support ON CONFLICT DO NOTHING.
_CONFLICT_FREE_INSERTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


@dataclass(frozen=True)
class UsageDecision:
    allowed: bool
    limit: int
    used: int
    is_premium: bool = False
    reset_time: str = RESET_TIME

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.used)


def daily_limit(is_premium: bool) -> int:
    return settings.usage_premium_daily_limit if is_premium else settings.usage_daily_limit


def utc_today() -> date:
    """Daily windows roll over at midnight UTC."""
    return datetime.now(timezone.utc).date()


def _record_filter(student_id: UUID, feature_type: str):
    return (UsageLimit.student_id == student_id, UsageLimit.feature_type == feature_type)


async def _daily_usage(db: AsyncSession, student_id: UUID, feature_type: str) -> int:
    value = (
        await db.execute(select(UsageLimit.daily_usage).where(*_record_filter(student_id, feature_type)))
    ).scalar_one_or_none()
    return int(value or 0)


async def _usage_row(db: AsyncSession, student_id: UUID, feature_type: str):
    return (
        await db.execute(
            select(UsageLimit.daily_usage, UsageLimit.last_reset_date, UsageLimit.is_premium).where(
                *_record_filter(student_id, feature_type)
            )
        )
    ).one_or_none()


async def _create_record(db: AsyncSession, student_id: UUID, feature_type: str, today: date) -> None:
    """Insert the zeroed record unless a concurrent request already created it."""
    insert = _CONFLICT_FREE_INSERTS[db.get_bind().dialect.name]
    await db.execute(
        insert(UsageLimit)
        .values(
            student_id=student_id,
            feature_type=feature_type,
            daily_usage=0,
            monthly_usage=0,
            last_reset_date=today,
            is_premium=False,
        )
        .on_conflict_do_nothing(index_elements=["student_id", "feature_type"])
    )


async def check(
    db: AsyncSession,
    student_id: UUID,
    feature_type: str,
    today: date | None = None,
) -> UsageDecision:
    today = today or utc_today()
    row = await _usage_row(db, student_id, feature_type)
    if row is None:
        await _create_record(db, student_id, feature_type, today)
        row = await _usage_row(db, student_id, feature_type)

    used = int(row.daily_usage)
    if row.last_reset_date != today:
        await db.execute(
            update(UsageLimit)
            .where(*_record_filter(student_id, feature_type))
            .values(daily_usage=0, last_reset_date=today)
            .execution_options(synchronize_session=False)
        )
        used = 0

    limit = daily_limit(bool(row.is_premium))
    return UsageDecision(allowed=used < limit, limit=limit, used=used, is_premium=bool(row.is_premium))


async def record_usage(db: AsyncSession, student_id: UUID, feature_type: str) -> None:
    """Unconditionally count one use; does not re-check the limit."""
    await db.execute(
        update(UsageLimit)
        .where(*_record_filter(student_id, feature_type))
        .values(
            daily_usage=UsageLimit.daily_usage + 1,
            monthly_usage=UsageLimit.monthly_usage + 1,
        )
        .execution_options(synchronize_session=False)
    )


async def check_and_reserve(
    db: AsyncSession,
    student_id: UUID,
    feature_type: str,
    today: date | None = None,
) -> UsageDecision:
    """Admit and count one use atomically. ``used`` is the count before this reservation."""
    decision = await check(db, student_id, feature_type, today)
    if not decision.allowed:
        return decision

    result = await db.execute(
        update(UsageLimit)
        .where(*_record_filter(student_id, feature_type), UsageLimit.daily_usage < decision.limit)
        .values(
            daily_usage=UsageLimit.daily_usage + 1,
            monthly_usage=UsageLimit.monthly_usage + 1,
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        used = await _daily_usage(db, student_id, feature_type)
        logger.info(
            json.dumps(
                {
                    "type": "usage_reservation_lost",
                    "student_id": str(student_id),
                    "feature": feature_type,
                    "used": used,
                }
            )
        )
        return UsageDecision(
            allowed=False, limit=decision.limit, used=used, is_premium=decision.is_premium
        )

    logger.info(
        json.dumps(
            {
                "type": "usage_reserved",
                "student_id": str(student_id),
                "feature": feature_type,
                "used_before": decision.used,
                "limit": decision.limit,
            }
        )
    )
    return decision
