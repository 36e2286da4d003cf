import asyncio
from datetime import date, timedelta

import pytest
from sqlalchemy import select, update

from app.models.entities import Student, UsageLimit
from app.services import usage

TODAY = date(2026, 10, 19)


async def _student(db) -> Student:
    student = Student(username="limited", email="limited@example.com", password_hash="x", grade_level="7th Grade")
    db.add(student)
    await db.commit()
    return student


@pytest.mark.asyncio
async def test_first_check_creates_record_and_allows(db):
    student = await _student(db)
    decision = await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    assert decision.allowed is True
    assert (decision.limit, decision.used) == (3, 0)
    assert decision.reset_time == "midnight"

    row = (await db.execute(select(UsageLimit).where(UsageLimit.student_id == student.id))).scalar_one()
    assert row.daily_usage == 0
    assert row.last_reset_date == TODAY


@pytest.mark.asyncio
async def test_reserve_admits_three_then_denies(db):
    student = await _student(db)
    used_before = []
    for _ in range(3):
        decision = await usage.check_and_reserve(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
        assert decision.allowed is True
        used_before.append(decision.used)
    assert used_before == [0, 1, 2]

    denied = await usage.check_and_reserve(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    assert denied.allowed is False
    assert (denied.limit, denied.used, denied.remaining) == (3, 3, 0)


@pytest.mark.asyncio
async def test_daily_counter_resets_on_new_day_but_monthly_keeps_counting(db):
    student = await _student(db)
    for _ in range(3):
        await usage.check_and_reserve(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    assert not (await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)).allowed

    tomorrow = TODAY + timedelta(days=1)
    decision = await usage.check_and_reserve(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=tomorrow)
    assert decision.allowed is True
    assert decision.used == 0

    row = (await db.execute(select(UsageLimit).where(UsageLimit.student_id == student.id))).scalar_one()
    await db.refresh(row)
    assert row.daily_usage == 1
    assert row.monthly_usage == 4
    assert row.last_reset_date == tomorrow


@pytest.mark.asyncio
async def test_premium_students_get_the_larger_limit(db):
    student = await _student(db)
    await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    await db.execute(update(UsageLimit).where(UsageLimit.student_id == student.id).values(is_premium=True, daily_usage=3))

    decision = await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    assert decision.allowed is True
    assert decision.is_premium is True
    assert decision.limit == 999


@pytest.mark.asyncio
async def test_features_are_counted_independently(db):
    student = await _student(db)
    for _ in range(3):
        await usage.check_and_reserve(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    other = await usage.check(db, student.id, "essay_review", today=TODAY)
    assert other.allowed is True
    assert other.used == 0


@pytest.mark.asyncio
async def test_record_usage_counts_without_rechecking(db):
    student = await _student(db)
    await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    for _ in range(4):
        await usage.record_usage(db, student.id, usage.FEATURE_HOMEWORK_HELP)
    decision = await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
    assert decision.used == 4
    assert decision.allowed is False
    assert decision.remaining == 0


@pytest.mark.asyncio
async def test_concurrent_first_use_both_get_a_decision(session_factory):
    async with session_factory() as setup:
        student = await _student(setup)

    async def reserve():
        async with session_factory() as session:
            decision = await usage.check_and_reserve(session, student.id, usage.FEATURE_HOMEWORK_HELP, today=TODAY)
            await session.commit()
            return decision

    first, second = await asyncio.gather(reserve(), reserve())
    assert first.allowed and second.allowed
    assert sorted([first.used, second.used]) == [0, 1]

    async with session_factory() as session:
        rows = (
            await session.execute(select(UsageLimit).where(UsageLimit.student_id == student.id))
        ).scalars().all()
    assert len(rows) == 1
    assert rows[0].daily_usage == 2


@pytest.mark.asyncio
async def test_default_day_is_the_utc_calendar_day(db):
    student = await _student(db)
    await usage.check(db, student.id, usage.FEATURE_HOMEWORK_HELP)
    row = (await db.execute(select(UsageLimit).where(UsageLimit.student_id == student.id))).scalar_one()
    assert row.last_reset_date == usage.utc_today()
