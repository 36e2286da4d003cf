from __future__ import annotations

import os
import sys
import tempfile
import uuid
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
API_DIR = ROOT / "API"
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))

# Test-mode runtime guards:
# - throwaway SQLite file instead of Postgres
# - seeded catalog so questions, pet items and graph nodes exist
_DB_DIR = tempfile.mkdtemp(prefix="k12-tutor-tests-")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_DB_DIR}/api.db")
os.environ.setdefault("SEED_ON_START", "true")
os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-length-for-hs256")

from app.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    with TestClient(app) as tc:
        yield tc


@pytest.fixture()
def auth_headers(client) -> dict[str, str]:
    suffix = uuid.uuid4().hex[:10]
    resp = client.post(
        "/auth/register",
        json={
            "username": f"student_{suffix}",
            "email": f"{suffix}@example.com",
            "password": "pass-1234",
            "gradeLevel": "9th Grade",
        },
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest_asyncio.fixture()
async def session_factory(tmp_path):
    """Session maker over a fresh SQLite schema, for service-level tests."""
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

    from app.models import entities  # noqa: F401
    from app.models.base import Base

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/service.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture()
async def db(session_factory):
    async with session_factory() as session:
        yield session
