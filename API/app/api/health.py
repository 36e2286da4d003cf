from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import DOMAIN_SYSTEM, get_domain_logger
from app.core.settings import settings
from app.db.database import get_db

router = APIRouter(tags=["health"])
logger = get_domain_logger(__name__, DOMAIN_SYSTEM)


@router.get("/health")
async def health(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach the database: %s", exc.__class__.__name__)
        database = "unavailable"
    return {
        "status": "ok" if database == "ok" else "degraded",
        "service": "k12-tutor-api",
        "env": settings.app_env,
        "database": database,
    }
