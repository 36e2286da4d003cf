from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.api.auth import router as auth_router
from app.api.catalog import router as catalog_router
from app.api.diagnostic import router as diagnostic_router
from app.api.health import router as health_router
from app.api.homework import router as homework_router
from app.api.practice import router as practice_router
from app.api.rewards import router as rewards_router
from app.core.bootstrap import initialize_database
from app.core.errors import (
    TutorError,
    http_exception_handler,
    request_id_middleware,
    store_exception_handler,
    tutor_error_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.logging import configure_logging
from app.core.settings import settings
from app.db.database import SessionLocal, engine


configure_logging(settings.log_level)

app = FastAPI(title="K12 Tutor API", version="0.1.0")
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(practice_router)
app.include_router(homework_router)
app.include_router(diagnostic_router)
app.include_router(rewards_router)
app.middleware("http")(request_id_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(TutorError, tutor_error_handler)
app.add_exception_handler(SQLAlchemyError, store_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.on_event("startup")
async def on_startup():
    async with SessionLocal() as session:
        await initialize_database(session, engine)


@app.on_event("shutdown")
async def on_shutdown():
    await engine.dispose()
