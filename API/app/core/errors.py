import logging
import uuid

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class TutorError(Exception):
    """Base for errors that map onto a JSON error envelope."""

    status_code = 500
    code = "tutor_error"

    def __init__(self, message: str, *, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(TutorError):
    status_code = 400
    code = "validation_error"


class NotFoundError(TutorError):
    status_code = 404
    code = "not_found"


class AuthError(TutorError):
    code = "auth_error"

    def __init__(self, message: str, *, status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class QuotaExceededError(TutorError):
    status_code = 429
    code = "quota_exceeded"

    def __init__(self, message: str, *, limit: int, used: int, reset_time: str):
        super().__init__(message)
        self.limit = limit
        self.used = used
        self.reset_time = reset_time


class StoreError(TutorError):
    status_code = 500
    code = "store_error"

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    *,
    code: str,
    message: str,
    status_code: int,
    details=None,
    extra: dict | None = None,
) -> JSONResponse:
    payload = {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "request_id": get_request_id(request),
            "details": details,
        },
    }
    if extra:
        payload.update(extra)
    return JSONResponse(status_code=status_code, content=payload)


async def tutor_error_handler(request: Request, exc: TutorError):
    extra = None
    if isinstance(exc, QuotaExceededError):
        extra = {"limit": exc.limit, "used": exc.used, "resetTime": exc.reset_time}
    return error_response(
        request,
        code=exc.code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        extra=extra,
    )


async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    # Driver messages can leak schema details; keep them in the log only.
    logger.exception("Store failure | request_id=%s", get_request_id(request), exc_info=exc)
    return await tutor_error_handler(request, StoreError())


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(
        request,
        code="http_error",
        message=str(exc.detail),
        status_code=exc.status_code,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(
        request,
        code="validation_error",
        message="Request validation failed",
        status_code=400,
        details=exc.errors(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception | request_id=%s", get_request_id(request), exc_info=exc)
    return error_response(
        request,
        code="internal_error",
        message="Internal server error",
        status_code=500,
    )


async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("x-request-id")
    request.state.request_id = incoming or str(uuid.uuid4())
    response = await call_next(request)
    response.headers["x-request-id"] = request.state.request_id
    return response
