"""Student credentials: pbkdf2 password hashes and signed access tokens."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from passlib.context import CryptContext

from app.core.settings import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Passwords are capped before hashing so the register and login paths agree.
MAX_PASSWORD_CHARS = 72


@dataclass(frozen=True)
class TokenClaims:
    student_id: UUID
    username: str
    grade_level: str


def hash_password(plain: str) -> str:
    return pwd_context.hash((plain or "")[:MAX_PASSWORD_CHARS])


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify((plain or "")[:MAX_PASSWORD_CHARS], hashed)


def create_token(student_id: UUID, username: str, grade_level: str) -> str:
    issued = datetime.now(timezone.utc)
    return jwt.encode(
        {
            "sub": str(student_id),
            "username": username,
            "grade_level": grade_level,
            "iat": issued,
            "exp": issued + timedelta(minutes=settings.jwt_expire_minutes),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def read_token(token: str) -> TokenClaims | None:
    """Verify signature and expiry; None for anything that is not a usable student token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        student_id = UUID(str(payload.get("sub")))
    except (jwt.PyJWTError, ValueError):
        return None
    return TokenClaims(
        student_id=student_id,
        username=str(payload.get("username", "")),
        grade_level=str(payload.get("grade_level", "")),
    )
