from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import AuthError
from app.core.security import read_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_student(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UUID:
    """Resolve the authenticated student id from the bearer token.

    No token is 401; a token that fails verification is 403.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required", status_code=401)
    claims = read_token(credentials.credentials)
    if claims is None:
        raise AuthError("Invalid token", status_code=403)
    return claims.student_id
