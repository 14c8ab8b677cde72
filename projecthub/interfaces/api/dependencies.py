"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from projecthub.domain.entities import User
from projecthub.infrastructure.database import get_db
from projecthub.infrastructure.repositories import UserRepository
from projecthub.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    email = payload.get("sub")
    if not isinstance(email, str) or not email:
        raise _unauthorized("Invalid credentials")

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user and expose it to the request pipeline."""

    if credentials is None:
        raise _unauthorized("Not authenticated")

    user = resolve_current_user(credentials.credentials, db)
    # Read by ActivityLogMiddleware once the handler has produced its response.
    request.state.user = user
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user


__all__ = [
    "bearer_scheme",
    "get_current_active_user",
    "get_current_user",
    "require_admin",
    "resolve_current_user",
]
