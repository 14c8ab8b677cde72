"""HTTP middleware that records an audit entry for authenticated requests."""

from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from projecthub.application.use_cases.activity import record_request_activity
from projecthub.domain.entities import User
from projecthub.infrastructure.database import SessionLocal

logger = logging.getLogger(__name__)


class ActivityLogMiddleware(BaseHTTPMiddleware):
    """Persist one activity log row per request made by an authenticated user.

    The entry is written after the downstream handler has produced its
    response, using a dedicated session. Failures are logged and never reach
    the client.
    """

    def __init__(
        self, app: ASGIApp, session_factory: Callable[[], Session] | None = None
    ) -> None:
        super().__init__(app)
        self._session_factory = session_factory

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        user = getattr(request.state, "user", None)
        if isinstance(user, User):
            await run_in_threadpool(self._log_activity, request, user)

        return response

    def _log_activity(self, request: Request, user: User) -> None:
        try:
            session_factory = self._session_factory or SessionLocal
            session = session_factory()
            try:
                record_request_activity(
                    session,
                    user=user,
                    method=request.method,
                    path=request.url.path,
                    ip_address=request.client.host if request.client else None,
                    user_agent=request.headers.get("user-agent"),
                )
            finally:
                session.close()
        except Exception:
            logger.exception(
                "Failed to log activity for %s %s", request.method, request.url.path
            )


__all__ = ["ActivityLogMiddleware"]
