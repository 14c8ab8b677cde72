"""Use cases for recording and reporting user activity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final

from sqlalchemy.orm import Session

from projecthub.config import get_settings
from projecthub.domain.entities import ActivityAction, ActivityLog, User
from projecthub.infrastructure.repositories import ActivityLogRepository
from projecthub.utils import day_bounds, local_now

SCREEN_TIME_EVENT: Final[str] = "screen_time"
MAX_SCREEN_TIME_SECONDS: Final[int] = 7200
# Upper bound of the activity_log.model_id column.
MAX_MODEL_ID: Final[int] = 2**31 - 1
_ASCII_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

_METHOD_ACTIONS: Final[dict[str, ActivityAction]] = {
    "POST": ActivityAction.CREATE,
    "PUT": ActivityAction.UPDATE,
    "PATCH": ActivityAction.UPDATE,
    "DELETE": ActivityAction.DELETE,
}

_PAST_TENSE: Final[dict[ActivityAction, str]] = {
    ActivityAction.CREATE: "created",
    ActivityAction.UPDATE: "updated",
    ActivityAction.DELETE: "deleted",
}


@dataclass(frozen=True)
class RequestActivity:
    """Audit details derived from an HTTP request."""

    action: ActivityAction
    model: str | None
    model_id: int | None
    description: str
    event_type: str


@dataclass(frozen=True)
class ActivityStatistics:
    total_activities: int
    today_activities: int
    by_role: list[tuple[str | None, int]]
    by_action: list[tuple[str, int]]


def action_for_method(method: str) -> ActivityAction:
    """Map an HTTP method to the audited action verb."""

    return _METHOD_ACTIONS.get(method.upper(), ActivityAction.VIEW)


def resource_from_path(path: str) -> tuple[str | None, int | None]:
    """Extract the resource type name and numeric id from ``path``.

    ``/projects/42`` yields ``("Project", 42)``. The second segment loses one
    trailing ``s`` and gets its first letter upper-cased; the third segment is
    kept only when it is made of ASCII digits and fits the id column.
    """

    segments = path.split("/")
    if len(segments) < 2:
        return None, None

    name = segments[1]
    if name.endswith("s"):
        name = name[:-1]
    model = name[:1].upper() + name[1:] or None

    model_id = None
    if model is not None and len(segments) > 2 and _ASCII_DIGITS.fullmatch(segments[2]):
        candidate = int(segments[2])
        if candidate <= MAX_MODEL_ID:
            model_id = candidate
    return model, model_id


def describe_activity(action: ActivityAction, model: str | None, user_name: str) -> str:
    if model:
        return f"{user_name} {_PAST_TENSE.get(action, 'viewed')} a {model}"
    return f"{user_name} performed {action.value} action"


def describe_request(method: str, path: str, user_name: str) -> RequestActivity:
    """Derive the audit entry for a request made by ``user_name``."""

    action = action_for_method(method)
    model, model_id = resource_from_path(path)
    return RequestActivity(
        action=action,
        model=model,
        model_id=model_id,
        description=describe_activity(action, model, user_name),
        event_type=f"{method.upper()} {path}",
    )


def actor_role(user: User) -> str:
    return user.role or get_settings().default_activity_role


def record_request_activity(
    session: Session,
    *,
    user: User,
    method: str,
    path: str,
    ip_address: str | None,
    user_agent: str | None,
) -> ActivityLog:
    """Persist the audit entry for a request made by an authenticated user."""

    activity = describe_request(method, path, user.name)
    entry = ActivityLog(
        id=None,
        user_id=user.id,
        user_role=actor_role(user),
        action=activity.action,
        model=activity.model,
        model_id=activity.model_id,
        description=activity.description,
        ip_address=ip_address,
        user_agent=user_agent,
        event_type=activity.event_type,
    )
    return ActivityLogRepository(session).create(entry)


def track_screen_time(
    session: Session,
    *,
    user: User,
    duration: int,
    ip_address: str | None,
    user_agent: str | None,
) -> ActivityLog:
    """Record ``duration`` seconds of active use reported by the client."""

    if not 1 <= duration <= MAX_SCREEN_TIME_SECONDS:
        msg = f"Duration must be between 1 and {MAX_SCREEN_TIME_SECONDS} seconds"
        raise ValueError(msg)

    entry = ActivityLog(
        id=None,
        user_id=user.id,
        user_role=actor_role(user),
        action=ActivityAction.ACTIVE,
        model=None,
        model_id=None,
        description=f"{user.name} was active on the platform",
        ip_address=ip_address,
        user_agent=user_agent,
        event_type=SCREEN_TIME_EVENT,
        screen_time=duration,
    )
    return ActivityLogRepository(session).create(entry)


def screen_time_for_day(session: Session, *, user_id: int, day: date | None = None) -> int:
    start, end = day_bounds(day or local_now().date())
    return ActivityLogRepository(session).sum_screen_time(user_id, start=start, end=end)


def format_screen_time(seconds: int) -> str:
    """Format ``seconds`` as ``"0m"``, ``"45m"``, ``"2h"`` or ``"2h 5m"``."""

    if seconds <= 0:
        return "0m"

    hours, remainder = divmod(seconds, 3600)
    minutes = remainder // 60
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


def list_activity_logs(
    session: Session,
    *,
    role: str | None = None,
    action: ActivityAction | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    search: str | None = None,
    skip: int = 0,
    limit: int = 50,
) -> list[ActivityLog]:
    """Return activity entries filtered by role, action, day range and text."""

    start = day_bounds(start_date)[0] if start_date else None
    end = day_bounds(end_date)[1] if end_date else None
    return ActivityLogRepository(session).list(
        role=role,
        action=action,
        start=start,
        end=end,
        search=search,
        skip=skip,
        limit=limit,
    )


def get_activity_statistics(session: Session) -> ActivityStatistics:
    repository = ActivityLogRepository(session)
    start, end = day_bounds(local_now().date())
    return ActivityStatistics(
        total_activities=repository.count(),
        today_activities=repository.count(start=start, end=end),
        by_role=list(repository.count_by_role()),
        by_action=list(repository.count_by_action()),
    )


__all__ = [
    "ActivityStatistics",
    "MAX_SCREEN_TIME_SECONDS",
    "RequestActivity",
    "SCREEN_TIME_EVENT",
    "action_for_method",
    "describe_activity",
    "describe_request",
    "format_screen_time",
    "get_activity_statistics",
    "list_activity_logs",
    "record_request_activity",
    "resource_from_path",
    "screen_time_for_day",
    "track_screen_time",
]
