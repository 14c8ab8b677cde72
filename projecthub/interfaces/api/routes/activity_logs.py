"""Routes for inspecting the activity audit trail and tracking screen time."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from projecthub.application.use_cases.activity import (
    format_screen_time,
    get_activity_statistics as get_activity_statistics_uc,
    list_activity_logs as list_activity_logs_uc,
    screen_time_for_day,
    track_screen_time as track_screen_time_uc,
)
from projecthub.domain.entities import ActivityAction, ActivityLog, User
from projecthub.infrastructure.database import get_db
from projecthub.interfaces.api.dependencies import get_current_active_user, require_admin
from projecthub.interfaces.api.schemas import (
    ActionCount,
    ActivityLogRead,
    ActivityStatisticsRead,
    RoleCount,
    ScreenTimeToday,
    ScreenTimeTrack,
    ScreenTimeTrackResponse,
)

router = APIRouter(prefix="/activity-logs", tags=["activity_logs"])

_ALL = "all"


def _activity_log_to_read_model(entry: ActivityLog) -> ActivityLogRead:
    return ActivityLogRead.model_validate(entry)


@router.get("/", response_model=list[ActivityLogRead])
def list_activity_logs(
    role: str | None = None,
    action: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    search: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[ActivityLogRead]:
    """Return activity entries, newest first, narrowed by the given filters."""

    action_filter = None
    if action and action != _ALL:
        try:
            action_filter = ActivityAction(action)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown action '{action}'",
            ) from exc

    entries = list_activity_logs_uc(
        db,
        role=role if role and role != _ALL else None,
        action=action_filter,
        start_date=start_date,
        end_date=end_date,
        search=search or None,
        skip=skip,
        limit=limit,
    )
    return [_activity_log_to_read_model(entry) for entry in entries]


@router.get("/statistics", response_model=ActivityStatisticsRead)
def activity_statistics(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> ActivityStatisticsRead:
    stats = get_activity_statistics_uc(db)
    return ActivityStatisticsRead(
        total_activities=stats.total_activities,
        today_activities=stats.today_activities,
        by_role=[RoleCount(user_role=role, count=count) for role, count in stats.by_role],
        by_action=[ActionCount(action=action, count=count) for action, count in stats.by_action],
    )


@router.get("/screen-time-today", response_model=ScreenTimeToday)
def screen_time_today(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ScreenTimeToday:
    """Return the authenticated user's accumulated screen time for today."""

    seconds = screen_time_for_day(db, user_id=current_user.id)
    return ScreenTimeToday(screen_time_seconds=seconds, formatted=format_screen_time(seconds))


@router.post("/screen-time", response_model=ScreenTimeTrackResponse)
def track_screen_time(
    payload: ScreenTimeTrack,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ScreenTimeTrackResponse:
    """Record a screen time heartbeat sent by the client."""

    try:
        entry = track_screen_time_uc(
            db,
            user=current_user,
            duration=payload.duration,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return ScreenTimeTrackResponse(success=True, log_id=entry.id or 0)


__all__ = ["router"]
