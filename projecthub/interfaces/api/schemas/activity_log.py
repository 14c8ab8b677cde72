"""Schemas for activity log endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from projecthub.application.use_cases.activity import MAX_SCREEN_TIME_SECONDS
from projecthub.domain.entities import ActivityAction


class ActivityLogRead(BaseModel):
    """Representation of an activity log entry returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    user_role: str | None
    action: ActivityAction
    model: str | None
    model_id: int | None
    description: str
    ip_address: str | None
    user_agent: str | None
    event_type: str | None
    screen_time: int | None = None
    created_at: datetime | None


class RoleCount(BaseModel):
    user_role: str | None
    count: int


class ActionCount(BaseModel):
    action: str
    count: int


class ActivityStatisticsRead(BaseModel):
    total_activities: int
    today_activities: int
    by_role: list[RoleCount]
    by_action: list[ActionCount]


class ScreenTimeTrack(BaseModel):
    duration: int = Field(..., ge=1, le=MAX_SCREEN_TIME_SECONDS, description="Seconds of activity")


class ScreenTimeTrackResponse(BaseModel):
    success: bool
    log_id: int


class ScreenTimeToday(BaseModel):
    screen_time_seconds: int
    formatted: str


__all__ = [
    "ActionCount",
    "ActivityLogRead",
    "ActivityStatisticsRead",
    "RoleCount",
    "ScreenTimeToday",
    "ScreenTimeTrack",
    "ScreenTimeTrackResponse",
]
