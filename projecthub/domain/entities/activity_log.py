"""Domain entity representing an audit entry for user activity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ActivityAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    VIEW = "view"
    ACTIVE = "active"


@dataclass(frozen=True)
class ActivityLog:
    """Immutable record of something a user did on the platform."""

    id: int | None
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
    changes: dict[str, Any] | None = field(default=None, compare=False)
    created_at: datetime | None = None


__all__ = ["ActivityAction", "ActivityLog"]
