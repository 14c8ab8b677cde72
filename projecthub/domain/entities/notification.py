"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .subject import SubjectRef


class NotificationType(str, Enum):
    """Semantic category of a notification."""

    DEADLINE_REMINDER = "deadline_reminder"
    PROJECT_ASSIGNED = "project_assigned"
    PROJECT_CREATED = "project_created"


@dataclass
class Notification:
    """Dismissible alert delivered to a specific user."""

    id: int | None
    user_id: int
    type: NotificationType
    subject: SubjectRef | None
    title: str
    message: str
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None


__all__ = ["Notification", "NotificationType"]
