"""Repository implementations for infrastructure layer."""

from .activity_log_repository import ActivityLogRepository
from .notification_repository import NotificationRepository
from .project_repository import ProjectRepository
from .reminder_repository import (
    REMINDER_STATUS_PENDING,
    REMINDER_STATUS_UNREAD,
    ReminderRepository,
)
from .user_repository import UserRepository

__all__ = [
    "ActivityLogRepository",
    "NotificationRepository",
    "ProjectRepository",
    "REMINDER_STATUS_PENDING",
    "REMINDER_STATUS_UNREAD",
    "ReminderRepository",
    "UserRepository",
]
