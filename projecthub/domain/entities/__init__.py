"""Domain entities exposed by the application."""

from .activity_log import ActivityAction, ActivityLog
from .notification import Notification, NotificationType
from .project import Project, ProjectMember
from .reminder import Reminder, ReminderType
from .subject import ResourceKind, SubjectRef, subject_columns
from .user import User

__all__ = [
    "ActivityAction",
    "ActivityLog",
    "Notification",
    "NotificationType",
    "Project",
    "ProjectMember",
    "Reminder",
    "ReminderType",
    "ResourceKind",
    "SubjectRef",
    "subject_columns",
    "User",
]
