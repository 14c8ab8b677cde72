"""ORM models used by the application infrastructure."""

from .activity_log import ActivityLogModel
from .notification import NotificationModel
from .project import ProjectMemberModel, ProjectModel
from .reminder import ReminderModel
from .user import UserModel

__all__ = [
    "ActivityLogModel",
    "NotificationModel",
    "ProjectMemberModel",
    "ProjectModel",
    "ReminderModel",
    "UserModel",
]
