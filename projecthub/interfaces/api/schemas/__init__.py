from .activity_log import (
    ActionCount,
    ActivityLogRead,
    ActivityStatisticsRead,
    RoleCount,
    ScreenTimeToday,
    ScreenTimeTrack,
    ScreenTimeTrackResponse,
)
from .notification import (
    MessageResponse,
    NotificationBulkReadResponse,
    NotificationRead,
    UnreadCount,
)
from .reminder import (
    ReminderCreate,
    ReminderMutationResponse,
    ReminderRead,
    ReminderUpdate,
)

__all__ = [
    "ActionCount",
    "ActivityLogRead",
    "ActivityStatisticsRead",
    "MessageResponse",
    "NotificationBulkReadResponse",
    "NotificationRead",
    "ReminderCreate",
    "ReminderMutationResponse",
    "ReminderRead",
    "ReminderUpdate",
    "RoleCount",
    "ScreenTimeToday",
    "ScreenTimeTrack",
    "ScreenTimeTrackResponse",
    "UnreadCount",
]
