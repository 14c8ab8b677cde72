"""Use cases for reading and dismissing a user's notifications."""

from sqlalchemy.orm import Session

from projecthub.domain.entities import Notification
from projecthub.infrastructure.repositories import NotificationRepository

NOTIFICATION_NOT_FOUND = "Notification not found"


def list_notifications(
    session: Session, *, user_id: int, skip: int = 0, limit: int = 20
) -> list[Notification]:
    """Return the most recent notifications addressed to ``user_id``."""

    return list(NotificationRepository(session).list_for_user(user_id, skip=skip, limit=limit))


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_as_read(
    session: Session, *, notification_id: int, user_id: int
) -> Notification:
    """Flag a notification as read or raise ``ValueError`` if it is not the user's."""

    notification = NotificationRepository(session).mark_as_read(
        notification_id, user_id=user_id
    )
    if notification is None:
        raise ValueError(NOTIFICATION_NOT_FOUND)
    return notification


def mark_all_notifications_as_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id=user_id)


def delete_notification(session: Session, *, notification_id: int, user_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise ValueError(NOTIFICATION_NOT_FOUND)


__all__ = [
    "NOTIFICATION_NOT_FOUND",
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
