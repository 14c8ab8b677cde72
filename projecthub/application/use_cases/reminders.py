"""Use cases for managing personal reminders."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from projecthub.domain.entities import Reminder, ReminderType, SubjectRef, User
from projecthub.infrastructure.repositories import ReminderRepository, UserRepository

REMINDER_NOT_FOUND = "Reminder not found"
REMINDER_FORBIDDEN = "Unauthorized"


def _get_owned_reminder(session: Session, reminder_id: int, user: User) -> Reminder:
    """Return the reminder if it exists and belongs to ``user``.

    Raises ``ValueError`` when the reminder does not exist and
    ``PermissionError`` when it belongs to someone else.
    """

    reminder = ReminderRepository(session).get(reminder_id)
    if reminder is None:
        raise ValueError(REMINDER_NOT_FOUND)
    if reminder.user_id != user.id:
        raise PermissionError(REMINDER_FORBIDDEN)
    return reminder


def list_reminders(
    session: Session,
    *,
    user_id: int,
    reminder_type: ReminderType | None = None,
    status: str | None = None,
    skip: int = 0,
    limit: int = 50,
) -> list[Reminder]:
    return list(
        ReminderRepository(session).list_for_user(
            user_id,
            reminder_type=reminder_type,
            status=status,
            skip=skip,
            limit=limit,
        )
    )


def create_reminder(
    session: Session,
    *,
    current_user: User,
    title: str,
    reminder_type: ReminderType,
    remind_at: datetime,
    description: str | None = None,
    subject: SubjectRef | None = None,
    user_id: int | None = None,
) -> Reminder:
    """Create a reminder for ``current_user`` or, for admins, another user."""

    owner_id = current_user.id
    if user_id is not None and user_id != current_user.id:
        if not current_user.is_admin():
            raise PermissionError(REMINDER_FORBIDDEN)
        if UserRepository(session).get(user_id) is None:
            raise ValueError("User not found")
        owner_id = user_id

    reminder = Reminder(
        id=None,
        user_id=owner_id,
        type=reminder_type,
        subject=subject,
        title=title,
        description=description,
        remind_at=remind_at,
    )
    return ReminderRepository(session).create(reminder)


def get_reminder(session: Session, *, reminder_id: int, current_user: User) -> Reminder:
    return _get_owned_reminder(session, reminder_id, current_user)


def update_reminder(
    session: Session,
    *,
    reminder_id: int,
    current_user: User,
    title: str,
    reminder_type: ReminderType,
    remind_at: datetime,
    description: str | None = None,
) -> Reminder:
    reminder = _get_owned_reminder(session, reminder_id, current_user)
    updated = replace(
        reminder,
        title=title,
        type=reminder_type,
        remind_at=remind_at,
        description=description,
    )
    return ReminderRepository(session).update(updated)


def mark_reminder_as_read(session: Session, *, reminder_id: int, current_user: User) -> Reminder:
    reminder = _get_owned_reminder(session, reminder_id, current_user)
    return ReminderRepository(session).update(replace(reminder, is_read=True))


def delete_reminder(session: Session, *, reminder_id: int, current_user: User) -> None:
    _get_owned_reminder(session, reminder_id, current_user)
    ReminderRepository(session).delete(reminder_id)


def count_pending_reminders(session: Session, *, user_id: int) -> int:
    """Return the number of unread reminders shown in the reminder badge."""

    return ReminderRepository(session).count_unread(user_id)


__all__ = [
    "REMINDER_FORBIDDEN",
    "REMINDER_NOT_FOUND",
    "count_pending_reminders",
    "create_reminder",
    "delete_reminder",
    "get_reminder",
    "list_reminders",
    "mark_reminder_as_read",
    "update_reminder",
]
