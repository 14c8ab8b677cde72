"""Daily scan that reminds project stakeholders about upcoming deadlines."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Final

from sqlalchemy.orm import Session

from projecthub.domain.entities import (
    Notification,
    NotificationType,
    Project,
    Reminder,
    ReminderType,
    ResourceKind,
    SubjectRef,
)
from projecthub.infrastructure.repositories import (
    NotificationRepository,
    ProjectRepository,
    ReminderRepository,
)
from projecthub.utils import local_now, localize

logger = logging.getLogger(__name__)

DEADLINE_THRESHOLD_DAYS: Final[frozenset[int]] = frozenset({1, 3, 7})
DEADLINE_LOOKAHEAD: Final[timedelta] = timedelta(days=7)
DEADLINE_REMINDER_TITLE: Final[str] = "Project Deadline Reminder"
_SECONDS_PER_DAY: Final[int] = 24 * 60 * 60


@dataclass(frozen=True)
class DeadlineScanResult:
    """Summary of a deadline scan run."""

    projects_checked: int
    projects_notified: int
    notifications_created: int
    reminders_created: int


def days_until_deadline(deadline: datetime, now: datetime) -> int:
    """Return the signed number of whole days between ``now`` and ``deadline``."""

    delta = localize(deadline) - localize(now)
    return math.floor(delta.total_seconds() / _SECONDS_PER_DAY)


def build_deadline_message(project: Project, days: int) -> str:
    deadline = localize(project.deadline)
    return (
        f"Project '{project.name}' deadline is in {days} day(s) - "
        f"{deadline.strftime('%b %d, %Y')}"
    )


def deadline_recipients(project: Project) -> list[int]:
    """Return the users to notify: the manager followed by every member.

    A user who is both manager and member appears twice and therefore gets a
    notification and a reminder for each role.
    """

    recipients: list[int] = []
    if project.project_manager is not None and project.project_manager.id is not None:
        recipients.append(project.project_manager.id)
    recipients.extend(member.user_id for member in project.members)
    return recipients


def scan_project_deadlines(
    session: Session, *, now: datetime | None = None
) -> DeadlineScanResult:
    """Create deadline notifications and reminders for projects due soon.

    Projects are selected when their deadline lies within the next seven days
    and notified only when exactly 1, 3 or 7 whole days remain. Records are
    written with create-if-absent semantics, so running the scan again for the
    same moment does not duplicate them. Persistence errors propagate to the
    caller.
    """

    current = localize(now) if now is not None else local_now()
    projects = ProjectRepository(session).list_with_deadline_between(
        current, current + DEADLINE_LOOKAHEAD
    )
    notifications = NotificationRepository(session)
    reminders = ReminderRepository(session)

    projects_notified = 0
    notifications_created = 0
    reminders_created = 0

    for project in projects:
        if project.deadline is None or project.id is None:
            continue

        days = days_until_deadline(project.deadline, current)
        if days not in DEADLINE_THRESHOLD_DAYS:
            continue

        message = build_deadline_message(project, days)
        subject = SubjectRef(kind=ResourceKind.PROJECT, id=project.id)
        remind_at = localize(project.deadline) - timedelta(days=1)

        for user_id in deadline_recipients(project):
            _, created = notifications.create_if_absent(
                Notification(
                    id=None,
                    user_id=user_id,
                    type=NotificationType.DEADLINE_REMINDER,
                    subject=subject,
                    title=DEADLINE_REMINDER_TITLE,
                    message=message,
                )
            )
            notifications_created += int(created)

            _, created = reminders.create_if_absent(
                Reminder(
                    id=None,
                    user_id=user_id,
                    type=ReminderType.DEADLINE,
                    subject=subject,
                    title=DEADLINE_REMINDER_TITLE,
                    description=message,
                    remind_at=remind_at,
                )
            )
            reminders_created += int(created)

        logger.debug("Project %s is %s day(s) from its deadline", project.id, days)
        projects_notified += 1

    logger.info(
        "Checked %s projects. Created reminders for %s projects.",
        len(projects),
        projects_notified,
    )
    return DeadlineScanResult(
        projects_checked=len(projects),
        projects_notified=projects_notified,
        notifications_created=notifications_created,
        reminders_created=reminders_created,
    )


__all__ = [
    "DEADLINE_LOOKAHEAD",
    "DEADLINE_REMINDER_TITLE",
    "DEADLINE_THRESHOLD_DAYS",
    "DeadlineScanResult",
    "build_deadline_message",
    "days_until_deadline",
    "deadline_recipients",
    "scan_project_deadlines",
]
