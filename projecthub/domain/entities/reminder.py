"""Domain entity representing a scheduled personal reminder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .subject import SubjectRef


class ReminderType(str, Enum):
    TASK = "task"
    MEETING = "meeting"
    DEADLINE = "deadline"
    EVENT = "event"
    OTHER = "other"


@dataclass
class Reminder:
    """To-do item that should surface for a user at ``remind_at``."""

    id: int | None
    user_id: int
    type: ReminderType
    subject: SubjectRef | None
    title: str
    description: str | None
    remind_at: datetime
    is_sent: bool = False
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Reminder", "ReminderType"]
