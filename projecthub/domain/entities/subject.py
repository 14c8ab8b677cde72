"""Typed reference to the domain object a record is about."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    """Entity kinds that notifications and reminders may point at."""

    PROJECT = "Project"
    TASK = "Task"
    CLIENT = "Client"
    EMPLOYEE = "Employee"
    CALENDAR_EVENT = "CalendarEvent"


@dataclass(frozen=True)
class SubjectRef:
    """Identify a subject entity by its kind and primary key."""

    kind: ResourceKind
    id: int

    @classmethod
    def from_columns(cls, kind: str | None, entity_id: int | None) -> "SubjectRef | None":
        """Build a reference from its persisted ``(type name, id)`` pair.

        Returns ``None`` when either column is empty and raises ``ValueError``
        for kind names that are not part of :class:`ResourceKind`.
        """

        if kind is None or entity_id is None:
            return None
        return cls(kind=ResourceKind(kind), id=int(entity_id))

    def to_columns(self) -> tuple[str, int]:
        return self.kind.value, self.id


def subject_columns(subject: SubjectRef | None) -> tuple[str | None, int | None]:
    """Return the ``(type name, id)`` pair to persist for ``subject``."""

    if subject is None:
        return None, None
    return subject.to_columns()


__all__ = ["ResourceKind", "SubjectRef", "subject_columns"]
