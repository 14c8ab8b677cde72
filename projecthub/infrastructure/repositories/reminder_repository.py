"""Persistence helpers for reminder entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from projecthub.domain.entities import Reminder, ReminderType, SubjectRef, subject_columns
from projecthub.infrastructure.models import ReminderModel
from projecthub.infrastructure.repositories.filters import matches
from projecthub.utils import local_now, local_now_naive, localize, to_storage

REMINDER_STATUS_UNREAD = "unread"
REMINDER_STATUS_PENDING = "pending"


class ReminderRepository:
    """Provide CRUD operations for :class:`Reminder` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        reminder_type: ReminderType | None = None,
        status: str | None = None,
        now: datetime | None = None,
        skip: int = 0,
        limit: int | None = 50,
    ) -> Sequence[Reminder]:
        query = self.session.query(ReminderModel).filter(ReminderModel.user_id == user_id)
        if reminder_type is not None:
            query = query.filter(ReminderModel.type == ReminderType(reminder_type).value)
        if status == REMINDER_STATUS_UNREAD:
            query = query.filter(ReminderModel.is_read.is_(False))
        elif status == REMINDER_STATUS_PENDING:
            moment = to_storage(now or local_now())
            query = query.filter(ReminderModel.is_sent.is_(False)).filter(
                ReminderModel.remind_at <= moment
            )
        query = query.order_by(ReminderModel.remind_at.desc(), ReminderModel.id.desc())
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(ReminderModel)
            .filter(ReminderModel.user_id == user_id)
            .filter(ReminderModel.is_read.is_(False))
            .count()
        )

    def get(self, reminder_id: int) -> Reminder | None:
        model = self.session.get(ReminderModel, reminder_id)
        return self._to_entity(model) if model else None

    def create(self, reminder: Reminder) -> Reminder:
        model = ReminderModel()
        self._apply_entity_to_model(model, reminder)
        model.created_at = to_storage(reminder.created_at) or local_now_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_if_absent(self, reminder: Reminder) -> tuple[Reminder, bool]:
        """Persist ``reminder`` unless a row with the same dedupe key exists.

        The key is ``(user_id, type, subject, title, description, remind_at)``.
        Returns the stored reminder and ``True`` when a new row was written.
        """

        related_model, related_model_id = subject_columns(reminder.subject)
        existing = (
            self.session.query(ReminderModel)
            .filter(ReminderModel.user_id == reminder.user_id)
            .filter(ReminderModel.type == ReminderType(reminder.type).value)
            .filter(matches(ReminderModel.related_model, related_model))
            .filter(matches(ReminderModel.related_model_id, related_model_id))
            .filter(ReminderModel.title == reminder.title)
            .filter(matches(ReminderModel.description, reminder.description))
            .filter(ReminderModel.remind_at == to_storage(reminder.remind_at))
            .order_by(ReminderModel.id)
            .first()
        )
        if existing is not None:
            return self._to_entity(existing), False
        return self.create(reminder), True

    def update(self, reminder: Reminder) -> Reminder:
        if reminder.id is None:
            raise ValueError("Reminder id is required for updates")
        model = self.session.get(ReminderModel, reminder.id)
        if model is None:
            msg = f"Reminder with id {reminder.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, reminder)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, reminder_id: int) -> bool:
        model = self.session.get(ReminderModel, reminder_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: ReminderModel, reminder: Reminder) -> None:
        model.user_id = reminder.user_id
        model.type = ReminderType(reminder.type).value
        model.related_model, model.related_model_id = subject_columns(reminder.subject)
        model.title = reminder.title
        model.description = reminder.description
        model.remind_at = to_storage(reminder.remind_at)
        model.is_sent = reminder.is_sent
        model.is_read = reminder.is_read

    @staticmethod
    def _to_entity(model: ReminderModel) -> Reminder:
        return Reminder(
            id=model.id,
            user_id=model.user_id,
            type=ReminderType(model.type),
            subject=SubjectRef.from_columns(model.related_model, model.related_model_id),
            title=model.title,
            description=model.description,
            remind_at=localize(model.remind_at),
            is_sent=bool(model.is_sent),
            is_read=bool(model.is_read),
            created_at=localize(model.created_at),
        )


__all__ = ["REMINDER_STATUS_PENDING", "REMINDER_STATUS_UNREAD", "ReminderRepository"]
