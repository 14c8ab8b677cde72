"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from projecthub.domain.entities import (
    Notification,
    NotificationType,
    SubjectRef,
    subject_columns,
)
from projecthub.infrastructure.models import NotificationModel
from projecthub.infrastructure.repositories.filters import matches
from projecthub.utils import local_now_naive, localize, to_storage


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        skip: int = 0,
        limit: int | None = 20,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_if_absent(self, notification: Notification) -> tuple[Notification, bool]:
        """Persist ``notification`` unless a row with the same dedupe key exists.

        The key is ``(user_id, type, subject, title, message)``. Returns the
        stored notification and ``True`` when a new row was written.
        """

        related_type, related_id = subject_columns(notification.subject)
        existing = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == notification.user_id)
            .filter(NotificationModel.type == NotificationType(notification.type).value)
            .filter(matches(NotificationModel.related_type, related_type))
            .filter(matches(NotificationModel.related_id, related_id))
            .filter(NotificationModel.title == notification.title)
            .filter(NotificationModel.message == notification.message)
            .order_by(NotificationModel.id)
            .first()
        )
        if existing is not None:
            return self._to_entity(existing), False
        return self.create(notification), True

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_model_for_user(notification_id, user_id)
        if model is None:
            return None
        model.is_read = True
        model.read_at = local_now_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, *, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: local_now_naive(),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        """Delete a notification owned by ``user_id``.

        Returns ``True`` when a record was removed and ``False`` when the
        requested notification was not found.
        """

        model = self._get_model_for_user(notification_id, user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _get_model_for_user(
        self, notification_id: int, user_id: int
    ) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.user_id = notification.user_id
        model.type = NotificationType(notification.type).value
        model.related_type, model.related_id = subject_columns(notification.subject)
        model.title = notification.title
        model.message = notification.message
        model.is_read = notification.is_read
        model.read_at = to_storage(notification.read_at)
        model.created_at = to_storage(notification.created_at) or local_now_naive()

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=NotificationType(model.type),
            subject=SubjectRef.from_columns(model.related_type, model.related_id),
            title=model.title,
            message=model.message,
            is_read=bool(model.is_read),
            read_at=localize(model.read_at),
            created_at=localize(model.created_at),
        )


__all__ = ["NotificationRepository"]
