"""Persistence layer for activity log records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from projecthub.domain.entities import ActivityAction, ActivityLog
from projecthub.infrastructure.models import ActivityLogModel
from projecthub.utils import local_now_naive, localize, to_storage


class ActivityLogRepository:
    """Append and query :class:`ActivityLog` entries.

    Entries are append-only: there are no update or delete helpers.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: ActivityLog) -> ActivityLog:
        model = ActivityLogModel(
            user_id=entry.user_id,
            user_role=entry.user_role,
            action=ActivityAction(entry.action).value,
            model=entry.model,
            model_id=entry.model_id,
            description=entry.description,
            ip_address=entry.ip_address,
            user_agent=entry.user_agent,
            event_type=entry.event_type,
            screen_time=entry.screen_time,
            changes=entry.changes,
            created_at=to_storage(entry.created_at) or local_now_naive(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(
        self,
        *,
        role: str | None = None,
        action: ActivityAction | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int | None = 50,
    ) -> list[ActivityLog]:
        """Return entries newest first, filtered by the provided criteria.

        ``start`` is inclusive and ``end`` exclusive.
        """

        query = self.session.query(ActivityLogModel)
        if role is not None:
            query = query.filter(ActivityLogModel.user_role == role)
        if action is not None:
            query = query.filter(ActivityLogModel.action == ActivityAction(action).value)
        query = self._within(query, start, end)
        if search:
            query = query.filter(ActivityLogModel.description.contains(search))
        query = query.order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        models: Iterable[ActivityLogModel] = query.all()
        return [self._to_entity(model) for model in models]

    def count(self, *, start: datetime | None = None, end: datetime | None = None) -> int:
        return self._within(self.session.query(ActivityLogModel), start, end).count()

    def count_by_role(self) -> Sequence[tuple[str | None, int]]:
        rows = (
            self.session.query(ActivityLogModel.user_role, func.count(ActivityLogModel.id))
            .group_by(ActivityLogModel.user_role)
            .order_by(ActivityLogModel.user_role)
            .all()
        )
        return [(role, int(total)) for role, total in rows]

    def count_by_action(self) -> Sequence[tuple[str, int]]:
        rows = (
            self.session.query(ActivityLogModel.action, func.count(ActivityLogModel.id))
            .group_by(ActivityLogModel.action)
            .order_by(ActivityLogModel.action)
            .all()
        )
        return [(action, int(total)) for action, total in rows]

    def sum_screen_time(self, user_id: int, *, start: datetime, end: datetime) -> int:
        query = (
            self.session.query(func.coalesce(func.sum(ActivityLogModel.screen_time), 0))
            .filter(ActivityLogModel.user_id == user_id)
            .filter(ActivityLogModel.event_type == "screen_time")
        )
        total = self._within(query, start, end).scalar()
        return int(total or 0)

    @staticmethod
    def _within(query: Query, start: datetime | None, end: datetime | None) -> Query:
        if start is not None:
            query = query.filter(ActivityLogModel.created_at >= to_storage(start))
        if end is not None:
            query = query.filter(ActivityLogModel.created_at < to_storage(end))
        return query

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityLog:
        return ActivityLog(
            id=model.id,
            user_id=model.user_id,
            user_role=model.user_role,
            action=ActivityAction(model.action),
            model=model.model,
            model_id=model.model_id,
            description=model.description,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            event_type=model.event_type,
            screen_time=model.screen_time,
            changes=model.changes,
            created_at=localize(model.created_at),
        )


__all__ = ["ActivityLogRepository"]
