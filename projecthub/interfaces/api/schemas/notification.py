"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from projecthub.domain.entities import NotificationType, ResourceKind


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: NotificationType
    related_type: ResourceKind | None = None
    related_id: int | None = None
    title: str
    message: str
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime


class UnreadCount(BaseModel):
    count: int


class NotificationBulkReadResponse(BaseModel):
    message: str
    updated: int


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "MessageResponse",
    "NotificationBulkReadResponse",
    "NotificationRead",
    "UnreadCount",
]
