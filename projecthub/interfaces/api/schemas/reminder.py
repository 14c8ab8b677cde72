"""Pydantic models describing reminder payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from projecthub.domain.entities import ReminderType, ResourceKind


class ReminderBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: ReminderType
    remind_at: datetime


class ReminderCreate(ReminderBase):
    """Payload used to schedule a new reminder."""

    user_id: int | None = Field(
        default=None,
        description="Owner of the reminder; only administrators may target another user",
    )
    related_model: ResourceKind | None = None
    related_model_id: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _validate_related_pair(self) -> "ReminderCreate":
        if (self.related_model is None) != (self.related_model_id is None):
            raise ValueError("related_model and related_model_id must be provided together")
        return self


class ReminderUpdate(ReminderBase):
    model_config = ConfigDict(extra="forbid")


class ReminderRead(BaseModel):
    """Representation of a reminder returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: ReminderType
    title: str
    description: str | None = None
    remind_at: datetime
    is_sent: bool
    is_read: bool
    related_model: ResourceKind | None = None
    related_model_id: int | None = None
    created_at: datetime | None = None


class ReminderMutationResponse(BaseModel):
    message: str
    reminder: ReminderRead


__all__ = [
    "ReminderCreate",
    "ReminderMutationResponse",
    "ReminderRead",
    "ReminderUpdate",
]
