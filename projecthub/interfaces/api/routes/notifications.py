"""Endpoints for reading and dismissing notifications."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from projecthub.application.use_cases.notifications import (
    count_unread_notifications as count_unread_notifications_uc,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read as mark_all_notifications_as_read_uc,
    mark_notification_as_read as mark_notification_as_read_uc,
)
from projecthub.domain.entities import Notification, User, subject_columns
from projecthub.infrastructure.database import get_db
from projecthub.interfaces.api.dependencies import get_current_active_user
from projecthub.interfaces.api.schemas import (
    MessageResponse,
    NotificationBulkReadResponse,
    NotificationRead,
    UnreadCount,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    related_type, related_id = subject_columns(notification.subject)
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        type=notification.type,
        related_type=related_type,
        related_id=related_id,
        title=notification.title,
        message=notification.message,
        is_read=notification.is_read,
        read_at=notification.read_at,
        created_at=notification.created_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications_uc(db, user_id=current_user.id, skip=skip, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCount:
    return UnreadCount(count=count_unread_notifications_uc(db, user_id=current_user.id))


@router.patch("/mark-all-read", response_model=NotificationBulkReadResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBulkReadResponse:
    updated = mark_all_notifications_as_read_uc(db, user_id=current_user.id)
    return NotificationBulkReadResponse(
        message="All notifications marked as read", updated=updated
    )


@router.patch("/{notification_id}/mark-read", response_model=NotificationRead)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Mark one of the user's notifications as read."""

    try:
        notification = mark_notification_as_read_uc(
            db, notification_id=notification_id, user_id=current_user.id
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        delete_notification_uc(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Notification deleted")


__all__ = ["router"]
