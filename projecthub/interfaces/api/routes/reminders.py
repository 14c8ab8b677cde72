"""Routes for managing personal reminders."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from projecthub.application.use_cases.reminders import (
    count_pending_reminders as count_pending_reminders_uc,
    create_reminder as create_reminder_uc,
    delete_reminder as delete_reminder_uc,
    get_reminder as get_reminder_uc,
    list_reminders as list_reminders_uc,
    mark_reminder_as_read as mark_reminder_as_read_uc,
    update_reminder as update_reminder_uc,
)
from projecthub.domain.entities import Reminder, ReminderType, SubjectRef, User, subject_columns
from projecthub.infrastructure.database import get_db
from projecthub.infrastructure.repositories import (
    REMINDER_STATUS_PENDING,
    REMINDER_STATUS_UNREAD,
)
from projecthub.interfaces.api.dependencies import get_current_active_user
from projecthub.interfaces.api.schemas import (
    MessageResponse,
    ReminderCreate,
    ReminderMutationResponse,
    ReminderRead,
    ReminderUpdate,
    UnreadCount,
)

router = APIRouter(prefix="/reminders", tags=["reminders"])

_ALL_TYPES = "all"


def _reminder_to_schema(reminder: Reminder) -> ReminderRead:
    related_model, related_model_id = subject_columns(reminder.subject)
    return ReminderRead(
        id=reminder.id or 0,
        user_id=reminder.user_id,
        type=reminder.type,
        title=reminder.title,
        description=reminder.description,
        remind_at=reminder.remind_at,
        is_sent=reminder.is_sent,
        is_read=reminder.is_read,
        related_model=related_model,
        related_model_id=related_model_id,
        created_at=reminder.created_at,
    )


def _access_error(exc: Exception) -> HTTPException:
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/", response_model=list[ReminderRead])
def list_reminders(
    type_filter: str | None = Query(None, alias="type", description="Reminder type or 'all'"),
    status_filter: str | None = Query(
        None,
        alias="status",
        pattern=f"^({REMINDER_STATUS_UNREAD}|{REMINDER_STATUS_PENDING})$",
    ),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[ReminderRead]:
    """Return the user's reminders, latest ``remind_at`` first."""

    reminder_type = None
    if type_filter and type_filter != _ALL_TYPES:
        try:
            reminder_type = ReminderType(type_filter)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown reminder type '{type_filter}'",
            ) from exc

    reminders = list_reminders_uc(
        db,
        user_id=current_user.id,
        reminder_type=reminder_type,
        status=status_filter,
        skip=skip,
        limit=limit,
    )
    return [_reminder_to_schema(reminder) for reminder in reminders]


@router.post("/", response_model=ReminderMutationResponse, status_code=status.HTTP_201_CREATED)
def create_reminder(
    reminder_in: ReminderCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReminderMutationResponse:
    subject = None
    if reminder_in.related_model is not None and reminder_in.related_model_id is not None:
        subject = SubjectRef(kind=reminder_in.related_model, id=reminder_in.related_model_id)

    try:
        reminder = create_reminder_uc(
            db,
            current_user=current_user,
            title=reminder_in.title,
            reminder_type=reminder_in.type,
            remind_at=reminder_in.remind_at,
            description=reminder_in.description,
            subject=subject,
            user_id=reminder_in.user_id,
        )
    except (PermissionError, ValueError) as exc:
        raise _access_error(exc) from exc
    return ReminderMutationResponse(
        message="Reminder created successfully", reminder=_reminder_to_schema(reminder)
    )


@router.get("/pending-count", response_model=UnreadCount)
def pending_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCount:
    return UnreadCount(count=count_pending_reminders_uc(db, user_id=current_user.id))


@router.get("/{reminder_id}", response_model=ReminderRead)
def read_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReminderRead:
    try:
        reminder = get_reminder_uc(db, reminder_id=reminder_id, current_user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _access_error(exc) from exc
    return _reminder_to_schema(reminder)


@router.put("/{reminder_id}", response_model=ReminderMutationResponse)
def update_reminder(
    reminder_id: int,
    reminder_in: ReminderUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ReminderMutationResponse:
    try:
        reminder = update_reminder_uc(
            db,
            reminder_id=reminder_id,
            current_user=current_user,
            title=reminder_in.title,
            reminder_type=reminder_in.type,
            remind_at=reminder_in.remind_at,
            description=reminder_in.description,
        )
    except (PermissionError, ValueError) as exc:
        raise _access_error(exc) from exc
    return ReminderMutationResponse(
        message="Reminder updated successfully", reminder=_reminder_to_schema(reminder)
    )


@router.patch("/{reminder_id}/mark-read", response_model=MessageResponse)
def mark_as_read(
    reminder_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        mark_reminder_as_read_uc(db, reminder_id=reminder_id, current_user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _access_error(exc) from exc
    return MessageResponse(message="Reminder marked as read")


@router.delete("/{reminder_id}", response_model=MessageResponse)
def delete_reminder(
    reminder_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        delete_reminder_uc(db, reminder_id=reminder_id, current_user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _access_error(exc) from exc
    return MessageResponse(message="Reminder deleted successfully")


__all__ = ["router"]
