"""SQLAlchemy model for scheduled user reminders."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from projecthub.infrastructure.database import Base
from projecthub.utils import local_now_naive


class ReminderModel(Base):
    """Database representation for user reminders."""

    __tablename__ = "reminder"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(20), nullable=False)
    remind_at = Column(DateTime(), nullable=False)
    is_sent = Column(Boolean, nullable=False, default=False, index=True)
    is_read = Column(Boolean, nullable=False, default=False)
    related_model = Column(String(50), nullable=True)
    related_model_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)

    __table_args__ = (Index("ix_reminder_user_remind_at", "user_id", "remind_at"),)


__all__ = ["ReminderModel"]
