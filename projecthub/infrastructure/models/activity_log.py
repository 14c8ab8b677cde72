"""SQLAlchemy model for the activity audit trail."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.types import JSON

from projecthub.infrastructure.database import Base
from projecthub.utils import local_now_naive


class ActivityLogModel(Base):
    """Database representation of audited user activity."""

    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True)
    # Kept alongside user_id so the role survives user deletion.
    user_role = Column(String(50), nullable=True)
    action = Column(String(20), nullable=False, index=True)
    model = Column(String(100), nullable=True, index=True)
    model_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    event_type = Column(String(255), nullable=True)
    screen_time = Column(Integer, nullable=True)
    changes = Column(JSON, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)

    __table_args__ = (Index("ix_activity_log_user_created", "user_id", "created_at"),)


__all__ = ["ActivityLogModel"]
