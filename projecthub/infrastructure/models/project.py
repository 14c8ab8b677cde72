"""SQLAlchemy models for projects and their team membership."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from projecthub.infrastructure.database import Base
from projecthub.utils import local_now_naive


class ProjectModel(Base):
    """Database representation of a project."""

    __tablename__ = "project"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    deadline = Column(DateTime, nullable=True, index=True)
    project_manager_id = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    status = Column(String(50), nullable=True)
    created_at = Column(DateTime, nullable=False, default=local_now_naive)

    project_manager = relationship("UserModel", lazy="joined")
    members = relationship(
        "ProjectMemberModel",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectMemberModel.id",
    )


class ProjectMemberModel(Base):
    """Association between a project and a member of its team."""

    __tablename__ = "project_member"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer, ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role = Column(String(50), nullable=True)

    project = relationship("ProjectModel", back_populates="members")
    user = relationship("UserModel")


__all__ = ["ProjectMemberModel", "ProjectModel"]
