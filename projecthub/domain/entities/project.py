"""Domain entities describing projects and their team members."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .user import User


@dataclass
class ProjectMember:
    """Membership of a user in a project team."""

    id: int | None
    project_id: int | None
    user_id: int
    role: str | None = None
    user: User | None = None


@dataclass
class Project:
    """Project with an optional deadline, a manager and team members."""

    id: int | None
    name: str
    deadline: datetime | None = None
    project_manager_id: int | None = None
    status: str | None = None
    project_manager: User | None = None
    members: list[ProjectMember] = field(default_factory=list)
    created_at: datetime | None = None


__all__ = ["Project", "ProjectMember"]
