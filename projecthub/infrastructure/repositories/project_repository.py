"""Read access to projects for scheduled jobs, plus creation helpers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session, joinedload, selectinload

from projecthub.domain.entities import Project, ProjectMember
from projecthub.infrastructure.models import ProjectMemberModel, ProjectModel
from projecthub.infrastructure.repositories.user_repository import UserRepository
from projecthub.utils import localize, to_storage


class ProjectRepository:
    """Provide queries over :class:`Project` aggregates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_with_deadline_between(
        self, start: datetime, end: datetime
    ) -> Sequence[Project]:
        """Return projects whose deadline falls within ``[start, end]``.

        The project manager and every member's user are loaded eagerly so the
        returned aggregates can be used after the session is closed.
        """

        query = (
            self.session.query(ProjectModel)
            .options(
                joinedload(ProjectModel.project_manager),
                selectinload(ProjectModel.members).joinedload(ProjectMemberModel.user),
            )
            .filter(ProjectModel.deadline.is_not(None))
            .filter(ProjectModel.deadline >= to_storage(start))
            .filter(ProjectModel.deadline <= to_storage(end))
            .order_by(ProjectModel.deadline, ProjectModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, project: Project) -> Project:
        model = ProjectModel(
            name=project.name,
            deadline=to_storage(project.deadline),
            project_manager_id=project.project_manager_id,
            status=project.status,
        )
        for member in project.members:
            model.members.append(
                ProjectMemberModel(user_id=member.user_id, role=member.role)
            )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _member_to_entity(model: ProjectMemberModel) -> ProjectMember:
        return ProjectMember(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            role=model.role,
            user=UserRepository._to_entity(model.user) if model.user else None,
        )

    @classmethod
    def _to_entity(cls, model: ProjectModel) -> Project:
        manager = model.project_manager
        return Project(
            id=model.id,
            name=model.name,
            deadline=localize(model.deadline),
            project_manager_id=model.project_manager_id,
            status=model.status,
            project_manager=UserRepository._to_entity(manager) if manager else None,
            members=[cls._member_to_entity(member) for member in model.members],
            created_at=localize(model.created_at),
        )


__all__ = ["ProjectRepository"]
