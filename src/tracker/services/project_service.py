"""Project service - CRUD with ownership enforcement."""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.authz import check_ownership
from src.tracker.core.exceptions import InternalError, NotFoundError, ValidationFailedError
from src.tracker.core.logging import get_logger
from src.tracker.models import Project
from src.tracker.models.base import utc_now
from src.tracker.repositories import ProjectRepository
from src.tracker.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

logger = get_logger(__name__)

PROJECT_NOT_FOUND = "Project not found"


class ProjectService:
    """Project CRUD.

    ``get_by_id`` does not know the requester, so read access is checked by
    the caller; ``update`` and ``delete`` check ownership themselves.
    """

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def _load_expanded(self, project_id: UUID) -> ProjectRead:
        row = await self.project_repo.get_with_owner(project_id)
        if row is None:
            raise NotFoundError(PROJECT_NOT_FOUND)
        return ProjectRead.from_entities(*row)

    async def _get_owned(
        self, project_id: UUID, requester_id: UUID, is_admin: bool, action: str
    ) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError(PROJECT_NOT_FOUND)
        check_ownership(project.owner_id, requester_id, privileged=is_admin, action=action)
        return project

    async def create(self, data: ProjectCreate, owner_id: UUID) -> ProjectRead:
        """Persist a new project owned by ``owner_id``.

        Raises:
            ValidationFailedError: if the store rejects the record.
        """
        values = data.model_dump()
        values["status"] = data.status.value
        project = Project(**values, owner_id=owner_id)
        self.project_repo.add(project)

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("Project create rejected by store", error=str(e))
            raise ValidationFailedError("Project could not be created") from e

        logger.info("Project created", project_id=str(project.id), owner_id=str(owner_id))
        return await self._load_expanded(project.id)

    async def list_all(self, requester_id: UUID, is_admin: bool) -> list[ProjectRead]:
        """All projects for admins, the requester's own projects otherwise. Newest first."""
        rows = await self.project_repo.list_with_owner(None if is_admin else requester_id)
        return [ProjectRead.from_entities(project, owner) for project, owner in rows]

    async def get_by_id(self, project_id: UUID) -> ProjectRead:
        """Raises NotFoundError if the project does not exist."""
        return await self._load_expanded(project_id)

    async def update(
        self,
        project_id: UUID,
        patch: ProjectUpdate,
        requester_id: UUID,
        is_admin: bool,
    ) -> ProjectRead:
        """Apply the fields present in ``patch`` to a project the requester may edit.

        Raises:
            ValidationFailedError: if the store rejects the new values.
        """
        project = await self._get_owned(
            project_id, requester_id, is_admin, action="update this project"
        )

        changes = patch.model_dump(exclude_unset=True)
        if "status" in changes:
            changes["status"] = changes["status"].value
        for field, value in changes.items():
            setattr(project, field, value)
        # SQLModel has no onupdate hook
        project.updated_at = utc_now()

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("Project update rejected by store", error=str(e))
            raise ValidationFailedError("Project could not be updated") from e

        logger.info("Project updated", project_id=str(project.id), updated_by=str(requester_id))
        return await self._load_expanded(project.id)

    async def delete(self, project_id: UUID, requester_id: UUID, is_admin: bool) -> str:
        """Delete a project the requester may edit. Returns a confirmation message.

        Raises:
            InternalError: if the store fails to remove the row.
        """
        project = await self._get_owned(
            project_id, requester_id, is_admin, action="delete this project"
        )

        await self.project_repo.delete(project)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise InternalError("Project could not be deleted") from e

        logger.info("Project deleted", project_id=str(project_id), deleted_by=str(requester_id))
        return "Project deleted successfully"
