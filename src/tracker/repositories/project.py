"""Repository for Project entity."""

from uuid import UUID

from sqlmodel import col, select
from sqlmodel.sql.expression import Select

from src.tracker.models import Project, User
from src.tracker.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity.

    Read methods that return ``(project, owner)`` pairs join the owner row
    in the same query so callers can expand the owner without a second trip.
    """

    model = Project

    def _with_owner(self) -> Select[tuple[Project, User]]:
        return select(Project, User).join(User, col(Project.owner_id) == col(User.id))

    async def get_with_owner(self, project_id: UUID) -> tuple[Project, User] | None:
        """Get a project and its owner, or None if the project does not exist."""
        result = await self.session.execute(
            self._with_owner().where(col(Project.id) == project_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def list_with_owner(self, owner_id: UUID | None = None) -> list[tuple[Project, User]]:
        """List projects newest first, optionally restricted to one owner."""
        query = self._with_owner()
        if owner_id is not None:
            query = query.where(col(Project.owner_id) == owner_id)
        query = query.order_by(col(Project.created_at).desc(), col(Project.id).desc())
        result = await self.session.execute(query)
        return [(project, owner) for project, owner in result.all()]
