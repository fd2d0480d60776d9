"""Service-level tests for ProjectService."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.exceptions import ForbiddenError, NotFoundError
from src.tracker.models import Project, ProjectStatus, User
from src.tracker.schemas.project import ProjectCreate, ProjectUpdate
from src.tracker.services import ProjectService
from tests.factories import generate_uuid7
from tests.helpers import create_project

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_create_sets_owner_and_defaults(
    project_service: ProjectService, member: User
) -> None:
    project = await project_service.create(ProjectCreate(name="Alpha"), owner_id=member.id)

    assert project.owner.id == member.id
    assert project.owner.email == member.email
    assert project.status is ProjectStatus.PLANNING


async def test_list_scoping(
    project_service: ProjectService,
    db_session: AsyncSession,
    member: User,
    other_member: User,
) -> None:
    await create_project(db_session, member)
    await create_project(db_session, other_member)

    own = await project_service.list_all(member.id, is_admin=False)
    everything = await project_service.list_all(member.id, is_admin=True)

    assert {p.owner.id for p in own} == {member.id}
    assert len(everything) == 2


async def test_update_touches_only_given_fields(
    project_service: ProjectService, db_session: AsyncSession, member: User
) -> None:
    existing = await create_project(db_session, member, name="Beta", description="Keep me")

    updated = await project_service.update(
        existing.id,
        ProjectUpdate(status=ProjectStatus.COMPLETED),
        requester_id=member.id,
        is_admin=False,
    )

    assert updated.name == "Beta"
    assert updated.description == "Keep me"
    assert updated.status is ProjectStatus.COMPLETED
    assert updated.owner.id == member.id
    assert updated.updated_at >= existing.updated_at


async def test_update_can_clear_description(
    project_service: ProjectService, db_session: AsyncSession, member: User
) -> None:
    existing = await create_project(db_session, member, description="Old")

    updated = await project_service.update(
        existing.id,
        ProjectUpdate.model_validate({"description": None}),
        requester_id=member.id,
        is_admin=False,
    )

    assert updated.description is None


async def test_non_owner_update_is_forbidden(
    project_service: ProjectService,
    db_session: AsyncSession,
    member: User,
    other_member: User,
) -> None:
    existing = await create_project(db_session, member, name="Gamma")

    with pytest.raises(ForbiddenError):
        await project_service.update(
            existing.id, ProjectUpdate(name="Mine now"), requester_id=other_member.id,
            is_admin=False,
        )

    await db_session.refresh(existing)
    assert existing.name == "Gamma"


async def test_delete_removes_row(
    project_service: ProjectService, db_session: AsyncSession, member: User, admin: User
) -> None:
    existing = await create_project(db_session, member)

    message = await project_service.delete(existing.id, requester_id=admin.id, is_admin=True)

    assert message == "Project deleted successfully"
    db_session.expunge_all()
    assert await db_session.get(Project, existing.id) is None


async def test_non_owner_delete_is_forbidden(
    project_service: ProjectService,
    db_session: AsyncSession,
    member: User,
    other_member: User,
) -> None:
    existing = await create_project(db_session, member)

    with pytest.raises(ForbiddenError, match="delete this project"):
        await project_service.delete(existing.id, requester_id=other_member.id, is_admin=False)


async def test_missing_project(project_service: ProjectService, member: User) -> None:
    with pytest.raises(NotFoundError, match="Project not found"):
        await project_service.get_by_id(generate_uuid7())
    with pytest.raises(NotFoundError):
        await project_service.delete(generate_uuid7(), requester_id=member.id, is_admin=True)
