"""Test helper functions for common data creation patterns."""

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.security import create_access_token
from src.tracker.models import Project, User
from tests.factories import ProjectFactory, UserFactory


def auth_headers(user: User, expires_delta: timedelta | None = None) -> dict[str, str]:
    """Bearer header for ``user`` without going through /auth/login."""
    token = create_access_token(user.id, user.email, user.role, expires_delta=expires_delta)
    return {"Authorization": f"Bearer {token}"}


async def create_user(session: AsyncSession, admin: bool = False, **user_kwargs) -> User:
    """Create and commit a user."""
    user = UserFactory.admin(**user_kwargs) if admin else UserFactory.build(**user_kwargs)
    session.add(user)
    await session.commit()
    return user


async def create_project(session: AsyncSession, owner: User, **project_kwargs) -> Project:
    """Create and commit a project owned by ``owner``."""
    project = ProjectFactory.build(owner_id=owner.id, **project_kwargs)
    session.add(project)
    await session.commit()
    return project
