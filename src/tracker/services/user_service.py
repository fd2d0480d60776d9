"""User administration service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.models import User, UserRole
from src.tracker.models.base import utc_now
from src.tracker.repositories import UserRepository

logger = get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def change_role(self, user_id: UUID, role: UserRole, changed_by: UUID) -> User:
        """Set a user's role. Authorization is the caller's job (admin-only route)."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        previous = user.role
        user.role = role.value
        user.updated_at = utc_now()

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User role changed",
            target_user_id=str(user.id),
            previous_role=previous,
            new_role=user.role,
            changed_by=str(changed_by),
        )
        return user
