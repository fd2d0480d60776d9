"""Authorization context threaded from the role guard to ownership checks."""

from dataclasses import dataclass
from uuid import UUID

from src.tracker.core.authz import check_ownership
from src.tracker.models import User


@dataclass(frozen=True)
class AuthzContext:
    """Result of the member-or-admin guard.

    Attributes:
        user: The authenticated requester
        privileged: True for admins; skips every later ownership check
    """

    user: User
    privileged: bool

    def ensure_can_access(self, owner_id: UUID, action: str = "access this resource") -> None:
        check_ownership(owner_id, self.user.id, privileged=self.privileged, action=action)
