"""Per-resource ownership check shared by services and route handlers."""

from uuid import UUID

from src.tracker.core.exceptions import ForbiddenError


def check_ownership(
    owner_id: UUID,
    requester_id: UUID,
    *,
    privileged: bool,
    action: str = "access this resource",
) -> None:
    """Allow privileged callers unconditionally, otherwise require ownership.

    Raises:
        ForbiddenError: if the requester is neither privileged nor the owner.
    """
    if privileged:
        return
    if owner_id != requester_id:
        raise ForbiddenError(f"You do not have permission to {action}")
