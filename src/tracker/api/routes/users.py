"""User endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.tracker.api.dependencies import AdminUser, CurrentUser, UserServiceDep
from src.tracker.schemas import ApiResponse, UserRead, UserRoleUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=ApiResponse[UserRead],
    responses={401: {"description": "Not authenticated"}},
)
async def get_me(current_user: CurrentUser) -> ApiResponse[UserRead]:
    """Get the authenticated user."""
    return ApiResponse(data=UserRead.model_validate(current_user))


@router.patch(
    "/{user_id}/role",
    response_model=ApiResponse[UserRead],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def change_role(
    user_id: UUID,
    body: UserRoleUpdate,
    admin: AdminUser,
    service: UserServiceDep,
) -> ApiResponse[UserRead]:
    """Change a user's role. Admin only."""
    user = await service.change_role(user_id, body.role, changed_by=admin.id)
    return ApiResponse(message="User role updated successfully", data=UserRead.model_validate(user))
