from src.tracker.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, TokenPayload
from src.tracker.schemas.envelope import ApiResponse, MessageResponse
from src.tracker.schemas.project import (
    ProjectCreate,
    ProjectOwner,
    ProjectRead,
    ProjectUpdate,
)
from src.tracker.schemas.user import UserRead, UserRoleUpdate

__all__ = [
    "ApiResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProjectCreate",
    "ProjectOwner",
    "ProjectRead",
    "ProjectUpdate",
    "RegisterRequest",
    "TokenPayload",
    "UserRead",
    "UserRoleUpdate",
]
