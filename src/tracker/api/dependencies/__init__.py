"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

from src.tracker.api.dependencies.auth import (
    AdminUser,
    Authz,
    CurrentUser,
    get_authz_context,
    get_current_user,
    require_admin,
)
from src.tracker.api.dependencies.db import DBSession, get_db_session
from src.tracker.api.dependencies.repositories import (
    ProjectRepo,
    UserRepo,
    get_project_repository,
    get_user_repository,
)
from src.tracker.api.dependencies.services import (
    AuthServiceDep,
    ProjectServiceDep,
    UserServiceDep,
    get_auth_service,
    get_project_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminUser",
    "Authz",
    "CurrentUser",
    "get_authz_context",
    "get_current_user",
    "require_admin",
    # Repositories
    "ProjectRepo",
    "UserRepo",
    "get_project_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "ProjectServiceDep",
    "UserServiceDep",
    "get_auth_service",
    "get_project_service",
    "get_user_service",
]
