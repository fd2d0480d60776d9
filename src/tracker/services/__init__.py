from src.tracker.services.auth_service import AuthService
from src.tracker.services.project_service import ProjectService
from src.tracker.services.user_service import UserService

__all__ = ["AuthService", "ProjectService", "UserService"]
