"""Model exports.

Import from here: `from src.tracker.models import User, Project`
"""

from src.tracker.models.enums import ProjectStatus, UserRole
from src.tracker.models.project import Project
from src.tracker.models.user import User

__all__ = [
    # Enums
    "ProjectStatus",
    "UserRole",
    # Tables
    "Project",
    "User",
]
