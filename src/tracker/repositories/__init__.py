"""Repository layer - data access abstraction."""

from src.tracker.repositories.base import BaseRepository
from src.tracker.repositories.project import ProjectRepository
from src.tracker.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "UserRepository",
]
