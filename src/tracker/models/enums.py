"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Platform-wide user role."""

    ADMIN = "admin"
    MEMBER = "member"


class ProjectStatus(str, Enum):
    """Lifecycle state of a project."""

    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"
