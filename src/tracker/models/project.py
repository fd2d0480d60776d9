"""Project model."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlmodel import Field, SQLModel

from src.tracker.models.base import utc_now
from src.tracker.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Project owned by exactly one user.

    ``owner_id`` is a plain reference: deleting a project never touches the
    user, and user lifecycle is managed elsewhere.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: str = Field(default=ProjectStatus.PLANNING.value, max_length=50)
    owner_id: UUID = Field(foreign_key="users.id", index=True)
    start_date: datetime | None = Field(default=None)
    end_date: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
