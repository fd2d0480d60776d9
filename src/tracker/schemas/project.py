"""Project schemas for API request/response."""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.tracker.models import Project, User
from src.tracker.models.enums import ProjectStatus, UserRole


def _strip_description(v: str | None) -> str | None:
    if v is not None:
        v = v.strip()
        if not v:
            return None
    return v


def _to_naive_utc(v: datetime | None) -> datetime | None:
    # Columns are TIMESTAMP WITHOUT TIME ZONE holding UTC
    if v is not None and v.tzinfo is not None:
        return v.astimezone(UTC).replace(tzinfo=None)
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    There is no ``owner`` field: the owner is always the authenticated caller.
    """

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _strip_description(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_dates(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)


class ProjectUpdate(BaseModel):
    """Fields a project update may touch. Anything else in the body is ignored."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: ProjectStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Project name cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: ProjectStatus | None) -> ProjectStatus:
        if v is None:
            raise ValueError("Project status cannot be null")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _strip_description(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def validate_dates(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)


class ProjectOwner(BaseModel):
    id: UUID
    email: str
    role: UserRole

    model_config = {"from_attributes": True}


class ProjectRead(BaseModel):
    """Schema for reading a project, with the owner expanded."""

    id: UUID
    name: str
    description: str | None
    status: ProjectStatus
    owner: ProjectOwner
    start_date: datetime | None
    end_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entities(cls, project: Project, owner: User) -> "ProjectRead":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            status=ProjectStatus(project.status),
            owner=ProjectOwner.model_validate(owner),
            start_date=project.start_date,
            end_date=project.end_date,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
