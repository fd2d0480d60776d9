from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.tracker.models.enums import UserRole


class UserRead(BaseModel):
    """Public view of a user; the password hash is never part of it."""

    id: UUID
    email: EmailStr
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserRoleUpdate(BaseModel):
    role: UserRole
