from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.tracker.models.enums import UserRole
from src.tracker.schemas.user import UserRead


class RegisterRequest(BaseModel):
    """Registration payload. Unknown fields, including ``role``, are ignored."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class LoginRequest(BaseModel):
    """Login payload.

    Both fields are optional here so a missing one yields the login-specific
    message. The email is normalized like ``RegisterRequest.email`` so the
    address a user registered with always finds their account.
    """

    email: EmailStr | None = None
    password: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class LoginResponse(BaseModel):
    user: UserRead
    token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: UUID
    email: str
    role: UserRole
