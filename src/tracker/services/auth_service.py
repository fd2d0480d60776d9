"""Authentication service - registration, login and token verification."""

from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tracker.core.config import get_settings
from src.tracker.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from src.tracker.core.logging import get_logger
from src.tracker.core.security import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.tracker.models import User, UserRole
from src.tracker.repositories import UserRepository
from src.tracker.schemas.auth import LoginResponse, TokenPayload
from src.tracker.schemas.user import UserRead

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_TOKEN = "Invalid or expired token"
DUPLICATE_EMAIL = "User with this email already exists"


class AuthService:
    """Registers users, checks credentials and issues/verifies access tokens."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    def _initial_role(self, email: str) -> UserRole:
        """Role is never taken from the client; only configured emails become admin."""
        settings = get_settings()
        if email.lower() in settings.bootstrap_admin_emails:
            return UserRole.ADMIN
        return UserRole.MEMBER

    async def register(self, email: str, password: str) -> UserRead:
        """Create a member (or bootstrap admin) account.

        Raises:
            ConflictError: if the email is already registered.
        """
        if await self.user_repo.exists_by_email(email):
            raise ConflictError(DUPLICATE_EMAIL)

        user = User(
            email=email,
            hashed_password=hash_password(password),
            role=self._initial_role(email).value,
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            await self.session.rollback()
            raise ConflictError(DUPLICATE_EMAIL) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User registered", user_id=str(user.id), role=user.role)
        return UserRead.model_validate(user)

    async def login(self, email: str, password: str) -> LoginResponse:
        """Check credentials and issue an access token.

        Unknown email and wrong password produce the same error.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify a hash so response time does not reveal whether the email exists
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            logger.info("Login failed", reason="unknown_email" if user is None else "bad_password")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        token = create_access_token(user.id, user.email, user.role)
        return LoginResponse(user=UserRead.model_validate(user), token=token)

    def verify_token(self, token: str) -> TokenPayload:
        """Validate signature, expiry and claims of an access token.

        Raises:
            UnauthorizedError: on any validation failure.
        """
        payload = decode_token(token)
        if payload is None or payload.get("type") != ACCESS_TOKEN_TYPE:
            raise UnauthorizedError(INVALID_TOKEN)

        try:
            return TokenPayload(
                user_id=payload.get("sub"),
                email=payload.get("email"),
                role=payload.get("role"),
            )
        except ValidationError as e:
            raise UnauthorizedError(INVALID_TOKEN) from e

    async def get_user_by_id(self, user_id: UUID) -> User:
        """Load a user.

        Raises:
            NotFoundError: if no such user exists.
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
