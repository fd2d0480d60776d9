"""User factory for test data generation."""

from polyfactory import Use

from src.tracker.core.security import hash_password
from src.tracker.models import User, UserRole
from tests.factories.base import BaseFactory, generate_uuid7, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"

_DEFAULT_HASH = hash_password(DEFAULT_TEST_PASSWORD)


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid7)
    email = Use(lambda: f"user_{generate_uuid7().hex[-8:]}@example.com")
    hashed_password = _DEFAULT_HASH
    role = UserRole.MEMBER.value
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def admin(cls, **kwargs):
        """Create an admin user."""
        return cls.build(role=UserRole.ADMIN.value, **kwargs)
