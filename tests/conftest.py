"""Root test fixtures shared across all test types.

Environment is configured here, before any application import, because
settings and the password hasher are built at import time.
Database fixtures live in tests/integration/conftest.py.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("DATABASE_SSL_MODE", "disable")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("BOOTSTRAP_ADMIN_EMAILS", '["root@example.com"]')
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest

from src.tracker.core.config import get_settings
from src.tracker.core.shutdown import request_tracker

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_request_tracker() -> Generator[None]:
    """The tracker is a process-wide singleton; keep tests independent."""
    request_tracker.reset()
    yield
    request_tracker.reset()
