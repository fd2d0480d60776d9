"""Database utilities - engine and session."""

from src.tracker.core.db.engine import check_connection, dispose_engine, get_engine
from src.tracker.core.db.session import get_session

__all__ = [
    "check_connection",
    "dispose_engine",
    "get_engine",
    "get_session",
]
