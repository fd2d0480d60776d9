"""Security utilities - crypto and response headers.

Re-exports all security-related functions for convenience.
"""

from src.tracker.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.tracker.core.security.headers import (
    API_ONLY_CSP,
    DOCS_CSP,
    SecurityHeadersMiddleware,
)

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Headers
    "API_ONLY_CSP",
    "DOCS_CSP",
    "SecurityHeadersMiddleware",
]
