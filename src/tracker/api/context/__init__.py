"""Request context for the API layer."""

from src.tracker.api.context.authz_context import AuthzContext

__all__ = ["AuthzContext"]
