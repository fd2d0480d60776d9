"""Authentication and authorization dependencies.

``get_current_user`` is the bearer-token gate applied to every protected
route. The role guards below build on it and read the principal that it
attaches to ``request.state``.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from src.tracker.api.context import AuthzContext
from src.tracker.api.dependencies.services import AuthServiceDep
from src.tracker.core.exceptions import AppError, ForbiddenError, UnauthorizedError
from src.tracker.core.logging import bind_user_context
from src.tracker.models import User

BEARER_PREFIX = "Bearer "


async def get_current_user(
    request: Request,
    auth_service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the bearer token and attach the user and raw token to the request."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("No token provided")

    token = authorization[len(BEARER_PREFIX) :]
    payload = auth_service.verify_token(token)

    try:
        user = await auth_service.get_user_by_id(payload.user_id)
    except AppError as e:
        # Token was valid but its user is gone
        raise UnauthorizedError(e.message) from e

    request.state.user = user
    request.state.token = token
    bind_user_context(user.id, user.role, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def _attached_user(request: Request) -> User:
    user: User | None = getattr(request.state, "user", None)
    if user is None:
        raise UnauthorizedError("Authentication required")
    return user


async def require_admin(request: Request, _user: CurrentUser) -> User:
    """Admin-only guard."""
    user = _attached_user(request)
    if not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user


AdminUser = Annotated[User, Depends(require_admin)]


async def get_authz_context(request: Request, _user: CurrentUser) -> AuthzContext:
    """Member-or-admin guard.

    Role is known before the resource is loaded, ownership is not: admins get
    a privileged context, everyone else is checked per resource later.
    """
    user = _attached_user(request)
    return AuthzContext(user=user, privileged=user.is_admin)


Authz = Annotated[AuthzContext, Depends(get_authz_context)]
