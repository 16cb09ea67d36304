"""
Caller identity and role checks.

The upstream auth gateway forwards the authenticated user in the
X-User-Id and X-User-Role headers.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header

from kitchenops.config import bind_request_context, get_logger
from kitchenops.core.entities.actor import Actor, UserRole
from kitchenops.core.exceptions import AuthenticationError, PermissionDeniedError

logger = get_logger(__name__)


async def get_current_actor(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_role: Annotated[str | None, Header()] = None,
) -> Actor:
    """Resolve the calling actor from gateway headers."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise AuthenticationError("Missing X-User-Id header")
    if not x_user_role:
        raise AuthenticationError("Missing X-User-Role header")

    role = next(
        (r for r in UserRole if r.value.lower() == x_user_role.strip().lower()),
        None,
    )
    if role is None:
        raise AuthenticationError(f"Unknown role: {x_user_role}")

    bind_request_context(user_id=user_id, role=role.value)
    return Actor(user_id=user_id, role=role)


CurrentActor = Annotated[Actor, Depends(get_current_actor)]


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[Actor]]:
    """Dependency factory allowing only the given roles."""

    async def dependency(actor: CurrentActor) -> Actor:
        if actor.role not in roles:
            logger.warning(
                "permission_denied",
                user_id=actor.user_id,
                role=actor.role.value,
                allowed=[r.value for r in roles],
            )
            raise PermissionDeniedError(actor.role.value, [r.value for r in roles])
        return actor

    return dependency


Editor = Annotated[Actor, Depends(require_roles(UserRole.ADMIN, UserRole.STAFF))]
AdminOnly = Annotated[Actor, Depends(require_roles(UserRole.ADMIN))]
