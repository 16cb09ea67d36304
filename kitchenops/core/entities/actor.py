"""Caller identity stamped onto ledger and order history entries."""

from enum import Enum

from pydantic import BaseModel


class UserRole(str, Enum):
    """Roles recognized by the access layer."""

    ADMIN = "Admin"
    STAFF = "Staff"
    VIEWER = "Viewer"


class Actor(BaseModel):
    """The authenticated user performing an operation."""

    user_id: str
    role: UserRole = UserRole.STAFF


# Used by jobs and tests that act outside a request
SYSTEM_ACTOR = Actor(user_id="system", role=UserRole.ADMIN)
