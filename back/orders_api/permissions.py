from enum import Enum
from typing import Set

from .errors import ForbiddenError
from .models import CurrentUser, Role


class Permissions(str, Enum):
    ORDERS_READ = "orders:read"
    ORDERS_CREATE = "orders:create"
    ORDERS_UPDATE = "orders:update"
    ORDERS_DELETE = "orders:delete"


# Roles not listed here fall back to DEFAULT_PERMISSIONS.
ROLE_PERMISSIONS = {
    Role.waiter.value: {p.value for p in Permissions},
}

DEFAULT_PERMISSIONS = {
    Permissions.ORDERS_READ.value,
    Permissions.ORDERS_UPDATE.value,
    Permissions.ORDERS_DELETE.value,
}


def get_role_permissions(role: str | None) -> Set[str]:
    """Get all permissions granted to a role."""
    if not role:
        return set()
    return set(ROLE_PERMISSIONS.get(role, DEFAULT_PERMISSIONS))


def is_allowed(user: CurrentUser | None, action: str) -> bool:
    """Check if user may perform `action`."""
    if user is None:
        return False
    return action in get_role_permissions(user.role)


def require_permission(user: CurrentUser | None, action: str, message: str = "Not authorized") -> None:
    if not is_allowed(user, action):
        raise ForbiddenError(message)
