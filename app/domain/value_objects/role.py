"""User role value object."""

from collections.abc import Iterable
from enum import Enum
from typing import Optional, Union


class Role(str, Enum):
    """Permission tier of a user."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Parse a stored role string, returning None for unknown values."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# Lead, franchise, task, communication and status mutations
EDITOR_ROLES = frozenset({Role.SUPERADMIN, Role.ADMIN})
# User management and email settings changes
USER_ADMIN_ROLES = frozenset({Role.SUPERADMIN})
ALL_ROLES = frozenset(Role)


def has_permission(
    role: Optional[Union[Role, str]],
    allowed_roles: Iterable[Union[Role, str]],
) -> bool:
    """
    Check whether a role is one of the allowed roles.

    Args:
        role: Role of the caller (None when it could not be resolved)
        allowed_roles: Roles allowed to perform the operation

    Returns:
        True if the role is allowed
    """
    if role is None:
        return False
    resolved = role if isinstance(role, Role) else Role.parse(role)
    if resolved is None:
        return False
    return resolved in {r if isinstance(r, Role) else Role.parse(r) for r in allowed_roles}
