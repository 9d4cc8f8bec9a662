"""Session context DTO."""

from collections.abc import Iterable
from typing import Optional

from app.application.dtos.base import DTO
from app.application.errors import PermissionDeniedError
from app.domain.value_objects.role import Role, has_permission


class SessionContext(DTO):
    """Identity and role of the caller, resolved once per request."""

    user_id: str
    email: Optional[str] = None
    role: Optional[Role] = None

    def can(self, allowed_roles: Iterable[Role]) -> bool:
        """Check whether the caller's role is allowed."""
        return has_permission(self.role, allowed_roles)

    def require(self, allowed_roles: Iterable[Role]) -> None:
        """
        Enforce the role gate.

        Args:
            allowed_roles: Roles allowed to perform the operation

        Raises:
            PermissionDeniedError: If the caller's role is not allowed
        """
        if not self.can(allowed_roles):
            raise PermissionDeniedError()
