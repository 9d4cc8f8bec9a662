"""User repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.user import User
from app.domain.value_objects.role import Role


class UserRepository(ABC):
    """Port interface for users and role resolution."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a user."""
        pass

    @abstractmethod
    async def get(self, user_id: str) -> Optional[User]:
        """Get a user by id, or None if not found."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email (case-insensitive), or None if not found."""
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Update an existing user."""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete a user."""
        pass

    @abstractmethod
    async def list(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    async def get_role(self, user_id: str) -> Optional[Role]:
        """
        Resolve the role of a user.

        Args:
            user_id: Identifier of the authenticated caller

        Returns:
            The caller's role, or None if the user is unknown
        """
        pass
