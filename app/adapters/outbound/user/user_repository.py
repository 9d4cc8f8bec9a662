"""In-memory user repository adapter."""

from dataclasses import replace
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.user_repository import UserRepository
from app.domain.entities.user import User
from app.domain.value_objects.role import Role


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of user repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def add(self, user: User) -> None:
        """Insert a user."""
        self._store.users[user.id] = replace(user)

    async def get(self, user_id: str) -> Optional[User]:
        """Get a user by id."""
        user = self._store.users.get(user_id)
        return replace(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        wanted = email.strip().lower()
        for user in self._store.users.values():
            if user.email.lower() == wanted:
                return replace(user)
        return None

    async def update(self, user: User) -> None:
        """Update an existing user."""
        if user.id in self._store.users:
            self._store.users[user.id] = replace(user)

    async def delete(self, user_id: str) -> None:
        """Delete a user."""
        self._store.users.pop(user_id, None)

    async def get_role(self, user_id: str) -> Optional[Role]:
        """Resolve the role of a user."""
        user = self._store.users.get(user_id)
        return user.role if user else None

    async def list(self) -> list[User]:
        """List all users."""
        return [replace(user) for user in self._store.users.values()]
