"""In-memory franchise repository adapter."""

from dataclasses import replace
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.franchise_repository import FranchiseRepository
from app.domain.entities.franchise import Franchise


class InMemoryFranchiseRepository(FranchiseRepository):
    """In-memory implementation of franchise repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def add(self, franchise: Franchise) -> None:
        """Insert a franchise."""
        self._store.franchises[franchise.id] = replace(franchise)

    async def get(self, franchise_id: str) -> Optional[Franchise]:
        """Get a franchise by id."""
        franchise = self._store.franchises.get(franchise_id)
        return replace(franchise) if franchise else None

    async def update(self, franchise: Franchise) -> None:
        """Update an existing franchise."""
        if franchise.id in self._store.franchises:
            self._store.franchises[franchise.id] = replace(franchise)

    async def delete(self, franchise_id: str) -> None:
        """Delete a franchise."""
        self._store.franchises.pop(franchise_id, None)

    async def list(self) -> list[Franchise]:
        """List franchises ordered by name."""
        franchises = [replace(f) for f in self._store.franchises.values()]
        franchises.sort(key=lambda f: f.name.lower())
        return franchises
