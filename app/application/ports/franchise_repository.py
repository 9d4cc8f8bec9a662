"""Franchise repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.franchise import Franchise


class FranchiseRepository(ABC):
    """Port interface for franchises."""

    @abstractmethod
    async def add(self, franchise: Franchise) -> None:
        """Insert a franchise."""
        pass

    @abstractmethod
    async def get(self, franchise_id: str) -> Optional[Franchise]:
        """Get a franchise by id, or None if not found."""
        pass

    @abstractmethod
    async def update(self, franchise: Franchise) -> None:
        """Update an existing franchise."""
        pass

    @abstractmethod
    async def delete(self, franchise_id: str) -> None:
        """Delete a franchise."""
        pass

    @abstractmethod
    async def list(self) -> list[Franchise]:
        """List franchises ordered by name."""
        pass
