"""Communication repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.communication import Communication


class CommunicationRepository(ABC):
    """Port interface for logged communications."""

    @abstractmethod
    async def add(self, communication: Communication) -> None:
        """Insert a communication."""
        pass

    @abstractmethod
    async def get(self, communication_id: str) -> Optional[Communication]:
        """Get a communication by id, or None if not found."""
        pass

    @abstractmethod
    async def update(self, communication: Communication) -> None:
        """Update the type and content of a communication."""
        pass

    @abstractmethod
    async def delete(self, communication_id: str) -> None:
        """Delete a communication."""
        pass

    @abstractmethod
    async def list_for_lead(self, lead_id: str) -> list[Communication]:
        """List the communications of a lead, newest first."""
        pass
