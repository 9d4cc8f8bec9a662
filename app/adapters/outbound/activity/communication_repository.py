"""In-memory communication repository adapter."""

from dataclasses import replace
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.communication_repository import CommunicationRepository
from app.domain.entities.communication import Communication


class InMemoryCommunicationRepository(CommunicationRepository):
    """In-memory implementation of communication repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def add(self, communication: Communication) -> None:
        """Insert a communication."""
        self._store.communications[communication.id] = replace(communication)

    async def get(self, communication_id: str) -> Optional[Communication]:
        """Get a communication by id."""
        communication = self._store.communications.get(communication_id)
        return replace(communication) if communication else None

    async def update(self, communication: Communication) -> None:
        """Update an existing communication."""
        if communication.id in self._store.communications:
            self._store.communications[communication.id] = replace(communication)

    async def delete(self, communication_id: str) -> None:
        """Delete a communication."""
        self._store.communications.pop(communication_id, None)

    async def list_for_lead(self, lead_id: str) -> list[Communication]:
        """List the communications of a lead, newest first."""
        indexed = [
            (position, replace(c))
            for position, c in enumerate(self._store.communications.values())
            if c.lead_id == lead_id
        ]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [communication for _, communication in indexed]
