"""In-memory status history repository adapter."""

from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.domain.entities.status_history import StatusHistoryEntry


class InMemoryStatusHistoryRepository(StatusHistoryRepository):
    """In-memory implementation of the status log."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def append(self, entry: StatusHistoryEntry) -> None:
        """Append an entry (entries are frozen, so they are stored as-is)."""
        self._store.status_history.append(entry)

    async def list_for_lead(self, lead_id: str) -> list[StatusHistoryEntry]:
        """Get the history of one lead in insertion order."""
        return [entry for entry in self._store.status_history if entry.lead_id == lead_id]

    async def list_all(self) -> dict[str, list[StatusHistoryEntry]]:
        """Get the history of every lead."""
        histories: dict[str, list[StatusHistoryEntry]] = {}
        for entry in self._store.status_history:
            histories.setdefault(entry.lead_id, []).append(entry)
        return histories
