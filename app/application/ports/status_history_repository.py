"""Status history repository port."""

from abc import ABC, abstractmethod

from app.domain.entities.status_history import StatusHistoryEntry


class StatusHistoryRepository(ABC):
    """Port interface for the append-only lead status log."""

    @abstractmethod
    async def append(self, entry: StatusHistoryEntry) -> None:
        """
        Append an entry; existing entries are never modified.

        Args:
            entry: New status history entry
        """
        pass

    @abstractmethod
    async def list_for_lead(self, lead_id: str) -> list[StatusHistoryEntry]:
        """
        Get the history of one lead in insertion order.

        Args:
            lead_id: Lead identifier

        Returns:
            Entries of the lead, oldest appended first
        """
        pass

    @abstractmethod
    async def list_all(self) -> dict[str, list[StatusHistoryEntry]]:
        """
        Get the history of every lead.

        Returns:
            Mapping of lead id to its entries in insertion order
        """
        pass
