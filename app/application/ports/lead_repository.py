"""Lead repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.lead import Lead, LeadDetails


class LeadRepository(ABC):
    """Port interface for leads and their details."""

    @abstractmethod
    async def add(self, lead: Lead) -> Lead:
        """
        Insert a lead.

        Args:
            lead: Lead entity to insert

        Returns:
            The stored lead
        """
        pass

    @abstractmethod
    async def get(self, lead_id: str) -> Optional[Lead]:
        """
        Get a lead by id.

        Args:
            lead_id: Lead identifier

        Returns:
            Lead entity, or None if not found
        """
        pass

    @abstractmethod
    async def update(self, lead: Lead) -> None:
        """
        Update the contact fields of an existing lead.

        Args:
            lead: Lead entity with new values
        """
        pass

    @abstractmethod
    async def delete(self, lead_id: str) -> None:
        """
        Delete a lead and everything attached to it.

        Cascades to details, status history, communications and tasks.

        Args:
            lead_id: Lead identifier
        """
        pass

    @abstractmethod
    async def list(self) -> list[Lead]:
        """
        List all leads, newest first.

        Returns:
            List of leads
        """
        pass

    @abstractmethod
    async def get_details(self, lead_id: str) -> Optional[LeadDetails]:
        """
        Get the details of a lead.

        Always a single record: if the store holds several rows for a lead,
        the most recently updated one is returned.

        Args:
            lead_id: Lead identifier

        Returns:
            Lead details, or None if the lead has none
        """
        pass

    @abstractmethod
    async def save_details(self, details: LeadDetails) -> None:
        """
        Insert or update the details of a lead.

        Args:
            details: Lead details entity
        """
        pass

    @abstractmethod
    async def list_details(self) -> dict[str, LeadDetails]:
        """
        Get the details of every lead.

        Returns:
            Mapping of lead id to its details
        """
        pass
