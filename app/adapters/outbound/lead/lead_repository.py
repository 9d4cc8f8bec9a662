"""In-memory lead repository adapter."""

from dataclasses import replace
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.lead_repository import LeadRepository
from app.domain.entities.lead import Lead, LeadDetails


class InMemoryLeadRepository(LeadRepository):
    """In-memory implementation of lead repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def add(self, lead: Lead) -> Lead:
        """Insert a lead."""
        self._store.leads[lead.id] = replace(lead)
        return replace(lead)

    async def get(self, lead_id: str) -> Optional[Lead]:
        """Get a lead by id."""
        lead = self._store.leads.get(lead_id)
        return replace(lead) if lead else None

    async def update(self, lead: Lead) -> None:
        """Update an existing lead."""
        if lead.id in self._store.leads:
            self._store.leads[lead.id] = replace(lead)

    async def delete(self, lead_id: str) -> None:
        """Delete a lead and its dependent rows."""
        self._store.delete_lead_cascade(lead_id)

    async def list(self) -> list[Lead]:
        """List all leads, newest first."""
        leads = [replace(lead) for lead in self._store.leads.values()]
        leads.sort(key=lambda lead: lead.created_at, reverse=True)
        return leads

    async def get_details(self, lead_id: str) -> Optional[LeadDetails]:
        """Get the details of a lead."""
        details = self._store.lead_details.get(lead_id)
        return replace(details) if details else None

    async def save_details(self, details: LeadDetails) -> None:
        """Insert or update the details of a lead."""
        self._store.lead_details[details.lead_id] = replace(details)

    async def list_details(self) -> dict[str, LeadDetails]:
        """Get the details of every lead."""
        return {lead_id: replace(d) for lead_id, d in self._store.lead_details.items()}
