"""Shared in-memory tables for the in-memory repository adapters."""

from dataclasses import dataclass, field
from typing import Optional

from app.domain.entities.communication import Communication
from app.domain.entities.email_settings import EmailSettings
from app.domain.entities.franchise import Franchise
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.entities.task import Task
from app.domain.entities.user import User


@dataclass
class InMemoryStore:
    """Process-local tables; dict insertion order is the row insertion order."""

    leads: dict[str, Lead] = field(default_factory=dict)
    lead_details: dict[str, LeadDetails] = field(default_factory=dict)
    status_history: list[StatusHistoryEntry] = field(default_factory=list)
    communications: dict[str, Communication] = field(default_factory=dict)
    tasks: dict[str, Task] = field(default_factory=dict)
    franchises: dict[str, Franchise] = field(default_factory=dict)
    users: dict[str, User] = field(default_factory=dict)
    email_settings: Optional[EmailSettings] = None

    def delete_lead_cascade(self, lead_id: str) -> None:
        """Remove a lead and every row that references it."""
        self.leads.pop(lead_id, None)
        self.lead_details.pop(lead_id, None)
        self.status_history = [e for e in self.status_history if e.lead_id != lead_id]
        self.communications = {
            k: c for k, c in self.communications.items() if c.lead_id != lead_id
        }
        self.tasks = {k: t for k, t in self.tasks.items() if t.lead_id != lead_id}
