"""Lead repository adapters."""

from app.adapters.outbound.lead.lead_repository import InMemoryLeadRepository
from app.adapters.outbound.lead.postgres_lead_repository import PostgresLeadRepository
from app.adapters.outbound.lead.postgres_status_history_repository import (
    PostgresStatusHistoryRepository,
)
from app.adapters.outbound.lead.status_history_repository import (
    InMemoryStatusHistoryRepository,
)

__all__ = [
    "InMemoryLeadRepository",
    "InMemoryStatusHistoryRepository",
    "PostgresLeadRepository",
    "PostgresStatusHistoryRepository",
]
