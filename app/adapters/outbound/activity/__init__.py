"""Communication and task repository adapters."""

from app.adapters.outbound.activity.communication_repository import (
    InMemoryCommunicationRepository,
)
from app.adapters.outbound.activity.postgres_communication_repository import (
    PostgresCommunicationRepository,
)
from app.adapters.outbound.activity.postgres_task_repository import PostgresTaskRepository
from app.adapters.outbound.activity.task_repository import InMemoryTaskRepository

__all__ = [
    "InMemoryCommunicationRepository",
    "InMemoryTaskRepository",
    "PostgresCommunicationRepository",
    "PostgresTaskRepository",
]
