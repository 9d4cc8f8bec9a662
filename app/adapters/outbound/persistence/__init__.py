"""Persistence infrastructure shared by the repository adapters."""

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.adapters.outbound.persistence.models import Base

__all__ = [
    "Base",
    "InMemoryStore",
]
