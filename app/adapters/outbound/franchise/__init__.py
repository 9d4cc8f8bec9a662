"""Franchise repository adapters."""

from app.adapters.outbound.franchise.franchise_repository import InMemoryFranchiseRepository
from app.adapters.outbound.franchise.postgres_franchise_repository import (
    PostgresFranchiseRepository,
)

__all__ = [
    "InMemoryFranchiseRepository",
    "PostgresFranchiseRepository",
]
