"""Franchise entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Franchise:
    """Franchise office, independent from leads."""

    name: str
    contact_person: str
    address: str
    city: str
    province: str
    phone: str
    email: str
    website: Optional[str] = None
    tesis_code: Optional[str] = None
    created_by: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)
