"""Communication entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.value_objects.choices import CommunicationType


@dataclass
class Communication:
    """Logged interaction with a lead."""

    lead_id: str
    type: CommunicationType
    content: str
    created_by: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def email_communication_content(subject: str, body: str) -> str:
    """Build the logged content of a sent email."""
    return f"Asunto: {subject}\n\n{body}"
