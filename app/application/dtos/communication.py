"""Communication DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.application.dtos.base import DTO
from app.application.dtos.validators import require_min_length
from app.domain.entities.communication import Communication
from app.domain.value_objects.choices import CommunicationType


class CommunicationCreate(DTO):
    """Input for logging a communication."""

    type: CommunicationType
    content: str

    @field_validator("content")
    @classmethod
    def _check_content(cls, value: str) -> str:
        return require_min_length(value, 1, "El contenido es obligatorio.")


class CommunicationUpdate(DTO):
    """Input for editing a communication."""

    type: Optional[CommunicationType] = None
    content: Optional[str] = None

    @field_validator("content")
    @classmethod
    def _check_content(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_min_length(value, 1, "El contenido es obligatorio.")


class CommunicationView(DTO):
    """Communication as returned to clients."""

    id: str
    lead_id: str
    type: CommunicationType
    content: str
    created_by: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, communication: Communication) -> "CommunicationView":
        """Build the view from an entity."""
        return cls(
            id=communication.id,
            lead_id=communication.lead_id,
            type=communication.type,
            content=communication.content,
            created_by=communication.created_by,
            created_at=communication.created_at,
        )
