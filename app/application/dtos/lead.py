"""Lead DTOs."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from app.application.dtos.base import DTO
from app.application.dtos.communication import CommunicationView
from app.application.dtos.task import TaskView
from app.application.dtos.validators import require_email, require_min_length
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.domain.value_objects.pipeline_stage import PipelineStage


class LeadCreate(DTO):
    """Input for creating a lead with its details."""

    full_name: str
    email: str
    phone: str
    location: str
    interest_level: int = Field(ge=1, le=5)
    investment_capacity: InvestmentCapacity
    source_channel: SourceChannel
    previous_experience: str = ""
    additional_comments: str = ""

    @field_validator("full_name")
    @classmethod
    def _check_full_name(cls, value: str) -> str:
        return require_min_length(value, 2, "El nombre debe tener al menos 2 caracteres.")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return require_email(value)

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        return require_min_length(value, 6, "Por favor, introduce un teléfono válido.")

    @field_validator("location")
    @classmethod
    def _check_location(cls, value: str) -> str:
        return require_min_length(value, 2, "La ubicación es obligatoria.")

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "full_name": "María García",
                "email": "maria@example.com",
                "phone": "+34600111222",
                "location": "Madrid",
                "interest_level": 4,
                "investment_capacity": "yes",
                "source_channel": "referral",
                "previous_experience": "10 años en banca",
                "additional_comments": "",
            }
        }


class LeadUpdate(DTO):
    """Input for editing a lead; omitted fields are left unchanged."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    interest_level: Optional[int] = Field(default=None, ge=1, le=5)
    investment_capacity: Optional[InvestmentCapacity] = None
    source_channel: Optional[SourceChannel] = None
    previous_experience: Optional[str] = None
    additional_comments: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def _check_full_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_min_length(value, 2, "El nombre debe tener al menos 2 caracteres.")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_email(value)

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_min_length(value, 6, "Por favor, introduce un teléfono válido.")

    @field_validator("location")
    @classmethod
    def _check_location(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_min_length(value, 2, "La ubicación es obligatoria.")


class LeadDetailsView(DTO):
    """Lead details as returned to clients."""

    interest_level: int
    investment_capacity: InvestmentCapacity
    source_channel: SourceChannel
    previous_experience: str
    additional_comments: str
    score: int
    updated_at: datetime

    @classmethod
    def from_entity(cls, details: LeadDetails) -> "LeadDetailsView":
        """Build the view from a details entity."""
        return cls(
            interest_level=details.interest_level,
            investment_capacity=details.investment_capacity,
            source_channel=details.source_channel,
            previous_experience=details.previous_experience,
            additional_comments=details.additional_comments,
            score=details.score,
            updated_at=details.updated_at,
        )


class StatusHistoryView(DTO):
    """One status history row."""

    id: str
    status: PipelineStage
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: StatusHistoryEntry) -> "StatusHistoryView":
        """Build the view from a history entry."""
        return cls(
            id=entry.id,
            status=entry.status,
            notes=entry.notes,
            created_by=entry.created_by,
            created_at=entry.created_at,
        )


class LeadSummary(DTO):
    """Lead row for lists: lead, details and derived current status."""

    id: str
    full_name: str
    email: str
    phone: str
    location: str
    created_at: datetime
    status: PipelineStage
    details: Optional[LeadDetailsView] = None

    @property
    def score(self) -> int:
        """Score of the lead, 0 when it has no details."""
        return self.details.score if self.details else 0

    @classmethod
    def from_entities(
        cls,
        lead: Lead,
        details: Optional[LeadDetails],
        status: PipelineStage,
    ) -> "LeadSummary":
        """Build the summary from the lead aggregate parts."""
        return cls(
            id=lead.id,
            full_name=lead.full_name,
            email=lead.email,
            phone=lead.phone,
            location=lead.location,
            created_at=lead.created_at,
            status=status,
            details=LeadDetailsView.from_entity(details) if details else None,
        )


class LeadDetailView(LeadSummary):
    """Full lead aggregate for the detail screen."""

    status_history: list[StatusHistoryView] = []
    communications: list[CommunicationView] = []
    tasks: list[TaskView] = []


class LeadListQuery(DTO):
    """Search, filter and sort options for the lead list."""

    search: Optional[str] = None
    status: Optional[PipelineStage] = None
    source_channel: Optional[SourceChannel] = None
    created_on: Optional[date] = None
    sort_by: Literal["full_name", "email", "location", "score", "created_at"] = "created_at"
    direction: Literal["asc", "desc"] = "desc"


class StatusChange(DTO):
    """Input for appending a status to a lead's history."""

    status: PipelineStage
    notes: Optional[str] = None
