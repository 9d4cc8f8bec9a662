"""Pipeline stage value object."""

from enum import Enum
from typing import Optional


class PipelineStage(str, Enum):
    """Sales pipeline stage a lead can occupy."""

    NEW_CONTACT = "new_contact"
    FIRST_CONTACT = "first_contact"
    INFO_SENT = "info_sent"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    INTERVIEW_COMPLETED = "interview_completed"
    PROPOSAL_SENT = "proposal_sent"
    NEGOTIATION = "negotiation"
    CONTRACT_SIGNED = "contract_signed"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        """Get the Spanish display label."""
        return _LABELS[self]

    @property
    def is_out_of_band(self) -> bool:
        """Whether the stage sits outside the ordered sequence."""
        return self is PipelineStage.REJECTED

    @classmethod
    def ordered(cls) -> list["PipelineStage"]:
        """Get the ordered stages followed by the out-of-band ones."""
        return list(cls)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PipelineStage"]:
        """
        Parse a stored status string.

        Args:
            value: Raw status string

        Returns:
            Matching stage, or None if the value is unknown
        """
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


DEFAULT_STAGE = PipelineStage.NEW_CONTACT

_LABELS = {
    PipelineStage.NEW_CONTACT: "Nuevo Contacto",
    PipelineStage.FIRST_CONTACT: "Primer Contacto",
    PipelineStage.INFO_SENT: "Información Enviada",
    PipelineStage.INTERVIEW_SCHEDULED: "Entrevista Programada",
    PipelineStage.INTERVIEW_COMPLETED: "Entrevista Completada",
    PipelineStage.PROPOSAL_SENT: "Propuesta Enviada",
    PipelineStage.NEGOTIATION: "Negociación",
    PipelineStage.CONTRACT_SIGNED: "Contrato Firmado",
    PipelineStage.REJECTED: "Rechazado",
}
