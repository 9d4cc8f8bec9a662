"""Pipeline board DTOs."""

from datetime import datetime
from typing import Optional

from app.application.dtos.base import DTO
from app.application.dtos.lead import LeadSummary
from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.domain.value_objects.pipeline_stage import PipelineStage


class PipelineCard(DTO):
    """Lead card shown in a pipeline column."""

    lead_id: str
    full_name: str
    email: str
    phone: str
    location: str
    created_at: datetime
    score: int = 0
    interest_level: Optional[int] = None
    investment_capacity: Optional[InvestmentCapacity] = None
    source_channel: Optional[SourceChannel] = None

    @classmethod
    def from_summary(cls, summary: LeadSummary) -> "PipelineCard":
        """Build a card from a lead summary."""
        details = summary.details
        return cls(
            lead_id=summary.id,
            full_name=summary.full_name,
            email=summary.email,
            phone=summary.phone,
            location=summary.location,
            created_at=summary.created_at,
            score=summary.score,
            interest_level=details.interest_level if details else None,
            investment_capacity=details.investment_capacity if details else None,
            source_channel=details.source_channel if details else None,
        )


class PipelineColumn(DTO):
    """One stage column of the board."""

    stage: PipelineStage
    label: str
    cards: list[PipelineCard] = []


class PipelineBoard(DTO):
    """Leads grouped by current stage, columns in stage order."""

    columns: list[PipelineColumn]

    def column(self, stage: PipelineStage) -> PipelineColumn:
        """Get the column of a stage."""
        for column in self.columns:
            if column.stage == stage:
                return column
        raise KeyError(stage)

    def stage_of(self, lead_id: str) -> Optional[PipelineStage]:
        """Get the stage whose column holds a lead's card."""
        for column in self.columns:
            if any(card.lead_id == lead_id for card in column.cards):
                return column.stage
        return None


class MoveCardRequest(DTO):
    """Drop of a lead card onto a stage column."""

    lead_id: str
    destination: PipelineStage
    notes: Optional[str] = None


class MoveCardResult(DTO):
    """Outcome of a card move."""

    success: bool
    lead_id: str
    source: Optional[PipelineStage] = None
    destination: PipelineStage
    board: PipelineBoard
    refetched: bool = False
    error: Optional[str] = None
