"""Lead entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.domain.value_objects.lead_score import LeadScore


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Lead:
    """A prospective franchisee tracked through the sales pipeline."""

    full_name: str
    email: str
    phone: str
    location: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = _now()


@dataclass
class LeadDetails:
    """Qualification details of a lead, with its derived score."""

    lead_id: str
    interest_level: int = 3
    investment_capacity: InvestmentCapacity = InvestmentCapacity.NO
    source_channel: SourceChannel = SourceChannel.OTHER
    previous_experience: str = ""
    additional_comments: str = ""
    score: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        """Score is always derived from the scoring inputs."""
        self.rescore()

    def rescore(self) -> int:
        """
        Recompute the score from the current scoring inputs.

        Returns:
            The new score
        """
        self.score = LeadScore.calculate(
            self.interest_level,
            self.investment_capacity,
            self.previous_experience,
            self.additional_comments,
        ).value
        return self.score

    def apply_changes(
        self,
        interest_level: Optional[int] = None,
        investment_capacity: Optional[InvestmentCapacity] = None,
        source_channel: Optional[SourceChannel] = None,
        previous_experience: Optional[str] = None,
        additional_comments: Optional[str] = None,
    ) -> None:
        """
        Apply an edit and recompute the score.

        Args:
            interest_level: New interest level, if changed
            investment_capacity: New capacity, if changed
            source_channel: New source channel, if changed
            previous_experience: New previous experience, if changed
            additional_comments: New comments, if changed
        """
        if interest_level is not None:
            self.interest_level = interest_level
        if investment_capacity is not None:
            self.investment_capacity = investment_capacity
        if source_channel is not None:
            self.source_channel = source_channel
        if previous_experience is not None:
            self.previous_experience = previous_experience
        if additional_comments is not None:
            self.additional_comments = additional_comments
        self.rescore()
        self.updated_at = _now()
