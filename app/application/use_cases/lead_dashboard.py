"""Lead dashboard use case."""

from collections import Counter
from datetime import datetime, timezone
from typing import Optional

from app.application.dtos.dashboard import DashboardStats
from app.application.dtos.session import SessionContext
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.application.use_cases.lead_summaries import load_lead_summaries
from app.domain.value_objects.pipeline_stage import PipelineStage

TOP_LOCATIONS = 5
RECENT_LEADS = 5


class ComputeDashboardStats:
    """Use case for the aggregated lead statistics."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        status_history_repository: StatusHistoryRepository,
    ) -> None:
        self._lead_repository = lead_repository
        self._status_history_repository = status_history_repository

    async def execute(self, session: SessionContext, now: Optional[datetime] = None) -> DashboardStats:
        """
        Compute dashboard statistics.

        The conversion rate is the share of leads whose current status is
        contract_signed. The average score covers leads with details.

        Args:
            session: Caller context
            now: Reference time for "this month" (defaults to current UTC time)

        Returns:
            Dashboard statistics
        """
        now = now or datetime.now(timezone.utc)
        summaries = await load_lead_summaries(
            self._lead_repository, self._status_history_repository
        )
        total = len(summaries)

        new_this_month = sum(
            1
            for s in summaries
            if s.created_at.year == now.year and s.created_at.month == now.month
        )

        by_status = Counter(s.status.value for s in summaries)
        signed = by_status.get(PipelineStage.CONTRACT_SIGNED.value, 0)
        conversion_rate = round(signed / total * 100, 1) if total else 0.0

        scores = [s.details.score for s in summaries if s.details is not None]
        average_score = round(sum(scores) / len(scores), 1) if scores else 0.0

        by_source = Counter(s.details.source_channel.value for s in summaries if s.details is not None)
        by_location = Counter(s.location for s in summaries if s.location)

        return DashboardStats(
            total_leads=total,
            new_leads_this_month=new_this_month,
            conversion_rate=conversion_rate,
            average_score=average_score,
            leads_by_status={stage.value: by_status.get(stage.value, 0) for stage in PipelineStage.ordered()},
            leads_by_source=dict(by_source),
            leads_by_location=dict(by_location.most_common(TOP_LOCATIONS)),
            recent_leads=sorted(summaries, key=lambda s: s.created_at, reverse=True)[:RECENT_LEADS],
        )
