"""Projection of leads into summaries with their derived current status."""

from app.application.dtos.lead import LeadSummary
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.domain.entities.status_history import current_status


async def load_lead_summaries(
    lead_repository: LeadRepository,
    status_history_repository: StatusHistoryRepository,
) -> list[LeadSummary]:
    """
    Load every lead with its details and current status, newest first.

    Details are normalized to a single record per lead by the repository;
    the current status is derived from the history, never stored.

    Args:
        lead_repository: Lead repository
        status_history_repository: Status history repository

    Returns:
        Lead summaries
    """
    leads = await lead_repository.list()
    details_by_lead = await lead_repository.list_details()
    histories = await status_history_repository.list_all()

    return [
        LeadSummary.from_entities(
            lead,
            details_by_lead.get(lead.id),
            current_status(histories.get(lead.id, [])),
        )
        for lead in leads
    ]
