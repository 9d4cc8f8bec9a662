"""Dashboard DTOs."""

from app.application.dtos.base import DTO
from app.application.dtos.lead import LeadSummary


class DashboardStats(DTO):
    """Aggregated lead statistics."""

    total_leads: int
    new_leads_this_month: int
    conversion_rate: float
    average_score: float
    leads_by_status: dict[str, int]
    leads_by_source: dict[str, int]
    leads_by_location: dict[str, int]
    recent_leads: list[LeadSummary]
