"""Dashboard HTTP routes."""

from fastapi import APIRouter, Depends

from app.adapters.inbound.http.dependencies import get_dashboard, get_session_context, translate_errors
from app.application.dtos.dashboard import DashboardStats
from app.application.dtos.session import SessionContext
from app.application.use_cases.lead_dashboard import ComputeDashboardStats

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard_stats(
    session: SessionContext = Depends(get_session_context),
    use_case: ComputeDashboardStats = Depends(get_dashboard),
) -> DashboardStats:
    """Get aggregated lead statistics."""
    with translate_errors():
        return await use_case.execute(session)
