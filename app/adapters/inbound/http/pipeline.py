"""Pipeline board HTTP routes."""

from fastapi import APIRouter, Depends

from app.adapters.inbound.http.dependencies import (
    get_lead_pipeline,
    get_session_context,
    translate_errors,
)
from app.application.dtos.pipeline import MoveCardRequest, MoveCardResult, PipelineBoard
from app.application.dtos.session import SessionContext
from app.application.use_cases.lead_pipeline import LeadPipeline

router = APIRouter(prefix="/pipeline", tags=["pipeline"])


@router.get("", response_model=PipelineBoard)
async def get_board(
    session: SessionContext = Depends(get_session_context),
    use_case: LeadPipeline = Depends(get_lead_pipeline),
) -> PipelineBoard:
    """Get leads grouped by current stage."""
    with translate_errors():
        return await use_case.board(session)


@router.post("/move", response_model=MoveCardResult)
async def move_card(
    request: MoveCardRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: LeadPipeline = Depends(get_lead_pipeline),
) -> MoveCardResult:
    """
    Move a lead card to another stage.

    A failed move is reported with success=false and the board as
    persisted, so the client can drop its optimistic state.
    """
    with translate_errors():
        return await use_case.move_card(session, request)
