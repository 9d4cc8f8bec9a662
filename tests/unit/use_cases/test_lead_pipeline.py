"""Unit tests for the pipeline board and card moves."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from app.application.dtos.pipeline import MoveCardRequest
from app.application.errors import GatewayError, NotFoundError, PermissionDeniedError
from app.application.use_cases.lead_pipeline import LeadPipeline, MoveCardCommand
from app.application.use_cases.track_lead_status import TrackLeadStatus
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.value_objects.choices import InvestmentCapacity
from app.domain.value_objects.pipeline_stage import PipelineStage

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def pipeline(repositories):
    track = TrackLeadStatus(repositories.leads, repositories.status_history)
    return LeadPipeline(repositories.leads, repositories.status_history, track)


async def _add_lead(repositories, name: str, minutes: int, status: PipelineStage = None) -> Lead:
    lead = Lead(
        full_name=name,
        email=f"{name.lower()}@example.com",
        phone="600111222",
        location="Madrid",
        created_at=T0 + timedelta(minutes=minutes),
    )
    await repositories.leads.add(lead)
    await repositories.leads.save_details(
        LeadDetails(lead_id=lead.id, interest_level=4, investment_capacity=InvestmentCapacity.YES)
    )
    if status is not None:
        await repositories.status_history.append(
            StatusHistoryEntry(lead_id=lead.id, status=status, created_at=T0 + timedelta(minutes=minutes))
        )
    return lead


@pytest_asyncio.fixture
async def leads(repositories):
    return {
        "ana": await _add_lead(repositories, "Ana", 1, PipelineStage.NEW_CONTACT),
        "luis": await _add_lead(repositories, "Luis", 2, PipelineStage.INFO_SENT),
        "eva": await _add_lead(repositories, "Eva", 3),
    }


@pytest.mark.asyncio
async def test_board_groups_by_current_status(pipeline, leads, user_session):
    board = await pipeline.board(user_session)

    assert [c.stage for c in board.columns] == PipelineStage.ordered()
    assert board.columns[-1].stage == PipelineStage.REJECTED
    assert board.column(PipelineStage.NEW_CONTACT).label == "Nuevo Contacto"

    # Leads without history sit in new_contact, newest first
    new_contact = [c.full_name for c in board.column(PipelineStage.NEW_CONTACT).cards]
    assert new_contact == ["Eva", "Ana"]
    assert [c.full_name for c in board.column(PipelineStage.INFO_SENT).cards] == ["Luis"]
    assert board.column(PipelineStage.INFO_SENT).cards[0].score == 90


@pytest.mark.asyncio
async def test_move_appends_status_and_returns_moved_board(pipeline, repositories, leads, admin_session):
    ana = leads["ana"]
    result = await pipeline.move_card(
        admin_session,
        MoveCardRequest(lead_id=ana.id, destination=PipelineStage.INTERVIEW_SCHEDULED, notes="Jueves"),
    )

    assert result.success
    assert result.source == PipelineStage.NEW_CONTACT
    assert result.board.stage_of(ana.id) == PipelineStage.INTERVIEW_SCHEDULED
    history = await repositories.status_history.list_for_lead(ana.id)
    assert history[-1].status == PipelineStage.INTERVIEW_SCHEDULED
    assert history[-1].notes == "Jueves"

    persisted = await pipeline.board(admin_session)
    assert persisted.stage_of(ana.id) == PipelineStage.INTERVIEW_SCHEDULED


@pytest.mark.asyncio
async def test_move_to_same_column_is_noop(pipeline, repositories, leads, admin_session):
    luis = leads["luis"]
    result = await pipeline.move_card(
        admin_session, MoveCardRequest(lead_id=luis.id, destination=PipelineStage.INFO_SENT)
    )
    assert result.success
    assert len(await repositories.status_history.list_for_lead(luis.id)) == 1


@pytest.mark.asyncio
async def test_failed_move_refetches_board(pipeline, repositories, leads, admin_session, monkeypatch):
    """When the append fails the persisted board is returned and nothing moves."""

    async def failing_append(entry):
        raise GatewayError("No se pudo guardar el estado")

    monkeypatch.setattr(repositories.status_history, "append", failing_append)

    ana = leads["ana"]
    result = await pipeline.move_card(
        admin_session, MoveCardRequest(lead_id=ana.id, destination=PipelineStage.NEGOTIATION)
    )

    assert not result.success
    assert result.refetched
    assert result.error == "No se pudo guardar el estado"
    assert result.board.stage_of(ana.id) == PipelineStage.NEW_CONTACT


@pytest.mark.asyncio
async def test_user_role_cannot_move(pipeline, repositories, leads, user_session):
    with pytest.raises(PermissionDeniedError):
        await pipeline.move_card(
            user_session, MoveCardRequest(lead_id=leads["ana"].id, destination=PipelineStage.REJECTED)
        )
    assert len(await repositories.status_history.list_for_lead(leads["ana"].id)) == 1


@pytest.mark.asyncio
async def test_move_unknown_lead(pipeline, leads, admin_session):
    with pytest.raises(NotFoundError):
        await pipeline.move_card(
            admin_session, MoveCardRequest(lead_id="missing", destination=PipelineStage.REJECTED)
        )


@pytest.mark.asyncio
async def test_command_leaves_snapshot_untouched(pipeline, leads, admin_session):
    board = await pipeline.board(admin_session)
    command = MoveCardCommand(
        board, MoveCardRequest(lead_id=leads["eva"].id, destination=PipelineStage.REJECTED)
    )

    moved = command.apply()

    assert board.stage_of(leads["eva"].id) == PipelineStage.NEW_CONTACT
    assert moved.stage_of(leads["eva"].id) == PipelineStage.REJECTED
    assert moved.column(PipelineStage.REJECTED).cards[0].full_name == "Eva"
