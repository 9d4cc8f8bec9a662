"""Unit tests for TrackLeadStatus use case."""

import pytest
import pytest_asyncio

from app.application.errors import NotFoundError, PermissionDeniedError
from app.application.use_cases.track_lead_status import TrackLeadStatus
from app.domain.entities.lead import Lead
from app.domain.value_objects.pipeline_stage import PipelineStage


@pytest.fixture
def status_changes():
    return []


@pytest.fixture
def use_case(repositories, status_changes):
    def _logger(lead_id, status, **kwargs):
        status_changes.append((lead_id, status, kwargs))

    return TrackLeadStatus(repositories.leads, repositories.status_history, logger=_logger)


@pytest_asyncio.fixture
async def lead(repositories):
    lead = Lead(full_name="Ana Ruiz", email="ana@example.com", phone="600111222", location="Sevilla")
    await repositories.leads.add(lead)
    return lead


@pytest.mark.asyncio
async def test_append_only_history(use_case, repositories, lead, admin_session):
    """Each move inserts a row; earlier rows are never changed."""
    await use_case.append_status(admin_session, lead.id, PipelineStage.FIRST_CONTACT)
    first = await repositories.status_history.list_for_lead(lead.id)

    await use_case.append_status(admin_session, lead.id, PipelineStage.INFO_SENT, notes="Dossier enviado")
    history = await repositories.status_history.list_for_lead(lead.id)

    assert len(history) == 2
    assert history[0] == first[0]
    assert history[1].notes == "Dossier enviado"
    assert history[1].created_by == admin_session.user_id
    assert await use_case.current_status(lead.id) == PipelineStage.INFO_SENT


@pytest.mark.asyncio
async def test_any_transition_is_allowed(use_case, lead, admin_session):
    await use_case.append_status(admin_session, lead.id, PipelineStage.CONTRACT_SIGNED)
    await use_case.append_status(admin_session, lead.id, PipelineStage.NEW_CONTACT)
    await use_case.append_status(admin_session, lead.id, PipelineStage.REJECTED)
    assert await use_case.current_status(lead.id) == PipelineStage.REJECTED


@pytest.mark.asyncio
async def test_moving_to_same_status_appends_again(use_case, repositories, lead, admin_session):
    await use_case.append_status(admin_session, lead.id, PipelineStage.NEGOTIATION)
    await use_case.append_status(admin_session, lead.id, PipelineStage.NEGOTIATION)
    assert len(await repositories.status_history.list_for_lead(lead.id)) == 2


@pytest.mark.asyncio
async def test_logs_status_before_and_after(use_case, lead, superadmin_session, status_changes):
    await use_case.append_status(superadmin_session, lead.id, PipelineStage.FIRST_CONTACT)
    lead_id, status, fields = status_changes[-1]
    assert lead_id == lead.id
    assert status == "first_contact"
    assert fields["status_before"] == "new_contact"
    assert fields["actor_id"] == superadmin_session.user_id


@pytest.mark.asyncio
async def test_user_role_cannot_move(use_case, repositories, lead, user_session):
    with pytest.raises(PermissionDeniedError):
        await use_case.append_status(user_session, lead.id, PipelineStage.FIRST_CONTACT)
    assert await repositories.status_history.list_for_lead(lead.id) == []


@pytest.mark.asyncio
async def test_unknown_lead(use_case, admin_session):
    with pytest.raises(NotFoundError):
        await use_case.append_status(admin_session, "missing", PipelineStage.FIRST_CONTACT)


@pytest.mark.asyncio
async def test_history_is_newest_first(use_case, lead, admin_session):
    await use_case.append_status(admin_session, lead.id, PipelineStage.FIRST_CONTACT)
    await use_case.append_status(admin_session, lead.id, PipelineStage.INFO_SENT)
    history = await use_case.history(lead.id)
    assert [e.status for e in history] == [PipelineStage.INFO_SENT, PipelineStage.FIRST_CONTACT]
