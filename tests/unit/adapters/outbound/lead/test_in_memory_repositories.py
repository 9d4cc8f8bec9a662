"""Unit tests for the in-memory repositories sharing one store."""

from datetime import datetime, timezone

import pytest

from app.domain.entities.communication import Communication
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.entities.task import Task
from app.domain.value_objects.choices import CommunicationType
from app.domain.value_objects.pipeline_stage import PipelineStage


@pytest.mark.asyncio
async def test_delete_lead_cascades(repositories, store):
    kept = await repositories.leads.add(
        Lead(full_name="Luis", email="luis@example.com", phone="600111222", location="Madrid")
    )
    lead = await repositories.leads.add(
        Lead(full_name="Ana", email="ana@example.com", phone="600111222", location="Madrid")
    )
    for lead_id in (kept.id, lead.id):
        await repositories.leads.save_details(LeadDetails(lead_id=lead_id))
        await repositories.status_history.append(
            StatusHistoryEntry(lead_id=lead_id, status=PipelineStage.NEW_CONTACT)
        )
        await repositories.communications.add(
            Communication(lead_id=lead_id, type=CommunicationType.CALL, content="Llamada")
        )
        await repositories.tasks.add(Task(lead_id=lead_id, title="Seguimiento"))

    await repositories.leads.delete(lead.id)

    assert await repositories.leads.get(lead.id) is None
    assert set(store.lead_details) == {kept.id}
    assert {e.lead_id for e in store.status_history} == {kept.id}
    assert {c.lead_id for c in store.communications.values()} == {kept.id}
    assert {t.lead_id for t in store.tasks.values()} == {kept.id}


@pytest.mark.asyncio
async def test_returned_entities_are_copies(repositories):
    lead = await repositories.leads.add(
        Lead(full_name="Ana", email="ana@example.com", phone="600111222", location="Madrid")
    )

    fetched = await repositories.leads.get(lead.id)
    fetched.location = "Bilbao"

    assert (await repositories.leads.get(lead.id)).location == "Madrid"


@pytest.mark.asyncio
async def test_history_keeps_insertion_order_on_ties(repositories):
    moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for status in (PipelineStage.REJECTED, PipelineStage.NEW_CONTACT):
        await repositories.status_history.append(
            StatusHistoryEntry(lead_id="l-1", status=status, created_at=moment)
        )

    entries = await repositories.status_history.list_for_lead("l-1")

    assert [e.status for e in entries] == [PipelineStage.REJECTED, PipelineStage.NEW_CONTACT]
