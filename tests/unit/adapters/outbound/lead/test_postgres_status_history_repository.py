"""Unit tests for Postgres status history repository using SQLite in-memory."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.lead import PostgresLeadRepository, PostgresStatusHistoryRepository
from app.adapters.outbound.persistence import Base
from app.domain.entities.lead import Lead
from app.domain.entities.status_history import StatusHistoryEntry, current_status
from app.domain.value_objects.pipeline_stage import PipelineStage

SAME_INSTANT = datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def repositories(monkeypatch):
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def get_test_db_session():
        return SessionLocal()

    monkeypatch.setattr(
        "app.adapters.outbound.lead.postgres_lead_repository.get_db_session",
        get_test_db_session,
    )
    monkeypatch.setattr(
        "app.adapters.outbound.lead.postgres_status_history_repository.get_db_session",
        get_test_db_session,
    )
    return PostgresLeadRepository(), PostgresStatusHistoryRepository()


@pytest.mark.asyncio
async def test_insertion_order_breaks_timestamp_ties(repositories):
    """Entries sharing created_at come back in insertion order, so the last one is current."""
    leads, history = repositories
    lead = await leads.add(Lead(full_name="Ana", email="ana@example.com", phone="600111222", location="Madrid"))

    for status in (PipelineStage.NEGOTIATION, PipelineStage.NEW_CONTACT, PipelineStage.REJECTED):
        await history.append(StatusHistoryEntry(lead_id=lead.id, status=status, created_at=SAME_INSTANT))

    entries = await history.list_for_lead(lead.id)

    assert [e.status for e in entries] == [
        PipelineStage.NEGOTIATION,
        PipelineStage.NEW_CONTACT,
        PipelineStage.REJECTED,
    ]
    assert current_status(entries) == PipelineStage.REJECTED
    assert entries[0].created_at == SAME_INSTANT


@pytest.mark.asyncio
async def test_list_all_groups_by_lead(repositories):
    leads, history = repositories
    ana = await leads.add(Lead(full_name="Ana", email="ana@example.com", phone="600111222", location="Madrid"))
    luis = await leads.add(Lead(full_name="Luis", email="luis@example.com", phone="600111222", location="Madrid"))

    await history.append(StatusHistoryEntry(lead_id=ana.id, status=PipelineStage.NEW_CONTACT, notes="Alta"))
    await history.append(StatusHistoryEntry(lead_id=luis.id, status=PipelineStage.NEW_CONTACT))
    await history.append(StatusHistoryEntry(lead_id=ana.id, status=PipelineStage.FIRST_CONTACT))

    grouped = await history.list_all()

    assert [e.status for e in grouped[ana.id]] == [PipelineStage.NEW_CONTACT, PipelineStage.FIRST_CONTACT]
    assert grouped[ana.id][0].notes == "Alta"
    assert len(grouped[luis.id]) == 1
