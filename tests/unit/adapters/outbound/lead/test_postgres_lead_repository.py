"""Unit tests for Postgres lead repository using SQLite in-memory."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.activity import PostgresCommunicationRepository, PostgresTaskRepository
from app.adapters.outbound.lead import PostgresLeadRepository, PostgresStatusHistoryRepository
from app.adapters.outbound.persistence import Base
from app.adapters.outbound.persistence.models import LeadDetailsModel
from app.application.errors import GatewayError
from app.domain.entities.communication import Communication
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.entities.task import Task
from app.domain.value_objects.choices import CommunicationType, InvestmentCapacity, SourceChannel
from app.domain.value_objects.pipeline_stage import PipelineStage

_PATCHED_MODULES = (
    "app.adapters.outbound.lead.postgres_lead_repository",
    "app.adapters.outbound.lead.postgres_status_history_repository",
    "app.adapters.outbound.activity.postgres_communication_repository",
    "app.adapters.outbound.activity.postgres_task_repository",
)


@pytest.fixture
def sqlite_engine():
    """Create SQLite in-memory engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session_factory(sqlite_engine, monkeypatch):
    """Patch get_db_session of the Postgres adapters to use the SQLite engine."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)

    def get_test_db_session():
        return SessionLocal()

    for module in _PATCHED_MODULES:
        monkeypatch.setattr(f"{module}.get_db_session", get_test_db_session)
    return SessionLocal


@pytest.fixture
def repository(session_factory):
    return PostgresLeadRepository()


def _lead(name: str, minutes: int = 0) -> Lead:
    return Lead(
        full_name=name,
        email=f"{name.lower()}@example.com",
        phone="600111222",
        location="Madrid",
        created_at=datetime(2025, 2, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
    )


@pytest.mark.asyncio
async def test_add_get_and_list_newest_first(repository):
    older = await repository.add(_lead("Ana", 0))
    newer = await repository.add(_lead("Luis", 5))

    fetched = await repository.get(older.id)
    assert fetched.full_name == "Ana"
    assert fetched.created_at.tzinfo is not None

    assert [lead.id for lead in await repository.list()] == [newer.id, older.id]
    assert await repository.get("missing") is None


@pytest.mark.asyncio
async def test_update_contact_fields(repository):
    lead = await repository.add(_lead("Ana"))
    lead.location = "Sevilla"
    await repository.update(lead)
    assert (await repository.get(lead.id)).location == "Sevilla"


@pytest.mark.asyncio
async def test_save_details_upserts_one_row(repository, session_factory):
    lead = await repository.add(_lead("Ana"))

    await repository.save_details(LeadDetails(lead_id=lead.id, interest_level=2))
    details = await repository.get_details(lead.id)
    details.apply_changes(
        interest_level=5,
        investment_capacity=InvestmentCapacity.YES,
        source_channel=SourceChannel.EVENT,
    )
    await repository.save_details(details)

    stored = await repository.get_details(lead.id)
    assert stored.interest_level == 5
    assert stored.source_channel == SourceChannel.EVENT
    assert stored.score == 100

    db = session_factory()
    try:
        assert db.query(LeadDetailsModel).filter(LeadDetailsModel.lead_id == lead.id).count() == 1
    finally:
        db.close()


@pytest.mark.asyncio
async def test_unknown_stored_enum_values_fall_back(repository, session_factory):
    lead = await repository.add(_lead("Ana"))
    db = session_factory()
    try:
        db.add(
            LeadDetailsModel(
                id="d-1",
                lead_id=lead.id,
                investment_capacity="medium",
                source_channel="fax",
                interest_level=3,
                score=3,
            )
        )
        db.commit()
    finally:
        db.close()

    details = await repository.get_details(lead.id)
    assert details.investment_capacity == InvestmentCapacity.NO
    assert details.source_channel == SourceChannel.OTHER
    assert details.score == 40


@pytest.mark.asyncio
async def test_list_details_keyed_by_lead(repository):
    ana = await repository.add(_lead("Ana"))
    luis = await repository.add(_lead("Luis", 1))
    await repository.save_details(LeadDetails(lead_id=ana.id, interest_level=4))

    details = await repository.list_details()

    assert set(details) == {ana.id}
    assert details[ana.id].interest_level == 4
    assert luis.id not in details


@pytest.mark.asyncio
async def test_delete_cascades_to_dependent_rows(repository, session_factory):
    history = PostgresStatusHistoryRepository()
    communications = PostgresCommunicationRepository()
    tasks = PostgresTaskRepository()

    lead = await repository.add(_lead("Ana"))
    await repository.save_details(LeadDetails(lead_id=lead.id))
    await history.append(StatusHistoryEntry(lead_id=lead.id, status=PipelineStage.NEW_CONTACT))
    await communications.add(Communication(lead_id=lead.id, type=CommunicationType.CALL, content="Llamada"))
    await tasks.add(Task(lead_id=lead.id, title="Enviar dossier"))

    await repository.delete(lead.id)

    assert await repository.get(lead.id) is None
    assert await repository.get_details(lead.id) is None
    assert await history.list_for_lead(lead.id) == []
    assert await communications.list_for_lead(lead.id) == []
    assert await tasks.list(lead_id=lead.id) == []


@pytest.mark.asyncio
async def test_database_errors_become_gateway_errors(repository, sqlite_engine):
    Base.metadata.drop_all(sqlite_engine)
    with pytest.raises(GatewayError):
        await repository.list()
    with pytest.raises(GatewayError):
        await repository.add(_lead("Ana"))
