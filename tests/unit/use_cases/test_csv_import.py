"""Unit tests for CSV parsing, validation and import."""

import pytest

from app.application.errors import GatewayError, PermissionDeniedError, ValidationError
from app.application.use_cases.csv_import import (
    FRANCHISE_REQUIRED_FIELDS,
    IMPORTED_NOTE,
    LEAD_REQUIRED_FIELDS,
    ImportFranchisesFromCsv,
    ImportLeadsFromCsv,
    parse_csv,
    validate_csv_data,
)
from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.domain.value_objects.pipeline_stage import PipelineStage

LEADS_CSV = """full_name,email,phone,location,interest_level,investment_capacity,source_channel
Ana Ruiz,ana@example.com,600111222,Sevilla,5,yes,referral

Luis Pérez, luis@example.com ,600333444,Madrid,,,
"""

FRANCHISES_CSV = """name,contact_person,address,city,province,phone,email,website
Oficina Centro,Luis Pérez,Calle Mayor 1,Madrid,Madrid,910000000,centro@example.com,https://centro.example.com
Bilbao Sur,Eva Sanz,Gran Vía 20,Bilbao,Bizkaia,944000000,bilbao@example.com
"""


class TestParseCsv:
    """Test cases for parse_csv."""

    def test_trims_and_drops_blank_lines(self) -> None:
        rows = parse_csv(LEADS_CSV)
        assert len(rows) == 2
        assert rows[1]["email"] == "luis@example.com"
        assert rows[1]["interest_level"] == ""

    def test_missing_trailing_values_become_empty(self) -> None:
        rows = parse_csv("a,b,c\n1\n")
        assert rows == [{"a": "1", "b": "", "c": ""}]

    def test_quoted_commas(self) -> None:
        rows = parse_csv('name,address\n"Oficina, Centro","Calle Mayor, 1"\n')
        assert rows[0]["name"] == "Oficina, Centro"

    def test_empty_text(self) -> None:
        assert parse_csv("\n\n") == []


class TestValidateCsvData:
    """Test cases for validate_csv_data."""

    def test_no_rows(self) -> None:
        result = validate_csv_data([], LEAD_REQUIRED_FIELDS)
        assert not result.is_valid
        assert result.errors == ["El archivo CSV no contiene datos"]

    def test_one_error_per_missing_column(self) -> None:
        rows = parse_csv("full_name,email\nAna,ana@example.com\n")
        result = validate_csv_data(rows, LEAD_REQUIRED_FIELDS)
        assert result.errors == [
            "Falta el campo requerido: phone",
            "Falta el campo requerido: location",
        ]

    def test_empty_required_values_are_reported_per_row(self) -> None:
        rows = parse_csv("full_name,email,phone,location\nAna,,600111222,Sevilla\n,,1,Madrid\n")
        result = validate_csv_data(rows, LEAD_REQUIRED_FIELDS)
        assert result.errors == [
            "Fila 1: El campo 'email' está vacío",
            "Fila 2: El campo 'full_name' está vacío",
            "Fila 2: El campo 'email' está vacío",
        ]

    def test_valid_franchises(self) -> None:
        result = validate_csv_data(parse_csv(FRANCHISES_CSV), FRANCHISE_REQUIRED_FIELDS)
        assert result.is_valid
        assert result.errors == []


@pytest.fixture
def lead_import(repositories):
    return ImportLeadsFromCsv(repositories.leads, repositories.status_history)


@pytest.fixture
def franchise_import(repositories):
    return ImportFranchisesFromCsv(repositories.franchises)


@pytest.mark.asyncio
async def test_lead_import_scores_and_sets_initial_status(lead_import, repositories, admin_session):
    result = await lead_import.execute(admin_session, LEADS_CSV)

    assert result.success
    assert result.imported == 2

    ana_id, luis_id = result.imported_ids
    ana = await repositories.leads.get_details(ana_id)
    assert ana.score == 50 + 50
    assert ana.source_channel == SourceChannel.REFERRAL

    luis = await repositories.leads.get_details(luis_id)
    assert luis.interest_level == 3
    assert luis.investment_capacity == InvestmentCapacity.NO
    assert luis.source_channel == SourceChannel.OTHER
    assert luis.score == 40

    history = await repositories.status_history.list_for_lead(luis_id)
    assert [(e.status, e.notes) for e in history] == [(PipelineStage.NEW_CONTACT, IMPORTED_NOTE)]


def test_lead_validate_rejects_bad_optional_values(lead_import):
    result = lead_import.validate(
        "full_name,email,phone,location,interest_level,investment_capacity\n"
        "Ana,ana@example.com,600111222,Sevilla,9,medium\n"
    )
    assert not result.is_valid
    assert result.errors == [
        "Fila 1: El campo 'interest_level' debe ser un número entre 1 y 5",
        "Fila 1: El campo 'investment_capacity' no es válido",
    ]


@pytest.mark.asyncio
async def test_invalid_file_is_not_imported(lead_import, repositories, admin_session):
    with pytest.raises(ValidationError) as exc_info:
        await lead_import.execute(admin_session, "full_name,email\nAna,ana@example.com\n")
    assert "Falta el campo requerido: phone" in exc_info.value.errors
    assert await repositories.leads.list() == []


@pytest.mark.asyncio
async def test_import_stops_at_first_failed_write(lead_import, repositories, admin_session, monkeypatch):
    original_add = repositories.leads.add
    calls = []

    async def add_then_fail(lead):
        calls.append(lead.id)
        if len(calls) == 2:
            raise GatewayError("No se pudo crear el candidato")
        return await original_add(lead)

    monkeypatch.setattr(repositories.leads, "add", add_then_fail)

    result = await lead_import.execute(admin_session, LEADS_CSV)

    assert not result.success
    assert result.total_rows == 2
    assert result.imported == 1
    assert result.errors == ["Fila 2: No se pudo crear el candidato"]
    assert len(await repositories.leads.list()) == 1


@pytest.mark.asyncio
async def test_user_role_cannot_import(lead_import, user_session):
    with pytest.raises(PermissionDeniedError):
        await lead_import.execute(user_session, LEADS_CSV)


@pytest.mark.asyncio
async def test_franchise_import(franchise_import, repositories, admin_session):
    result = await franchise_import.execute(admin_session, FRANCHISES_CSV)

    assert result.success
    franchises = await repositories.franchises.list()
    assert [f.name for f in franchises] == ["Bilbao Sur", "Oficina Centro"]
    assert franchises[0].website is None
    assert franchises[1].website == "https://centro.example.com"
    assert franchises[1].created_by == admin_session.user_id
