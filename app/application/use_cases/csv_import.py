"""CSV bulk import use cases for leads and franchises."""

import csv
import io
from typing import Any, Callable, Optional

from app.application.dtos.csv_import import CsvImportResult, CsvValidationResult
from app.application.dtos.session import SessionContext
from app.application.errors import CRMError, ValidationError
from app.application.ports.franchise_repository import FranchiseRepository
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.domain.entities.franchise import Franchise
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.domain.value_objects.pipeline_stage import DEFAULT_STAGE
from app.domain.value_objects.role import EDITOR_ROLES

LEAD_REQUIRED_FIELDS = ("full_name", "email", "phone", "location")
FRANCHISE_REQUIRED_FIELDS = ("name", "contact_person", "address", "city", "province", "phone", "email")

IMPORTED_NOTE = "Importado desde CSV"

DEFAULT_INTEREST_LEVEL = 3


def parse_csv(text: str) -> list[dict[str, str]]:
    """
    Parse CSV text into rows keyed by the header.

    Blank lines are dropped, header names and values are trimmed and
    missing trailing values become empty strings.

    Args:
        text: Raw CSV content

    Returns:
        Data rows (the header is not included)
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    lines = [row for row in reader if any(cell.strip() for cell in row)]
    if not lines:
        return []

    headers = [h.strip() for h in lines[0]]
    rows = []
    for line in lines[1:]:
        values = [v.strip() for v in line]
        rows.append({h: values[i] if i < len(values) else "" for i, h in enumerate(headers)})
    return rows


def validate_csv_data(rows: list[dict[str, str]], required_fields: tuple[str, ...]) -> CsvValidationResult:
    """
    Check parsed rows for required columns and empty required values.

    Args:
        rows: Parsed data rows
        required_fields: Columns every row must fill

    Returns:
        Validation result with one message per problem
    """
    if not rows:
        return CsvValidationResult(is_valid=False, errors=["El archivo CSV no contiene datos"])

    headers = rows[0].keys()
    missing = [f for f in required_fields if f not in headers]
    if missing:
        return CsvValidationResult(
            is_valid=False,
            errors=[f"Falta el campo requerido: {f}" for f in missing],
        )

    errors = []
    for index, row in enumerate(rows):
        for name in required_fields:
            if not row.get(name, "").strip():
                errors.append(f"Fila {index + 1}: El campo '{name}' está vacío")

    return CsvValidationResult(is_valid=not errors, errors=errors)


def validate_lead_rows(rows: list[dict[str, str]]) -> CsvValidationResult:
    """
    Validate lead rows, including the optional scoring columns.

    interest_level, investment_capacity and source_channel may be absent
    or empty; when filled they must hold valid values.
    """
    result = validate_csv_data(rows, LEAD_REQUIRED_FIELDS)
    if not rows or not set(LEAD_REQUIRED_FIELDS) <= rows[0].keys():
        return result

    errors = list(result.errors)
    for index, row in enumerate(rows):
        interest = row.get("interest_level", "")
        if interest and _parse_interest(interest) is None:
            errors.append(f"Fila {index + 1}: El campo 'interest_level' debe ser un número entre 1 y 5")
        capacity = row.get("investment_capacity", "")
        if capacity and not _is_member(InvestmentCapacity, capacity):
            errors.append(f"Fila {index + 1}: El campo 'investment_capacity' no es válido")
        source = row.get("source_channel", "")
        if source and not _is_member(SourceChannel, source):
            errors.append(f"Fila {index + 1}: El campo 'source_channel' no es válido")

    return CsvValidationResult(is_valid=not errors, errors=errors)


def _parse_interest(value: str) -> Optional[int]:
    try:
        level = int(value)
    except ValueError:
        return None
    return level if 1 <= level <= 5 else None


def _is_member(enum_cls: type, value: str) -> bool:
    try:
        enum_cls(value.strip().lower())
    except ValueError:
        return False
    return True


class ImportLeadsFromCsv:
    """Use case for bulk importing leads from CSV."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        status_history_repository: StatusHistoryRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize lead import use case.

        Args:
            lead_repository: Repository for leads and details
            status_history_repository: Repository for the status log
            logger: Optional import logger (entity, rows_total, rows_imported, **fields)
        """
        self._lead_repository = lead_repository
        self._status_history_repository = status_history_repository
        self._logger = logger

    def validate(self, text: str) -> CsvValidationResult:
        """Parse and validate CSV text without importing it."""
        return validate_lead_rows(parse_csv(text))

    async def execute(self, session: SessionContext, text: str) -> CsvImportResult:
        """
        Import every row as a lead with scored details and a new_contact status.

        Rows are written in order. The first failed write stops the
        import; rows written before it stay.

        Args:
            session: Caller context
            text: Raw CSV content

        Returns:
            Import result with the number of imported rows

        Raises:
            PermissionDeniedError: If the caller cannot create leads
            ValidationError: If the file does not validate
        """
        session.require(EDITOR_ROLES)

        rows = parse_csv(text)
        validation = validate_lead_rows(rows)
        if not validation.is_valid:
            raise ValidationError("El archivo CSV contiene errores", errors=validation.errors)

        imported_ids: list[str] = []
        errors: list[str] = []
        for index, row in enumerate(rows):
            try:
                imported_ids.append(await self._import_row(session, row))
            except CRMError as e:
                errors.append(f"Fila {index + 1}: {e.message}")
                break

        if self._logger:
            self._logger("leads", len(rows), len(imported_ids), actor_id=session.user_id)
        return CsvImportResult(
            total_rows=len(rows),
            imported=len(imported_ids),
            errors=errors,
            imported_ids=imported_ids,
        )

    async def _import_row(self, session: SessionContext, row: dict[str, str]) -> str:
        lead = Lead(
            full_name=row["full_name"],
            email=row["email"],
            phone=row["phone"],
            location=row["location"],
        )
        await self._lead_repository.add(lead)

        capacity = row.get("investment_capacity", "").lower()
        source = row.get("source_channel", "").lower()
        details = LeadDetails(
            lead_id=lead.id,
            interest_level=_parse_interest(row.get("interest_level", "")) or DEFAULT_INTEREST_LEVEL,
            investment_capacity=InvestmentCapacity(capacity) if capacity else InvestmentCapacity.NO,
            source_channel=SourceChannel(source) if source else SourceChannel.OTHER,
            previous_experience=row.get("previous_experience", ""),
            additional_comments=row.get("additional_comments", ""),
        )
        await self._lead_repository.save_details(details)

        await self._status_history_repository.append(
            StatusHistoryEntry(
                lead_id=lead.id,
                status=DEFAULT_STAGE,
                notes=IMPORTED_NOTE,
                created_by=session.user_id,
            )
        )
        return lead.id


class ImportFranchisesFromCsv:
    """Use case for bulk importing franchises from CSV."""

    def __init__(
        self,
        franchise_repository: FranchiseRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        self._franchise_repository = franchise_repository
        self._logger = logger

    def validate(self, text: str) -> CsvValidationResult:
        """Parse and validate CSV text without importing it."""
        return validate_csv_data(parse_csv(text), FRANCHISE_REQUIRED_FIELDS)

    async def execute(self, session: SessionContext, text: str) -> CsvImportResult:
        """
        Import every row as a franchise.

        Args:
            session: Caller context
            text: Raw CSV content

        Returns:
            Import result

        Raises:
            PermissionDeniedError: If the caller cannot create franchises
            ValidationError: If the file does not validate
        """
        session.require(EDITOR_ROLES)

        rows = parse_csv(text)
        validation = validate_csv_data(rows, FRANCHISE_REQUIRED_FIELDS)
        if not validation.is_valid:
            raise ValidationError("El archivo CSV contiene errores", errors=validation.errors)

        imported_ids: list[str] = []
        errors: list[str] = []
        for index, row in enumerate(rows):
            franchise = Franchise(
                name=row["name"],
                contact_person=row["contact_person"],
                address=row["address"],
                city=row["city"],
                province=row["province"],
                phone=row["phone"],
                email=row["email"],
                website=row.get("website") or None,
                tesis_code=row.get("tesis_code") or None,
                created_by=session.user_id,
            )
            try:
                await self._franchise_repository.add(franchise)
            except CRMError as e:
                errors.append(f"Fila {index + 1}: {e.message}")
                break
            imported_ids.append(franchise.id)

        if self._logger:
            self._logger("franchises", len(rows), len(imported_ids), actor_id=session.user_id)
        return CsvImportResult(
            total_rows=len(rows),
            imported=len(imported_ids),
            errors=errors,
            imported_ids=imported_ids,
        )
