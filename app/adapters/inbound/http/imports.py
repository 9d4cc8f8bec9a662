"""CSV import HTTP routes."""

from fastapi import APIRouter, Depends

from app.adapters.inbound.http.dependencies import (
    get_import_franchises,
    get_import_leads,
    get_session_context,
    translate_errors,
)
from app.adapters.inbound.http.schemas import CsvUploadRequest
from app.application.dtos.csv_import import CsvImportResult, CsvValidationResult
from app.application.dtos.session import SessionContext
from app.application.use_cases.csv_import import ImportFranchisesFromCsv, ImportLeadsFromCsv

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post("/leads/validate", response_model=CsvValidationResult)
async def validate_leads_csv(
    upload: CsvUploadRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: ImportLeadsFromCsv = Depends(get_import_leads),
) -> CsvValidationResult:
    """Validate a lead CSV without importing it."""
    return use_case.validate(upload.content)


@router.post("/leads", response_model=CsvImportResult)
async def import_leads_csv(
    upload: CsvUploadRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: ImportLeadsFromCsv = Depends(get_import_leads),
) -> CsvImportResult:
    """Import leads from CSV."""
    with translate_errors():
        return await use_case.execute(session, upload.content)


@router.post("/franchises/validate", response_model=CsvValidationResult)
async def validate_franchises_csv(
    upload: CsvUploadRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: ImportFranchisesFromCsv = Depends(get_import_franchises),
) -> CsvValidationResult:
    """Validate a franchise CSV without importing it."""
    return use_case.validate(upload.content)


@router.post("/franchises", response_model=CsvImportResult)
async def import_franchises_csv(
    upload: CsvUploadRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: ImportFranchisesFromCsv = Depends(get_import_franchises),
) -> CsvImportResult:
    """Import franchises from CSV."""
    with translate_errors():
        return await use_case.execute(session, upload.content)
