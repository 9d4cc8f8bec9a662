"""CSV import DTOs."""

from app.application.dtos.base import DTO


class CsvValidationResult(DTO):
    """Outcome of validating parsed CSV rows."""

    is_valid: bool
    errors: list[str] = []


class CsvImportResult(DTO):
    """Outcome of an import run."""

    total_rows: int
    imported: int
    errors: list[str] = []
    imported_ids: list[str] = []

    @property
    def success(self) -> bool:
        """Whether every row was imported."""
        return not self.errors and self.imported == self.total_rows
