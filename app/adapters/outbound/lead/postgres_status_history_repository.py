"""Postgres-backed status history repository adapter."""

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import LeadStatusHistoryModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.domain.entities.status_history import StatusHistoryEntry
from app.domain.value_objects.pipeline_stage import DEFAULT_STAGE, PipelineStage
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresStatusHistoryRepository(StatusHistoryRepository):
    """Postgres implementation of the status log; rows are only ever inserted."""

    def _model_to_entity(self, model: LeadStatusHistoryModel) -> StatusHistoryEntry:
        """Convert a history row to an entry (unknown statuses read as new_contact)."""
        return StatusHistoryEntry(
            id=model.id,
            lead_id=model.lead_id,
            status=PipelineStage.parse(model.status) or DEFAULT_STAGE,
            notes=model.notes,
            created_by=model.created_by,
            created_at=as_utc(model.created_at),
        )

    async def append(self, entry: StatusHistoryEntry) -> None:
        """
        Insert a history row.

        Args:
            entry: New status history entry
        """
        db: Session = get_db_session()
        try:
            last_sequence = (
                db.query(func.max(LeadStatusHistoryModel.sequence))
                .filter(LeadStatusHistoryModel.lead_id == entry.lead_id)
                .scalar()
            )
            db.add(
                LeadStatusHistoryModel(
                    id=entry.id,
                    lead_id=entry.lead_id,
                    sequence=(last_sequence or 0) + 1,
                    status=entry.status.value,
                    notes=entry.notes,
                    created_by=entry.created_by,
                    created_at=entry.created_at,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while appending status for lead {entry.lead_id}: {str(e)}"
            )
            raise GatewayError("No se pudo actualizar el estado del candidato") from e
        finally:
            db.close()

    async def list_for_lead(self, lead_id: str) -> list[StatusHistoryEntry]:
        """
        Get the history of one lead in insertion order.

        Args:
            lead_id: Lead identifier

        Returns:
            Entries of the lead
        """
        db: Session = get_db_session()
        try:
            models = (
                db.query(LeadStatusHistoryModel)
                .filter(LeadStatusHistoryModel.lead_id == lead_id)
                .order_by(LeadStatusHistoryModel.sequence)
                .all()
            )
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting status history of {lead_id}: {str(e)}")
            raise GatewayError("No se pudo cargar el historial de estados") from e
        finally:
            db.close()

    async def list_all(self) -> dict[str, list[StatusHistoryEntry]]:
        """
        Get the history of every lead.

        Returns:
            Mapping of lead id to its entries in insertion order
        """
        db: Session = get_db_session()
        try:
            models = (
                db.query(LeadStatusHistoryModel)
                .order_by(LeadStatusHistoryModel.lead_id, LeadStatusHistoryModel.sequence)
                .all()
            )
            histories: dict[str, list[StatusHistoryEntry]] = {}
            for model in models:
                histories.setdefault(model.lead_id, []).append(self._model_to_entity(model))
            return histories
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing status history: {str(e)}")
            raise GatewayError("No se pudo cargar el historial de estados") from e
        finally:
            db.close()
