"""Postgres-backed communication repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import CommunicationModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.communication_repository import CommunicationRepository
from app.domain.entities.communication import Communication
from app.domain.value_objects.choices import CommunicationType
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresCommunicationRepository(CommunicationRepository):
    """Postgres implementation of communication repository."""

    def _model_to_entity(self, model: CommunicationModel) -> Communication:
        try:
            communication_type = CommunicationType(model.type)
        except ValueError:
            communication_type = CommunicationType.OTHER
        return Communication(
            id=model.id,
            lead_id=model.lead_id,
            type=communication_type,
            content=model.content,
            created_by=model.created_by,
            created_at=as_utc(model.created_at),
        )

    async def add(self, communication: Communication) -> None:
        """Insert a communication."""
        db: Session = get_db_session()
        try:
            db.add(
                CommunicationModel(
                    id=communication.id,
                    lead_id=communication.lead_id,
                    type=communication.type.value,
                    content=communication.content,
                    created_by=communication.created_by,
                    created_at=communication.created_at,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while logging communication for lead "
                f"{communication.lead_id}: {str(e)}"
            )
            raise GatewayError("No se pudo registrar la comunicación") from e
        finally:
            db.close()

    async def get(self, communication_id: str) -> Optional[Communication]:
        """Get a communication by id."""
        db: Session = get_db_session()
        try:
            model = (
                db.query(CommunicationModel)
                .filter(CommunicationModel.id == communication_id)
                .first()
            )
            return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting communication {communication_id}: {str(e)}")
            raise GatewayError("No se pudo cargar la comunicación") from e
        finally:
            db.close()

    async def update(self, communication: Communication) -> None:
        """Update the type and content of a communication."""
        db: Session = get_db_session()
        try:
            model = (
                db.query(CommunicationModel)
                .filter(CommunicationModel.id == communication.id)
                .first()
            )
            if model is None:
                return
            model.type = communication.type.value
            model.content = communication.content
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while updating communication {communication.id}: {str(e)}"
            )
            raise GatewayError("No se pudo actualizar la comunicación") from e
        finally:
            db.close()

    async def delete(self, communication_id: str) -> None:
        """Delete a communication."""
        db: Session = get_db_session()
        try:
            db.query(CommunicationModel).filter(CommunicationModel.id == communication_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while deleting communication {communication_id}: {str(e)}"
            )
            raise GatewayError("No se pudo eliminar la comunicación") from e
        finally:
            db.close()

    async def list_for_lead(self, lead_id: str) -> list[Communication]:
        """List the communications of a lead, newest first."""
        db: Session = get_db_session()
        try:
            models = (
                db.query(CommunicationModel)
                .filter(CommunicationModel.lead_id == lead_id)
                .order_by(CommunicationModel.created_at.desc())
                .all()
            )
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing communications of {lead_id}: {str(e)}")
            raise GatewayError("No se pudieron cargar las comunicaciones") from e
        finally:
            db.close()
