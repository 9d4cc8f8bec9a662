"""Postgres-backed lead repository adapter."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import LeadDetailsModel, LeadModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.lead_repository import LeadRepository
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.value_objects.choices import InvestmentCapacity, SourceChannel
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresLeadRepository(LeadRepository):
    """Postgres implementation of lead repository."""

    def _model_to_entity(self, model: LeadModel) -> Lead:
        """
        Convert LeadModel to Lead entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Lead entity
        """
        return Lead(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone=model.phone,
            location=model.location,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _details_model_to_entity(self, model: LeadDetailsModel) -> LeadDetails:
        """
        Convert LeadDetailsModel to LeadDetails entity.

        Unknown enum values stored by older clients fall back to the defaults.

        Args:
            model: SQLAlchemy model instance

        Returns:
            LeadDetails entity (score recomputed from its inputs)
        """
        try:
            capacity = InvestmentCapacity(model.investment_capacity)
        except ValueError:
            capacity = InvestmentCapacity.NO
        try:
            source = SourceChannel(model.source_channel)
        except ValueError:
            source = SourceChannel.OTHER

        return LeadDetails(
            lead_id=model.lead_id,
            interest_level=model.interest_level,
            investment_capacity=capacity,
            source_channel=source,
            previous_experience=model.previous_experience or "",
            additional_comments=model.additional_comments or "",
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _latest_details_models(self, db: Session) -> dict[str, LeadDetailsModel]:
        """Pick one details row per lead (most recently updated wins)."""
        latest: dict[str, LeadDetailsModel] = {}
        for model in db.query(LeadDetailsModel).order_by(LeadDetailsModel.updated_at).all():
            latest[model.lead_id] = model
        return latest

    async def add(self, lead: Lead) -> Lead:
        """
        Insert a lead.

        Args:
            lead: Lead entity

        Returns:
            The stored lead
        """
        db: Session = get_db_session()
        try:
            db.add(
                LeadModel(
                    id=lead.id,
                    full_name=lead.full_name,
                    email=lead.email,
                    phone=lead.phone,
                    location=lead.location,
                    created_at=lead.created_at,
                    updated_at=lead.updated_at,
                )
            )
            db.commit()
            return lead
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while inserting lead {lead.id}: {str(e)}")
            raise GatewayError("No se pudo crear el candidato") from e
        finally:
            db.close()

    async def get(self, lead_id: str) -> Optional[Lead]:
        """
        Get a lead by id.

        Args:
            lead_id: Lead identifier

        Returns:
            Lead entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.query(LeadModel).filter(LeadModel.id == lead_id).first()
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting lead {lead_id}: {str(e)}")
            raise GatewayError("No se pudo cargar el candidato") from e
        finally:
            db.close()

    async def update(self, lead: Lead) -> None:
        """
        Update the contact fields of a lead.

        Args:
            lead: Lead entity with new values
        """
        db: Session = get_db_session()
        try:
            model = db.query(LeadModel).filter(LeadModel.id == lead.id).first()
            if model is None:
                return
            model.full_name = lead.full_name
            model.email = lead.email
            model.phone = lead.phone
            model.location = lead.location
            model.updated_at = datetime.now(timezone.utc)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating lead {lead.id}: {str(e)}")
            raise GatewayError("No se pudo actualizar el candidato") from e
        finally:
            db.close()

    async def delete(self, lead_id: str) -> None:
        """
        Delete a lead; ORM cascades remove its dependent rows.

        Args:
            lead_id: Lead identifier
        """
        db: Session = get_db_session()
        try:
            model = db.query(LeadModel).filter(LeadModel.id == lead_id).first()
            if model is not None:
                db.delete(model)
                db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting lead {lead_id}: {str(e)}")
            raise GatewayError("No se pudo eliminar el candidato") from e
        finally:
            db.close()

    async def list(self) -> list[Lead]:
        """
        List all leads, newest first.

        Returns:
            List of leads
        """
        db: Session = get_db_session()
        try:
            models = db.query(LeadModel).order_by(LeadModel.created_at.desc()).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing leads: {str(e)}")
            raise GatewayError("No se pudieron cargar los candidatos") from e
        finally:
            db.close()

    async def get_details(self, lead_id: str) -> Optional[LeadDetails]:
        """
        Get the details of a lead.

        Args:
            lead_id: Lead identifier

        Returns:
            Most recently updated details row, or None
        """
        db: Session = get_db_session()
        try:
            model = (
                db.query(LeadDetailsModel)
                .filter(LeadDetailsModel.lead_id == lead_id)
                .order_by(LeadDetailsModel.updated_at.desc())
                .first()
            )
            if model is None:
                return None
            return self._details_model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting details of lead {lead_id}: {str(e)}")
            raise GatewayError("No se pudieron cargar los detalles del candidato") from e
        finally:
            db.close()

    async def save_details(self, details: LeadDetails) -> None:
        """
        Insert or update the details of a lead (upsert by lead_id).

        Args:
            details: Lead details entity
        """
        db: Session = get_db_session()
        try:
            model = (
                db.query(LeadDetailsModel)
                .filter(LeadDetailsModel.lead_id == details.lead_id)
                .order_by(LeadDetailsModel.updated_at.desc())
                .first()
            )
            if model is None:
                model = LeadDetailsModel(
                    id=str(uuid4()),
                    lead_id=details.lead_id,
                    created_at=details.created_at,
                )
                db.add(model)

            model.previous_experience = details.previous_experience
            model.investment_capacity = details.investment_capacity.value
            model.source_channel = details.source_channel.value
            model.interest_level = details.interest_level
            model.additional_comments = details.additional_comments
            model.score = details.score
            model.updated_at = details.updated_at
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while saving details of lead {details.lead_id}: {str(e)}"
            )
            raise GatewayError("No se pudieron guardar los detalles del candidato") from e
        finally:
            db.close()

    async def list_details(self) -> dict[str, LeadDetails]:
        """
        Get the details of every lead.

        Returns:
            Mapping of lead id to its details
        """
        db: Session = get_db_session()
        try:
            return {
                lead_id: self._details_model_to_entity(model)
                for lead_id, model in self._latest_details_models(db).items()
            }
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing lead details: {str(e)}")
            raise GatewayError("No se pudieron cargar los detalles de los candidatos") from e
        finally:
            db.close()
