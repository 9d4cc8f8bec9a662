"""Postgres-backed franchise repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import FranchiseModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.franchise_repository import FranchiseRepository
from app.domain.entities.franchise import Franchise
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

_FIELDS = (
    "name",
    "contact_person",
    "address",
    "city",
    "province",
    "phone",
    "email",
    "website",
    "tesis_code",
)


class PostgresFranchiseRepository(FranchiseRepository):
    """Postgres implementation of franchise repository."""

    def _model_to_entity(self, model: FranchiseModel) -> Franchise:
        return Franchise(
            id=model.id,
            created_by=model.created_by,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            **{name: getattr(model, name) for name in _FIELDS},
        )

    async def add(self, franchise: Franchise) -> None:
        """Insert a franchise."""
        db: Session = get_db_session()
        try:
            db.add(
                FranchiseModel(
                    id=franchise.id,
                    created_by=franchise.created_by,
                    created_at=franchise.created_at,
                    updated_at=franchise.updated_at,
                    **{name: getattr(franchise, name) for name in _FIELDS},
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while creating franchise {franchise.name}: {str(e)}")
            raise GatewayError("No se pudo crear la franquicia") from e
        finally:
            db.close()

    async def get(self, franchise_id: str) -> Optional[Franchise]:
        """Get a franchise by id."""
        db: Session = get_db_session()
        try:
            model = db.query(FranchiseModel).filter(FranchiseModel.id == franchise_id).first()
            return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting franchise {franchise_id}: {str(e)}")
            raise GatewayError("No se pudo cargar la franquicia") from e
        finally:
            db.close()

    async def update(self, franchise: Franchise) -> None:
        """Update an existing franchise."""
        db: Session = get_db_session()
        try:
            model = db.query(FranchiseModel).filter(FranchiseModel.id == franchise.id).first()
            if model is None:
                return
            for name in _FIELDS:
                setattr(model, name, getattr(franchise, name))
            model.updated_at = franchise.updated_at
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating franchise {franchise.id}: {str(e)}")
            raise GatewayError("No se pudo actualizar la franquicia") from e
        finally:
            db.close()

    async def delete(self, franchise_id: str) -> None:
        """Delete a franchise."""
        db: Session = get_db_session()
        try:
            db.query(FranchiseModel).filter(FranchiseModel.id == franchise_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting franchise {franchise_id}: {str(e)}")
            raise GatewayError("No se pudo eliminar la franquicia") from e
        finally:
            db.close()

    async def list(self) -> list[Franchise]:
        """List franchises ordered by name."""
        db: Session = get_db_session()
        try:
            models = db.query(FranchiseModel).order_by(FranchiseModel.name).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing franchises: {str(e)}")
            raise GatewayError("No se pudieron cargar las franquicias") from e
        finally:
            db.close()
