"""Postgres-backed email settings repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import EmailSettingsModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.email_settings_repository import EmailSettingsRepository
from app.domain.entities.email_settings import EmailSettings
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

_FIELDS = (
    "smtp_host",
    "smtp_port",
    "smtp_user",
    "smtp_password",
    "smtp_secure",
    "from_email",
    "from_name",
)


class PostgresEmailSettingsRepository(EmailSettingsRepository):
    """Postgres implementation of email settings repository."""

    async def get(self) -> Optional[EmailSettings]:
        """
        Get the stored settings.

        Returns:
            Settings of the most recently updated row, or None
        """
        db: Session = get_db_session()
        try:
            model = (
                db.query(EmailSettingsModel)
                .order_by(EmailSettingsModel.updated_at.desc())
                .first()
            )
            if model is None:
                return None
            return EmailSettings(
                id=model.id,
                created_at=as_utc(model.created_at),
                updated_at=as_utc(model.updated_at),
                **{name: getattr(model, name) for name in _FIELDS},
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting email settings: {str(e)}")
            raise GatewayError("No se pudo obtener la configuración de email") from e
        finally:
            db.close()

    async def save(self, settings: EmailSettings) -> None:
        """
        Insert the settings, or update the existing row.

        Args:
            settings: SMTP settings
        """
        db: Session = get_db_session()
        try:
            model = db.query(EmailSettingsModel).first()
            if model is None:
                model = EmailSettingsModel(id=settings.id, created_at=settings.created_at)
                db.add(model)
            for name in _FIELDS:
                setattr(model, name, getattr(settings, name))
            model.updated_at = settings.updated_at
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving email settings: {str(e)}")
            raise GatewayError("No se pudo guardar la configuración de email") from e
        finally:
            db.close()
