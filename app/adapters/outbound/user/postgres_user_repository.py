"""Postgres-backed user repository adapter."""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import UserModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.user_repository import UserRepository
from app.domain.entities.user import User
from app.domain.value_objects.role import Role
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresUserRepository(UserRepository):
    """Postgres implementation of user repository."""

    def _model_to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            role=Role.parse(model.role) or Role.USER,
            avatar_url=model.avatar_url,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def add(self, user: User) -> None:
        """Insert a user."""
        db: Session = get_db_session()
        try:
            db.add(
                UserModel(
                    id=user.id,
                    email=user.email,
                    full_name=user.full_name,
                    role=user.role.value,
                    avatar_url=user.avatar_url,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while creating user {user.email}: {str(e)}")
            raise GatewayError("No se pudo crear el usuario") from e
        finally:
            db.close()

    async def get(self, user_id: str) -> Optional[User]:
        """Get a user by id."""
        db: Session = get_db_session()
        try:
            model = db.query(UserModel).filter(UserModel.id == user_id).first()
            return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting user {user_id}: {str(e)}")
            raise GatewayError("No se pudo cargar el usuario") from e
        finally:
            db.close()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email (case-insensitive)."""
        db: Session = get_db_session()
        try:
            model = (
                db.query(UserModel)
                .filter(func.lower(UserModel.email) == email.strip().lower())
                .first()
            )
            return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error while looking up user by email: {str(e)}")
            raise GatewayError("No se pudo cargar el usuario") from e
        finally:
            db.close()

    async def update(self, user: User) -> None:
        """Update an existing user."""
        db: Session = get_db_session()
        try:
            model = db.query(UserModel).filter(UserModel.id == user.id).first()
            if model is None:
                return
            model.full_name = user.full_name
            model.role = user.role.value
            model.avatar_url = user.avatar_url
            model.updated_at = user.updated_at
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating user {user.id}: {str(e)}")
            raise GatewayError("No se pudo actualizar el usuario") from e
        finally:
            db.close()

    async def delete(self, user_id: str) -> None:
        """Delete a user."""
        db: Session = get_db_session()
        try:
            db.query(UserModel).filter(UserModel.id == user_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting user {user_id}: {str(e)}")
            raise GatewayError("No se pudo eliminar el usuario") from e
        finally:
            db.close()

    async def get_role(self, user_id: str) -> Optional[Role]:
        """
        Resolve the role of a user.

        Args:
            user_id: Identifier of the authenticated caller

        Returns:
            Role, or None for unknown users or unrecognized role values
        """
        db: Session = get_db_session()
        try:
            role = db.query(UserModel.role).filter(UserModel.id == user_id).scalar()
            return Role.parse(role)
        except SQLAlchemyError as e:
            logger.error(f"Database error while resolving role of user {user_id}: {str(e)}")
            raise GatewayError("No se pudo comprobar el rol del usuario") from e
        finally:
            db.close()

    async def list(self) -> list[User]:
        """List all users."""
        db: Session = get_db_session()
        try:
            models = db.query(UserModel).order_by(UserModel.email).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing users: {str(e)}")
            raise GatewayError("No se pudieron cargar los usuarios") from e
        finally:
            db.close()
