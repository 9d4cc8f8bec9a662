"""User DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.application.dtos.base import DTO
from app.application.dtos.validators import require_email, require_min_length
from app.domain.entities.user import User
from app.domain.value_objects.role import Role


class UserCreate(DTO):
    """Input for creating a user."""

    email: str
    full_name: str
    role: Role
    avatar_url: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return require_email(value).lower()

    @field_validator("full_name")
    @classmethod
    def _check_full_name(cls, value: str) -> str:
        return require_min_length(value, 2, "El nombre debe tener al menos 2 caracteres.")


class UserUpdate(DTO):
    """Input for editing a user."""

    full_name: Optional[str] = None
    role: Optional[Role] = None
    avatar_url: Optional[str] = None


class UserView(DTO):
    """User as returned to clients."""

    id: str
    email: str
    full_name: Optional[str] = None
    role: Role
    avatar_url: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserView":
        """Build the view from an entity."""
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )
