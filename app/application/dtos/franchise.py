"""Franchise DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.application.dtos.base import DTO
from app.application.dtos.validators import require_email, require_min_length
from app.domain.entities.franchise import Franchise

_MIN_LENGTHS = {
    "name": (2, "El nombre debe tener al menos 2 caracteres"),
    "contact_person": (2, "La persona de contacto debe tener al menos 2 caracteres"),
    "address": (5, "La dirección debe tener al menos 5 caracteres"),
    "city": (2, "La localidad debe tener al menos 2 caracteres"),
    "province": (2, "La provincia debe tener al menos 2 caracteres"),
    "phone": (9, "El teléfono debe tener al menos 9 caracteres"),
}


def _check_min_length(field_name: str, value: str) -> str:
    length, message = _MIN_LENGTHS[field_name]
    return require_min_length(value, length, message)


class FranchiseCreate(DTO):
    """Input for creating a franchise."""

    name: str
    contact_person: str
    address: str
    city: str
    province: str
    phone: str
    email: str
    website: Optional[str] = None
    tesis_code: Optional[str] = None

    @field_validator("name", "contact_person", "address", "city", "province", "phone")
    @classmethod
    def _check_lengths(cls, value: str, info) -> str:
        return _check_min_length(info.field_name, value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return require_email(value, "Debe ser un email válido")


class FranchiseUpdate(DTO):
    """Input for editing a franchise; omitted fields are left unchanged."""

    name: Optional[str] = None
    contact_person: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    tesis_code: Optional[str] = None

    @field_validator("name", "contact_person", "address", "city", "province", "phone")
    @classmethod
    def _check_lengths(cls, value: Optional[str], info) -> Optional[str]:
        if value is None:
            return value
        return _check_min_length(info.field_name, value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_email(value, "Debe ser un email válido")


class FranchiseView(DTO):
    """Franchise as returned to clients."""

    id: str
    name: str
    contact_person: str
    address: str
    city: str
    province: str
    phone: str
    email: str
    website: Optional[str] = None
    tesis_code: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, franchise: Franchise) -> "FranchiseView":
        """Build the view from an entity."""
        return cls(
            id=franchise.id,
            name=franchise.name,
            contact_person=franchise.contact_person,
            address=franchise.address,
            city=franchise.city,
            province=franchise.province,
            phone=franchise.phone,
            email=franchise.email,
            website=franchise.website,
            tesis_code=franchise.tesis_code,
            created_by=franchise.created_by,
            created_at=franchise.created_at,
            updated_at=franchise.updated_at,
        )
