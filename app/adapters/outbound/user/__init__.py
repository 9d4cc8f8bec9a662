"""User and email settings repository adapters."""

from app.adapters.outbound.user.email_settings_repository import InMemoryEmailSettingsRepository
from app.adapters.outbound.user.postgres_email_settings_repository import (
    PostgresEmailSettingsRepository,
)
from app.adapters.outbound.user.postgres_user_repository import PostgresUserRepository
from app.adapters.outbound.user.user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryEmailSettingsRepository",
    "InMemoryUserRepository",
    "PostgresEmailSettingsRepository",
    "PostgresUserRepository",
]
