"""In-memory email settings repository adapter."""

from dataclasses import replace
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.email_settings_repository import EmailSettingsRepository
from app.domain.entities.email_settings import EmailSettings


class InMemoryEmailSettingsRepository(EmailSettingsRepository):
    """In-memory implementation of email settings repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def get(self) -> Optional[EmailSettings]:
        """Get the stored settings."""
        settings = self._store.email_settings
        return replace(settings) if settings else None

    async def save(self, settings: EmailSettings) -> None:
        """Replace the stored settings."""
        self._store.email_settings = replace(settings)
