"""Email settings repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.email_settings import EmailSettings


class EmailSettingsRepository(ABC):
    """Port interface for the single SMTP settings record."""

    @abstractmethod
    async def get(self) -> Optional[EmailSettings]:
        """Get the stored settings, or None if never saved."""
        pass

    @abstractmethod
    async def save(self, settings: EmailSettings) -> None:
        """Insert the settings, or replace the existing record."""
        pass
