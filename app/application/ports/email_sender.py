"""Email sender port."""

from abc import ABC, abstractmethod

from app.application.dtos.email import EmailPayload, EmailSendResult


class EmailSender(ABC):
    """Port interface for email delivery."""

    @abstractmethod
    async def send(self, payload: EmailPayload) -> EmailSendResult:
        """
        Send one email.

        Args:
            payload: Recipient, sender, subject, body parts and SMTP settings

        Returns:
            Delivery result; failures are reported, not raised
        """
        pass
