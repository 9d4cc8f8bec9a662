"""Mock email sender adapter (simulated delivery, no SMTP traffic)."""

import asyncio
import logging
from typing import Optional

from app.application.dtos.email import EmailPayload, EmailSendResult
from app.application.dtos.validators import is_valid_email
from app.application.ports.email_sender import EmailSender
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event


class MockEmailSender(EmailSender):
    """Validates the request, waits a simulated delay and reports success."""

    def __init__(self, delay_seconds: Optional[float] = None) -> None:
        """
        Initialize mock sender.

        Args:
            delay_seconds: Simulated network delay (defaults to settings.mock_email_delay_seconds)
        """
        self._delay_seconds = (
            settings.mock_email_delay_seconds if delay_seconds is None else delay_seconds
        )

    async def send(self, payload: EmailPayload) -> EmailSendResult:
        """
        Simulate sending one email.

        Args:
            payload: Email request

        Returns:
            Success result, or a failure describing the rejected input
        """
        if not payload.to or not payload.subject or not payload.content or not payload.smtp:
            return EmailSendResult(success=False, message="Missing required fields")

        if not is_valid_email(payload.to):
            return EmailSendResult(success=False, message="Invalid email address")

        if not payload.smtp.host or not payload.smtp.port:
            return EmailSendResult(success=False, message="Invalid SMTP settings")

        log_event(
            component="email",
            action="mock_send",
            level=logging.DEBUG,
            to=payload.to,
            sender=payload.from_.email if payload.from_ else None,
            subject=payload.subject,
            content_type=payload.content[0].type,
            smtp_host=payload.smtp.host,
            smtp_port=payload.smtp.port,
            lead_id=payload.lead_id,
        )

        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)

        return EmailSendResult(success=True, message="Email sent successfully")
