"""Send email use case."""

from datetime import datetime, timezone
from typing import Callable, Optional

from app.application.dtos.email import (
    EmailAddress,
    EmailContent,
    EmailMessage,
    EmailPayload,
    EmailSendResult,
    EmailSettingsInput,
    EmailSettingsView,
    MassEmailRequest,
    MassEmailResult,
    SmtpConfig,
)
from app.application.dtos.session import SessionContext
from app.application.errors import CRMError, GatewayError, NotFoundError, ValidationError
from app.application.ports.communication_repository import CommunicationRepository
from app.application.ports.email_sender import EmailSender
from app.application.ports.email_settings_repository import EmailSettingsRepository
from app.application.ports.lead_repository import LeadRepository
from app.domain.entities.communication import Communication, email_communication_content
from app.domain.entities.email_settings import EmailSettings
from app.domain.value_objects.choices import CommunicationType
from app.domain.value_objects.role import EDITOR_ROLES, USER_ADMIN_ROLES

MISSING_SETTINGS_MESSAGE = "No se encontró la configuración de email"


def build_payload(
    settings: EmailSettings,
    to: str,
    message: EmailMessage,
    lead_id: Optional[str] = None,
) -> EmailPayload:
    """
    Build the sender request from stored settings and a composed message.

    Args:
        settings: Stored SMTP settings
        to: Recipient address
        message: Subject and body
        lead_id: Lead the email is about, if any

    Returns:
        Email payload
    """
    return EmailPayload(
        to=to,
        from_=EmailAddress(email=settings.from_email, name=settings.from_name),
        subject=message.subject,
        content=[
            EmailContent(
                type="text/html" if message.is_html else "text/plain",
                value=message.content,
            )
        ],
        smtp=SmtpConfig(
            host=settings.smtp_host,
            port=settings.smtp_port,
            user=settings.smtp_user,
            password=settings.smtp_password,
            secure=settings.smtp_secure,
        ),
        lead_id=lead_id,
    )


class SendEmails:
    """Use case for SMTP settings and emails to leads."""

    def __init__(
        self,
        email_settings_repository: EmailSettingsRepository,
        email_sender: EmailSender,
        lead_repository: LeadRepository,
        communication_repository: CommunicationRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize send emails use case.

        Args:
            email_settings_repository: Repository for the SMTP settings row
            email_sender: Email sending gateway
            lead_repository: Repository for leads (recipients)
            communication_repository: Repository where sent emails are logged
            logger: Optional email logger (to, success, smtp_host, **fields)
        """
        self._email_settings_repository = email_settings_repository
        self._email_sender = email_sender
        self._lead_repository = lead_repository
        self._communication_repository = communication_repository
        self._logger = logger

    async def get_settings(self, session: SessionContext) -> Optional[EmailSettingsView]:
        """Get the stored SMTP settings, without the password."""
        session.require(EDITOR_ROLES)
        settings = await self._email_settings_repository.get()
        return EmailSettingsView.from_entity(settings) if settings else None

    async def save_settings(self, session: SessionContext, data: EmailSettingsInput) -> EmailSettingsView:
        """
        Create or replace the SMTP settings.

        Args:
            session: Caller context
            data: Validated settings

        Returns:
            Saved settings
        """
        session.require(USER_ADMIN_ROLES)
        existing = await self._email_settings_repository.get()

        settings = EmailSettings(**data.model_dump())
        if existing is not None:
            settings.id = existing.id
            settings.created_at = existing.created_at
        settings.updated_at = datetime.now(timezone.utc)
        await self._email_settings_repository.save(settings)
        return EmailSettingsView.from_entity(settings)

    async def send_to_lead(
        self,
        session: SessionContext,
        lead_id: str,
        message: EmailMessage,
    ) -> EmailSendResult:
        """
        Email one lead and log the email as a communication.

        Args:
            session: Caller context
            lead_id: Recipient lead
            message: Subject and body

        Returns:
            Sender result

        Raises:
            PermissionDeniedError: If the caller cannot contact leads
            NotFoundError: If the lead does not exist
            ValidationError: If no SMTP settings are stored
            GatewayError: If the sender reports a failure
        """
        session.require(EDITOR_ROLES)
        lead = await self._lead_repository.get(lead_id)
        if lead is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")
        settings = await self._require_settings()

        result = await self._send(session, settings, lead.id, lead.email, message)
        if not result.success:
            raise GatewayError(result.message)
        return result

    async def send_mass(self, session: SessionContext, request: MassEmailRequest) -> MassEmailResult:
        """
        Email several leads, one send per lead.

        Each successful send is logged as a communication; failures are
        collected and do not stop the remaining sends.

        Args:
            session: Caller context
            request: Recipient leads and message

        Returns:
            Aggregate result with the failed addresses
        """
        session.require(EDITOR_ROLES)
        settings = await self._require_settings()

        sent = 0
        failed: list[str] = []
        for lead_id in request.lead_ids:
            lead = await self._lead_repository.get(lead_id)
            if lead is None:
                failed.append(lead_id)
                continue
            result = await self._send(session, settings, lead.id, lead.email, request.message)
            if result.success:
                sent += 1
            else:
                failed.append(lead.email)

        total = len(request.lead_ids)
        if sent == total:
            summary = "All emails sent successfully"
        elif sent:
            summary = f"{sent} of {total} emails sent successfully"
        else:
            summary = "Failed to send any emails"
        return MassEmailResult(success=sent > 0, message=summary, failed_emails=failed)

    async def _require_settings(self) -> EmailSettings:
        settings = await self._email_settings_repository.get()
        if settings is None:
            raise ValidationError(MISSING_SETTINGS_MESSAGE)
        return settings

    async def _send(
        self,
        session: SessionContext,
        settings: EmailSettings,
        lead_id: str,
        to: str,
        message: EmailMessage,
    ) -> EmailSendResult:
        """
        Send one email and log it as a communication on success.

        A communication that cannot be stored is logged and does not turn a
        delivered email into a failure.
        """
        result = await self._email_sender.send(build_payload(settings, to, message, lead_id))

        communication_error = None
        if result.success:
            try:
                await self._communication_repository.add(
                    Communication(
                        lead_id=lead_id,
                        type=CommunicationType.EMAIL,
                        content=email_communication_content(message.subject, message.content),
                        created_by=session.user_id,
                    )
                )
            except CRMError as e:
                communication_error = e.message

        if self._logger:
            self._logger(
                to,
                result.success,
                smtp_host=settings.smtp_host,
                lead_id=lead_id,
                communication_error=communication_error,
            )
        return result
