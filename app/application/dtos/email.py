"""Email DTOs."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from app.application.dtos.base import DTO
from app.application.dtos.validators import require_email, require_min_length
from app.domain.entities.email_settings import EmailSettings


class EmailSettingsInput(DTO):
    """Input for saving the SMTP settings."""

    smtp_host: str
    smtp_port: int = Field(default=587, ge=1, le=65535)
    smtp_user: str
    smtp_password: str
    smtp_secure: bool = False
    from_email: str
    from_name: str

    @field_validator("smtp_host", "smtp_user", "smtp_password", "from_name")
    @classmethod
    def _check_required(cls, value: str) -> str:
        return require_min_length(value, 1, "Este campo es obligatorio.")

    @field_validator("from_email")
    @classmethod
    def _check_from_email(cls, value: str) -> str:
        return require_email(value)


class EmailSettingsView(DTO):
    """SMTP settings as returned to clients; the password is never echoed."""

    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_secure: bool
    from_email: str
    from_name: str
    has_password: bool

    @classmethod
    def from_entity(cls, settings: EmailSettings) -> "EmailSettingsView":
        """Build the view from an entity."""
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_secure=settings.smtp_secure,
            from_email=settings.from_email,
            from_name=settings.from_name,
            has_password=bool(settings.smtp_password),
        )


class EmailAddress(DTO):
    """Sender address."""

    email: str
    name: Optional[str] = None


class EmailContent(DTO):
    """One body part of an email."""

    type: Literal["text/plain", "text/html"] = "text/plain"
    value: str


class SmtpConfig(DTO):
    """SMTP connection settings carried in a send request."""

    host: str
    port: int
    user: Optional[str] = None
    password: Optional[str] = None
    secure: bool = False


class EmailPayload(DTO):
    """Request accepted by the email sender."""

    to: Optional[str] = None
    from_: Optional[EmailAddress] = Field(default=None, alias="from")
    subject: Optional[str] = None
    content: list[EmailContent] = []
    smtp: Optional[SmtpConfig] = None
    lead_id: Optional[str] = Field(default=None, alias="leadId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EmailSendResult(DTO):
    """Result reported by the email sender."""

    success: bool
    message: str


class EmailMessage(DTO):
    """Message composed by a user."""

    subject: str
    content: str
    is_html: bool = False

    @field_validator("subject", "content")
    @classmethod
    def _check_required(cls, value: str) -> str:
        return require_min_length(value, 1, "Este campo es obligatorio.")


class MassEmailRequest(DTO):
    """Message to send to several leads."""

    lead_ids: list[str] = Field(min_length=1)
    message: EmailMessage


class MassEmailResult(DTO):
    """Outcome of a mass send."""

    success: bool
    message: str
    failed_emails: list[str] = []
