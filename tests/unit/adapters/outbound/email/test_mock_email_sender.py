"""Unit tests for the mock email sender."""

import pytest

from app.adapters.outbound.email import MockEmailSender
from app.application.dtos.email import EmailAddress, EmailContent, EmailPayload, SmtpConfig


def _payload(**overrides) -> EmailPayload:
    values = dict(
        to="ana@example.com",
        from_=EmailAddress(email="crm@example.com", name="CRM"),
        subject="Hola",
        content=[EmailContent(value="Bienvenida")],
        smtp=SmtpConfig(host="smtp.example.com", port=587),
    )
    values.update(overrides)
    return EmailPayload(**values)


@pytest.mark.asyncio
async def test_valid_payload_succeeds():
    result = await MockEmailSender(delay_seconds=0).send(_payload())

    assert result.success is True
    assert result.message == "Email sent successfully"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"to": None}, "Missing required fields"),
        ({"content": []}, "Missing required fields"),
        ({"to": "not-an-email"}, "Invalid email address"),
        ({"smtp": SmtpConfig(host="", port=587)}, "Invalid SMTP settings"),
    ],
)
async def test_rejected_payloads(overrides, message):
    result = await MockEmailSender(delay_seconds=0).send(_payload(**overrides))

    assert result.success is False
    assert result.message == message
