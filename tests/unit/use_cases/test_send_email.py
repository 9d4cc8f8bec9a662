"""Unit tests for SendEmails use case."""

import pytest
import pytest_asyncio

from app.application.dtos.email import (
    EmailMessage,
    EmailPayload,
    EmailSendResult,
    EmailSettingsInput,
    MassEmailRequest,
)
from app.application.errors import GatewayError, PermissionDeniedError, ValidationError
from app.application.ports.email_sender import EmailSender
from app.application.use_cases.send_email import MISSING_SETTINGS_MESSAGE, SendEmails, build_payload
from app.domain.entities.email_settings import EmailSettings
from app.domain.entities.lead import Lead
from app.domain.value_objects.choices import CommunicationType

SETTINGS = EmailSettingsInput(
    smtp_host="smtp.example.com",
    smtp_port=465,
    smtp_user="crm",
    smtp_password="secret",
    smtp_secure=True,
    from_email="crm@example.com",
    from_name="Equipo de Expansión",
)

MESSAGE = EmailMessage(subject="Bienvenida", content="Hola, gracias por tu interés.")


class RecordingEmailSender(EmailSender):
    """Email sender that records payloads and fails for chosen recipients."""

    def __init__(self, failing: tuple[str, ...] = ()) -> None:
        self.payloads: list[EmailPayload] = []
        self._failing = failing

    async def send(self, payload: EmailPayload) -> EmailSendResult:
        self.payloads.append(payload)
        if payload.to in self._failing:
            return EmailSendResult(success=False, message="Invalid email address")
        return EmailSendResult(success=True, message="Email sent successfully")


async def _add_lead(repositories, name: str, email: str) -> Lead:
    lead = Lead(full_name=name, email=email, phone="600111222", location="Madrid")
    await repositories.leads.add(lead)
    return lead


@pytest.fixture
def sender():
    return RecordingEmailSender(failing=("bad@example.com",))


@pytest.fixture
def use_case(repositories, sender):
    return SendEmails(
        repositories.email_settings,
        sender,
        repositories.leads,
        repositories.communications,
    )


@pytest_asyncio.fixture
async def configured(use_case, superadmin_session):
    return await use_case.save_settings(superadmin_session, SETTINGS)


@pytest.mark.asyncio
async def test_settings_never_echo_password(use_case, superadmin_session, admin_session):
    assert await use_case.get_settings(admin_session) is None

    saved = await use_case.save_settings(superadmin_session, SETTINGS)

    assert saved.has_password
    assert "smtp_password" not in saved.model_dump()
    assert (await use_case.get_settings(admin_session)).smtp_port == 465


@pytest.mark.asyncio
async def test_saving_settings_replaces_single_row(use_case, repositories, superadmin_session):
    first = await use_case.save_settings(superadmin_session, SETTINGS)
    await use_case.save_settings(superadmin_session, SETTINGS.model_copy(update={"smtp_host": "smtp2.example.com"}))

    stored = await repositories.email_settings.get()
    assert stored.smtp_host == "smtp2.example.com"
    assert first.smtp_host == "smtp.example.com"


@pytest.mark.asyncio
async def test_only_superadmin_saves_settings(use_case, admin_session):
    with pytest.raises(PermissionDeniedError):
        await use_case.save_settings(admin_session, SETTINGS)


@pytest.mark.asyncio
async def test_send_without_settings(use_case, repositories, admin_session):
    lead = await _add_lead(repositories, "Ana", "ana@example.com")
    with pytest.raises(ValidationError) as exc_info:
        await use_case.send_to_lead(admin_session, lead.id, MESSAGE)
    assert exc_info.value.message == MISSING_SETTINGS_MESSAGE


@pytest.mark.asyncio
async def test_send_to_lead_logs_communication(use_case, repositories, sender, configured, admin_session):
    lead = await _add_lead(repositories, "Ana", "ana@example.com")

    result = await use_case.send_to_lead(admin_session, lead.id, MESSAGE)

    assert result.success
    payload = sender.payloads[0]
    assert payload.to == "ana@example.com"
    assert payload.smtp.host == "smtp.example.com"
    assert payload.smtp.secure
    assert payload.from_.name == "Equipo de Expansión"
    assert payload.lead_id == lead.id

    communications = await repositories.communications.list_for_lead(lead.id)
    assert len(communications) == 1
    assert communications[0].type == CommunicationType.EMAIL
    assert communications[0].content == "Asunto: Bienvenida\n\nHola, gracias por tu interés."


@pytest.mark.asyncio
async def test_failed_send_raises_and_logs_nothing(use_case, repositories, configured, admin_session):
    lead = await _add_lead(repositories, "Bad", "bad@example.com")
    with pytest.raises(GatewayError):
        await use_case.send_to_lead(admin_session, lead.id, MESSAGE)
    assert await repositories.communications.list_for_lead(lead.id) == []


@pytest.mark.asyncio
async def test_mass_send_partial_failure(use_case, repositories, configured, admin_session):
    ana = await _add_lead(repositories, "Ana", "ana@example.com")
    bad = await _add_lead(repositories, "Bad", "bad@example.com")
    eva = await _add_lead(repositories, "Eva", "eva@example.com")

    result = await use_case.send_mass(
        admin_session, MassEmailRequest(lead_ids=[ana.id, bad.id, eva.id], message=MESSAGE)
    )

    assert result.success
    assert result.message == "2 of 3 emails sent successfully"
    assert result.failed_emails == ["bad@example.com"]
    assert len(await repositories.communications.list_for_lead(ana.id)) == 1
    assert await repositories.communications.list_for_lead(bad.id) == []


@pytest.mark.asyncio
async def test_mass_send_all_and_none(use_case, repositories, configured, admin_session):
    ana = await _add_lead(repositories, "Ana", "ana@example.com")
    bad = await _add_lead(repositories, "Bad", "bad@example.com")

    all_sent = await use_case.send_mass(admin_session, MassEmailRequest(lead_ids=[ana.id], message=MESSAGE))
    assert all_sent.message == "All emails sent successfully"

    none_sent = await use_case.send_mass(admin_session, MassEmailRequest(lead_ids=[bad.id], message=MESSAGE))
    assert not none_sent.success
    assert none_sent.message == "Failed to send any emails"


def test_build_payload_html():
    settings = EmailSettings(
        smtp_host="smtp.example.com",
        smtp_user="crm",
        smtp_password="secret",
        from_email="crm@example.com",
        from_name="CRM",
    )
    payload = build_payload(
        settings, "ana@example.com", EmailMessage(subject="Hola", content="<p>Hola</p>", is_html=True)
    )
    assert payload.content[0].type == "text/html"
    assert payload.smtp.port == 587


@pytest.mark.asyncio
async def test_mass_send_survives_communication_log_failure(
    repositories, sender, configured, admin_session, monkeypatch
):
    ana = await _add_lead(repositories, "Ana", "ana@example.com")
    eva = await _add_lead(repositories, "Eva", "eva@example.com")
    logged = []

    async def failing_add(communication):
        raise GatewayError("No se pudo registrar la comunicación")

    monkeypatch.setattr(repositories.communications, "add", failing_add)
    use_case = SendEmails(
        repositories.email_settings,
        sender,
        repositories.leads,
        repositories.communications,
        logger=lambda to, success, **fields: logged.append((to, success, fields)),
    )

    result = await use_case.send_mass(
        admin_session, MassEmailRequest(lead_ids=[ana.id, eva.id], message=MESSAGE)
    )

    assert result.success
    assert result.message == "All emails sent successfully"
    assert result.failed_emails == []
    assert [payload.to for payload in sender.payloads] == ["ana@example.com", "eva@example.com"]
    assert all(
        fields["communication_error"] == "No se pudo registrar la comunicación"
        for _, _, fields in logged
    )


@pytest.mark.asyncio
async def test_delivered_email_is_success_when_communication_log_fails(
    use_case, repositories, configured, admin_session, monkeypatch
):
    lead = await _add_lead(repositories, "Ana", "ana@example.com")

    async def failing_add(communication):
        raise GatewayError("No se pudo registrar la comunicación")

    monkeypatch.setattr(repositories.communications, "add", failing_add)

    result = await use_case.send_to_lead(admin_session, lead.id, MESSAGE)

    assert result.success
