"""Unit tests for input validation of DTOs."""

import pytest
from pydantic import ValidationError

from app.application.dtos.email import EmailContent, EmailPayload, SmtpConfig
from app.application.dtos.franchise import FranchiseCreate
from app.application.dtos.lead import LeadCreate, LeadUpdate
from app.application.dtos.task import TaskCreate
from app.application.dtos.user import UserCreate

VALID_LEAD = {
    "full_name": "María García",
    "email": "maria@example.com",
    "phone": "+34600111222",
    "location": "Madrid",
    "interest_level": 4,
    "investment_capacity": "yes",
    "source_channel": "referral",
}

VALID_FRANCHISE = {
    "name": "Oficina Centro",
    "contact_person": "Luis Pérez",
    "address": "Calle Mayor 1",
    "city": "Madrid",
    "province": "Madrid",
    "phone": "910000000",
    "email": "centro@example.com",
}


def test_lead_create_trims_values():
    lead = LeadCreate(**{**VALID_LEAD, "full_name": "  María García  "})
    assert lead.full_name == "María García"
    assert lead.previous_experience == ""


def test_lead_create_rejects_short_name():
    with pytest.raises(ValidationError) as exc_info:
        LeadCreate(**{**VALID_LEAD, "full_name": "M"})
    assert "al menos 2 caracteres" in str(exc_info.value)


def test_lead_create_rejects_invalid_email():
    with pytest.raises(ValidationError) as exc_info:
        LeadCreate(**{**VALID_LEAD, "email": "maria@example"})
    assert "email válido" in str(exc_info.value)


@pytest.mark.parametrize("level", [0, 6])
def test_lead_create_rejects_interest_out_of_range(level):
    with pytest.raises(ValidationError):
        LeadCreate(**{**VALID_LEAD, "interest_level": level})


def test_lead_create_rejects_unknown_capacity():
    with pytest.raises(ValidationError):
        LeadCreate(**{**VALID_LEAD, "investment_capacity": "medium"})


def test_lead_update_allows_partial_input():
    update = LeadUpdate(interest_level=2)
    assert update.model_dump(exclude_none=True) == {"interest_level": 2}


def test_franchise_create_min_lengths():
    with pytest.raises(ValidationError) as exc_info:
        FranchiseCreate(**{**VALID_FRANCHISE, "address": "C/1", "phone": "12345"})
    message = str(exc_info.value)
    assert "La dirección debe tener al menos 5 caracteres" in message
    assert "El teléfono debe tener al menos 9 caracteres" in message


def test_franchise_create_email_message():
    with pytest.raises(ValidationError) as exc_info:
        FranchiseCreate(**{**VALID_FRANCHISE, "email": "no-es-email"})
    assert "Debe ser un email válido" in str(exc_info.value)


def test_task_title_min_length():
    with pytest.raises(ValidationError):
        TaskCreate(title="A")
    assert TaskCreate(title=" Llamar ").title == "Llamar"


def test_user_create_lowercases_email():
    user = UserCreate(email="Ana@Example.COM", full_name="Ana", role="admin")
    assert user.email == "ana@example.com"


def test_email_payload_accepts_wire_aliases():
    payload = EmailPayload.model_validate(
        {
            "to": "lead@example.com",
            "from": {"email": "crm@example.com", "name": "CRM"},
            "subject": "Hola",
            "content": [{"type": "text/plain", "value": "Texto"}],
            "smtp": {"host": "smtp.example.com", "port": 587},
            "leadId": "lead-1",
        }
    )
    assert payload.from_.email == "crm@example.com"
    assert payload.lead_id == "lead-1"
    assert payload.content == [EmailContent(type="text/plain", value="Texto")]
    assert payload.smtp == SmtpConfig(host="smtp.example.com", port=587)
