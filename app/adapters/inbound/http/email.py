"""Email HTTP routes."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.adapters.inbound.http.dependencies import (
    get_send_emails,
    get_session_context,
    translate_errors,
)
from app.application.dtos.email import (
    EmailSettingsInput,
    EmailSettingsView,
    MassEmailRequest,
    MassEmailResult,
)
from app.application.dtos.session import SessionContext
from app.application.use_cases.send_email import SendEmails

router = APIRouter(prefix="/email", tags=["email"])


@router.get("/settings", response_model=Optional[EmailSettingsView])
async def get_email_settings(
    session: SessionContext = Depends(get_session_context),
    use_case: SendEmails = Depends(get_send_emails),
) -> Optional[EmailSettingsView]:
    """Get the SMTP settings (null when not configured)."""
    with translate_errors():
        return await use_case.get_settings(session)


@router.put("/settings", response_model=EmailSettingsView)
async def save_email_settings(
    data: EmailSettingsInput,
    session: SessionContext = Depends(get_session_context),
    use_case: SendEmails = Depends(get_send_emails),
) -> EmailSettingsView:
    """Create or replace the SMTP settings."""
    with translate_errors():
        return await use_case.save_settings(session, data)


@router.post("/mass", response_model=MassEmailResult)
async def send_mass_email(
    request: MassEmailRequest,
    session: SessionContext = Depends(get_session_context),
    use_case: SendEmails = Depends(get_send_emails),
) -> MassEmailResult:
    """Email several leads; partial failures are reported, not raised."""
    with translate_errors():
        return await use_case.send_mass(session, request)
