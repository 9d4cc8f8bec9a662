"""Lead HTTP routes: leads, status history, lead communications and tasks."""

from fastapi import APIRouter, Depends, Response, status

from app.adapters.inbound.http.dependencies import (
    get_log_communications,
    get_manage_leads,
    get_manage_tasks,
    get_send_emails,
    get_session_context,
    get_track_lead_status,
    translate_errors,
)
from app.application.dtos.communication import CommunicationCreate, CommunicationView
from app.application.dtos.email import EmailMessage, EmailSendResult
from app.application.dtos.lead import (
    LeadCreate,
    LeadDetailView,
    LeadListQuery,
    LeadSummary,
    LeadUpdate,
    StatusChange,
    StatusHistoryView,
)
from app.application.dtos.session import SessionContext
from app.application.dtos.task import TaskCreate, TaskListQuery, TaskView
from app.application.use_cases.log_communications import LogCommunications
from app.application.use_cases.manage_leads import ManageLeads
from app.application.use_cases.manage_tasks import ManageTasks
from app.application.use_cases.send_email import SendEmails
from app.application.use_cases.track_lead_status import TrackLeadStatus

router = APIRouter(prefix="/leads", tags=["leads"])


@router.get("", response_model=list[LeadSummary])
async def list_leads(
    query: LeadListQuery = Depends(),
    session: SessionContext = Depends(get_session_context),
    use_case: ManageLeads = Depends(get_manage_leads),
) -> list[LeadSummary]:
    """
    List leads with their current status and score.

    Supports text search over name, email and location, filters by
    status, source channel and creation date, and sorting.
    """
    with translate_errors():
        return await use_case.list(session, query)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeadDetailView)
async def create_lead(
    data: LeadCreate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageLeads = Depends(get_manage_leads),
) -> LeadDetailView:
    """Create a lead with its details and initial new_contact status."""
    with translate_errors():
        return await use_case.create(session, data)


@router.get("/{lead_id}", response_model=LeadDetailView)
async def get_lead(
    lead_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageLeads = Depends(get_manage_leads),
) -> LeadDetailView:
    """Get a lead with its history, communications and tasks."""
    with translate_errors():
        return await use_case.get_detail(session, lead_id)


@router.patch("/{lead_id}", response_model=LeadDetailView)
async def update_lead(
    lead_id: str,
    data: LeadUpdate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageLeads = Depends(get_manage_leads),
) -> LeadDetailView:
    """Edit a lead and recompute its score."""
    with translate_errors():
        return await use_case.update(session, lead_id, data)


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lead(
    lead_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageLeads = Depends(get_manage_leads),
) -> Response:
    """Delete a lead and everything attached to it."""
    with translate_errors():
        await use_case.delete(session, lead_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{lead_id}/status-history", response_model=list[StatusHistoryView])
async def get_status_history(
    lead_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: TrackLeadStatus = Depends(get_track_lead_status),
) -> list[StatusHistoryView]:
    """Get a lead's status history, newest first."""
    with translate_errors():
        history = await use_case.history(lead_id)
    return [StatusHistoryView.from_entity(entry) for entry in history]


@router.post(
    "/{lead_id}/status",
    status_code=status.HTTP_201_CREATED,
    response_model=StatusHistoryView,
)
async def append_status(
    lead_id: str,
    data: StatusChange,
    session: SessionContext = Depends(get_session_context),
    use_case: TrackLeadStatus = Depends(get_track_lead_status),
) -> StatusHistoryView:
    """Move a lead to a stage by appending a history entry."""
    with translate_errors():
        entry = await use_case.append_status(session, lead_id, data.status, data.notes)
    return StatusHistoryView.from_entity(entry)


@router.get("/{lead_id}/communications", response_model=list[CommunicationView])
async def list_lead_communications(
    lead_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: LogCommunications = Depends(get_log_communications),
) -> list[CommunicationView]:
    """List a lead's communications, newest first."""
    with translate_errors():
        return await use_case.list_for_lead(session, lead_id)


@router.post(
    "/{lead_id}/communications",
    status_code=status.HTTP_201_CREATED,
    response_model=CommunicationView,
)
async def create_communication(
    lead_id: str,
    data: CommunicationCreate,
    session: SessionContext = Depends(get_session_context),
    use_case: LogCommunications = Depends(get_log_communications),
) -> CommunicationView:
    """Record an interaction with a lead."""
    with translate_errors():
        return await use_case.create(session, lead_id, data)


@router.get("/{lead_id}/tasks", response_model=list[TaskView])
async def list_lead_tasks(
    lead_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> list[TaskView]:
    """List a lead's tasks by due date."""
    with translate_errors():
        return await use_case.list(session, TaskListQuery(lead_id=lead_id))


@router.post("/{lead_id}/tasks", status_code=status.HTTP_201_CREATED, response_model=TaskView)
async def create_task(
    lead_id: str,
    data: TaskCreate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> TaskView:
    """Schedule a task for a lead."""
    with translate_errors():
        return await use_case.create(session, lead_id, data)


@router.post("/{lead_id}/email", response_model=EmailSendResult)
async def send_lead_email(
    lead_id: str,
    message: EmailMessage,
    session: SessionContext = Depends(get_session_context),
    use_case: SendEmails = Depends(get_send_emails),
) -> EmailSendResult:
    """Email a lead and log the email as a communication."""
    with translate_errors():
        return await use_case.send_to_lead(session, lead_id, message)
