"""FastAPI dependencies: repositories, caller session and use cases."""

from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Depends, Header, HTTPException, status

from app.application.dtos.session import SessionContext
from app.application.errors import (
    AuthenticationError,
    ConflictError,
    CRMError,
    GatewayError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.application.use_cases.csv_import import ImportFranchisesFromCsv, ImportLeadsFromCsv
from app.application.use_cases.lead_dashboard import ComputeDashboardStats
from app.application.use_cases.lead_pipeline import LeadPipeline
from app.application.use_cases.log_communications import LogCommunications
from app.application.use_cases.manage_franchises import ManageFranchises
from app.application.use_cases.manage_leads import ManageLeads
from app.application.use_cases.manage_tasks import ManageTasks
from app.application.use_cases.manage_users import ManageUsers
from app.application.use_cases.send_email import SendEmails
from app.application.use_cases.track_lead_status import TrackLeadStatus
from app.infrastructure.logging.logger import logger
from app.infrastructure.wiring import dependencies as wiring

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (GatewayError, status.HTTP_502_BAD_GATEWAY),
)

_repositories: Optional[wiring.Repositories] = None


def to_http_exception(error: CRMError) -> HTTPException:
    """
    Map an application error to an HTTP error.

    Args:
        error: Application error

    Returns:
        HTTPException with the matching status code
    """
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, error_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            code = error_code
            break

    detail = error.message
    if isinstance(error, ValidationError) and error.errors:
        detail = {"message": error.message, "errors": error.errors}
    return HTTPException(status_code=code, detail=detail)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Raise application errors raised inside the block as HTTP errors."""
    try:
        yield
    except CRMError as e:
        if isinstance(e, GatewayError):
            logger.error(f"Gateway error: {e.message}")
        raise to_http_exception(e) from e


def get_repositories() -> wiring.Repositories:
    """Get the process-wide repositories, created on first use."""
    global _repositories
    if _repositories is None:
        _repositories = wiring.create_repositories()
    return _repositories


async def get_session_context(
    x_user_id: Optional[str] = Header(default=None),
    repositories: wiring.Repositories = Depends(get_repositories),
) -> SessionContext:
    """
    Resolve the caller from the X-User-Id header.

    Raises:
        HTTPException: 401 if the header is missing or the user is unknown
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuario no autenticado",
        )
    with translate_errors():
        return await wiring.create_resolve_session(repositories).execute(x_user_id)


def get_manage_leads(repositories: wiring.Repositories = Depends(get_repositories)) -> ManageLeads:
    return wiring.create_manage_leads(repositories)


def get_track_lead_status(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> TrackLeadStatus:
    return wiring.create_track_lead_status(repositories)


def get_lead_pipeline(repositories: wiring.Repositories = Depends(get_repositories)) -> LeadPipeline:
    return wiring.create_lead_pipeline(repositories)


def get_manage_tasks(repositories: wiring.Repositories = Depends(get_repositories)) -> ManageTasks:
    return wiring.create_manage_tasks(repositories)


def get_log_communications(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> LogCommunications:
    return wiring.create_log_communications(repositories)


def get_manage_franchises(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> ManageFranchises:
    return wiring.create_manage_franchises(repositories)


def get_manage_users(repositories: wiring.Repositories = Depends(get_repositories)) -> ManageUsers:
    return wiring.create_manage_users(repositories)


def get_import_leads(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> ImportLeadsFromCsv:
    return wiring.create_import_leads(repositories)


def get_import_franchises(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> ImportFranchisesFromCsv:
    return wiring.create_import_franchises(repositories)


def get_send_emails(repositories: wiring.Repositories = Depends(get_repositories)) -> SendEmails:
    return wiring.create_send_emails(repositories)


def get_dashboard(
    repositories: wiring.Repositories = Depends(get_repositories),
) -> ComputeDashboardStats:
    return wiring.create_dashboard(repositories)
