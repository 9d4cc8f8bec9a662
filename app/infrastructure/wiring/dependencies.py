"""Dependency injection factory functions."""

from dataclasses import dataclass

from app.adapters.outbound.activity import (
    InMemoryCommunicationRepository,
    InMemoryTaskRepository,
    PostgresCommunicationRepository,
    PostgresTaskRepository,
)
from app.adapters.outbound.email import MockEmailSender
from app.adapters.outbound.franchise import (
    InMemoryFranchiseRepository,
    PostgresFranchiseRepository,
)
from app.adapters.outbound.lead import (
    InMemoryLeadRepository,
    InMemoryStatusHistoryRepository,
    PostgresLeadRepository,
    PostgresStatusHistoryRepository,
)
from app.adapters.outbound.persistence import InMemoryStore
from app.adapters.outbound.user import (
    InMemoryEmailSettingsRepository,
    InMemoryUserRepository,
    PostgresEmailSettingsRepository,
    PostgresUserRepository,
)
from app.application.ports.communication_repository import CommunicationRepository
from app.application.ports.email_sender import EmailSender
from app.application.ports.email_settings_repository import EmailSettingsRepository
from app.application.ports.franchise_repository import FranchiseRepository
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.application.ports.task_repository import TaskRepository
from app.application.ports.user_repository import UserRepository
from app.application.use_cases.csv_import import ImportFranchisesFromCsv, ImportLeadsFromCsv
from app.application.use_cases.lead_dashboard import ComputeDashboardStats
from app.application.use_cases.lead_pipeline import LeadPipeline
from app.application.use_cases.log_communications import LogCommunications
from app.application.use_cases.manage_franchises import ManageFranchises
from app.application.use_cases.manage_leads import ManageLeads
from app.application.use_cases.manage_tasks import ManageTasks
from app.application.use_cases.manage_users import ManageUsers
from app.application.use_cases.resolve_session import ResolveSession
from app.application.use_cases.send_email import SendEmails
from app.application.use_cases.track_lead_status import TrackLeadStatus
from app.domain.entities.user import User
from app.domain.value_objects.role import Role
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import (
    log_csv_import,
    log_email,
    log_event,
    log_status_change,
)


@dataclass
class Repositories:
    """Repository adapters sharing one backend."""

    leads: LeadRepository
    status_history: StatusHistoryRepository
    communications: CommunicationRepository
    tasks: TaskRepository
    franchises: FranchiseRepository
    users: UserRepository
    email_settings: EmailSettingsRepository
    email_sender: EmailSender


def create_in_memory_repositories(
    store: InMemoryStore = None,
    email_sender: EmailSender = None,
) -> Repositories:
    """
    Factory function to create in-memory repositories over one store.

    Args:
        store: Shared tables (a fresh store is created when omitted)
        email_sender: Email sender (mock sender with the configured delay when omitted)

    Returns:
        Repositories instance
    """
    store = store or InMemoryStore()
    return Repositories(
        leads=InMemoryLeadRepository(store),
        status_history=InMemoryStatusHistoryRepository(store),
        communications=InMemoryCommunicationRepository(store),
        tasks=InMemoryTaskRepository(store),
        franchises=InMemoryFranchiseRepository(store),
        users=InMemoryUserRepository(store),
        email_settings=InMemoryEmailSettingsRepository(store),
        email_sender=email_sender or MockEmailSender(settings.mock_email_delay_seconds),
    )


def create_repositories() -> Repositories:
    """
    Factory function to create repositories for the configured backend.

    Returns:
        Repositories instance
    """
    if settings.repository_backend == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when REPOSITORY_BACKEND=postgres")
        return Repositories(
            leads=PostgresLeadRepository(),
            status_history=PostgresStatusHistoryRepository(),
            communications=PostgresCommunicationRepository(),
            tasks=PostgresTaskRepository(),
            franchises=PostgresFranchiseRepository(),
            users=PostgresUserRepository(),
            email_settings=PostgresEmailSettingsRepository(),
            email_sender=MockEmailSender(settings.mock_email_delay_seconds),
        )

    store = InMemoryStore()
    if settings.seed_superadmin_email:
        superadmin = User(
            id=settings.seed_superadmin_id,
            email=settings.seed_superadmin_email.lower(),
            full_name="Superadmin",
            role=Role.SUPERADMIN,
        )
        store.users[superadmin.id] = superadmin
    return create_in_memory_repositories(store)


def create_resolve_session(repositories: Repositories) -> ResolveSession:
    """Factory function to create ResolveSession."""
    return ResolveSession(repositories.users)


def create_track_lead_status(repositories: Repositories) -> TrackLeadStatus:
    """Factory function to create TrackLeadStatus."""
    return TrackLeadStatus(
        repositories.leads,
        repositories.status_history,
        logger=log_status_change,
    )


def create_manage_leads(repositories: Repositories) -> ManageLeads:
    """Factory function to create ManageLeads."""
    return ManageLeads(
        repositories.leads,
        repositories.status_history,
        repositories.communications,
        repositories.tasks,
        logger=log_event,
    )


def create_lead_pipeline(repositories: Repositories) -> LeadPipeline:
    """Factory function to create LeadPipeline."""
    return LeadPipeline(
        repositories.leads,
        repositories.status_history,
        create_track_lead_status(repositories),
        logger=log_event,
    )


def create_manage_tasks(repositories: Repositories) -> ManageTasks:
    """Factory function to create ManageTasks."""
    return ManageTasks(repositories.tasks, repositories.leads, logger=log_event)


def create_log_communications(repositories: Repositories) -> LogCommunications:
    """Factory function to create LogCommunications."""
    return LogCommunications(repositories.communications, repositories.leads, logger=log_event)


def create_manage_franchises(repositories: Repositories) -> ManageFranchises:
    """Factory function to create ManageFranchises."""
    return ManageFranchises(repositories.franchises, logger=log_event)


def create_manage_users(repositories: Repositories) -> ManageUsers:
    """Factory function to create ManageUsers."""
    return ManageUsers(
        repositories.users,
        avatar_base_url=settings.default_avatar_base_url,
        logger=log_event,
    )


def create_import_leads(repositories: Repositories) -> ImportLeadsFromCsv:
    """Factory function to create ImportLeadsFromCsv."""
    return ImportLeadsFromCsv(repositories.leads, repositories.status_history, logger=log_csv_import)


def create_import_franchises(repositories: Repositories) -> ImportFranchisesFromCsv:
    """Factory function to create ImportFranchisesFromCsv."""
    return ImportFranchisesFromCsv(repositories.franchises, logger=log_csv_import)


def create_send_emails(repositories: Repositories) -> SendEmails:
    """Factory function to create SendEmails."""
    return SendEmails(
        repositories.email_settings,
        repositories.email_sender,
        repositories.leads,
        repositories.communications,
        logger=log_email,
    )


def create_dashboard(repositories: Repositories) -> ComputeDashboardStats:
    """Factory function to create ComputeDashboardStats."""
    return ComputeDashboardStats(repositories.leads, repositories.status_history)
