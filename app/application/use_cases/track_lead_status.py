"""Track lead status use case (append-only pipeline history)."""

from typing import Callable, Optional

from app.application.dtos.session import SessionContext
from app.application.errors import NotFoundError
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.domain.entities.status_history import StatusHistoryEntry, current_status, newest_first
from app.domain.value_objects.pipeline_stage import PipelineStage
from app.domain.value_objects.role import EDITOR_ROLES


class TrackLeadStatus:
    """Use case for appending and reading pipeline status history."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        status_history_repository: StatusHistoryRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize track lead status use case.

        Args:
            lead_repository: Repository for leads
            status_history_repository: Repository for the status log
            logger: Optional status-change logger (lead_id, status, actor_id, status_before)
        """
        self._lead_repository = lead_repository
        self._status_history_repository = status_history_repository
        self._logger = logger

    async def append_status(
        self,
        session: SessionContext,
        lead_id: str,
        status: PipelineStage,
        notes: Optional[str] = None,
    ) -> StatusHistoryEntry:
        """
        Move a lead to a stage by appending a history row.

        Any stage may follow any other; existing rows are never touched.

        Args:
            session: Caller context
            lead_id: Lead identifier
            status: Destination stage
            notes: Optional note stored with the entry

        Returns:
            The appended entry

        Raises:
            PermissionDeniedError: If the caller cannot modify leads
            NotFoundError: If the lead does not exist
        """
        session.require(EDITOR_ROLES)

        if await self._lead_repository.get(lead_id) is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")

        history = await self._status_history_repository.list_for_lead(lead_id)
        status_before = current_status(history)

        entry = StatusHistoryEntry(
            lead_id=lead_id,
            status=status,
            notes=notes,
            created_by=session.user_id,
        )
        await self._status_history_repository.append(entry)

        self._log(lead_id, status.value, session.user_id, status_before.value)
        return entry

    async def current_status(self, lead_id: str) -> PipelineStage:
        """
        Get the current status of a lead.

        Args:
            lead_id: Lead identifier

        Returns:
            Status of the most recent entry, or new_contact
        """
        history = await self._status_history_repository.list_for_lead(lead_id)
        return current_status(history)

    async def history(self, lead_id: str) -> list[StatusHistoryEntry]:
        """
        Get the history of a lead for display, newest first.

        Args:
            lead_id: Lead identifier

        Returns:
            Status history entries
        """
        history = await self._status_history_repository.list_for_lead(lead_id)
        return newest_first(history)

    def _log(self, lead_id: str, status: str, actor_id: str, status_before: str) -> None:
        if self._logger:
            self._logger(lead_id, status, actor_id=actor_id, status_before=status_before)
