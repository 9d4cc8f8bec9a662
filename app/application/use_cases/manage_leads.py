"""Manage leads use case."""

from typing import Any, Callable, Optional

from app.application.dtos.communication import CommunicationView
from app.application.dtos.lead import (
    LeadCreate,
    LeadDetailView,
    LeadListQuery,
    LeadSummary,
    LeadUpdate,
    StatusHistoryView,
)
from app.application.dtos.session import SessionContext
from app.application.dtos.task import TaskView
from app.application.errors import CRMError, NotFoundError
from app.application.ports.communication_repository import CommunicationRepository
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.status_history_repository import StatusHistoryRepository
from app.application.ports.task_repository import TaskRepository
from app.application.use_cases.lead_summaries import load_lead_summaries
from app.domain.entities.lead import Lead, LeadDetails
from app.domain.entities.status_history import StatusHistoryEntry, current_status, newest_first
from app.domain.value_objects.pipeline_stage import DEFAULT_STAGE
from app.domain.value_objects.role import EDITOR_ROLES

CREATED_NOTE = "Candidato creado"

_TEXT_SORT_FIELDS = ("full_name", "email", "location")


class ManageLeads:
    """Use case for creating, editing, deleting, reading and listing leads."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        status_history_repository: StatusHistoryRepository,
        communication_repository: CommunicationRepository,
        task_repository: TaskRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize manage leads use case.

        Args:
            lead_repository: Repository for leads and details
            status_history_repository: Repository for the status log
            communication_repository: Repository for communications
            task_repository: Repository for tasks
            logger: Optional event logger (component, action, **fields)
        """
        self._lead_repository = lead_repository
        self._status_history_repository = status_history_repository
        self._communication_repository = communication_repository
        self._task_repository = task_repository
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("leads", action, **kwargs)

    async def create(
        self,
        session: SessionContext,
        data: LeadCreate,
        initial_note: str = CREATED_NOTE,
    ) -> LeadDetailView:
        """
        Create a lead, its details and its initial status.

        The three writes are sequential and independent: if a later one
        fails, the earlier rows stay in place and the error propagates.

        Args:
            session: Caller context
            data: Validated lead input
            initial_note: Note of the initial new_contact entry

        Returns:
            The created lead

        Raises:
            PermissionDeniedError: If the caller cannot create leads
            GatewayError: If a write fails
        """
        session.require(EDITOR_ROLES)

        lead = Lead(
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            location=data.location,
        )
        details = LeadDetails(
            lead_id=lead.id,
            interest_level=data.interest_level,
            investment_capacity=data.investment_capacity,
            source_channel=data.source_channel,
            previous_experience=data.previous_experience or "",
            additional_comments=data.additional_comments or "",
        )
        entry = StatusHistoryEntry(
            lead_id=lead.id,
            status=DEFAULT_STAGE,
            notes=initial_note,
            created_by=session.user_id,
        )

        step = "lead"
        try:
            await self._lead_repository.add(lead)
            step = "details"
            await self._lead_repository.save_details(details)
            step = "status"
            await self._status_history_repository.append(entry)
        except CRMError as e:
            self._log(
                "lead_create_failed",
                actor_id=session.user_id,
                lead_id=lead.id,
                failed_step=step,
                error=e.message,
            )
            raise

        self._log("lead_created", actor_id=session.user_id, lead_id=lead.id, score=details.score)
        return await self.get_detail(session, lead.id)

    async def update(
        self,
        session: SessionContext,
        lead_id: str,
        data: LeadUpdate,
    ) -> LeadDetailView:
        """
        Edit a lead and its details, recomputing the score.

        Details are inserted if the lead has none yet.

        Args:
            session: Caller context
            lead_id: Lead identifier
            data: Fields to change

        Returns:
            The updated lead

        Raises:
            PermissionDeniedError: If the caller cannot edit leads
            NotFoundError: If the lead does not exist
        """
        session.require(EDITOR_ROLES)

        lead = await self._get_lead(lead_id)
        changes = data.model_dump(exclude_none=True)

        contact_fields = {"full_name", "email", "phone", "location"}
        if contact_fields & changes.keys():
            for name in contact_fields & changes.keys():
                setattr(lead, name, changes[name])
            lead.touch()
            await self._lead_repository.update(lead)

        details = await self._lead_repository.get_details(lead_id)
        if details is None:
            details = LeadDetails(lead_id=lead_id)
        details.apply_changes(
            interest_level=data.interest_level,
            investment_capacity=data.investment_capacity,
            source_channel=data.source_channel,
            previous_experience=data.previous_experience,
            additional_comments=data.additional_comments,
        )
        await self._lead_repository.save_details(details)

        self._log("lead_updated", actor_id=session.user_id, lead_id=lead_id, score=details.score)
        return await self.get_detail(session, lead_id)

    async def delete(self, session: SessionContext, lead_id: str) -> None:
        """
        Permanently delete a lead with its details, history, communications and tasks.

        Args:
            session: Caller context
            lead_id: Lead identifier

        Raises:
            PermissionDeniedError: If the caller is not an administrator
            NotFoundError: If the lead does not exist
        """
        session.require(EDITOR_ROLES)
        await self._get_lead(lead_id)
        await self._lead_repository.delete(lead_id)
        self._log("lead_deleted", actor_id=session.user_id, lead_id=lead_id)

    async def get_detail(self, session: SessionContext, lead_id: str) -> LeadDetailView:
        """
        Get a lead with everything attached to it.

        Args:
            session: Caller context
            lead_id: Lead identifier

        Returns:
            Lead detail view

        Raises:
            NotFoundError: If the lead does not exist
        """
        lead = await self._get_lead(lead_id)
        details = await self._lead_repository.get_details(lead_id)
        history = await self._status_history_repository.list_for_lead(lead_id)
        communications = await self._communication_repository.list_for_lead(lead_id)
        tasks = await self._task_repository.list(lead_id=lead_id)

        summary = LeadSummary.from_entities(lead, details, current_status(history))
        return LeadDetailView(
            **summary.model_dump(exclude={"details"}),
            details=summary.details,
            status_history=[StatusHistoryView.from_entity(e) for e in newest_first(history)],
            communications=[CommunicationView.from_entity(c) for c in communications],
            tasks=[TaskView.from_entity(t, lead_name=lead.full_name) for t in tasks],
        )

    async def list(self, session: SessionContext, query: LeadListQuery) -> list[LeadSummary]:
        """
        List leads with search, filters and sorting.

        Args:
            session: Caller context
            query: Search, filter and sort options

        Returns:
            Matching lead summaries
        """
        summaries = await load_lead_summaries(
            self._lead_repository, self._status_history_repository
        )
        matching = [s for s in summaries if self._matches(s, query)]

        reverse = query.direction == "desc"
        if query.sort_by in _TEXT_SORT_FIELDS:
            matching.sort(key=lambda s: getattr(s, query.sort_by).casefold(), reverse=reverse)
        elif query.sort_by == "score":
            matching.sort(key=lambda s: s.score, reverse=reverse)
        else:
            matching.sort(key=lambda s: s.created_at, reverse=reverse)
        return matching

    def _matches(self, summary: LeadSummary, query: LeadListQuery) -> bool:
        """Check a summary against the search text and filters."""
        if query.search:
            term = query.search.strip().casefold()
            haystacks = (summary.full_name, summary.email, summary.location)
            if not any(term in value.casefold() for value in haystacks):
                return False

        if query.status is not None and summary.status != query.status:
            return False

        if query.source_channel is not None:
            if summary.details is None or summary.details.source_channel != query.source_channel:
                return False

        if query.created_on is not None and summary.created_at.date() != query.created_on:
            return False

        return True

    async def _get_lead(self, lead_id: str) -> Lead:
        lead = await self._lead_repository.get(lead_id)
        if lead is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")
        return lead
