"""Log communications use case."""

from typing import Any, Callable, Optional

from app.application.dtos.communication import (
    CommunicationCreate,
    CommunicationUpdate,
    CommunicationView,
)
from app.application.dtos.session import SessionContext
from app.application.errors import NotFoundError
from app.application.ports.communication_repository import CommunicationRepository
from app.application.ports.lead_repository import LeadRepository
from app.domain.entities.communication import Communication
from app.domain.value_objects.role import EDITOR_ROLES


class LogCommunications:
    """Use case for the per-lead interaction log."""

    def __init__(
        self,
        communication_repository: CommunicationRepository,
        lead_repository: LeadRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize log communications use case.

        Args:
            communication_repository: Repository for communications
            lead_repository: Repository for leads
            logger: Optional event logger (component, action, **fields)
        """
        self._communication_repository = communication_repository
        self._lead_repository = lead_repository
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("communications", action, **kwargs)

    async def create(
        self,
        session: SessionContext,
        lead_id: str,
        data: CommunicationCreate,
    ) -> CommunicationView:
        """
        Record an interaction with a lead.

        Args:
            session: Caller context
            lead_id: Lead identifier
            data: Type and content

        Returns:
            The recorded communication

        Raises:
            PermissionDeniedError: If the caller cannot modify leads
            NotFoundError: If the lead does not exist
        """
        session.require(EDITOR_ROLES)
        if await self._lead_repository.get(lead_id) is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")

        communication = Communication(
            lead_id=lead_id,
            type=data.type,
            content=data.content,
            created_by=session.user_id,
        )
        await self._communication_repository.add(communication)

        self._log(
            "communication_logged",
            actor_id=session.user_id,
            lead_id=lead_id,
            communication_type=communication.type.value,
        )
        return CommunicationView.from_entity(communication)

    async def update(
        self,
        session: SessionContext,
        communication_id: str,
        data: CommunicationUpdate,
    ) -> CommunicationView:
        """Edit the type or content of a communication."""
        session.require(EDITOR_ROLES)
        communication = await self._get(communication_id)

        if data.type is not None:
            communication.type = data.type
        if data.content is not None:
            communication.content = data.content
        await self._communication_repository.update(communication)

        self._log("communication_updated", actor_id=session.user_id, communication_id=communication_id)
        return CommunicationView.from_entity(communication)

    async def delete(self, session: SessionContext, communication_id: str) -> None:
        """Delete a communication."""
        session.require(EDITOR_ROLES)
        await self._get(communication_id)
        await self._communication_repository.delete(communication_id)
        self._log("communication_deleted", actor_id=session.user_id, communication_id=communication_id)

    async def list_for_lead(self, session: SessionContext, lead_id: str) -> list[CommunicationView]:
        """
        List a lead's communications, newest first.

        Args:
            session: Caller context
            lead_id: Lead identifier

        Returns:
            Communications of the lead
        """
        if await self._lead_repository.get(lead_id) is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")
        communications = await self._communication_repository.list_for_lead(lead_id)
        return [CommunicationView.from_entity(c) for c in communications]

    async def _get(self, communication_id: str) -> Communication:
        communication = await self._communication_repository.get(communication_id)
        if communication is None:
            raise NotFoundError(f"Comunicación {communication_id} no encontrada")
        return communication
