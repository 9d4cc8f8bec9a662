"""Manage franchises use case."""

from typing import Any, Callable, Optional

from app.application.dtos.franchise import FranchiseCreate, FranchiseUpdate, FranchiseView
from app.application.dtos.session import SessionContext
from app.application.errors import NotFoundError
from app.application.ports.franchise_repository import FranchiseRepository
from app.domain.entities.franchise import Franchise
from app.domain.value_objects.role import EDITOR_ROLES


class ManageFranchises:
    """Use case for the franchise directory."""

    def __init__(
        self,
        franchise_repository: FranchiseRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize manage franchises use case.

        Args:
            franchise_repository: Repository for franchises
            logger: Optional event logger (component, action, **fields)
        """
        self._franchise_repository = franchise_repository
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("franchises", action, **kwargs)

    async def create(self, session: SessionContext, data: FranchiseCreate) -> FranchiseView:
        """
        Register a franchise.

        Args:
            session: Caller context
            data: Validated franchise input

        Returns:
            The created franchise

        Raises:
            PermissionDeniedError: If the caller cannot modify franchises
        """
        session.require(EDITOR_ROLES)
        franchise = Franchise(**data.model_dump(), created_by=session.user_id)
        await self._franchise_repository.add(franchise)
        self._log("franchise_created", actor_id=session.user_id, franchise_id=franchise.id)
        return FranchiseView.from_entity(franchise)

    async def update(
        self,
        session: SessionContext,
        franchise_id: str,
        data: FranchiseUpdate,
    ) -> FranchiseView:
        """Edit a franchise; omitted fields are kept."""
        session.require(EDITOR_ROLES)
        franchise = await self._get(franchise_id)

        for name, value in data.model_dump(exclude_none=True).items():
            setattr(franchise, name, value)
        franchise.touch()
        await self._franchise_repository.update(franchise)

        self._log("franchise_updated", actor_id=session.user_id, franchise_id=franchise_id)
        return FranchiseView.from_entity(franchise)

    async def delete(self, session: SessionContext, franchise_id: str) -> None:
        """Delete a franchise."""
        session.require(EDITOR_ROLES)
        await self._get(franchise_id)
        await self._franchise_repository.delete(franchise_id)
        self._log("franchise_deleted", actor_id=session.user_id, franchise_id=franchise_id)

    async def get(self, session: SessionContext, franchise_id: str) -> FranchiseView:
        """Get one franchise."""
        return FranchiseView.from_entity(await self._get(franchise_id))

    async def list(self, session: SessionContext, search: Optional[str] = None) -> list[FranchiseView]:
        """
        List franchises by name, optionally filtered by text.

        The search matches name, contact person, city and province.

        Args:
            session: Caller context
            search: Case-insensitive search text

        Returns:
            Matching franchises
        """
        franchises = await self._franchise_repository.list()
        if search and search.strip():
            term = search.strip().casefold()
            franchises = [
                f
                for f in franchises
                if any(
                    term in value.casefold()
                    for value in (f.name, f.contact_person, f.city, f.province)
                )
            ]
        return [FranchiseView.from_entity(f) for f in franchises]

    async def _get(self, franchise_id: str) -> Franchise:
        franchise = await self._franchise_repository.get(franchise_id)
        if franchise is None:
            raise NotFoundError(f"Franquicia {franchise_id} no encontrada")
        return franchise
