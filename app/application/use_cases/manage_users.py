"""Manage users use case."""

from typing import Any, Callable, Optional
from urllib.parse import quote

from app.application.dtos.session import SessionContext
from app.application.dtos.user import UserCreate, UserUpdate, UserView
from app.application.errors import ConflictError, NotFoundError, ValidationError
from app.application.ports.user_repository import UserRepository
from app.domain.entities.user import User
from app.domain.value_objects.role import USER_ADMIN_ROLES

DEFAULT_AVATAR_BASE_URL = "https://api.dicebear.com/7.x/avataaars/svg"


class ManageUsers:
    """Use case for user administration, restricted to superadmins."""

    def __init__(
        self,
        user_repository: UserRepository,
        avatar_base_url: str = DEFAULT_AVATAR_BASE_URL,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize manage users use case.

        Args:
            user_repository: Repository for users
            avatar_base_url: Base URL of generated avatars (seeded by email)
            logger: Optional event logger (component, action, **fields)
        """
        self._user_repository = user_repository
        self._avatar_base_url = avatar_base_url
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("users", action, **kwargs)

    def default_avatar(self, email: str) -> str:
        """Get the generated avatar URL for an email."""
        return f"{self._avatar_base_url}?seed={quote(email)}"

    async def create(self, session: SessionContext, data: UserCreate) -> UserView:
        """
        Create a user with a role.

        Args:
            session: Caller context
            data: Validated user input

        Returns:
            The created user

        Raises:
            PermissionDeniedError: If the caller is not a superadmin
            ConflictError: If the email is already registered
        """
        session.require(USER_ADMIN_ROLES)

        if await self._user_repository.get_by_email(data.email) is not None:
            raise ConflictError("User with this email already exists")

        user = User(
            email=data.email,
            full_name=data.full_name,
            role=data.role,
            avatar_url=data.avatar_url or self.default_avatar(data.email),
        )
        await self._user_repository.add(user)

        self._log("user_created", actor_id=session.user_id, user_id=user.id, role=user.role.value)
        return UserView.from_entity(user)

    async def update(self, session: SessionContext, user_id: str, data: UserUpdate) -> UserView:
        """Edit a user's name, role or avatar."""
        session.require(USER_ADMIN_ROLES)
        user = await self._get(user_id)

        for name, value in data.model_dump(exclude_none=True).items():
            setattr(user, name, value)
        user.touch()
        await self._user_repository.update(user)

        self._log("user_updated", actor_id=session.user_id, user_id=user_id, role=user.role.value)
        return UserView.from_entity(user)

    async def delete(self, session: SessionContext, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            PermissionDeniedError: If the caller is not a superadmin
            ValidationError: If callers try to delete themselves
            NotFoundError: If the user does not exist
        """
        session.require(USER_ADMIN_ROLES)
        if user_id == session.user_id:
            raise ValidationError("No puedes eliminar tu propio usuario")
        await self._get(user_id)
        await self._user_repository.delete(user_id)
        self._log("user_deleted", actor_id=session.user_id, user_id=user_id)

    async def list(self, session: SessionContext) -> list[UserView]:
        """List users."""
        session.require(USER_ADMIN_ROLES)
        return [UserView.from_entity(u) for u in await self._user_repository.list()]

    async def _get(self, user_id: str) -> User:
        user = await self._user_repository.get(user_id)
        if user is None:
            raise NotFoundError(f"Usuario {user_id} no encontrado")
        return user
