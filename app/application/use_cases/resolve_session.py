"""Resolve session use case."""

from app.application.dtos.session import SessionContext
from app.application.errors import AuthenticationError
from app.application.ports.user_repository import UserRepository


class ResolveSession:
    """Use case for turning an authenticated user id into a session context."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def execute(self, user_id: str) -> SessionContext:
        """
        Resolve the caller's identity and role.

        A user without a stored role gets a context with no role, which
        passes no role gate.

        Args:
            user_id: Identifier supplied by the authentication layer

        Returns:
            Session context

        Raises:
            AuthenticationError: If no such user exists
        """
        user = await self._user_repository.get(user_id)
        if user is None:
            raise AuthenticationError("Usuario no autenticado")
        role = await self._user_repository.get_role(user_id)
        return SessionContext(user_id=user.id, email=user.email, role=role)
