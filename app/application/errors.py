"""Application errors.

Use cases raise these; the HTTP layer maps each one to a status code.
"""


class CRMError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CRMError):
    """Input rejected by a business rule (rendered inline by clients)."""

    def __init__(self, message: str, errors: list[str] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(CRMError):
    """Requested record does not exist."""


class ConflictError(CRMError):
    """Record clashes with an existing one (e.g. duplicate email)."""


class AuthenticationError(CRMError):
    """Caller identity could not be resolved."""


class PermissionDeniedError(CRMError):
    """Caller's role is not allowed to perform the operation."""

    RESTRICTED_ACCESS_MESSAGE = (
        "Acceso Restringido: no tienes los permisos necesarios para realizar esta acción."
    )

    def __init__(self, message: str = RESTRICTED_ACCESS_MESSAGE) -> None:
        super().__init__(message)


class GatewayError(CRMError):
    """Persistence or delivery backend failed (network, constraint, auth)."""
