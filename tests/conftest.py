"""Shared fixtures: in-memory repositories and role-scoped sessions."""

import pytest

from app.adapters.outbound.email import MockEmailSender
from app.adapters.outbound.persistence import InMemoryStore
from app.application.dtos.session import SessionContext
from app.domain.value_objects.role import Role
from app.infrastructure.wiring.dependencies import create_in_memory_repositories


@pytest.fixture
def store():
    """Fresh in-memory tables."""
    return InMemoryStore()


@pytest.fixture
def repositories(store):
    """In-memory repositories over one store, with an instant email sender."""
    return create_in_memory_repositories(store, email_sender=MockEmailSender(delay_seconds=0))


@pytest.fixture
def superadmin_session():
    return SessionContext(user_id="u-super", email="super@example.com", role=Role.SUPERADMIN)


@pytest.fixture
def admin_session():
    return SessionContext(user_id="u-admin", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def user_session():
    return SessionContext(user_id="u-user", email="user@example.com", role=Role.USER)


@pytest.fixture
def anonymous_session():
    """Authenticated user whose role could not be resolved."""
    return SessionContext(user_id="u-norole", email="norole@example.com", role=None)
