"""Unit tests for ManageUsers and ResolveSession use cases."""

import pytest

from app.application.dtos.user import UserCreate, UserUpdate
from app.application.errors import (
    AuthenticationError,
    ConflictError,
    PermissionDeniedError,
    ValidationError,
)
from app.application.use_cases.manage_users import ManageUsers
from app.application.use_cases.resolve_session import ResolveSession
from app.domain.entities.user import User
from app.domain.value_objects.role import Role


@pytest.fixture
def use_case(repositories):
    return ManageUsers(repositories.users, avatar_base_url="https://avatars.example.com/svg")


@pytest.mark.asyncio
async def test_create_user_with_generated_avatar(use_case, superadmin_session):
    user = await use_case.create(
        superadmin_session, UserCreate(email="Ana@Example.com", full_name="Ana Ruiz", role="admin")
    )
    assert user.email == "ana@example.com"
    assert user.role == Role.ADMIN
    assert user.avatar_url == "https://avatars.example.com/svg?seed=ana%40example.com"


@pytest.mark.asyncio
async def test_duplicate_email_conflicts(use_case, superadmin_session):
    await use_case.create(superadmin_session, UserCreate(email="ana@example.com", full_name="Ana", role="user"))
    with pytest.raises(ConflictError) as exc_info:
        await use_case.create(
            superadmin_session, UserCreate(email="ANA@example.com", full_name="Ana Bis", role="user")
        )
    assert exc_info.value.message == "User with this email already exists"


@pytest.mark.asyncio
async def test_only_superadmin_manages_users(use_case, admin_session):
    with pytest.raises(PermissionDeniedError):
        await use_case.list(admin_session)
    with pytest.raises(PermissionDeniedError):
        await use_case.create(admin_session, UserCreate(email="x@example.com", full_name="Xavi", role="user"))


@pytest.mark.asyncio
async def test_update_role(use_case, superadmin_session):
    user = await use_case.create(
        superadmin_session, UserCreate(email="ana@example.com", full_name="Ana", role="user")
    )
    updated = await use_case.update(superadmin_session, user.id, UserUpdate(role=Role.ADMIN))
    assert updated.role == Role.ADMIN
    assert updated.full_name == "Ana"


@pytest.mark.asyncio
async def test_cannot_delete_self(use_case, superadmin_session):
    with pytest.raises(ValidationError):
        await use_case.delete(superadmin_session, superadmin_session.user_id)


@pytest.mark.asyncio
async def test_delete_and_list(use_case, superadmin_session):
    user = await use_case.create(
        superadmin_session, UserCreate(email="ana@example.com", full_name="Ana", role="user")
    )
    await use_case.delete(superadmin_session, user.id)
    assert await use_case.list(superadmin_session) == []


@pytest.mark.asyncio
async def test_resolve_session(repositories):
    await repositories.users.add(User(id="u-1", email="ana@example.com", role=Role.ADMIN))
    resolve = ResolveSession(repositories.users)

    session = await resolve.execute("u-1")

    assert session.role == Role.ADMIN
    assert session.email == "ana@example.com"
    with pytest.raises(AuthenticationError):
        await resolve.execute("unknown")
