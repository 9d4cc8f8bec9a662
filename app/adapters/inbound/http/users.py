"""User administration and session HTTP routes."""

from fastapi import APIRouter, Depends, Response, status

from app.adapters.inbound.http.dependencies import (
    get_manage_users,
    get_session_context,
    translate_errors,
)
from app.adapters.inbound.http.schemas import SessionResponse
from app.application.dtos.session import SessionContext
from app.application.dtos.user import UserCreate, UserUpdate, UserView
from app.application.use_cases.manage_users import ManageUsers
from app.domain.value_objects.role import EDITOR_ROLES, USER_ADMIN_ROLES

router = APIRouter(tags=["users"])


@router.get("/me", response_model=SessionResponse)
async def get_me(session: SessionContext = Depends(get_session_context)) -> SessionResponse:
    """Get the caller's identity and what the caller may change."""
    return SessionResponse(
        user_id=session.user_id,
        email=session.email,
        role=session.role,
        can_edit=session.can(EDITOR_ROLES),
        can_manage_users=session.can(USER_ADMIN_ROLES),
    )


@router.get("/users", response_model=list[UserView])
async def list_users(
    session: SessionContext = Depends(get_session_context),
    use_case: ManageUsers = Depends(get_manage_users),
) -> list[UserView]:
    """List users (superadmin only)."""
    with translate_errors():
        return await use_case.list(session)


@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserView)
async def create_user(
    data: UserCreate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageUsers = Depends(get_manage_users),
) -> UserView:
    """Create a user with a role (superadmin only)."""
    with translate_errors():
        return await use_case.create(session, data)


@router.patch("/users/{user_id}", response_model=UserView)
async def update_user(
    user_id: str,
    data: UserUpdate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageUsers = Depends(get_manage_users),
) -> UserView:
    """Edit a user (superadmin only)."""
    with translate_errors():
        return await use_case.update(session, user_id, data)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageUsers = Depends(get_manage_users),
) -> Response:
    """Delete a user (superadmin only)."""
    with translate_errors():
        await use_case.delete(session, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
