"""Franchise HTTP routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from app.adapters.inbound.http.dependencies import (
    get_manage_franchises,
    get_session_context,
    translate_errors,
)
from app.application.dtos.franchise import FranchiseCreate, FranchiseUpdate, FranchiseView
from app.application.dtos.session import SessionContext
from app.application.use_cases.manage_franchises import ManageFranchises

router = APIRouter(prefix="/franchises", tags=["franchises"])


@router.get("", response_model=list[FranchiseView])
async def list_franchises(
    search: Optional[str] = None,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageFranchises = Depends(get_manage_franchises),
) -> list[FranchiseView]:
    """List franchises, optionally filtered by text."""
    with translate_errors():
        return await use_case.list(session, search)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FranchiseView)
async def create_franchise(
    data: FranchiseCreate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageFranchises = Depends(get_manage_franchises),
) -> FranchiseView:
    """Register a franchise."""
    with translate_errors():
        return await use_case.create(session, data)


@router.get("/{franchise_id}", response_model=FranchiseView)
async def get_franchise(
    franchise_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageFranchises = Depends(get_manage_franchises),
) -> FranchiseView:
    """Get a franchise."""
    with translate_errors():
        return await use_case.get(session, franchise_id)


@router.patch("/{franchise_id}", response_model=FranchiseView)
async def update_franchise(
    franchise_id: str,
    data: FranchiseUpdate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageFranchises = Depends(get_manage_franchises),
) -> FranchiseView:
    """Edit a franchise."""
    with translate_errors():
        return await use_case.update(session, franchise_id, data)


@router.delete("/{franchise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_franchise(
    franchise_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageFranchises = Depends(get_manage_franchises),
) -> Response:
    """Delete a franchise."""
    with translate_errors():
        await use_case.delete(session, franchise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
