"""Task and communication HTTP routes addressed by their own ids."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Response, status

from app.adapters.inbound.http.dependencies import (
    get_log_communications,
    get_manage_tasks,
    get_session_context,
    translate_errors,
)
from app.application.dtos.communication import CommunicationUpdate, CommunicationView
from app.application.dtos.session import SessionContext
from app.application.dtos.task import TaskCompletionResult, TaskListQuery, TaskUpdate, TaskView
from app.application.use_cases.log_communications import LogCommunications
from app.application.use_cases.manage_tasks import ManageTasks

router = APIRouter(tags=["activity"])


@router.get("/tasks", response_model=list[TaskView])
async def list_tasks(
    lead_id: Optional[str] = None,
    state: Optional[Literal["pending", "completed"]] = None,
    search: Optional[str] = None,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> list[TaskView]:
    """List tasks across leads, by due date with undated tasks last."""
    query = TaskListQuery(lead_id=lead_id, state=state, search=search)
    with translate_errors():
        return await use_case.list(session, query)


@router.patch("/tasks/{task_id}", response_model=TaskView)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> TaskView:
    """Edit a task."""
    with translate_errors():
        return await use_case.update(session, task_id, data)


@router.post("/tasks/{task_id}/complete", response_model=TaskCompletionResult)
async def complete_task(
    task_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> TaskCompletionResult:
    """Complete a task; the response carries a suggested communication."""
    with translate_errors():
        return await use_case.complete(session, task_id)


@router.post("/tasks/{task_id}/reopen", response_model=TaskView)
async def reopen_task(
    task_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> TaskView:
    """Move a task back to pending."""
    with translate_errors():
        return await use_case.reopen(session, task_id)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: ManageTasks = Depends(get_manage_tasks),
) -> Response:
    """Delete a task."""
    with translate_errors():
        await use_case.delete(session, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/communications/{communication_id}", response_model=CommunicationView)
async def update_communication(
    communication_id: str,
    data: CommunicationUpdate,
    session: SessionContext = Depends(get_session_context),
    use_case: LogCommunications = Depends(get_log_communications),
) -> CommunicationView:
    """Edit a communication."""
    with translate_errors():
        return await use_case.update(session, communication_id, data)


@router.delete("/communications/{communication_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_communication(
    communication_id: str,
    session: SessionContext = Depends(get_session_context),
    use_case: LogCommunications = Depends(get_log_communications),
) -> Response:
    """Delete a communication."""
    with translate_errors():
        await use_case.delete(session, communication_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
