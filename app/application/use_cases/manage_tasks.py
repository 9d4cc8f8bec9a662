"""Manage tasks use case."""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from app.application.dtos.session import SessionContext
from app.application.dtos.task import (
    SuggestedCommunication,
    TaskCompletionResult,
    TaskCreate,
    TaskListQuery,
    TaskUpdate,
    TaskView,
)
from app.application.errors import NotFoundError
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.task_repository import TaskRepository
from app.domain.entities.task import Task
from app.domain.value_objects.choices import CommunicationType
from app.domain.value_objects.role import EDITOR_ROLES


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with stored ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def suggest_communication(task: Task) -> SuggestedCommunication:
    """
    Build the communication offered after a task is completed.

    Args:
        task: Completed task

    Returns:
        Pre-filled communication of the task's type (other when untyped)
    """
    content = f"Tarea completada: {task.title}"
    if task.description:
        content = f"{content}\n\n{task.description}"
    return SuggestedCommunication(
        lead_id=task.lead_id,
        type=task.type.as_communication_type() if task.type else CommunicationType.OTHER,
        content=content,
    )


class ManageTasks:
    """Use case for the task lifecycle (pending and completed)."""

    def __init__(
        self,
        task_repository: TaskRepository,
        lead_repository: LeadRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize manage tasks use case.

        Args:
            task_repository: Repository for tasks
            lead_repository: Repository for leads (existence and names)
            logger: Optional event logger (component, action, **fields)
        """
        self._task_repository = task_repository
        self._lead_repository = lead_repository
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("tasks", action, **kwargs)

    async def create(self, session: SessionContext, lead_id: str, data: TaskCreate) -> TaskView:
        """
        Schedule a task for a lead.

        Args:
            session: Caller context
            lead_id: Lead identifier
            data: Validated task input

        Returns:
            The created task, pending

        Raises:
            PermissionDeniedError: If the caller cannot modify leads
            NotFoundError: If the lead does not exist
        """
        session.require(EDITOR_ROLES)
        lead = await self._lead_repository.get(lead_id)
        if lead is None:
            raise NotFoundError(f"Candidato {lead_id} no encontrado")

        task = Task(
            lead_id=lead_id,
            title=data.title,
            description=data.description,
            due_date=as_utc(data.due_date),
            type=data.type,
            assigned_to=data.assigned_to or session.user_id,
        )
        await self._task_repository.add(task)

        self._log("task_created", actor_id=session.user_id, task_id=task.id, lead_id=lead_id)
        return TaskView.from_entity(task, lead_name=lead.full_name)

    async def update(self, session: SessionContext, task_id: str, data: TaskUpdate) -> TaskView:
        """
        Edit a task's fields.

        Args:
            session: Caller context
            task_id: Task identifier
            data: Fields to change

        Returns:
            The updated task

        Raises:
            PermissionDeniedError: If the caller cannot modify leads
            NotFoundError: If the task does not exist
        """
        session.require(EDITOR_ROLES)
        task = await self._get_task(task_id)

        # Fields sent as null are cleared; the title is required and never cleared
        changes = data.model_dump(exclude_unset=True)
        if changes.get("title") is None:
            changes.pop("title", None)
        if "due_date" in changes:
            changes["due_date"] = as_utc(changes["due_date"])
        for name, value in changes.items():
            setattr(task, name, value)
        task.updated_at = datetime.now(timezone.utc)
        await self._task_repository.save(task)

        self._log("task_updated", actor_id=session.user_id, task_id=task_id)
        return await self._view(task)

    async def complete(self, session: SessionContext, task_id: str) -> TaskCompletionResult:
        """
        Complete a task and suggest logging a communication for it.

        Completing an already completed task is a no-op that keeps the
        original completion time.

        Args:
            session: Caller context
            task_id: Task identifier

        Returns:
            Completed task and the suggested communication

        Raises:
            PermissionDeniedError: If the caller cannot modify leads
            NotFoundError: If the task does not exist
        """
        session.require(EDITOR_ROLES)
        task = await self._get_task(task_id)

        if not task.completed:
            task.complete()
            await self._task_repository.save(task)
            self._log("task_completed", actor_id=session.user_id, task_id=task_id)

        return TaskCompletionResult(
            task=await self._view(task),
            suggested_communication=suggest_communication(task),
        )

    async def reopen(self, session: SessionContext, task_id: str) -> TaskView:
        """
        Move a completed task back to pending.

        Args:
            session: Caller context
            task_id: Task identifier

        Returns:
            The reopened task
        """
        session.require(EDITOR_ROLES)
        task = await self._get_task(task_id)

        if task.completed:
            task.reopen()
            await self._task_repository.save(task)
            self._log("task_reopened", actor_id=session.user_id, task_id=task_id)

        return await self._view(task)

    async def delete(self, session: SessionContext, task_id: str) -> None:
        """Delete a task."""
        session.require(EDITOR_ROLES)
        await self._get_task(task_id)
        await self._task_repository.delete(task_id)
        self._log("task_deleted", actor_id=session.user_id, task_id=task_id)

    async def list(self, session: SessionContext, query: TaskListQuery) -> list[TaskView]:
        """
        List tasks by due date, undated ones last.

        Args:
            session: Caller context
            query: Lead, state and text filters

        Returns:
            Matching tasks with their lead names
        """
        tasks = await self._task_repository.list(lead_id=query.lead_id)
        names = {lead.id: lead.full_name for lead in await self._lead_repository.list()}

        views = []
        term = query.search.strip().casefold() if query.search else None
        for task in tasks:
            if query.state is not None and task.state != query.state:
                continue
            lead_name = names.get(task.lead_id)
            if term:
                haystacks = (task.title, task.description or "", lead_name or "")
                if not any(term in value.casefold() for value in haystacks):
                    continue
            views.append(TaskView.from_entity(task, lead_name=lead_name))
        return views

    async def _get_task(self, task_id: str) -> Task:
        task = await self._task_repository.get(task_id)
        if task is None:
            raise NotFoundError(f"Tarea {task_id} no encontrada")
        return task

    async def _view(self, task: Task) -> TaskView:
        lead = await self._lead_repository.get(task.lead_id)
        return TaskView.from_entity(task, lead_name=lead.full_name if lead else None)
