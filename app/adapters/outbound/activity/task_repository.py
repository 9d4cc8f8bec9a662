"""In-memory task repository adapter."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from app.adapters.outbound.persistence.in_memory_store import InMemoryStore
from app.application.ports.task_repository import TaskRepository
from app.domain.entities.task import Task

_NO_DUE_DATE = datetime.max.replace(tzinfo=timezone.utc)


def due_date_order(task: Task) -> tuple[datetime, datetime]:
    """Sort key: due date ascending, undated tasks last, then creation time."""
    return (task.due_date or _NO_DUE_DATE, task.created_at)


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of task repository."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            store: Shared tables (a private store is created when omitted)
        """
        self._store = store or InMemoryStore()

    async def add(self, task: Task) -> None:
        """Insert a task."""
        self._store.tasks[task.id] = replace(task)

    async def get(self, task_id: str) -> Optional[Task]:
        """Get a task by id."""
        task = self._store.tasks.get(task_id)
        return replace(task) if task else None

    async def save(self, task: Task) -> None:
        """Persist an existing task."""
        if task.id in self._store.tasks:
            self._store.tasks[task.id] = replace(task)

    async def delete(self, task_id: str) -> None:
        """Delete a task permanently."""
        self._store.tasks.pop(task_id, None)

    async def list(self, lead_id: Optional[str] = None) -> list[Task]:
        """List tasks ordered by due date."""
        tasks = [
            replace(task)
            for task in self._store.tasks.values()
            if lead_id is None or task.lead_id == lead_id
        ]
        tasks.sort(key=due_date_order)
        return tasks
