"""Task repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.task import Task


class TaskRepository(ABC):
    """Port interface for lead tasks."""

    @abstractmethod
    async def add(self, task: Task) -> None:
        """Insert a task."""
        pass

    @abstractmethod
    async def get(self, task_id: str) -> Optional[Task]:
        """Get a task by id, or None if not found."""
        pass

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Persist every field of an existing task."""
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """Delete a task permanently."""
        pass

    @abstractmethod
    async def list(self, lead_id: Optional[str] = None) -> list[Task]:
        """
        List tasks ordered by due date ascending (undated last).

        Args:
            lead_id: Restrict to the tasks of one lead

        Returns:
            List of tasks
        """
        pass
