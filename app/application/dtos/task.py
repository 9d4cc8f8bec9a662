"""Task DTOs."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import field_validator

from app.application.dtos.base import DTO
from app.application.dtos.validators import require_min_length
from app.domain.entities.task import Task
from app.domain.value_objects.choices import CommunicationType, TaskType


class TaskCreate(DTO):
    """Input for creating a task."""

    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    type: Optional[TaskType] = None
    assigned_to: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        return require_min_length(value, 2, "El título debe tener al menos 2 caracteres.")


class TaskUpdate(DTO):
    """Input for editing a task; completion has its own operations."""

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    type: Optional[TaskType] = None
    assigned_to: Optional[str] = None

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return require_min_length(value, 2, "El título debe tener al menos 2 caracteres.")


class TaskView(DTO):
    """Task as returned to clients."""

    id: str
    lead_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    type: Optional[TaskType] = None
    completed: bool
    completed_at: Optional[datetime] = None
    assigned_to: Optional[str] = None
    state: Literal["pending", "completed"]
    lead_name: Optional[str] = None

    @classmethod
    def from_entity(cls, task: Task, lead_name: Optional[str] = None) -> "TaskView":
        """Build the view from an entity."""
        return cls(
            id=task.id,
            lead_id=task.lead_id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            type=task.type,
            completed=task.completed,
            completed_at=task.completed_at,
            assigned_to=task.assigned_to,
            state=task.state,
            lead_name=lead_name,
        )


class TaskListQuery(DTO):
    """Filters for task lists."""

    lead_id: Optional[str] = None
    state: Optional[Literal["pending", "completed"]] = None
    search: Optional[str] = None


class SuggestedCommunication(DTO):
    """Pre-filled communication offered after completing a task."""

    lead_id: str
    type: CommunicationType
    content: str


class TaskCompletionResult(DTO):
    """Result of completing a task."""

    task: TaskView
    suggested_communication: Optional[SuggestedCommunication] = None
