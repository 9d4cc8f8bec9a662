"""Task entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from app.domain.value_objects.choices import TaskType


@dataclass
class Task:
    """Scheduled follow-up action tied to a lead."""

    lead_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    type: Optional[TaskType] = None
    completed: bool = False
    completed_at: Optional[datetime] = None
    assigned_to: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def state(self) -> str:
        """Get the lifecycle state ('pending' or 'completed')."""
        return "completed" if self.completed else "pending"

    def complete(self, now: Optional[datetime] = None) -> None:
        """
        Mark the task as completed.

        Completing an already completed task keeps its completion timestamp.

        Args:
            now: Completion timestamp (defaults to current UTC time)
        """
        if self.completed and self.completed_at is not None:
            return
        moment = now or datetime.now(timezone.utc)
        self.completed = True
        self.completed_at = moment
        self.updated_at = moment

    def reopen(self) -> None:
        """Move the task back to pending."""
        self.completed = False
        self.completed_at = None
        self.updated_at = datetime.now(timezone.utc)

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """Check whether a pending task is past its due date."""
        if self.completed or self.due_date is None:
            return False
        return self.due_date < (now or datetime.now(timezone.utc))
