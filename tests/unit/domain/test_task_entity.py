"""Unit tests for the task lifecycle."""

from datetime import datetime, timedelta, timezone

from app.domain.entities.task import Task
from app.domain.value_objects.choices import CommunicationType, TaskType

NOW = datetime(2025, 5, 10, 9, 0, tzinfo=timezone.utc)


def test_new_task_is_pending():
    task = Task(lead_id="lead-1", title="Llamar")
    assert task.state == "pending"
    assert task.completed_at is None


def test_complete_sets_timestamp():
    task = Task(lead_id="lead-1", title="Llamar")
    task.complete(now=NOW)
    assert task.state == "completed"
    assert task.completed_at == NOW


def test_complete_twice_keeps_first_timestamp():
    task = Task(lead_id="lead-1", title="Llamar")
    task.complete(now=NOW)
    task.complete(now=NOW + timedelta(hours=3))
    assert task.completed_at == NOW


def test_reopen_clears_completion():
    task = Task(lead_id="lead-1", title="Llamar")
    task.complete(now=NOW)
    task.reopen()
    assert task.state == "pending"
    assert task.completed_at is None


def test_is_overdue():
    task = Task(lead_id="lead-1", title="Llamar", due_date=NOW - timedelta(days=1))
    assert task.is_overdue(now=NOW)
    task.complete(now=NOW)
    assert not task.is_overdue(now=NOW)
    assert not Task(lead_id="lead-1", title="Sin fecha").is_overdue(now=NOW)


def test_task_type_maps_to_communication_type():
    assert TaskType.MEETING.as_communication_type() == CommunicationType.MEETING
    assert TaskType.CALL.as_communication_type() == CommunicationType.CALL


def test_reopen_twice_stays_pending():
    completed = Task(lead_id="lead-1", title="Llamar")
    completed.complete(now=NOW)
    pending = Task(lead_id="lead-1", title="Enviar dossier")

    for task in (completed, pending):
        task.reopen()
        assert task.completed is False
        assert task.completed_at is None
        task.reopen()
        assert task.completed is False
        assert task.completed_at is None
