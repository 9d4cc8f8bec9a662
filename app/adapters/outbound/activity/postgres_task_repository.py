"""Postgres-backed task repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import TaskModel, as_utc
from app.application.errors import GatewayError
from app.application.ports.task_repository import TaskRepository
from app.domain.entities.task import Task
from app.domain.value_objects.choices import TaskType
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .task_repository import due_date_order


class PostgresTaskRepository(TaskRepository):
    """Postgres implementation of task repository."""

    def _model_to_entity(self, model: TaskModel) -> Task:
        try:
            task_type = TaskType(model.type) if model.type else None
        except ValueError:
            task_type = None
        return Task(
            id=model.id,
            lead_id=model.lead_id,
            title=model.title,
            description=model.description,
            due_date=as_utc(model.due_date),
            type=task_type,
            completed=bool(model.completed),
            completed_at=as_utc(model.completed_at),
            assigned_to=model.assigned_to,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _apply(self, task: Task, model: TaskModel) -> None:
        model.title = task.title
        model.description = task.description
        model.due_date = task.due_date
        model.type = task.type.value if task.type else None
        model.completed = task.completed
        model.completed_at = task.completed_at
        model.assigned_to = task.assigned_to
        model.updated_at = task.updated_at or datetime.now(timezone.utc)

    async def add(self, task: Task) -> None:
        """Insert a task."""
        db: Session = get_db_session()
        try:
            model = TaskModel(id=task.id, lead_id=task.lead_id, created_at=task.created_at)
            self._apply(task, model)
            db.add(model)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while creating task for lead {task.lead_id}: {str(e)}")
            raise GatewayError("No se pudo crear la tarea") from e
        finally:
            db.close()

    async def get(self, task_id: str) -> Optional[Task]:
        """Get a task by id."""
        db: Session = get_db_session()
        try:
            model = db.query(TaskModel).filter(TaskModel.id == task_id).first()
            return self._model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting task {task_id}: {str(e)}")
            raise GatewayError("No se pudo cargar la tarea") from e
        finally:
            db.close()

    async def save(self, task: Task) -> None:
        """Persist every field of an existing task."""
        db: Session = get_db_session()
        try:
            model = db.query(TaskModel).filter(TaskModel.id == task.id).first()
            if model is None:
                return
            self._apply(task, model)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving task {task.id}: {str(e)}")
            raise GatewayError("No se pudo actualizar la tarea") from e
        finally:
            db.close()

    async def delete(self, task_id: str) -> None:
        """Delete a task permanently."""
        db: Session = get_db_session()
        try:
            db.query(TaskModel).filter(TaskModel.id == task_id).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting task {task_id}: {str(e)}")
            raise GatewayError("No se pudo eliminar la tarea") from e
        finally:
            db.close()

    async def list(self, lead_id: Optional[str] = None) -> list[Task]:
        """List tasks ordered by due date (undated last)."""
        db: Session = get_db_session()
        try:
            query = db.query(TaskModel)
            if lead_id is not None:
                query = query.filter(TaskModel.lead_id == lead_id)
            tasks = [self._model_to_entity(model) for model in query.all()]
            tasks.sort(key=due_date_order)
            return tasks
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing tasks: {str(e)}")
            raise GatewayError("No se pudieron cargar las tareas") from e
        finally:
            db.close()
