from typing import List, Optional, Union

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from taskboard.errors import NotFoundError, ValidationError
from taskboard.models.task import Task, TaskStatus
from taskboard.repositories.base import Repository
from taskboard.schemas.task import TaskOut, TaskUpdate

log = structlog.get_logger()


def _max_position_plus_one(session: Session, project_id: int, status: TaskStatus) -> int:
    highest = session.scalar(
        select(func.max(Task.position)).where(
            Task.project_id == project_id,
            Task.status == status.value,
        )
    )
    return 0 if highest is None else highest + 1


class TaskRepository(Repository):
    """Tasks grouped into status columns, ordered by position inside a column.

    Positions are append-only per (project, status): a task entering a column,
    by creation or by a status change, lands one past the current maximum.
    Deleting a task leaves a gap that is never closed. The max lookup and the
    write that uses it share one transaction.
    """

    def list_tasks(self, project_id: int) -> List[TaskOut]:
        with self._transaction() as session:
            rows = session.scalars(
                select(Task)
                .where(Task.project_id == project_id)
                .order_by(Task.status, Task.position, Task.id)
            )
            return [TaskOut.model_validate(row) for row in rows]

    def next_position(self, project_id: int, status: Union[TaskStatus, str]) -> int:
        column = TaskStatus.parse(status)
        if column is None:
            raise ValidationError("invalid task status")
        with self._transaction() as session:
            return _max_position_plus_one(session, project_id, column)

    def create_task(
        self,
        project_id: int,
        title: str,
        description: Optional[str] = "",
        status: Optional[str] = None,
    ) -> TaskOut:
        title = (title or "").strip()
        if not title:
            raise ValidationError("task title must not be empty")
        column = TaskStatus.parse(status) or TaskStatus.TODO

        with self._transaction() as session:
            task = Task(
                project_id=project_id,
                title=title,
                description=(description or "").strip(),
                status=column.value,
                position=_max_position_plus_one(session, project_id, column),
            )
            session.add(task)
            session.flush()
            session.refresh(task)
            created = TaskOut.model_validate(task)
        log.info(
            "task_created",
            task_id=created.id,
            project_id=project_id,
            status=column.value,
            position=created.position,
        )
        return created

    def get_task(self, task_id: int) -> TaskOut:
        with self._transaction() as session:
            return TaskOut.model_validate(self._load(session, task_id))

    def update_task(self, task_id: int, changes: TaskUpdate) -> TaskOut:
        with self._transaction() as session:
            task = self._load(session, task_id)
            current = TaskStatus(task.status)

            if changes.title is not None and changes.title.strip():
                task.title = changes.title.strip()
            if changes.description is not None:
                task.description = changes.description.strip()

            target = TaskStatus.parse(changes.status) or current
            if target != current:
                task.position = _max_position_plus_one(session, task.project_id, target)
                task.status = target.value
                log.info(
                    "task_moved",
                    task_id=task_id,
                    from_status=current.value,
                    to_status=target.value,
                    position=task.position,
                )

            task.updated_at = func.now()
            session.flush()
            session.refresh(task)
            return TaskOut.model_validate(task)

    def delete_task(self, task_id: int) -> None:
        with self._transaction() as session:
            result = session.execute(delete(Task).where(Task.id == task_id))
            if result.rowcount == 0:
                raise NotFoundError("task not found")
        log.info("task_deleted", task_id=task_id)

    @staticmethod
    def _load(session: Session, task_id: int) -> Task:
        task = session.get(Task, task_id)
        if task is None:
            raise NotFoundError("task not found")
        return task
