import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tasktracker.models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Data access for the tasks table.

    Every write commits immediately, one statement per call.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, task: Task) -> Task:
        """Insert a new task or flush changes to a loaded one, then refresh it."""
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.debug("Saved %r", task)
        return task

    def find_all(self) -> list[Task]:
        return list(self.db.scalars(select(Task)))

    def find_by_id(self, task_id: int) -> Task | None:
        return self.db.get(Task, task_id)

    def exists_by_id(self, task_id: int) -> bool:
        return self.find_by_id(task_id) is not None

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Task)) or 0

    def delete_by_id(self, task_id: int) -> None:
        task = self.find_by_id(task_id)
        if task is None:
            logger.debug("Delete skipped, no task id=%s", task_id)
            return
        self.db.delete(task)
        self.db.commit()
        logger.debug("Deleted task id=%s", task_id)

    def find_by_completed(self, completed: bool) -> list[Task]:
        return list(self.db.scalars(select(Task).where(Task.completed == completed)))

    def find_by_title_containing_ignore_case(self, text: str) -> list[Task]:
        stmt = select(Task).where(
            func.lower(Task.title).contains(text.lower(), autoescape=True)
        )
        return list(self.db.scalars(stmt))
