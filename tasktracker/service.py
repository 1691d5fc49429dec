from __future__ import annotations

import logging

from tasktracker.models import Task
from tasktracker.repository import TaskRepository
from tasktracker.schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found id={task_id}")
        self.task_id = task_id


class TaskService:
    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def list(self) -> list[Task]:
        return self.repository.find_all()

    def get_by_id(self, task_id: int) -> Task | None:
        return self.repository.find_by_id(task_id)

    def count(self) -> int:
        return self.repository.count()

    def create(self, data: TaskCreate) -> Task:
        task = Task(title=data.title, description=data.description, completed=data.completed)
        task = self.repository.save(task)
        logger.info("Task created id=%s title=%r", task.id, task.title)
        return task

    def update(self, task_id: int, patch: TaskUpdate) -> Task:
        """Overwrite title, description and completed; id and created_at are kept.

        completed is taken from the patch even when the caller left it out.
        """
        task = self._require(task_id)
        task.title = patch.title
        task.description = patch.description
        task.completed = patch.completed
        task = self.repository.save(task)
        logger.info("Task updated id=%s completed=%s", task.id, task.completed)
        return task

    def toggle_status(self, task_id: int) -> Task:
        task = self._require(task_id)
        task.completed = not task.completed
        task = self.repository.save(task)
        logger.info("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: int) -> None:
        self.repository.delete_by_id(task_id)
        logger.info("Task deleted id=%s", task_id)

    def list_by_status(self, completed: bool) -> list[Task]:
        return self.repository.find_by_completed(completed)

    def search_by_title(self, title: str) -> list[Task]:
        return self.repository.find_by_title_containing_ignore_case(title)

    def _require(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            logger.warning("Task not found id=%s", task_id)
            raise TaskNotFoundError(task_id)
        return task
