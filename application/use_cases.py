import logging
from typing import List, Optional

from domain.entities import Task
from domain.exceptions import TaskNotFoundError, ValidationError
from infrastructure.memory_store import TaskStore

logger = logging.getLogger(__name__)


class TaskUseCases:
    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, title: Optional[str], description: Optional[str] = None) -> Task:
        if not title:
            raise ValidationError("Title is required")
        task = Task(title=title, description=description or "", completed=False)
        created = self.store.add_task(task)
        logger.info(f"Created task {created.id}")
        return created

    def get_task(self, task_id: int) -> Task:
        task = self.store.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.debug(f"Fetched task {task_id}")
        return task

    def get_all_tasks(self) -> List[Task]:
        return self.store.list_tasks()

    def update_task(self, task_id: int, title: Optional[str] = None, description: Optional[str] = None, completed: bool = False) -> Task:
        """Non-empty title/description replace the stored values; completed is always written."""
        updated = self.store.update_task(
            task_id,
            title=title or None,
            description=description or None,
            completed=completed,
        )
        if updated is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Updated task {task_id}: completed = {updated.completed}")
        return updated

    def delete_task(self, task_id: int) -> None:
        if not self.store.delete_task(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"Deleted task {task_id}")
