import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from domain.entities import Task

logger = logging.getLogger(__name__)

SAMPLE_TASKS = [
    ("Learn FastAPI", "Study the FastAPI web framework"),
    ("Deploy to Railway", "Deploy the task API to the Railway platform"),
]


class TaskStore:
    """In-memory, insertion-ordered task collection.

    Ids come from a counter that only moves forward, so a deleted id is
    never handed out again. Every public method holds ``_lock`` and returns
    copies, never the stored objects.
    """

    def __init__(self, seed: bool = False):
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()
        if seed:
            self.seed_sample_data()

    @property
    def next_id(self) -> int:
        return self._next_id

    def seed_sample_data(self):
        for title, description in SAMPLE_TASKS:
            self.add_task(Task(title=title, description=description))
        logger.info(f"Seeded {len(SAMPLE_TASKS)} sample tasks")

    def add_task(self, task: Task) -> Task:
        with self._lock:
            stored = replace(
                task,
                id=self._next_id,
                created_at=datetime.now(timezone.utc),
            )
            self._next_id += 1
            self._tasks.append(stored)
            return replace(stored)

    def get_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            return replace(self._tasks[index])

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def update_task(self, task_id: int, title: Optional[str], description: Optional[str], completed: bool) -> Optional[Task]:
        """Fields passed as None keep their stored value."""
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            task = self._tasks[index]
            if title is not None:
                task.title = title
            if description is not None:
                task.description = description
            task.completed = completed
            return replace(task)

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return False
            del self._tasks[index]
            return True

    def clear(self):
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # Callers must hold the lock.
    def _index_of(self, task_id: int) -> Optional[int]:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None
