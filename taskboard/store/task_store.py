"""In-memory task store."""

import logging
import threading
from datetime import datetime
from typing import List, Optional

from taskboard.errors import NotFoundError
from taskboard.models.task import Task, TaskPatch
from taskboard.models.task_factory import apply_patch

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered in-memory collection of tasks.

    Insertion order is the canonical enumeration order. Every operation holds
    one lock, since FastAPI runs sync endpoints on a thread pool.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._lock = threading.Lock()

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFoundError()

    def insert(self, task: Task) -> Task:
        """Append a new task."""
        with self._lock:
            self._tasks.append(task)
        logger.debug(f"Created task {task.id}: {task.title[:50]}")
        return task

    def find_by_id(self, task_id: str) -> Task:
        """Get task by ID.

        Raises:
            NotFoundError: If no task has this ID
        """
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def update(self, task_id: str, patch: TaskPatch, now: Optional[datetime] = None) -> Task:
        """Merge a patch into the task with this ID and return the result.

        Raises:
            NotFoundError: If no task has this ID
        """
        with self._lock:
            index = self._index_of(task_id)
            updated = apply_patch(self._tasks[index], patch, now=now)
            self._tasks[index] = updated
        logger.debug(f"Updated task {task_id}: fields={sorted(patch.model_fields_set)}")
        return updated

    def delete(self, task_id: str) -> Task:
        """Remove the task with this ID and return it.

        Raises:
            NotFoundError: If no task has this ID
        """
        with self._lock:
            removed = self._tasks.pop(self._index_of(task_id))
        logger.debug(f"Deleted task {task_id}")
        return removed

    def delete_all(self) -> int:
        """Remove every task and return how many were removed."""
        with self._lock:
            count = len(self._tasks)
            self._tasks = []
        logger.debug(f"Deleted all tasks ({count})")
        return count

    def all(self) -> List[Task]:
        """Return all tasks in insertion order (a copy of the list)."""
        with self._lock:
            return list(self._tasks)

    def count(self) -> int:
        """Number of stored tasks."""
        with self._lock:
            return len(self._tasks)
