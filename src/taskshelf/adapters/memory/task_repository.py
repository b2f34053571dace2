"""In-memory implementation of TaskRepository."""

from __future__ import annotations

import logging
import threading

from taskshelf.adapters.memory.notifier import ChangeNotifier
from taskshelf.adapters.memory.utils import find_index, generate_uuid
from taskshelf.models import NotFoundError, Task, TaskCreate, TaskUpdate
from taskshelf.repositories import Listener, TaskRepository

logger = logging.getLogger(__name__)


class MemoryTaskRepository(TaskRepository):
    """Task store backed by a list kept most-recent-first."""

    def __init__(self, lock: threading.RLock | None = None):
        """Initialize the task store.

        Args:
            lock: Optional lock shared with other stores. If None, the store
                creates its own.
        """
        self._lock = lock or threading.RLock()
        self._tasks: list[Task] = []
        self._notifier = ChangeNotifier()

    def subscribe(self, listener: Listener) -> None:
        self._notifier.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._notifier.unsubscribe(listener)

    def _index_of(self, task_id: str) -> int:
        index = find_index(self._tasks, task_id)
        if index is None:
            raise NotFoundError("task", task_id)
        return index

    def list_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def list_by_section(self, section_id: str) -> list[Task]:
        with self._lock:
            return [task for task in self._tasks if task.section_id == section_id]

    def get(self, task_id: str) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def add(self, task_data: TaskCreate) -> Task:
        task = Task(
            id=generate_uuid(),
            title=task_data.title,
            description=task_data.description,
            priority=task_data.priority,
            completed=False,
            section_id=task_data.section_id,
            reminder=task_data.reminder,
        )
        with self._lock:
            self._tasks.insert(0, task)
            logger.debug(
                "Task added id=%s section=%s priority=%s",
                task.id,
                task.section_id,
                task.priority.value,
            )
            self._notifier.notify()
            return task

    def update(self, task_id: str, updates: TaskUpdate) -> Task:
        with self._lock:
            index = self._index_of(task_id)
            task = self._tasks[index].model_copy(update=updates.model_dump())
            self._tasks[index] = task
            logger.debug("Task updated id=%s section=%s", task_id, task.section_id)
            self._notifier.notify()
            return task

    def toggle_completed(self, task_id: str) -> Task:
        with self._lock:
            index = self._index_of(task_id)
            current = self._tasks[index]
            task = current.model_copy(update={"completed": not current.completed})
            self._tasks[index] = task
            logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
            self._notifier.notify()
            return task

    def delete(self, task_id: str) -> bool:
        with self._lock:
            index = find_index(self._tasks, task_id)
            if index is None:
                return False
            del self._tasks[index]
            logger.debug("Task deleted id=%s", task_id)
            self._notifier.notify()
            return True
