"""Task service - Business logic for task operations.

This service layer sits between commands and repositories, providing
a clean API for task-related business logic.
"""

from __future__ import annotations

import threading
from datetime import datetime

from taskshelf.models import (
    INBOX_SECTION_ID,
    Priority,
    Task,
    TaskCreate,
    TaskUpdate,
)
from taskshelf.repositories import TaskRepository
from taskshelf.services.projection import matches_query


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(
        self, task_repository: TaskRepository, lock: threading.RLock | None = None
    ):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
            lock: Lock shared with the repository, held across read-modify-write
                operations such as move_task()
        """
        self.repository = task_repository
        self._lock = lock or threading.RLock()

    def list_tasks(self, *, section_id: str | None = None) -> list[Task]:
        """List tasks, newest first.

        Args:
            section_id: Only return tasks stored under this section

        Returns:
            List of Task objects
        """
        if section_id is None:
            return self.repository.list_all()
        return self.repository.list_by_section(section_id)

    def search(self, section_id: str, query: str) -> list[Task]:
        """Find tasks in a section whose title or description contains ``query``.

        Matching ignores case. An empty query returns the whole section.
        """
        tasks = self.repository.list_by_section(section_id)
        if not query:
            return tasks
        return [task for task in tasks if matches_query(task, query)]

    def get_task(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Raises:
            NotFoundError: If the task does not exist
        """
        return self.repository.get(task_id)

    def add_task(
        self,
        title: str,
        *,
        description: str = "",
        priority: Priority | str = Priority.LOW,
        section_id: str = INBOX_SECTION_ID,
        reminder: datetime | None = None,
    ) -> Task:
        """Create a new task at the top of the list.

        Args:
            title: Task title (callers reject empty titles)
            description: Detailed description
            priority: Priority level
            section_id: Section to file the task under
            reminder: Optional reminder timestamp

        Returns:
            Created Task object
        """
        task_data = TaskCreate(
            title=title,
            description=description,
            priority=Priority(priority),
            section_id=section_id,
            reminder=reminder,
        )
        return self.repository.add(task_data)

    def update_task(
        self,
        task_id: str,
        *,
        title: str,
        description: str,
        priority: Priority | str,
        section_id: str,
        reminder: datetime | None = None,
    ) -> Task:
        """Replace every editable field of a task.

        Raises:
            NotFoundError: If the task does not exist
        """
        updates = TaskUpdate(
            title=title,
            description=description,
            priority=Priority(priority),
            section_id=section_id,
            reminder=reminder,
        )
        return self.repository.update(task_id, updates)

    def move_task(self, task_id: str, section_id: str) -> Task:
        """Move a task to another section, leaving other fields unchanged.

        Raises:
            NotFoundError: If the task does not exist
        """
        with self._lock:
            task = self.repository.get(task_id)
            return self.repository.update(
                task_id, TaskUpdate.from_task(task, section_id=section_id)
            )

    def toggle_task(self, task_id: str) -> Task:
        """Flip a task between open and completed.

        Raises:
            NotFoundError: If the task does not exist
        """
        return self.repository.toggle_completed(task_id)

    def delete_task(self, task_id: str) -> bool:
        """Delete a task. Returns False when it was already gone."""
        return self.repository.delete(task_id)
