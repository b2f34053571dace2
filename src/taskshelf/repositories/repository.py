"""Repository abstraction layer for Taskshelf.

This module defines the abstract base classes (interfaces) for the section
and task stores, following the hexagonal architecture (Ports & Adapters)
pattern.

Every mutating operation notifies the store's subscribers once it has
succeeded. Listeners receive no payload; they re-read the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from taskshelf.models import (
    Section,
    SectionCreate,
    SectionUpdate,
    Task,
    TaskCreate,
    TaskUpdate,
)

Listener = Callable[[], None]


class ObservableRepository(ABC):
    """Change-notification half of a repository contract."""

    @abstractmethod
    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every successful mutation.

        Args:
            listener: Zero-argument callable
        """
        raise NotImplementedError(
            "ObservableRepository.subscribe() must be implemented by adapter"
        )

    @abstractmethod
    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered callback.

        Unknown listeners are ignored.

        Args:
            listener: Callable passed to subscribe()
        """
        raise NotImplementedError(
            "ObservableRepository.unsubscribe() must be implemented by adapter"
        )


class SectionRepository(ObservableRepository):
    """Abstract base class for section operations.

    Implementations always contain the default inbox section.
    """

    @abstractmethod
    def list_all(self) -> list[Section]:
        """List all sections in creation order.

        Returns:
            Snapshot list of Section objects, inbox first
        """
        raise NotImplementedError(
            "SectionRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, section_id: str) -> Section:
        """Get a specific section by ID.

        Args:
            section_id: Unique identifier for the section

        Returns:
            Section object

        Raises:
            NotFoundError: If section does not exist
        """
        raise NotImplementedError(
            "SectionRepository.get() must be implemented by adapter"
        )

    @abstractmethod
    def add(self, section_data: SectionCreate) -> Section:
        """Append a new section.

        Args:
            section_data: SectionCreate object with the title

        Returns:
            Created Section object with a freshly generated ID
        """
        raise NotImplementedError(
            "SectionRepository.add() must be implemented by adapter"
        )

    @abstractmethod
    def update(self, section_id: str, updates: SectionUpdate) -> Section:
        """Replace a section's title in place.

        Args:
            section_id: Unique identifier for the section
            updates: SectionUpdate object with the new title

        Returns:
            Updated Section object

        Raises:
            NotFoundError: If section does not exist
        """
        raise NotImplementedError(
            "SectionRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, section_id: str) -> bool:
        """Remove a section.

        Deleting the inbox or an unknown id is a no-op. This does not touch
        tasks; use SectionService.delete_section() to reassign them first.

        Args:
            section_id: Unique identifier for the section

        Returns:
            True if a section was removed
        """
        raise NotImplementedError(
            "SectionRepository.delete() must be implemented by adapter"
        )


class TaskRepository(ObservableRepository):
    """Abstract base class for task operations.

    Tasks are kept most-recent-first.
    """

    @abstractmethod
    def list_all(self) -> list[Task]:
        """List all tasks.

        Returns:
            Snapshot list of Task objects, newest first
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def list_by_section(self, section_id: str) -> list[Task]:
        """List tasks whose section_id matches exactly.

        Args:
            section_id: Section identifier; unknown ids yield an empty list

        Returns:
            Tasks in the same relative order as list_all()
        """
        raise NotImplementedError(
            "TaskRepository.list_by_section() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Get a specific task by ID.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Task object

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def add(self, task_data: TaskCreate) -> Task:
        """Create a new task and place it first.

        Args:
            task_data: TaskCreate object with task details

        Returns:
            Created Task object with generated ID and completed=False
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: str, updates: TaskUpdate) -> Task:
        """Replace all mutable fields of a task, keeping its position.

        Args:
            task_id: Unique identifier for the task
            updates: TaskUpdate object carrying the complete field set

        Returns:
            Updated Task object

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def toggle_completed(self, task_id: str) -> Task:
        """Flip a task's completion flag.

        Args:
            task_id: Unique identifier for the task

        Returns:
            Updated Task object

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.toggle_completed() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Delete a task. Unknown ids are a no-op.

        Args:
            task_id: Unique identifier for the task

        Returns:
            True if a task was removed
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )
