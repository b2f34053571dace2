"""Section service - Business logic for section operations."""

from __future__ import annotations

import logging
import threading

from taskshelf.models import (
    INBOX_SECTION_ID,
    NotFoundError,
    Section,
    SectionCreate,
    SectionUpdate,
    TaskUpdate,
)
from taskshelf.repositories import SectionRepository, TaskRepository
from taskshelf.services.projection import SectionSummary, section_summaries

logger = logging.getLogger(__name__)


class SectionService:
    """Service for section business logic.

    Owns the one rule that spans both stores: a section's tasks are moved to
    the inbox before the section disappears.
    """

    def __init__(
        self,
        section_repository: SectionRepository,
        task_repository: TaskRepository,
        lock: threading.RLock | None = None,
    ):
        """Initialize the section service.

        Args:
            section_repository: SectionRepository implementation
            task_repository: TaskRepository implementation, used for
                reassignment on delete
            lock: Lock shared with both repositories. Holding it makes the
                reassign-then-delete sequence atomic for other callers.
        """
        self.repository = section_repository
        self.task_repository = task_repository
        self._lock = lock or threading.RLock()

    def list_sections(self) -> list[Section]:
        """List all sections in creation order, inbox first."""
        return self.repository.list_all()

    def list_summaries(self) -> list[SectionSummary]:
        """List sections with the number of tasks in each."""
        with self._lock:
            return section_summaries(
                self.repository.list_all(), self.task_repository.list_all()
            )

    def get_section(self, section_id: str) -> Section:
        """Get a specific section by ID.

        Raises:
            NotFoundError: If the section does not exist
        """
        return self.repository.get(section_id)

    def create_section(self, title: str) -> Section:
        """Append a new section.

        Args:
            title: Section title; callers reject empty titles

        Returns:
            Created Section object
        """
        return self.repository.add(SectionCreate(title=title))

    def rename_section(self, section_id: str, title: str) -> Section:
        """Change a section's title. The inbox may be renamed too.

        Raises:
            NotFoundError: If the section does not exist
        """
        return self.repository.update(section_id, SectionUpdate(title=title))

    def delete_section(self, section_id: str) -> int:
        """Delete a section after moving its tasks to the inbox.

        Tasks that vanish between listing and reassignment are skipped.
        Deleting the inbox does nothing.

        Args:
            section_id: Section to delete

        Returns:
            Number of tasks moved to the inbox
        """
        if section_id == INBOX_SECTION_ID:
            logger.info("Ignoring request to delete the inbox section")
            return 0

        with self._lock:
            moved = 0
            for task in self.task_repository.list_by_section(section_id):
                try:
                    self.task_repository.update(
                        task.id, TaskUpdate.from_task(task, section_id=INBOX_SECTION_ID)
                    )
                except NotFoundError:
                    logger.debug("Task %s disappeared before reassignment", task.id)
                    continue
                moved += 1

            removed = self.repository.delete(section_id)

        logger.info(
            "Section delete id=%s removed=%s tasks_moved=%d", section_id, removed, moved
        )
        return moved
