"""Workspace: one section store, one task store and the services over them.

Stores are never reached through module globals in the core. A workspace is
created explicitly and handed to whatever consumes it. All four objects share
a single re-entrant lock, so multi-step operations such as
``SectionService.delete_section`` run without interleaving with other
commands.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from functools import lru_cache

from taskshelf.adapters.memory import MemorySectionRepository, MemoryTaskRepository
from taskshelf.models import INBOX_SECTION_TITLE
from taskshelf.repositories import SectionRepository, TaskRepository
from taskshelf.services.section_service import SectionService
from taskshelf.services.task_service import TaskService


@dataclass
class Workspace:
    """Container wiring repositories to services."""

    section_repository: SectionRepository
    task_repository: TaskRepository
    lock: threading.RLock = field(default_factory=threading.RLock)
    section_service: SectionService = field(init=False)
    task_service: TaskService = field(init=False)

    def __post_init__(self) -> None:
        self.section_service = SectionService(
            self.section_repository, self.task_repository, self.lock
        )
        self.task_service = TaskService(self.task_repository, self.lock)


def create_workspace(default_section_title: str = INBOX_SECTION_TITLE) -> Workspace:
    """Build an empty in-memory workspace holding only the inbox section."""
    lock = threading.RLock()
    return Workspace(
        section_repository=MemorySectionRepository(default_section_title, lock=lock),
        task_repository=MemoryTaskRepository(lock=lock),
        lock=lock,
    )


@lru_cache(maxsize=1)
def get_workspace() -> Workspace:
    """Return the workspace for this CLI process.

    Only the command layer uses this; it lives as long as the process (one
    command, or a whole ``taskshelf shell`` session).
    """
    from taskshelf.config import get_config_manager

    config = get_config_manager().config
    return create_workspace(config.workspace.default_section_title)
