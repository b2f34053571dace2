"""In-memory adapter module - process-local stores for sections and tasks."""

from taskshelf.adapters.memory.notifier import ChangeNotifier
from taskshelf.adapters.memory.section_repository import MemorySectionRepository
from taskshelf.adapters.memory.task_repository import MemoryTaskRepository

__all__ = [
    "ChangeNotifier",
    "MemorySectionRepository",
    "MemoryTaskRepository",
]
