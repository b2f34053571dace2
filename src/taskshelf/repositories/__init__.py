"""Repository interfaces for Taskshelf.

This package contains abstract base classes (ABCs) that define the contracts
for section and task stores. These are the "Ports" in the Hexagonal
Architecture.

Implementations (Adapters) are in:
- taskshelf.adapters.memory (in-process stores)
"""

from .repository import (
    Listener,
    ObservableRepository,
    SectionRepository,
    TaskRepository,
)

__all__ = [
    "Listener",
    "ObservableRepository",
    "SectionRepository",
    "TaskRepository",
]
