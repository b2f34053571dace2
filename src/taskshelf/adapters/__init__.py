"""Adapters module - Repository implementations.

This package contains concrete implementations (adapters) for the repository interfaces:
- memory: in-process stores holding state in Python lists
"""

from .memory import MemorySectionRepository, MemoryTaskRepository

__all__ = [
    "MemorySectionRepository",
    "MemoryTaskRepository",
]
