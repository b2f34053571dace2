"""Utility functions for the in-memory adapter."""

from __future__ import annotations

import uuid


def generate_uuid() -> str:
    """Generate a new UUID as string.

    Returns:
        UUID string (e.g., "123e4567-e89b-12d3-a456-426614174000")
    """
    return str(uuid.uuid4())


def find_index(items: list, item_id: str) -> int | None:
    """Return the position of the element with ``id == item_id``, or None."""
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None
