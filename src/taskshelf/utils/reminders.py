"""Reminder presets offered when adding or editing a task.

A reminder is only a stored timestamp; nothing is scheduled.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from enum import StrEnum

EVENING = time(20, 0)
MORNING = time(9, 0)


class ReminderPreset(StrEnum):
    NONE = "none"
    TODAY_EVENING = "today-evening"
    TOMORROW = "tomorrow"
    NEXT_WEEK = "next-week"
    CUSTOM = "custom"


def resolve_reminder(
    preset: ReminderPreset | str,
    *,
    custom: datetime | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """Turn a preset into a concrete reminder timestamp.

    Args:
        preset: One of the ReminderPreset values
        custom: Explicit timestamp, required for the custom preset
        now: Reference time (defaults to the current local time)

    Returns:
        The reminder datetime, or None for the "none" preset

    Raises:
        ValueError: If the preset is unknown or custom is missing
    """
    preset = ReminderPreset(preset)
    now = now or datetime.now()
    today = now.date()

    if preset is ReminderPreset.NONE:
        return None
    if preset is ReminderPreset.TODAY_EVENING:
        return datetime.combine(today, EVENING)
    if preset is ReminderPreset.TOMORROW:
        return datetime.combine(today + timedelta(days=1), MORNING)
    if preset is ReminderPreset.NEXT_WEEK:
        return datetime.combine(today + timedelta(days=7), MORNING)
    if custom is None:
        raise ValueError("A custom reminder needs an explicit date and time")
    return custom


def format_reminder(value: datetime | None) -> str:
    """Render a reminder as ``YYYY-MM-DD HH:MM`` ("-" when unset)."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M")
