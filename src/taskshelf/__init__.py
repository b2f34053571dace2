"""Taskshelf - sections and tasks, managed in memory."""

__version__ = "0.1.0"
