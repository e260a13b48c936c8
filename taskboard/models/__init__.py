"""Data models for taskboard."""

from taskboard.models.task import Task, TaskPatch, TaskStatus, TaskPriority

__all__ = [
    "Task",
    "TaskPatch",
    "TaskStatus",
    "TaskPriority",
]
