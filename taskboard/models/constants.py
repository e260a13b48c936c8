"""Constants for taskboard.

This module centralizes field limits and default values used throughout the application.
"""

from taskboard.models.task import TaskPriority, TaskStatus


# Task defaults
DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = TaskPriority.MEDIUM

# Field limits
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000

# High priority tasks must be due within this many days of today
HIGH_PRIORITY_WINDOW_DAYS = 7

# Canonical UUID text form (8-4-4-4-12 hex groups)
TASK_ID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"

# Fields a client may set on create/update
UPDATABLE_FIELDS = ("title", "description", "status", "priority", "dueDate")
