"""Task creation factory for taskboard.

This module centralizes task creation and patch merging so defaults,
trimming and timestamps are applied the same way everywhere.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from taskboard.models.task import Task, TaskPatch, TaskPriority, TaskStatus
from taskboard.models.constants import DEFAULT_PRIORITY, DEFAULT_STATUS
from taskboard.validation.dates import parse_due_date, utc_now
from taskboard.validation.rules import is_given


def create_task_defaults() -> Dict[str, Any]:
    """Get default task values as a dictionary.

    Returns:
        Dictionary with default task field values using constants
    """
    return {
        "status": DEFAULT_STATUS,
        "priority": DEFAULT_PRIORITY,
        "due_date": None,
    }


def create_task_base(
    title: str,
    description: str,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    due_date: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Task:
    """Create a task with defaults, allowing overrides.

    Assigns a fresh UUID4 id and sets ``created_at`` and ``updated_at`` to the
    same instant. Title and description are stored trimmed.

    Args:
        title: Task title (required, already validated)
        description: Task description (required, already validated)
        status: Task status (defaults to TODO)
        priority: Task priority (defaults to MEDIUM)
        due_date: Optional due date
        now: Creation timestamp (defaults to current UTC time)

    Returns:
        Task object with defaults applied
    """
    now = now or utc_now()
    defaults = create_task_defaults()

    return Task(
        id=str(uuid.uuid4()),
        title=title.strip(),
        description=description.strip(),
        status=status if status else defaults["status"],
        priority=priority if priority else defaults["priority"],
        due_date=due_date if due_date is not None else defaults["due_date"],
        created_at=now,
        updated_at=now,
    )


def create_task_from_payload(payload: Mapping[str, Any], now: Optional[datetime] = None) -> Task:
    """Build a new task from a validated create request body."""
    raw_due_date = payload.get("dueDate")
    return create_task_base(
        title=payload["title"],
        description=payload["description"],
        status=payload.get("status") if is_given(payload.get("status")) else None,
        priority=payload.get("priority") if is_given(payload.get("priority")) else None,
        due_date=parse_due_date(raw_due_date) if is_given(raw_due_date) else None,
        now=now,
    )


def build_patch(payload: Mapping[str, Any]) -> TaskPatch:
    """Build a TaskPatch from a validated update request body.

    Only keys present in the body are set on the patch. An unsupplied ``dueDate``
    (null, empty string, 0) becomes an explicit None, which clears the stored value.
    """
    fields: Dict[str, Any] = {}
    if "title" in payload:
        fields["title"] = payload["title"]
    if "description" in payload:
        fields["description"] = payload["description"]
    # An unsupplied status/priority leaves the stored value in place
    if is_given(payload.get("status")):
        fields["status"] = payload["status"]
    if is_given(payload.get("priority")):
        fields["priority"] = payload["priority"]
    if "dueDate" in payload:
        raw_due_date = payload["dueDate"]
        fields["due_date"] = parse_due_date(raw_due_date) if is_given(raw_due_date) else None
    return TaskPatch(**fields)


def apply_patch(task: Task, patch: TaskPatch, now: Optional[datetime] = None) -> Task:
    """Merge a patch into a task, returning a new Task.

    ``id`` and ``created_at`` are preserved; ``updated_at`` is refreshed.
    Fields not set on the patch keep their current values.
    """
    changes: Dict[str, Any] = {}
    for name in patch.model_fields_set:
        value = getattr(patch, name)
        if name in ("title", "description"):
            value = value.strip()
        changes[name] = value

    now = now or utc_now()
    changes["updated_at"] = max(now, task.created_at)
    return Task(**{**task.model_dump(), **changes})
