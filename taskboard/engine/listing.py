"""Filtering and ordering for task listings.

Derives a view over the store's contents: an optional status filter, then an
optional due-date ordering. The input list is never modified.
"""

from typing import List, Optional
from taskboard.models.task import Task

SORT_DUE_DATE_ASC = "dueDate:asc"
SORT_DUE_DATE_DESC = "dueDate:desc"


def filter_by_status(tasks: List[Task], status: Optional[str]) -> List[Task]:
    """Keep tasks whose status matches ``status`` case-insensitively.

    An empty or missing status applies no filter. A status that is not one
    of the enum values matches nothing.
    """
    if not status:
        return list(tasks)
    wanted = status.upper()
    return [task for task in tasks if task.status == wanted]


def sort_by_due_date(tasks: List[Task], sort_by: Optional[str]) -> List[Task]:
    """Order tasks by due date.

    Tasks without a due date go after all tasks with one, in either
    direction. Ties keep insertion order. Unrecognized ``sort_by`` values
    leave the order unchanged.

    Args:
        tasks: Tasks to order
        sort_by: ``dueDate:asc`` or ``dueDate:desc``

    Returns:
        New list in the requested order
    """
    if sort_by not in (SORT_DUE_DATE_ASC, SORT_DUE_DATE_DESC):
        return list(tasks)
    descending = sort_by == SORT_DUE_DATE_DESC
    return sorted(tasks, key=lambda task: _due_date_sort_key(task, descending))


def _due_date_sort_key(task: Task, descending: bool) -> tuple:
    """Sort key: (has_due_date: 0 or 1, signed timestamp)."""
    if task.due_date:
        timestamp = task.due_date.timestamp()
        return (0, -timestamp if descending else timestamp)
    return (1, 0.0)


def list_view(tasks: List[Task], status: Optional[str] = None, sort_by: Optional[str] = None) -> List[Task]:
    """Apply the status filter, then the due-date ordering."""
    return sort_by_due_date(filter_by_status(tasks, status), sort_by)
