"""Request validation for taskboard."""

from taskboard.validation.dates import parse_due_date, due_date_window, start_of_today
from taskboard.validation.rules import (
    Rule,
    first_violation,
    is_given,
    validate_create,
    validate_update,
    validate_high_priority_constraint,
    validate_task_id,
)

__all__ = [
    "parse_due_date",
    "due_date_window",
    "start_of_today",
    "Rule",
    "first_violation",
    "is_given",
    "validate_create",
    "validate_update",
    "validate_high_priority_constraint",
    "validate_task_id",
]
