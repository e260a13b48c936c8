"""Validation rules for task requests.

Each rule set is an ordered list of ``Rule`` records. Rules are evaluated in
order and the first violated rule's message is returned; nothing after it runs.
A result of None means the input is accepted.
"""

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, List, Mapping, Optional, Type

from taskboard.models.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    TASK_ID_PATTERN,
    UPDATABLE_FIELDS,
)
from taskboard.models.task import TaskPriority, TaskStatus
from taskboard.validation.dates import due_date_window, parse_due_date

Payload = Mapping[str, Any]

# Error messages
TITLE_REQUIRED = "Title is required"
TITLE_NOT_STRING = "Title must be a non-empty string"
TITLE_TOO_LONG = f"Title must not exceed {MAX_TITLE_LENGTH} characters"
DESCRIPTION_REQUIRED = "Description is required"
DESCRIPTION_NOT_STRING = "Description must be a non-empty string"
DESCRIPTION_TOO_LONG = f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters"
INVALID_STATUS = "Invalid status value. Must be one of: TODO, IN_PROGRESS, COMPLETED"
INVALID_PRIORITY = "Invalid priority value. Must be one of: LOW, MEDIUM, HIGH"
INVALID_DUE_DATE = "Invalid due date format. Use ISO 8601 format (e.g., 2026-12-31)"
HIGH_PRIORITY_DUE_DATE_REQUIRED = "High priority tasks must have a due date"
HIGH_PRIORITY_DUE_DATE_TOO_FAR = "High priority tasks must have a due date within 7 days from today"
DUE_DATE_IN_PAST = "Due date cannot be in the past"
NO_UPDATE_FIELDS = (
    "At least one field (title, description, status, priority, or dueDate) must be provided"
)
TASK_ID_REQUIRED = "Task ID is required"
INVALID_TASK_ID = "Invalid task ID format"
INVALID_BODY = "Request body must be a valid JSON object"

_TASK_ID_RE = re.compile(TASK_ID_PATTERN, re.IGNORECASE)


def is_given(value: Any) -> bool:
    """Whether a body value counts as supplied.

    Only None, False, zero, NaN and the empty string count as not supplied.
    Empty lists and objects are supplied values and get validated.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and value == value
    return True


def _always(payload: Payload) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    """A single check: ``violated`` is only consulted when ``applies`` holds."""
    message: str
    violated: Callable[[Payload], bool]
    applies: Callable[[Payload], bool] = _always


def first_violation(rules: Iterable[Rule], payload: Payload) -> Optional[str]:
    """Return the message of the first violated rule, or None."""
    return next(
        (rule.message for rule in rules if rule.applies(payload) and rule.violated(payload)),
        None,
    )


def _only_when(condition: Callable[[Payload], bool], rules: List[Rule]) -> List[Rule]:
    return [replace(rule, applies=condition) for rule in rules]


def _present(field: str) -> Callable[[Payload], bool]:
    return lambda payload: field in payload


def _blank_or_not_string(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _not_member(value: Any, enum_cls: Type[Enum]) -> bool:
    # List membership so unhashable JSON values (lists, objects) compare safely
    return value not in [member.value for member in enum_cls]


def _text_rules(field: str, not_string: str, too_long: str, limit: int) -> List[Rule]:
    return [
        Rule(not_string, lambda p: _blank_or_not_string(p.get(field))),
        # Length in code points, not UTF-16 units: astral characters count once
        Rule(too_long, lambda p: len(p[field]) > limit),
    ]


def _high_priority_rules(now: Optional[datetime]) -> List[Rule]:
    """Due date must be given and fall within [today, today + 7 days].

    An unparsable due date compares as neither too far nor in the past.
    """
    today, window_end = due_date_window(now)

    def too_far(payload: Payload) -> bool:
        due = parse_due_date(payload["dueDate"])
        return due is not None and due > window_end

    def in_past(payload: Payload) -> bool:
        due = parse_due_date(payload["dueDate"])
        return due is not None and due < today

    return [
        Rule(HIGH_PRIORITY_DUE_DATE_REQUIRED, lambda p: not is_given(p.get("dueDate"))),
        Rule(HIGH_PRIORITY_DUE_DATE_TOO_FAR, too_far),
        Rule(DUE_DATE_IN_PAST, in_past),
    ]


def create_rules(now: Optional[datetime] = None) -> List[Rule]:
    """Ordered rules for a create request."""
    def resolves_to_high(payload: Payload) -> bool:
        priority = payload.get("priority")
        resolved = priority if is_given(priority) else TaskPriority.MEDIUM.value
        return resolved == TaskPriority.HIGH.value

    return [
        Rule(TITLE_REQUIRED, lambda p: not is_given(p.get("title"))),
        *_text_rules("title", TITLE_NOT_STRING, TITLE_TOO_LONG, MAX_TITLE_LENGTH),
        Rule(DESCRIPTION_REQUIRED, lambda p: not is_given(p.get("description"))),
        *_text_rules("description", DESCRIPTION_NOT_STRING, DESCRIPTION_TOO_LONG, MAX_DESCRIPTION_LENGTH),
        Rule(INVALID_STATUS, lambda p: is_given(p.get("status")) and _not_member(p["status"], TaskStatus)),
        Rule(INVALID_PRIORITY, lambda p: is_given(p.get("priority")) and _not_member(p["priority"], TaskPriority)),
        Rule(INVALID_DUE_DATE, lambda p: is_given(p.get("dueDate")) and parse_due_date(p["dueDate"]) is None),
        *_only_when(resolves_to_high, _high_priority_rules(now)),
    ]


def update_rules() -> List[Rule]:
    """Ordered rules for an update request; every field is optional."""
    def clears_or_omits_due_date(payload: Payload) -> bool:
        return payload.get("dueDate") is None or payload.get("dueDate") == ""

    return [
        Rule(NO_UPDATE_FIELDS, lambda p: not any(field in p for field in UPDATABLE_FIELDS)),
        *_only_when(
            _present("title"),
            _text_rules("title", TITLE_NOT_STRING, TITLE_TOO_LONG, MAX_TITLE_LENGTH),
        ),
        *_only_when(
            _present("description"),
            _text_rules("description", DESCRIPTION_NOT_STRING, DESCRIPTION_TOO_LONG, MAX_DESCRIPTION_LENGTH),
        ),
        Rule(INVALID_STATUS, lambda p: _not_member(p["status"], TaskStatus), _present("status")),
        Rule(INVALID_PRIORITY, lambda p: _not_member(p["priority"], TaskPriority), _present("priority")),
        Rule(
            INVALID_DUE_DATE,
            lambda p: not clears_or_omits_due_date(p) and parse_due_date(p["dueDate"]) is None,
        ),
    ]


def validate_create(payload: Payload, now: Optional[datetime] = None) -> Optional[str]:
    """Validate a create request body."""
    return first_violation(create_rules(now), payload)


def validate_update(payload: Payload) -> Optional[str]:
    """Validate an update request body (field shapes only)."""
    return first_violation(update_rules(), payload)


def validate_high_priority_constraint(payload: Payload, now: Optional[datetime] = None) -> Optional[str]:
    """Check the due-date window when the request body sets priority to HIGH.

    Only the request body is inspected: the stored task's due date does not
    satisfy the constraint, so ``priority: HIGH`` must come with a fresh
    ``dueDate`` inside the window.
    """
    def sets_high(payload: Payload) -> bool:
        return payload.get("priority") == TaskPriority.HIGH.value

    return first_violation(_only_when(sets_high, _high_priority_rules(now)), payload)


def validate_task_id(task_id: Optional[str]) -> Optional[str]:
    """Validate a path-supplied task identifier (UUID text form, any case)."""
    if not task_id:
        return TASK_ID_REQUIRED
    if not isinstance(task_id, str) or not _TASK_ID_RE.fullmatch(task_id):
        return INVALID_TASK_ID
    return None
