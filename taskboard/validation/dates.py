"""Due-date parsing and the high-priority due-date window."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Tuple

from taskboard.models.constants import HIGH_PRIORITY_WINDOW_DAYS

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_due_date(value: Any) -> Optional[datetime]:
    """Parse a client-supplied due date.

    Accepts ISO 8601 strings (date-only or date-time, trailing ``Z`` allowed)
    and JSON numbers as milliseconds since the Unix epoch. Naive values are
    read as UTC.

    Args:
        value: Raw value from the request body

    Returns:
        Timezone-aware datetime, or None if the value is not a valid date
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return _EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def start_of_today(now: Optional[datetime] = None) -> datetime:
    """Midnight (UTC) of the current day."""
    now = now or utc_now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)


def due_date_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Inclusive window a high priority task's due date must fall in.

    Returns:
        Tuple of (today at 00:00, today at 00:00 + HIGH_PRIORITY_WINDOW_DAYS)
    """
    today = start_of_today(now)
    return today, today + timedelta(days=HIGH_PRIORITY_WINDOW_DAYS)
