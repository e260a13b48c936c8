"""Listing engine for taskboard."""

from taskboard.engine.listing import (
    filter_by_status,
    sort_by_due_date,
    list_view,
    SORT_DUE_DATE_ASC,
    SORT_DUE_DATE_DESC,
)

__all__ = [
    "filter_by_status",
    "sort_by_due_date",
    "list_view",
    "SORT_DUE_DATE_ASC",
    "SORT_DUE_DATE_DESC",
]
