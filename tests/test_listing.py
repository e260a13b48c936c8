"""Tests for status filtering and due-date ordering."""

import uuid
from datetime import datetime, timezone

from taskboard.engine.listing import filter_by_status, sort_by_due_date, list_view
from taskboard.models.task import Task, TaskStatus


def _task(sample_task_base, title, status=TaskStatus.TODO, due_date=None):
    return Task(**{
        **sample_task_base,
        "id": str(uuid.uuid4()),
        "title": title,
        "status": status,
        "due_date": due_date,
    })


def _day(day):
    return datetime(2026, 5, day, tzinfo=timezone.utc)


class TestFilterByStatus:
    """Test status filtering."""

    def test_case_insensitive(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "a", TaskStatus.COMPLETED),
            _task(sample_task_base, "b", TaskStatus.TODO),
            _task(sample_task_base, "c", TaskStatus.COMPLETED),
        ]
        assert [t.title for t in filter_by_status(tasks, "completed")] == ["a", "c"]
        assert [t.title for t in filter_by_status(tasks, "In_Progress")] == []

    def test_no_status_keeps_everything(self, sample_task_base):
        tasks = [_task(sample_task_base, "a"), _task(sample_task_base, "b")]
        assert filter_by_status(tasks, None) == tasks
        assert filter_by_status(tasks, "") == tasks

    def test_unknown_status_matches_nothing(self, sample_task_base):
        assert filter_by_status([_task(sample_task_base, "a")], "archived") == []


class TestSortByDueDate:
    """Test due-date ordering."""

    def test_ascending_puts_undated_last(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "none-1"),
            _task(sample_task_base, "may-9", due_date=_day(9)),
            _task(sample_task_base, "may-2", due_date=_day(2)),
            _task(sample_task_base, "none-2"),
            _task(sample_task_base, "may-5", due_date=_day(5)),
        ]
        ordered = sort_by_due_date(tasks, "dueDate:asc")
        assert [t.title for t in ordered] == ["may-2", "may-5", "may-9", "none-1", "none-2"]

    def test_descending_puts_undated_last(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "none-1"),
            _task(sample_task_base, "may-2", due_date=_day(2)),
            _task(sample_task_base, "may-9", due_date=_day(9)),
        ]
        ordered = sort_by_due_date(tasks, "dueDate:desc")
        assert [t.title for t in ordered] == ["may-9", "may-2", "none-1"]

    def test_ties_keep_insertion_order(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "first", due_date=_day(3)),
            _task(sample_task_base, "second", due_date=_day(3)),
        ]
        assert [t.title for t in sort_by_due_date(tasks, "dueDate:desc")] == ["first", "second"]

    def test_unrecognized_sort_keeps_order(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "b", due_date=_day(9)),
            _task(sample_task_base, "a", due_date=_day(1)),
        ]
        assert sort_by_due_date(tasks, "title:asc") == tasks
        assert sort_by_due_date(tasks, None) == tasks

    def test_does_not_mutate_input(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "b", due_date=_day(9)),
            _task(sample_task_base, "a", due_date=_day(1)),
        ]
        original = list(tasks)
        sort_by_due_date(tasks, "dueDate:asc")
        assert tasks == original


def test_list_view_filters_then_sorts(sample_task_base):
    tasks = [
        _task(sample_task_base, "todo-late", TaskStatus.TODO, _day(20)),
        _task(sample_task_base, "done", TaskStatus.COMPLETED, _day(1)),
        _task(sample_task_base, "todo-early", TaskStatus.TODO, _day(4)),
    ]
    view = list_view(tasks, status="todo", sort_by="dueDate:asc")
    assert [t.title for t in view] == ["todo-early", "todo-late"]
