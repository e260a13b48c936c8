"""Tests for task creation and patch merging."""

import uuid
from datetime import datetime, timedelta, timezone

from taskboard.models.task import Task, TaskPatch, TaskStatus, TaskPriority
from taskboard.models.task_factory import (
    apply_patch,
    build_patch,
    create_task_base,
    create_task_from_payload,
)


class TestCreateTask:
    """Test building new tasks."""

    def test_defaults_and_trimming(self, fixed_now):
        task = create_task_base(title="  Buy milk ", description="\n2%\t", now=fixed_now)

        assert uuid.UUID(task.id).version == 4
        assert task.title == "Buy milk"
        assert task.description == "2%"
        assert task.status == TaskStatus.TODO
        assert task.priority == TaskPriority.MEDIUM
        assert task.due_date is None
        assert task.created_at == task.updated_at == fixed_now

    def test_ids_are_unique(self):
        ids = {create_task_base(title="t", description="d").id for _ in range(100)}
        assert len(ids) == 100

    def test_from_payload(self, fixed_now):
        task = create_task_from_payload(
            {
                "title": "Ship",
                "description": "Release",
                "status": "IN_PROGRESS",
                "priority": "HIGH",
                "dueDate": "2026-03-12",
            },
            now=fixed_now,
        )

        assert task.status == TaskStatus.IN_PROGRESS
        assert task.priority == TaskPriority.HIGH
        assert task.due_date == datetime(2026, 3, 12, tzinfo=timezone.utc)

    def test_from_payload_empty_enums_use_defaults(self):
        task = create_task_from_payload({"title": "t", "description": "d", "status": "", "priority": None})
        assert task.status == TaskStatus.TODO
        assert task.priority == TaskPriority.MEDIUM


class TestPatch:
    """Test building and applying patches."""

    def test_build_patch_tracks_presence(self):
        patch = build_patch({"title": "New", "dueDate": None})
        assert patch.model_fields_set == {"title", "due_date"}
        assert patch.due_date is None

    def test_build_patch_ignores_falsy_status_and_priority(self):
        patch = build_patch({"status": "", "priority": None, "title": "x"})
        assert patch.model_fields_set == {"title"}

    def test_build_patch_keeps_zero_due_date_as_clear(self):
        patch = build_patch({"dueDate": 0})
        assert patch.model_fields_set == {"due_date"}
        assert patch.due_date is None

    def test_apply_patch_omitted_due_date_kept(self, sample_task_base):
        due = datetime(2026, 6, 1, tzinfo=timezone.utc)
        task = Task(**{**sample_task_base, "due_date": due})

        updated = apply_patch(task, build_patch({"description": " changed "}))

        assert updated.due_date == due
        assert updated.description == "changed"
        assert updated.id == task.id

    def test_apply_patch_explicit_null_clears_due_date(self, sample_task_base):
        task = Task(**{**sample_task_base, "due_date": datetime(2026, 6, 1, tzinfo=timezone.utc)})

        updated = apply_patch(task, build_patch({"dueDate": ""}))

        assert updated.due_date is None

    def test_apply_patch_refreshes_updated_at(self, sample_task):
        later = sample_task.created_at + timedelta(seconds=1)
        updated = apply_patch(sample_task, TaskPatch(priority=TaskPriority.LOW), now=later)

        assert updated.priority == TaskPriority.LOW
        assert updated.created_at == sample_task.created_at
        assert updated.updated_at == later

    def test_updated_at_never_before_created_at(self, sample_task):
        earlier = sample_task.created_at - timedelta(hours=1)
        updated = apply_patch(sample_task, TaskPatch(title="x"), now=earlier)
        assert updated.updated_at >= updated.created_at
