"""Pytest fixtures and configuration for taskboard tests."""

import pytest
import uuid
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from taskboard.api.app import create_app
from taskboard.config import Settings
from taskboard.models.task import Task, TaskStatus, TaskPriority
from taskboard.store.task_store import TaskStore


@pytest.fixture
def fixed_now():
    """A pinned clock for time-sensitive rules: 2026-03-10 15:30 UTC."""
    return datetime(2026, 3, 10, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def task_store():
    """Fresh, empty TaskStore for each test."""
    return TaskStore()


@pytest.fixture
def test_settings():
    return Settings(
        host="127.0.0.1",
        port=3000,
        reload=False,
        log_level="DEBUG",
        cors_origins=("*",),
        api_prefix="/api",
    )


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    now = datetime.now(timezone.utc)
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "description": "Test description",
        "status": TaskStatus.TODO,
        "priority": TaskPriority.MEDIUM,
        "due_date": None,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def valid_payload():
    """Minimal valid create request body."""
    return {"title": "Buy milk", "description": "2%"}


@pytest.fixture
def test_client(task_store, test_settings):
    """FastAPI test client serving ``task_store``."""
    app = create_app(store=task_store, settings=test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_task(test_client):
    """POST a task, returning the created JSON body."""
    def _create(**fields):
        body = {"title": "Task", "description": "Description"}
        body.update(fields)
        response = test_client.post("/api/tasks", json=body)
        assert response.status_code == 201, response.json()
        return response.json()
    return _create
