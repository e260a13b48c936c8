"""Request/response models for the task endpoints."""

from typing import List
from pydantic import BaseModel, Field

from taskboard.models.task import Task


class TaskListResponse(BaseModel):
    """Response for listing tasks."""
    count: int
    tasks: List[Task]


class TaskDeletedResponse(BaseModel):
    """Response for deleting a single task."""
    message: str = "Task deleted successfully"
    task: Task


class TasksClearedResponse(BaseModel):
    """Response for deleting all tasks."""
    message: str = "All tasks deleted successfully"
    count: int


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str


class HealthResponse(BaseModel):
    """Response for the health check."""
    status: str = "healthy"
    version: str
    task_count: int = Field(..., alias="taskCount", description="Number of stored tasks")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
