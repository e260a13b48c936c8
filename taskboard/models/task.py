"""Task data model for taskboard."""

from datetime import datetime
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Task(BaseModel):
    """Canonical Task model.

    Serialized with camelCase keys (``dueDate``, ``createdAt``, ``updatedAt``).
    """

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., description="Task title (trimmed)")
    description: str = Field(..., description="Task description (trimmed)")
    status: TaskStatus = Field(TaskStatus.TODO, description="Task status")
    priority: TaskPriority = Field(TaskPriority.MEDIUM, description="Task priority")
    due_date: Optional[datetime] = Field(None, alias="dueDate", description="Optional due date")
    created_at: datetime = Field(..., alias="createdAt", description="Task creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Task last update timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True


class TaskPatch(BaseModel):
    """Partial update for a task.

    Presence is tracked separately from value: only fields that were
    explicitly set (``model_fields_set``) are applied. An explicitly set
    ``due_date`` of None clears the stored due date, an unset one keeps it.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True
