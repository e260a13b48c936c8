"""Error types raised by taskboard and rendered as ``{"error": message}``."""


class TaskboardError(Exception):
    """Base class for client-facing errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """Request input failed a validation rule."""

    status_code = 400


class NotFoundError(TaskboardError):
    """No task with the requested ID exists."""

    status_code = 404

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)
