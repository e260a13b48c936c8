"""FastAPI web application for taskboard."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.api.dependencies import (
    get_task_store,
    valid_task_id,
    validated_create_payload,
    validated_update_patch,
)
from taskboard.api.schemas import (
    ErrorResponse,
    HealthResponse,
    TaskDeletedResponse,
    TaskListResponse,
    TasksClearedResponse,
)
from taskboard.config import APP_VERSION, Settings, get_settings
from taskboard.engine.listing import list_view
from taskboard.errors import TaskboardError
from taskboard.models.task import Task, TaskPatch
from taskboard.models.task_factory import create_task_from_payload
from taskboard.store.task_store import TaskStore

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    404: {"model": ErrorResponse, "description": "Task not found"},
}

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "",
    status_code=201,
    response_model=Task,
    response_model_exclude_none=True,
    responses={400: ERROR_RESPONSES[400]},
)
def create_task(
    payload: Dict[str, Any] = Depends(validated_create_payload),
    store: TaskStore = Depends(get_task_store),
):
    """Create a task."""
    task = create_task_from_payload(payload)
    store.insert(task)
    logger.info(f"Created task {task.id}")
    return task


@router.get("", response_model=TaskListResponse, response_model_exclude_none=True)
def get_all_tasks(
    status: Optional[str] = Query(None, description="Filter by status (case-insensitive)"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="dueDate:asc or dueDate:desc"),
    store: TaskStore = Depends(get_task_store),
):
    """List tasks, optionally filtered by status and ordered by due date."""
    tasks = list_view(store.all(), status=status, sort_by=sort_by)
    return TaskListResponse(count=len(tasks), tasks=tasks)


@router.get("/{task_id}", response_model=Task, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def get_task_by_id(
    task_id: str = Depends(valid_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """Get a single task."""
    return store.find_by_id(task_id)


@router.put("/{task_id}", response_model=Task, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def update_task(
    task_id: str = Depends(valid_task_id),
    patch: TaskPatch = Depends(validated_update_patch),
    store: TaskStore = Depends(get_task_store),
):
    """Apply a partial update; fields not in the body keep their values."""
    task = store.update(task_id, patch)
    logger.info(f"Updated task {task_id}")
    return task


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def delete_task(
    task_id: str = Depends(valid_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """Delete a single task and return it."""
    task = store.delete(task_id)
    logger.info(f"Deleted task {task_id}")
    return TaskDeletedResponse(task=task)


@router.delete("", response_model=TasksClearedResponse)
def delete_all_tasks(store: TaskStore = Depends(get_task_store)):
    """Delete every task."""
    count = store.delete_all()
    logger.info(f"Deleted all tasks ({count})")
    return TasksClearedResponse(count=count)


def _error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(TaskboardError)
    async def handle_taskboard_error(request: Request, exc: TaskboardError):
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, "Internal server error")


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    Args:
        store: Task store to serve (a fresh empty store if None)
        settings: Runtime settings (read from the environment if None)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="taskboard API",
        description="In-memory task management with validated create/update rules",
        version=APP_VERSION,
    )
    app.state.task_store = store if store is not None else TaskStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health", response_model=HealthResponse)
    def health(store: TaskStore = Depends(get_task_store)):
        """Health check endpoint."""
        return HealthResponse(version=APP_VERSION, task_count=store.count())

    return app


app = create_app()
