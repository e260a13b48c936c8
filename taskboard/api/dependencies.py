"""FastAPI dependencies for the task routes.

Each validation dependency runs one rule set and raises ``ValidationError``
with the first failing rule's message. Routes list them in the order they
must run.
"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request

from taskboard.errors import ValidationError
from taskboard.models.task import TaskPatch
from taskboard.models.task_factory import build_patch
from taskboard.store.task_store import TaskStore
from taskboard.validation.rules import (
    INVALID_BODY,
    validate_create,
    validate_high_priority_constraint,
    validate_task_id,
    validate_update,
)

logger = logging.getLogger(__name__)


def get_task_store(request: Request) -> TaskStore:
    """Task store owned by the running application."""
    return request.app.state.task_store


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Read the request body as a JSON object. An empty body reads as ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.info(f"Rejected {request.method} {request.url.path}: malformed JSON body")
        raise ValidationError(INVALID_BODY)
    if not isinstance(payload, dict):
        logger.info(f"Rejected {request.method} {request.url.path}: body is not a JSON object")
        raise ValidationError(INVALID_BODY)
    return payload


def _reject_if(message: Optional[str], action: str) -> None:
    if message:
        logger.info(f"Rejected {action}: {message}")
        raise ValidationError(message)


def valid_task_id(task_id: str) -> str:
    """Path task ID in canonical UUID form."""
    _reject_if(validate_task_id(task_id), f"task id {task_id!r}")
    return task_id


def validated_create_payload(payload: Dict[str, Any] = Depends(read_json_body)) -> Dict[str, Any]:
    """Create request body that passed every create rule."""
    _reject_if(validate_create(payload), "create")
    return payload


def validated_update_patch(payload: Dict[str, Any] = Depends(read_json_body)) -> TaskPatch:
    """Update request body as a patch, after the update and high-priority rules."""
    _reject_if(validate_update(payload), "update")
    _reject_if(validate_high_priority_constraint(payload), "update")
    return build_patch(payload)
