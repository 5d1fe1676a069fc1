# interfaces/api.py
import logging
import re
from datetime import datetime, timezone
from typing import Type, TypeVar

import pydantic
from fastapi import APIRouter, Depends, Request

from application.use_cases import TaskUseCases
from domain.exceptions import InvalidTaskIdError, ValidationError
from interfaces.responses import send_response
from schemas.task import HealthStatus, TaskBase, TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# Ids are 64-bit signed integers on the wire.
TASK_ID_MIN = -(2 ** 63)
TASK_ID_MAX = 2 ** 63 - 1

TaskBody = TypeVar("TaskBody", bound=TaskBase)


def get_use_cases(request: Request) -> TaskUseCases:
    return request.app.state.use_cases


def parse_task_id(task_id: str) -> int:
    if not TASK_ID_PATTERN.fullmatch(task_id):
        raise InvalidTaskIdError(task_id)
    value = int(task_id)
    if not TASK_ID_MIN <= value <= TASK_ID_MAX:
        raise InvalidTaskIdError(task_id)
    return value


async def read_task_body(request: Request, model: Type[TaskBody]) -> TaskBody:
    """Decodes the request body as JSON whatever its Content-Type says."""
    raw = await request.body()
    # A bare null decodes to a task with every field left at its default.
    if raw.strip() == b"null":
        return model()
    try:
        return model.model_validate_json(raw)
    except pydantic.ValidationError as e:
        logger.debug(f"Rejected task body: {e.errors()}")
        raise ValidationError("Invalid JSON format") from e


@router.get("/health")
async def health_check(request: Request):
    health = HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=request.app.version,
    )
    return send_response(200, True, "API is running", health)


@router.get("/tasks")
async def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    tasks = use_cases.get_all_tasks()
    return send_response(
        200, True, "Tasks retrieved successfully",
        [TaskResponse.model_validate(task) for task in tasks],
    )


@router.post("/tasks")
async def create_task(request: Request, use_cases: TaskUseCases = Depends(get_use_cases)):
    task = await read_task_body(request, TaskCreate)
    created_task = use_cases.create_task(task.title, task.description)
    return send_response(201, True, "Task created successfully", TaskResponse.model_validate(created_task))


@router.get("/tasks/{task_id}")
async def get_task(task_id: int = Depends(parse_task_id), use_cases: TaskUseCases = Depends(get_use_cases)):
    task = use_cases.get_task(task_id)
    return send_response(200, True, "Task found", TaskResponse.model_validate(task))


@router.put("/tasks/{task_id}")
async def update_task(request: Request, task_id: int = Depends(parse_task_id), use_cases: TaskUseCases = Depends(get_use_cases)):
    task = await read_task_body(request, TaskUpdate)
    # A missing "completed" key means false, same as an explicit false.
    updated_task = use_cases.update_task(task_id, task.title, task.description, bool(task.completed))
    return send_response(200, True, "Task updated successfully", TaskResponse.model_validate(updated_task))


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: int = Depends(parse_task_id), use_cases: TaskUseCases = Depends(get_use_cases)):
    use_cases.delete_task(task_id)
    return send_response(200, True, "Task deleted successfully")
