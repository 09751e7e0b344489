"""
Task API - Task Router

CRUD endpoints for task management.
All endpoints are JWT-protected.
"""

import json
import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Request, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError as SchemaError

from task_api.database import get_database
from task_api.auth.dependencies import CurrentUser
from task_api.errors import ValidationError
from task_api.tasks.service import TaskService
from task_api.tasks.repository import TaskRepository, TaskRepositoryInterface
from task_api.tasks.schemas import TaskWriteRequest, TaskResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

# Keeps (page - 1) * limit inside the store's int64 skip
MAX_PAGE = 1_000_000

TASK_BODY_OPENAPI = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TaskWriteRequest.model_json_schema()}},
    }
}


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


async def get_task_body(current_user: CurrentUser, request: Request) -> TaskWriteRequest:
    """Parse the task body once the caller is authenticated.

    An empty body counts as an object with no fields.
    """
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else {}
    except ValueError as e:
        logger.info(f"Rejected unparseable body on {request.url.path}: {e}")
        raise ValidationError() from e
    if not isinstance(data, dict):
        raise ValidationError()
    try:
        return TaskWriteRequest.model_validate(data)
    except SchemaError as e:
        logger.info(f"Rejected request to {request.url.path}: {[err.get('loc') for err in e.errors()]}")
        raise ValidationError() from e


TaskBody = Annotated[TaskWriteRequest, Depends(get_task_body)]


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List tasks",
)
async def list_tasks(
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
    page: int = Query(default=1, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(default=10, ge=1, le=100, description="Tasks per page"),
) -> List[TaskResponse]:
    return await service.list_tasks(page=page, limit=limit)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task(
    task_id: str,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Get a specific task by ID.

    Returns 404 if the task doesn't exist.
    """
    return await service.get_task(task_id)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    openapi_extra=TASK_BODY_OPENAPI,
)
async def create_task(
    request: TaskBody,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a new task.

    `title`, `description` and `status` are all required; a missing or empty
    field is rejected with 400 before anything is stored. The body is only
    parsed after the token check, so unauthenticated callers always get 401.
    """
    return await service.create_task(request)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Replace a task",
    openapi_extra=TASK_BODY_OPENAPI,
)
async def update_task(
    task_id: str,
    request: TaskBody,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Replace all fields of a task by ID.

    Returns 404 if the task doesn't exist.
    """
    return await service.update_task(task_id, request)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
)
async def delete_task(
    task_id: str,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """
    Delete a task by ID.

    Returns 404 if the task doesn't exist.
    """
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
