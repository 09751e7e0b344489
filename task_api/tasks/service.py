"""
Task API - Task Service

Validates task input, makes exactly one repository call per operation and
turns repository outcomes into results or typed errors.
"""

import logging
from typing import List

from task_api.errors import NotFoundError, StoreError, ValidationError
from task_api.tasks.models import Task
from task_api.tasks.repository import TaskRepositoryInterface
from task_api.tasks.schemas import TaskWriteRequest, TaskResponse

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"
MISSING_FIELDS = "Missing required fields"


class TaskService:
    """Service layer for task operations.

    A repository returning None (or False for deletes) means "not found".
    Any exception from the repository is logged and replaced by StoreError,
    so clients only ever see the generic server error message.
    """

    def __init__(self, repository: TaskRepositoryInterface):
        self.repository = repository

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
        )

    @staticmethod
    def _require_fields(request: TaskWriteRequest) -> None:
        if not request.is_complete():
            raise ValidationError(MISSING_FIELDS)

    async def list_tasks(self, page: int, limit: int) -> List[TaskResponse]:
        """List one page of tasks."""
        try:
            tasks = await self.repository.list_page(page, limit)
        except Exception as e:
            logger.error(f"[TaskService] Listing tasks failed (page={page}, limit={limit}): {e}", exc_info=True)
            raise StoreError() from e
        return [self._task_to_response(task) for task in tasks]

    async def get_task(self, task_id: str) -> TaskResponse:
        """Get a task by ID."""
        try:
            task = await self.repository.get_by_id(task_id)
        except Exception as e:
            logger.error(f"[TaskService] Fetching task {task_id} failed: {e}", exc_info=True)
            raise StoreError() from e

        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return self._task_to_response(task)

    async def create_task(self, request: TaskWriteRequest) -> TaskResponse:
        """Create a task. All three fields must be present and non-empty."""
        self._require_fields(request)

        try:
            task = await self.repository.create(
                title=request.title,
                description=request.description,
                status=request.status,
            )
        except Exception as e:
            logger.error(f"[TaskService] Creating task failed: {e}", exc_info=True)
            raise StoreError() from e

        logger.info(f"[TaskService] Created task {task.id}")
        return self._task_to_response(task)

    async def update_task(self, task_id: str, request: TaskWriteRequest) -> TaskResponse:
        """Replace the title, description and status of a task."""
        self._require_fields(request)

        try:
            task = await self.repository.update(
                task_id,
                title=request.title,
                description=request.description,
                status=request.status,
            )
        except Exception as e:
            logger.error(f"[TaskService] Updating task {task_id} failed: {e}", exc_info=True)
            raise StoreError() from e

        if not task:
            raise NotFoundError(TASK_NOT_FOUND)

        logger.info(f"[TaskService] Updated task {task_id}")
        return self._task_to_response(task)

    async def delete_task(self, task_id: str) -> None:
        """Delete a task by ID."""
        try:
            deleted = await self.repository.delete(task_id)
        except Exception as e:
            logger.error(f"[TaskService] Deleting task {task_id} failed: {e}", exc_info=True)
            raise StoreError() from e

        if not deleted:
            raise NotFoundError(TASK_NOT_FOUND)

        logger.info(f"[TaskService] Deleted task {task_id}")
