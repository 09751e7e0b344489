"""
Task API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and an in-memory one for testing.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from task_api.tasks.models import Task


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    A missing task is reported by returning None/False, never by raising.
    """

    @abstractmethod
    async def list_page(self, page: int, limit: int) -> List[Task]:
        """List one page of tasks, newest first. Pages start at 1."""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    async def create(self, title: str, description: str, status: str) -> Task:
        pass

    @abstractmethod
    async def update(
        self, task_id: str, title: str, description: str, status: str
    ) -> Optional[Task]:
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        pass


class TaskRepository(TaskRepositoryInterface):
    """MongoDB implementation of the task repository."""

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def list_page(self, page: int, limit: int) -> List[Task]:
        cursor = (
            self.collection.find({})
            .sort("created_at", -1)
            .skip((page - 1) * limit)
            .limit(limit)
        )
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        doc = await self.collection.find_one({"_id": task_id})
        if doc is None:
            return None
        return Task.from_dict(doc)

    async def create(self, title: str, description: str, status: str) -> Task:
        task = Task.create(title=title, description=description, status=status)
        await self.collection.insert_one(task.to_dict())
        return task

    async def update(
        self, task_id: str, title: str, description: str, status: str
    ) -> Optional[Task]:
        result = await self.collection.find_one_and_update(
            {"_id": task_id},
            {"$set": {
                "title": title,
                "description": description,
                "status": status,
                "updated_at": datetime.now(timezone.utc),
            }},
            return_document=ReturnDocument.AFTER,
        )
        if result is None:
            return None
        return Task.from_dict(result)

    async def delete(self, task_id: str) -> bool:
        result = await self.collection.delete_one({"_id": task_id})
        return result.deleted_count > 0


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}

    def clear(self) -> None:
        self._tasks.clear()

    async def list_page(self, page: int, limit: int) -> List[Task]:
        ordered = list(reversed(self._tasks.values()))
        start = (page - 1) * limit
        return ordered[start:start + limit]

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def create(self, title: str, description: str, status: str) -> Task:
        task = Task.create(title=title, description=description, status=status)
        self._tasks[task.id] = task
        return task

    async def update(
        self, task_id: str, title: str, description: str, status: str
    ) -> Optional[Task]:
        task = self._tasks.get(task_id)
        if task is None:
            return None

        task.title = title
        task.description = description
        task.status = status
        task.updated_at = datetime.now(timezone.utc)
        return task

    async def delete(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None
