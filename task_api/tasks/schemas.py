"""
Task API - Task Schemas

Pydantic models for task API requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TaskWriteRequest(BaseModel):
    """Request body for creating or replacing a task.

    Fields are optional at the schema level so that a missing field is
    reported as "Missing required fields" by the service rather than as a
    generic validation failure.
    """

    title: Optional[str] = Field(default=None, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: Optional[str] = Field(default=None, description="Task status, e.g. pending or completed")

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.description) and bool(self.status)


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: str = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: str = Field(description="Task description")
    status: str = Field(description="Task status")
