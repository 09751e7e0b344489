"""
Task API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Task:
    """Task entity for database storage."""

    id: str
    title: str
    description: str
    status: str
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, title: str, description: str, status: str) -> "Task":
        """Create a new task with generated ID."""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            status=status,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            title=data["title"],
            description=data["description"],
            status=data["status"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
