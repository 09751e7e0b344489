
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User entity for authentication."""

    id: str
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, username: str, password_hash: str) -> "User":
        """Create a new user with generated ID."""
        return cls(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            created_at=_utcnow(),
        )

    def to_dict(self) -> dict:
        """Convert user to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create user from MongoDB document."""
        return cls(
            id=data["_id"],
            username=data["username"],
            password_hash=data["password_hash"],
            created_at=data.get("created_at", _utcnow()),
        )


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a verified bearer token."""

    id: str
