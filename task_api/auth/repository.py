from abc import ABC, abstractmethod
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from task_api.auth.models import User

logger = logging.getLogger(__name__)


class DuplicateUsernameError(Exception):
    """Raised by a repository when the username is already stored."""

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists")
        self.username = username


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping implementations (in-memory -> MongoDB).
    Usernames are unique: ``create`` must reject a duplicate atomically by
    raising DuplicateUsernameError.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository."""

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def ensure_indexes(self) -> None:
        """Create the unique username index that backs duplicate detection."""
        await self.collection.create_index("username", unique=True)

    async def create(self, user: User) -> User:
        """Create a new user."""
        try:
            result = await self.collection.insert_one(user.to_dict())
        except DuplicateKeyError as e:
            raise DuplicateUsernameError(user.username) from e
        except Exception as e:
            logger.error(f"[MongoUserRepository] Error creating user in MongoDB: {e}", exc_info=True)
            raise
        logger.info(f"[MongoUserRepository] User created with _id: {result.inserted_id}")
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        doc = await self.collection.find_one({"username": username})
        if doc is None:
            return None
        return User.from_dict(doc)
