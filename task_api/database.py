"""
Task API - Database Module

MongoDB connection management using Motor (async driver).
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from task_api.config import settings

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB.

        The driver connects lazily, so a ping is issued to report reachability.
        An unreachable server is logged but does not stop the application.
        """
        self.client = AsyncIOMotorClient(settings.MONGODB_URI)
        self.db = self.client[settings.MONGODB_DATABASE]
        try:
            await self.client.admin.command("ping")
            logger.info(f"Connected to MongoDB database '{settings.MONGODB_DATABASE}'")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


# Singleton database instance
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency to get the database instance."""
    return database.get_database()
