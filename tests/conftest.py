"""
Task API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from task_api.main import app
from task_api.auth.dependencies import get_token_service, get_user_repository
from task_api.auth.models import User
from task_api.auth.repository import DuplicateUsernameError, UserRepositoryInterface
from task_api.auth.tokens import TokenService
from task_api.tasks.models import Task
from task_api.tasks.repository import InMemoryTaskRepository, TaskRepositoryInterface
from task_api.tasks.router import get_task_repository


TEST_SECRET = "test-secret-key-for-testing-only-0123456789"


class InMemoryUserRepository(UserRepositoryInterface):
    """In-memory user repository for testing."""

    def __init__(self):
        self._users: Dict[str, User] = {}

    async def create(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUsernameError(user.username)
        self._users[user.username] = user
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def clear(self) -> None:
        self._users.clear()

    def get(self, username: str) -> Optional[User]:
        """Synchronous helper for tests that need direct access."""
        return self._users.get(username)


class FailingTaskRepository(TaskRepositoryInterface):
    """Task store whose every call fails, for the server-error paths."""

    def __init__(self, message: str = "Database error"):
        self.message = message

    async def list_page(self, page: int, limit: int) -> List[Task]:
        raise RuntimeError(self.message)

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        raise RuntimeError(self.message)

    async def create(self, title: str, description: str, status: str) -> Task:
        raise RuntimeError(self.message)

    async def update(
        self, task_id: str, title: str, description: str, status: str
    ) -> Optional[Task]:
        raise RuntimeError(self.message)

    async def delete(self, task_id: str) -> bool:
        raise RuntimeError(self.message)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_SECRET, algorithm="HS256", expires_minutes=30)


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    """Provide a fresh in-memory task repository for each test."""
    return InMemoryTaskRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Provide a fresh in-memory user repository for each test."""
    return InMemoryUserRepository()


def _make_client(task_repo, user_repo, tokens) -> TestClient:
    app.dependency_overrides[get_task_repository] = lambda: task_repo
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_token_service] = lambda: tokens
    return TestClient(app)


@pytest.fixture
def client(task_repository, user_repository, token_service):
    """Create test client backed by in-memory repositories."""
    yield _make_client(task_repository, user_repository, token_service)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(user_repository, token_service):
    """Test client whose task store raises on every call."""
    yield _make_client(FailingTaskRepository(), user_repository, token_service)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"username": "testuser", "password": "password123"}
    client.post("/api/auth/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post("/api/auth/login", json=registered_user)
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def service_headers(token_service):
    """Headers carrying a valid token without going through login."""
    return {"Authorization": f"Bearer {token_service.issue('user123')}"}


@pytest.fixture
def task_payload():
    return {"title": "New Task", "description": "Task description", "status": "pending"}
