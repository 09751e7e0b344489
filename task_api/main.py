"""
Task API - Main Application

Task management service: JWT-authenticated CRUD over task records stored in MongoDB.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from task_api.config import settings
from task_api.database import database
from task_api.auth import auth_router
from task_api.auth.repository import MongoUserRepository
from task_api.tasks import tasks_router
from task_api.errors import AppError
from task_api.security import validate_security_config

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config()
    await database.connect()
    try:
        await MongoUserRepository(database.get_database()).ensure_indexes()
    except PyMongoError as e:
        logger.error(f"Failed to create user indexes: {e}")

    yield

    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task management API with JWT authentication",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render domain errors as {"message": ...}."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render schema/query validation failures as 400 instead of FastAPI's 422."""
    errors = exc.errors()
    if errors and all(err.get("type") == "missing" for err in errors):
        message = "Missing required fields"
    else:
        message = "Invalid request"
    # Locations only; inputs may contain passwords
    logger.info(f"Rejected request to {request.url.path}: {[err.get('loc') for err in errors]}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(tasks_router, prefix=API_PREFIX)
