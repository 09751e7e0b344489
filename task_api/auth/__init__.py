"""
Task API - Authentication Module

Register/login with JWT bearer authentication.
"""

from task_api.auth.router import router as auth_router
from task_api.auth.dependencies import CurrentUser, get_current_user

__all__ = ["auth_router", "CurrentUser", "get_current_user"]
