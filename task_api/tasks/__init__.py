"""
Task API - Tasks Module

CRUD operations on task records.
"""

from task_api.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
