"""
Artifact: assistant_service/exam_assistant/api/v1/router.py
Purpose: Aggregates v1 API route modules for single include in app startup.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Registered health, assistant and exam routers under v1. (Exam Planner Team)
Preconditions:
- Route modules under api/v1/routes are importable.
Returns:
- `APIRouter` instance with health, assistant and exam routes.
Errors/Exceptions:
- Import errors if route modules cannot be resolved.
"""

from fastapi import APIRouter

from .routes.assistant import router as assistant_router
from .routes.exams import router as exams_router
from .routes.health import router as health_router

api_v1_router = APIRouter()
api_v1_router.include_router(health_router)
api_v1_router.include_router(assistant_router)
api_v1_router.include_router(exams_router)
