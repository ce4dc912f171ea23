"""
Artifact: assistant_service/exam_assistant/api/v1/routes/health.py
Purpose: Defines health-check route handlers for versioned API and shared health logic.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Reported model configuration state alongside liveness. (Exam Planner Team)
Preconditions:
- FastAPI routing context is initialized.
Returns:
- Dictionary with `ok: true` and whether the LLM API key is configured.
Errors/Exceptions:
- No custom exceptions expected for normal route execution.
"""

from fastapi import APIRouter

from ....core.config import settings
from ....core.logging import get_logger

logger = get_logger("examplanner.main")
router = APIRouter(tags=["health"])


def get_health_status(route_path: str) -> dict:
    """Shared health-check handler body used by v1 and legacy routes."""
    logger.debug("GET %s", route_path)
    return {"ok": True, "llmConfigured": bool(settings.nvidia_api_key())}


@router.get("/health")
def health_v1():
    return get_health_status("/api/v1/health")
