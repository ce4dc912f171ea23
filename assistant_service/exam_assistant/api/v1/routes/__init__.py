"""Route module exports for API v1."""

from .assistant import router as assistant_router
from .exams import router as exams_router
from .health import router as health_router

__all__ = ["assistant_router", "exams_router", "health_router"]
