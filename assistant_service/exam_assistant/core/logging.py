"""
Artifact: assistant_service/exam_assistant/core/logging.py
Purpose: Provides centralized logging configuration and named logger accessors.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added log level override via environment. (Exam Planner Team)
Preconditions:
- Python logging module is available.
Inputs:
- Acceptable: Logger names as non-empty strings (conventionally under `examplanner.`).
- Unacceptable: Invalid logger names that are not string-compatible.
Postconditions:
- Root logging is configured once and loggers can be retrieved by name.
Returns:
- `configure_logging` returns None; `get_logger` returns `logging.Logger`.
Errors/Exceptions:
- No custom exceptions; logging internals may raise standard runtime errors in rare cases.
"""

import logging
import os


def configure_logging() -> None:
    """Apply process-wide logging configuration for the service."""
    level_name = os.getenv("EXAM_ASSISTANT_LOG_LEVEL", "DEBUG").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.DEBUG),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    """Return a named logger instance."""
    return logging.getLogger(name)
