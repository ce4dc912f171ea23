"""
Artifact: assistant_service/exam_assistant/services/assistant_service.py
Purpose: Coordinates request-level assistant turns for API handlers.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added request-level assistant turn execution for API handlers. (Exam Planner Team)
Preconditions:
- Incoming request is validated as AssistantTurnRequest and the user id has been verified upstream.
Inputs:
- Acceptable: Non-empty message with optional gatheredFields/examDates from the client.
- Unacceptable: Requests that bypassed schema validation.
Postconditions:
- One conversation turn is executed; confirmed multi-exam entries are saved to the store.
Returns:
- JSON-ready dictionary for the turn outcome (None fields omitted).
Errors/Exceptions:
- Propagates configuration/programming errors to the API layer for HTTP error mapping.
"""

from typing import Optional

from ..clients.llm_client import LazyExtractionEngine
from ..core.logging import get_logger
from ..orchestrators.conversation_orchestrator import run_turn
from ..schemas.requests import AssistantTurnRequest
from .exam_store import ExamStore, get_exam_store

logger = get_logger("examplanner.main")


def run_assistant_turn(
    req: AssistantTurnRequest,
    user_id: str,
    route_path: str,
    *,
    store: Optional[ExamStore] = None,
    engine=None,
) -> dict:
    """Execute one assistant turn for a validated request."""
    logger.info(
        "POST %s | user=%s | message_len=%d | gathered=%d | exam_dates=%d",
        route_path,
        user_id,
        len(req.message),
        len(req.gatheredFields or {}),
        len(req.examDates or []),
    )

    outcome = run_turn(
        req.message,
        req.gatheredFields,
        engine=engine or LazyExtractionEngine(),
        exam_dates=req.examDates,
        store=store if store is not None else get_exam_store(),
        user_id=user_id,
    )
    logger.info("Assistant turn completed | status=%s", outcome.status)
    return outcome.model_dump(mode="json", exclude_none=True)
