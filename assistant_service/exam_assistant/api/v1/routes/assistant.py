"""
Artifact: assistant_service/exam_assistant/api/v1/routes/assistant.py
Purpose: Defines the assistant-turn route handler and maps runtime failures to HTTP responses.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added assistant turn route with shared error mapping. (Exam Planner Team)
Preconditions:
- Incoming request body conforms to AssistantTurnRequest schema.
- `X-User-Id` header carries the verified user id.
Inputs:
- Acceptable: POST body `{message, gatheredFields?, examDates?}`.
- Unacceptable: Empty message, malformed examDates entries or non-JSON bodies (400).
Postconditions:
- Executes one conversation turn and returns its outcome.
Returns:
- Dictionary `{status, message?, missing?, gathered?, data?, examDates?, summary?}`.
Errors/Exceptions:
- Raises HTTPException(500) when configuration or unexpected runtime failures occur.
"""

import traceback

from fastapi import APIRouter, Depends, HTTPException

from ....core.logging import get_logger
from ....schemas.requests import AssistantTurnRequest
from ....services.assistant_service import run_assistant_turn
from ...deps import get_current_user_id

logger = get_logger("examplanner.main")
router = APIRouter(tags=["assistant"])


def handle_assistant_turn_request(req: AssistantTurnRequest, user_id: str, route_path: str):
    """Shared assistant-turn handler body used by v1 and legacy routes."""
    try:
        return run_assistant_turn(req, user_id, route_path=route_path)
    except Exception as e:
        logger.error("Assistant error: %s", repr(e))
        logger.debug("Traceback:\n%s", traceback.format_exc())
        raise HTTPException(status_code=500, detail="AI service error")


@router.post("/assistant/turns")
def create_assistant_turn(req: AssistantTurnRequest, user_id: str = Depends(get_current_user_id)):
    return handle_assistant_turn_request(req, user_id, route_path="/api/v1/assistant/turns")
