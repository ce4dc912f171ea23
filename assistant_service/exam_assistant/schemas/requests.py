"""
Artifact: assistant_service/exam_assistant/schemas/requests.py
Purpose: Defines transport request models accepted by the assistant-turn and exam workflows.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added assistant turn request model with optional conversation state. (Exam Planner Team)
Preconditions:
- Pydantic BaseModel and typing modules are available.
Inputs:
- Acceptable: JSON object with a non-empty message and optional gatheredFields/examDates.
- Unacceptable: Missing or empty message, non-object gatheredFields, malformed examDates entries.
Postconditions:
- Request data is validated into typed models used by services/routes.
Returns:
- `AssistantTurnRequest` model instances.
Errors/Exceptions:
- Pydantic validation errors for malformed request bodies.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .shared import ExamDateEntry


class AssistantTurnRequest(BaseModel):
    message: str = Field(min_length=1)
    gatheredFields: Optional[Dict[str, Any]] = None
    examDates: Optional[List[ExamDateEntry]] = None
