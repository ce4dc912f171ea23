"""
Artifact: assistant_service/exam_assistant/api/deps.py
Purpose: FastAPI dependencies shared by the versioned routes.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added user identity and store dependencies. (Exam Planner Team)
Preconditions:
- An upstream session layer has verified the user and forwards the id in `X-User-Id`.
Returns:
- The trusted user id string.
Errors/Exceptions:
- HTTPException(401) when the header is missing or blank.
"""

from typing import Optional

from fastapi import Header, HTTPException

from ..services.exam_store import InMemoryExamStore, get_exam_store


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return x_user_id.strip()


def get_store() -> InMemoryExamStore:
    return get_exam_store()
