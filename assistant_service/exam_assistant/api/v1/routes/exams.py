"""
Artifact: assistant_service/exam_assistant/api/v1/routes/exams.py
Purpose: Defines the exam list/create/update/delete/toggle-complete route handlers.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added exam CRUD and completion toggle routes. (Exam Planner Team)
Preconditions:
- `X-User-Id` header carries the verified user id.
Inputs:
- Acceptable: ExamRecord JSON bodies for create/update; exam ids owned by the caller.
- Unacceptable: Bodies failing ExamRecord validation (400); foreign or unknown ids (404).
Postconditions:
- The in-memory exam store reflects the requested change.
Returns:
- `{"exams": [...]}`, `{"exam": {...}}` or `{"message": "Deleted"}`.
Errors/Exceptions:
- HTTPException(404) for ExamNotFoundError.
"""

from fastapi import APIRouter, Depends, HTTPException

from ....core.errors import ExamNotFoundError
from ....core.logging import get_logger
from ....schemas.responses import ExamEnvelope, ExamListResponse
from ....schemas.shared import ExamRecord
from ....services.exam_store import InMemoryExamStore
from ...deps import get_current_user_id, get_store

logger = get_logger("examplanner.main")
router = APIRouter(prefix="/exams", tags=["exams"])


@router.get("", response_model=ExamListResponse)
def list_exams(user_id: str = Depends(get_current_user_id), store: InMemoryExamStore = Depends(get_store)):
    return {"exams": store.list(user_id)}


@router.post("", status_code=201, response_model=ExamEnvelope)
def create_exam(
    record: ExamRecord,
    user_id: str = Depends(get_current_user_id),
    store: InMemoryExamStore = Depends(get_store),
):
    return {"exam": store.create(user_id, record)}


@router.put("/{exam_id}", response_model=ExamEnvelope)
def update_exam(
    exam_id: str,
    record: ExamRecord,
    user_id: str = Depends(get_current_user_id),
    store: InMemoryExamStore = Depends(get_store),
):
    try:
        return {"exam": store.update(user_id, exam_id, record)}
    except ExamNotFoundError:
        raise HTTPException(status_code=404, detail="Not found")


@router.delete("/{exam_id}")
def delete_exam(
    exam_id: str,
    user_id: str = Depends(get_current_user_id),
    store: InMemoryExamStore = Depends(get_store),
):
    try:
        store.delete(user_id, exam_id)
    except ExamNotFoundError:
        raise HTTPException(status_code=404, detail="Not found")
    return {"message": "Deleted"}


@router.patch("/{exam_id}/complete", response_model=ExamEnvelope)
def toggle_exam_complete(
    exam_id: str,
    user_id: str = Depends(get_current_user_id),
    store: InMemoryExamStore = Depends(get_store),
):
    try:
        return {"exam": store.toggle_complete(user_id, exam_id)}
    except ExamNotFoundError:
        raise HTTPException(status_code=404, detail="Not found")
