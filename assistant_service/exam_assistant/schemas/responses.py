"""
Artifact: assistant_service/exam_assistant/schemas/responses.py
Purpose: Defines the typed turn outcomes of the assistant protocol and the exam route envelopes.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added tagged-union turn outcomes, batch summary and exam envelopes. (Exam Planner Team)
Preconditions:
- Pydantic BaseModel and shared schema models are available.
Inputs:
- Acceptable: Outcome fields matching one variant of the `status` tagged union.
- Unacceptable: Mixed-variant fields (e.g. a `complete` outcome with `missing`).
Postconditions:
- Outcome objects serialize to the `{status, message?, missing?, gathered?, data?, examDates?}` contract.
Returns:
- Outcome and envelope model instances.
Errors/Exceptions:
- Pydantic validation errors when outcome fields do not match the declared variant.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .shared import ExamDateEntry, ExamRecord, StoredExam


class EntryOutcome(BaseModel):
    date: str
    saved: bool
    examId: Optional[str] = None
    error: Optional[str] = None


class BatchSummary(BaseModel):
    saved: int = 0
    failed: int = 0
    entries: List[EntryOutcome] = []


class OffTopicOutcome(BaseModel):
    status: Literal["off_topic"] = "off_topic"
    message: str


class IncompleteOutcome(BaseModel):
    status: Literal["incomplete"] = "incomplete"
    message: str
    missing: List[str] = []
    gathered: Dict[str, Any] = {}
    examDates: Optional[List[ExamDateEntry]] = None
    summary: Optional[BatchSummary] = None


class CompleteOutcome(BaseModel):
    status: Literal["complete"] = "complete"
    data: Union[ExamRecord, List[ExamRecord]]
    message: Optional[str] = None
    summary: Optional[BatchSummary] = None


class ErrorOutcome(BaseModel):
    status: Literal["error"] = "error"
    message: str


TurnOutcome = Annotated[
    Union[OffTopicOutcome, IncompleteOutcome, CompleteOutcome, ErrorOutcome],
    Field(discriminator="status"),
]


class ParseError(BaseModel):
    """Model output that could not be read as a JSON object."""

    reason: str
    raw: str


class ExamEnvelope(BaseModel):
    exam: StoredExam


class ExamListResponse(BaseModel):
    exams: List[StoredExam]
