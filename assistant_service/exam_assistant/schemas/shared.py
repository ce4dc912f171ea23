"""
Artifact: assistant_service/exam_assistant/schemas/shared.py
Purpose: Defines the exam record models shared by the assistant protocol, the store and the routes.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-19: Moved all exam field rules (blank checks, semester coercion, strict strings) onto ExamRecord. (Exam Planner Team)
Preconditions:
- Pydantic BaseModel is installed and importable.
Inputs:
- Acceptable: JSON-compatible values matching declared field types and enum literals.
- Unacceptable: Unknown exam types/categories, non-positive semesters, malformed date/time strings.
Postconditions:
- Shared Pydantic models validate and serialize contract-compatible exam data.
Returns:
- Typed model instances for exam records, stored exams and multi-exam date entries.
Errors/Exceptions:
- Pydantic validation errors for invalid payload data.
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ExamType = Literal["Mid Term", "End Term", "CA", "Lab", "Other"]
Category = Literal["Regular", "Backlog"]

EXAM_TYPES = ("Mid Term", "End Term", "CA", "Lab", "Other")
CATEGORIES = ("Regular", "Backlog")

# Order matters: it is the order missing/invalid fields are reported in.
REQUIRED_FIELDS = (
    "code",
    "subject",
    "examType",
    "category",
    "semester",
    "date",
    "startTime",
    "endTime",
)

DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
TIME_PATTERN = r"^[0-9]{2}:[0-9]{2}$"


def coerce_semester(value: Any) -> Optional[int]:
    """Return the semester as an int >= 1, or None if it is not one."""
    # bool is an int subclass; True must not become semester 1
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        number = int(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
        if not math.isfinite(parsed) or not parsed.is_integer():
            return None
        number = int(parsed)
    else:
        return None
    return number if number >= 1 else None


class ExamRecord(BaseModel):
    code: str = Field(min_length=1, strict=True)
    subject: str = Field(min_length=1, strict=True)
    examType: ExamType
    category: Category
    semester: int = Field(ge=1)
    date: str = Field(pattern=DATE_PATTERN, strict=True)
    startTime: str = Field(pattern=TIME_PATTERN, strict=True)
    endTime: str = Field(pattern=TIME_PATTERN, strict=True)

    @field_validator("code", "subject")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("semester", mode="before")
    @classmethod
    def _coerce_semester(cls, value: Any) -> int:
        number = coerce_semester(value)
        if number is None:
            raise ValueError("semester must be a positive integer")
        return number


class StoredExam(ExamRecord):
    id: str
    userId: str
    completed: bool = False
    createdAt: datetime


class ExamDateEntry(BaseModel):
    date: str
    fields: Dict[str, Any] = {}
    missingFields: List[str] = []
    isConfirmed: bool = False
