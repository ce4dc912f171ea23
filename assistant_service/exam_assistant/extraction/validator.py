"""
Artifact: assistant_service/exam_assistant/extraction/validator.py
Purpose: Deterministic schema checks applied to exam data extracted by the model.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-19: Validation now runs through ExamRecord so model output and stored records share one rule set. (Exam Planner Team)
Preconditions:
- Candidate payloads have already been parsed from JSON (see normalizer.py).
Inputs:
- Acceptable: Dict payloads of the shape {"status": ..., "data": {...}} or bare field dicts.
- Unacceptable: Anything else is rejected (None / False), never raised.
Postconditions:
- Valid data is returned as an ExamRecord with an integer semester; all other fields pass through.
Returns:
- `validate_candidate` / `validate_exam_fields`: ExamRecord or None.
- `validate_field`: bool. `invalid_fields`: list of failing field names.
Errors/Exceptions:
- None; pydantic ValidationError is caught and reported through the return value.

Even with a strict prompt the model can return values outside the schema,
so the rules live here in code and not in the prompt. Checks are purely
syntactic: "2026-02-30" passes, and startTime is not compared to endTime.
"""

from typing import Any, Optional

from pydantic import ValidationError

from ..core.logging import get_logger
from ..schemas.shared import REQUIRED_FIELDS, ExamRecord

logger = get_logger("examplanner.validator")

VALID_STATUSES = ("off_topic", "incomplete", "complete")


def _failing_fields(error: ValidationError) -> set[str]:
    return {str(err["loc"][0]) for err in error.errors() if err.get("loc")}


def invalid_fields(fields: Any) -> list[str]:
    """Required fields that are missing or fail their rule, in schema order."""
    if not isinstance(fields, dict):
        return list(REQUIRED_FIELDS)
    try:
        ExamRecord.model_validate(fields)
    except ValidationError as e:
        failing = _failing_fields(e)
        return [name for name in REQUIRED_FIELDS if name in failing]
    return []


def validate_field(name: str, value: Any) -> bool:
    """Check one exam field against its rule. Unknown field names fail."""
    if name not in REQUIRED_FIELDS:
        return False
    return name not in invalid_fields({name: value})


def validate_exam_fields(fields: Any) -> Optional[ExamRecord]:
    """Validate a bare field dict; None when any required field fails."""
    if not isinstance(fields, dict):
        return None
    try:
        return ExamRecord.model_validate(fields)
    except ValidationError as e:
        logger.debug("Exam fields rejected | invalid=%s", sorted(_failing_fields(e)))
        return None


def validate_candidate(payload: Any) -> Optional[ExamRecord]:
    """
    Validate a parsed model payload and return the exam it describes.

    Only a recognized `complete` payload with a fully valid `data` object
    yields a record; `off_topic` and `incomplete` payloads carry no record.
    """
    if not isinstance(payload, dict) or payload.get("status") not in VALID_STATUSES:
        return None
    if payload["status"] != "complete":
        return None

    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    return validate_exam_fields(data)
