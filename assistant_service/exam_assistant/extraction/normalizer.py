"""
Artifact: assistant_service/exam_assistant/extraction/normalizer.py
Purpose: Turns raw model text into a JSON object, tolerating markdown code fences.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added fence stripping and strict JSON object parsing for model replies. (Exam Planner Team)
Inputs:
- Acceptable: Any string returned by the extraction model.
Returns:
- Parsed dict on success, `ParseError` otherwise.
Errors/Exceptions:
- None; parse failures are returned, never raised.
"""

import json
import re
from typing import Union

from ..schemas.responses import ParseError

_LEADING_JSON_FENCE = re.compile(r"^```json\s*", re.IGNORECASE)
_LEADING_FENCE = re.compile(r"^```\s*")
_TRAILING_FENCE = re.compile(r"```\s*$")


def strip_code_fences(text: str) -> str:
    cleaned = (text or "").strip()
    cleaned = _LEADING_JSON_FENCE.sub("", cleaned)
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def normalize_model_output(raw_text: str) -> Union[dict, ParseError]:
    cleaned = strip_code_fences(raw_text)
    if not cleaned:
        return ParseError(reason="Empty model output", raw=raw_text or "")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return ParseError(reason=f"Invalid JSON: {e}", raw=raw_text)

    if not isinstance(parsed, dict):
        return ParseError(reason=f"Expected a JSON object, got {type(parsed).__name__}", raw=raw_text)
    return parsed
