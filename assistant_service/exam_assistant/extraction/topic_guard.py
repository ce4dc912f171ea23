"""
Artifact: assistant_service/exam_assistant/extraction/topic_guard.py
Purpose: Cheap keyword pre-filter deciding whether a message is worth sending to the model.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added keyword-based topicality guard with settings-driven extra keywords. (Exam Planner Team)
Inputs:
- Acceptable: Any user text, any length or casing.
Returns:
- True when at least one keyword occurs in the message.
Errors/Exceptions:
- None.
"""

from typing import Iterable, Optional

from ..core.config import settings
from .keywords import EXAM_KEYWORDS


def active_keywords() -> tuple[str, ...]:
    """Default keyword table plus any configured extras."""
    return EXAM_KEYWORDS + tuple(settings.extra_topic_keywords())


def is_plausibly_exam_related(message: str, keywords: Optional[Iterable[str]] = None) -> bool:
    lower = (message or "").lower()
    table = active_keywords() if keywords is None else keywords
    return any(kw in lower for kw in table)
