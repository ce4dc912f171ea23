"""Schema package exports for exam assistant contracts."""

from .requests import AssistantTurnRequest
from .responses import (
    BatchSummary,
    CompleteOutcome,
    EntryOutcome,
    ErrorOutcome,
    ExamEnvelope,
    ExamListResponse,
    IncompleteOutcome,
    OffTopicOutcome,
    ParseError,
    TurnOutcome,
)
from .shared import ExamDateEntry, ExamRecord, StoredExam

__all__ = [
    "AssistantTurnRequest",
    "BatchSummary",
    "CompleteOutcome",
    "EntryOutcome",
    "ErrorOutcome",
    "ExamDateEntry",
    "ExamEnvelope",
    "ExamListResponse",
    "ExamRecord",
    "IncompleteOutcome",
    "OffTopicOutcome",
    "ParseError",
    "StoredExam",
    "TurnOutcome",
]
