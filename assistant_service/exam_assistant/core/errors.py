"""
Artifact: assistant_service/exam_assistant/core/errors.py
Purpose: Declares the typed exceptions raised by the exam store and provider boundary.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added not-found and missing-configuration error types. (Exam Planner Team)
Errors/Exceptions:
- ExamNotFoundError: exam id unknown or owned by another user.
- MissingConfigurationError: required runtime configuration (e.g. API key) is absent.
"""


class ExamNotFoundError(LookupError):
    """Raised when an exam id does not exist for the requesting user."""

    def __init__(self, exam_id: str):
        super().__init__(f"Exam {exam_id!r} not found")
        self.exam_id = exam_id


class MissingConfigurationError(RuntimeError):
    """Raised when the service is missing configuration it cannot run without."""
