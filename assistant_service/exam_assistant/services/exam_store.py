"""
Artifact: assistant_service/exam_assistant/services/exam_store.py
Purpose: Persistence collaborator for exam records, keyed by exam id and owning user id.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added exam store protocol and thread-safe in-memory implementation. (Exam Planner Team)
Preconditions:
- Callers pass an already-verified user id; the store performs no authentication.
Inputs:
- Acceptable: Validated ExamRecord instances and opaque string ids.
- Unacceptable: Ids belonging to a different user (treated as not found).
Postconditions:
- Records are created with their own uuid and `completed=False`; lists are ordered by date ascending.
Returns:
- StoredExam instances or lists of them.
Errors/Exceptions:
- ExamNotFoundError for unknown ids or ids owned by another user.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from ..core.errors import ExamNotFoundError
from ..core.logging import get_logger
from ..schemas.shared import ExamRecord, StoredExam

logger = get_logger("examplanner.store")


class ExamStore(Protocol):
    def create(self, user_id: str, record: ExamRecord) -> StoredExam: ...

    def list(self, user_id: str) -> List[StoredExam]: ...

    def get(self, user_id: str, exam_id: str) -> StoredExam: ...

    def update(self, user_id: str, exam_id: str, record: ExamRecord) -> StoredExam: ...

    def delete(self, user_id: str, exam_id: str) -> None: ...

    def toggle_complete(self, user_id: str, exam_id: str) -> StoredExam: ...


class InMemoryExamStore:
    """Process-local store. Sync FastAPI handlers run in a thread pool, hence the lock."""

    def __init__(self):
        self._exams: Dict[str, StoredExam] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str, record: ExamRecord) -> StoredExam:
        exam = StoredExam(
            **record.model_dump(),
            id=str(uuid.uuid4()),
            userId=user_id,
            completed=False,
            createdAt=datetime.now(timezone.utc),
        )
        with self._lock:
            self._exams[exam.id] = exam
        logger.info("Exam created | id=%s user=%s code=%s date=%s", exam.id, user_id, exam.code, exam.date)
        return exam

    def list(self, user_id: str) -> List[StoredExam]:
        with self._lock:
            owned = [e for e in self._exams.values() if e.userId == user_id]
        return sorted(owned, key=lambda e: (e.date, e.startTime))

    def get(self, user_id: str, exam_id: str) -> StoredExam:
        with self._lock:
            exam = self._exams.get(exam_id)
        if exam is None or exam.userId != user_id:
            raise ExamNotFoundError(exam_id)
        return exam

    def update(self, user_id: str, exam_id: str, record: ExamRecord) -> StoredExam:
        with self._lock:
            current = self._owned(user_id, exam_id)
            updated = current.model_copy(update=record.model_dump())
            self._exams[exam_id] = updated
        logger.info("Exam updated | id=%s user=%s", exam_id, user_id)
        return updated

    def delete(self, user_id: str, exam_id: str) -> None:
        with self._lock:
            self._owned(user_id, exam_id)
            del self._exams[exam_id]
        logger.info("Exam deleted | id=%s user=%s", exam_id, user_id)

    def toggle_complete(self, user_id: str, exam_id: str) -> StoredExam:
        with self._lock:
            current = self._owned(user_id, exam_id)
            updated = current.model_copy(update={"completed": not current.completed})
            self._exams[exam_id] = updated
        logger.info("Exam completion toggled | id=%s completed=%s", exam_id, updated.completed)
        return updated

    def _owned(self, user_id: str, exam_id: str) -> StoredExam:
        exam = self._exams.get(exam_id)
        if exam is None or exam.userId != user_id:
            raise ExamNotFoundError(exam_id)
        return exam


_STORE: Optional[InMemoryExamStore] = None


def get_exam_store() -> InMemoryExamStore:
    """Return the process-wide store singleton."""
    global _STORE
    if _STORE is None:
        _STORE = InMemoryExamStore()
    return _STORE
