"""
Artifact: assistant_service/exam_assistant/extraction/keywords.py
Purpose: Keyword table consulted by the topicality guard.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added the exam keyword table as data. (Exam Planner Team)
Preconditions:
- None.
Inputs:
- Acceptable: Lower-case keyword strings, optionally with surrounding spaces.
- Unacceptable: Upper-case entries; matching lower-cases the message only.
Postconditions:
- EXAM_KEYWORDS is an immutable tuple.
Returns:
- Not applicable (data module).
Errors/Exceptions:
- None.

Matching is a lower-cased substring test. Some entries carry deliberate
whitespace ("ca ") to avoid matching inside words such as "can" or "call".
"""

EXAM_KEYWORDS = (
    "exam",
    "test",
    "midterm",
    "mid term",
    "endterm",
    "end term",
    "lab",
    "quiz",
    "subject",
    "semester",
    "schedule",
    "timetable",
    "date",
    "time",
    "add",
    "create",
    "update",
    "edit",
    "delete",
    "remove",
    "mark",
    "complete",
    "backlog",
    "regular",
    "course",
    "class",
    "paper",
    "assessment",
    "ca ",
    "code",
    "morning",
    "afternoon",
    "evening",
)
