"""
Artifact: assistant_service/exam_assistant/orchestrators/conversation_orchestrator.py
Purpose: Runs one assistant turn: guard, prompt, model call with retries, parse, validate, decide outcome.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added stateless turn state machine with multi-exam batch handling. (Exam Planner Team)
Preconditions:
- The caller holds the conversation state (gathered fields, exam date entries) and resends it each turn.
- `engine` exposes `complete(prompt: str) -> str`.
Inputs:
- Acceptable: Non-empty user message, optional gathered-field dict, optional exam date entries.
- Unacceptable: Multi-exam turns without a store and user id (programming error).
Postconditions:
- No state is kept between calls; confirmed multi-exam entries are persisted through the store.
Returns:
- One TurnOutcome variant: OffTopicOutcome, IncompleteOutcome, CompleteOutcome or ErrorOutcome.
Errors/Exceptions:
- MissingConfigurationError when the model client cannot be configured.
- RuntimeError for multi-exam turns without a store or user id.
- Provider, parse and validation failures are returned as ErrorOutcome, never raised.
"""

import time
import traceback
from typing import Any, Callable, Iterable, Optional

from ..core.config import settings
from ..core.errors import MissingConfigurationError
from ..core.logging import get_logger
from ..extraction.normalizer import normalize_model_output
from ..extraction.prompts import OFF_TOPIC_MESSAGE, build_extraction_prompt
from ..extraction.retry import ProviderBusy, call_with_retry
from ..extraction.topic_guard import is_plausibly_exam_related
from ..extraction.validator import invalid_fields, validate_candidate, validate_exam_fields
from ..schemas.responses import (
    BatchSummary,
    CompleteOutcome,
    EntryOutcome,
    ErrorOutcome,
    IncompleteOutcome,
    OffTopicOutcome,
    ParseError,
    TurnOutcome,
)
from ..schemas.shared import ExamDateEntry, ExamRecord

logger = get_logger("examplanner.orchestrator")

INCOMPLETE_MESSAGE = "I need a few more details to add your exam."
COMPLETE_MESSAGE = "Perfect! Here's what I've extracted. Please review and confirm:"
BUSY_MESSAGE = "AI service is temporarily busy. Please try again in a moment."
PROVIDER_ERROR_MESSAGE = "AI service error. Please try again later."
UNEXPECTED_RESPONSE_MESSAGE = "AI returned an unexpected response. Please try rephrasing your message."
INVALID_FORMAT_MESSAGE = "AI returned an invalid response format. Please try again."


def merge_gathered(prior: Optional[dict], new: Optional[dict]) -> dict:
    """Shallow merge; keys in `new` overwrite keys in `prior`."""
    merged = dict(prior or {})
    merged.update(new or {})
    return merged


def _payload_message(payload: dict, default: str) -> str:
    message = payload.get("message")
    return message if isinstance(message, str) and message.strip() else default


def _payload_fields(payload: dict) -> dict:
    for key in ("gathered", "fields"):
        value = payload.get(key)
        if isinstance(value, dict):
            return value
    return {}


def reconcile_exam_dates(prior_entries: Iterable[ExamDateEntry], payload_entries: list) -> list[ExamDateEntry]:
    """
    Fold the model's per-date entries into the caller's entries, keyed by date.

    Fields merge last-write-wins; missingFields and isConfirmed come from the
    model when it supplies them. Dates only the caller knows are kept as-is.
    """
    by_date: dict[str, ExamDateEntry] = {e.date: e for e in prior_entries}

    for raw in payload_entries:
        if not isinstance(raw, dict) or not isinstance(raw.get("date"), str) or not raw["date"]:
            logger.warning("Skipping malformed exam date entry: %r", raw)
            continue

        previous = by_date.get(raw["date"])
        raw_fields = raw.get("fields") if isinstance(raw.get("fields"), dict) else {}
        if isinstance(raw.get("missingFields"), list):
            missing = [str(m) for m in raw["missingFields"]]
        else:
            missing = list(previous.missingFields) if previous else []

        by_date[raw["date"]] = ExamDateEntry(
            date=raw["date"],
            fields=merge_gathered(previous.fields if previous else {}, raw_fields),
            missingFields=missing,
            isConfirmed=raw.get("isConfirmed") is True,
        )

    return list(by_date.values())


def process_confirmed_entries(entries: list[ExamDateEntry], store, user_id: str):
    """
    Validate and persist every confirmed entry independently.

    Returns (saved_records, remaining_entries, summary). A failed entry stays
    in `remaining_entries`, unconfirmed, with its invalid fields as missing.
    """
    saved: list[ExamRecord] = []
    remaining: list[ExamDateEntry] = []
    outcomes: list[EntryOutcome] = []
    failed = 0

    for entry in entries:
        if not entry.isConfirmed:
            remaining.append(entry)
            continue

        candidate = dict(entry.fields)
        if not candidate.get("date"):
            candidate["date"] = entry.date

        record = validate_exam_fields(candidate)
        if record is None:
            bad = invalid_fields(candidate)
            logger.warning("Confirmed exam entry failed validation | date=%s invalid=%s", entry.date, bad)
            failed += 1
            outcomes.append(EntryOutcome(date=entry.date, saved=False, error=f"Invalid fields: {', '.join(bad)}"))
            remaining.append(entry.model_copy(update={"isConfirmed": False, "missingFields": bad}))
            continue

        try:
            stored = store.create(user_id, record)
        except Exception as e:
            logger.error("Failed to save exam entry | date=%s error=%s", entry.date, repr(e))
            logger.debug("Traceback:\n%s", traceback.format_exc())
            failed += 1
            outcomes.append(EntryOutcome(date=entry.date, saved=False, error="Could not save this exam."))
            remaining.append(entry.model_copy(update={"isConfirmed": False}))
            continue

        saved.append(record)
        outcomes.append(EntryOutcome(date=entry.date, saved=True, examId=stored.id))

    summary = BatchSummary(saved=len(saved), failed=failed, entries=outcomes)
    return saved, remaining, summary


def _batch_message(base: str, summary: BatchSummary) -> str:
    if not summary.entries:
        return base
    note = f"Saved {summary.saved} exam(s)."
    if summary.failed:
        note += f" {summary.failed} could not be saved."
    return f"{note} {base}"


def _run_batch_turn(
    payload: dict,
    gathered: dict,
    prior_entries: list[ExamDateEntry],
    store,
    user_id: Optional[str],
) -> TurnOutcome:
    if store is None or not user_id:
        raise RuntimeError("An exam store and user id are required for multi-exam turns")

    entries = reconcile_exam_dates(prior_entries, payload["examDates"])
    saved, remaining, summary = process_confirmed_entries(entries, store, user_id)
    logger.info(
        "Multi-exam turn | entries=%d saved=%d failed=%d remaining=%d",
        len(entries), summary.saved, summary.failed, len(remaining),
    )

    if not remaining and saved:
        return CompleteOutcome(
            data=saved,
            message=_batch_message(_payload_message(payload, "All exams have been added."), summary),
            summary=summary,
        )

    missing: list[str] = []
    for entry in remaining:
        for name in entry.missingFields:
            if name not in missing:
                missing.append(name)

    return IncompleteOutcome(
        message=_batch_message(_payload_message(payload, INCOMPLETE_MESSAGE), summary),
        missing=missing,
        gathered=gathered,
        examDates=remaining,
        summary=summary if summary.entries else None,
    )


def run_turn(
    message: str,
    gathered: Optional[dict[str, Any]] = None,
    *,
    engine,
    exam_dates: Optional[list] = None,
    store=None,
    user_id: Optional[str] = None,
    max_attempts: Optional[int] = None,
    base_delay_seconds: Optional[float] = None,
    retry_sleep: Callable[[float], None] = time.sleep,
) -> TurnOutcome:
    """
    Run one conversation turn and return its outcome.

    The guard applies only to the first message of a conversation. Model
    output that cannot be parsed or validated becomes an ErrorOutcome.
    """
    prior = dict(gathered or {})
    prior_entries = [
        e if isinstance(e, ExamDateEntry) else ExamDateEntry.model_validate(e)
        for e in (exam_dates or [])
    ]

    # A reply like "March 10" mid-conversation has no keyword but is on topic.
    if not prior and not prior_entries and not is_plausibly_exam_related(message):
        logger.info("Off-topic message short-circuited | chars=%d", len(message or ""))
        return OffTopicOutcome(message=OFF_TOPIC_MESSAGE)

    prompt = build_extraction_prompt(
        message,
        prior,
        [e.model_dump() for e in prior_entries],
    )

    try:
        reply = call_with_retry(
            engine.complete,
            prompt,
            max_attempts=max_attempts or settings.retry_attempts(),
            base_delay_seconds=(
                settings.retry_base_delay_seconds() if base_delay_seconds is None else base_delay_seconds
            ),
            sleep=retry_sleep,
        )
    except MissingConfigurationError:
        raise
    except Exception as e:
        logger.error("Extraction provider failed: %s", repr(e))
        logger.debug("Traceback:\n%s", traceback.format_exc())
        return ErrorOutcome(message=PROVIDER_ERROR_MESSAGE)

    if isinstance(reply, ProviderBusy):
        return ErrorOutcome(message=BUSY_MESSAGE)

    payload = normalize_model_output(reply.text)
    if isinstance(payload, ParseError):
        logger.error("Failed to parse AI response: %s | raw=%r", payload.reason, payload.raw[:500])
        return ErrorOutcome(message=UNEXPECTED_RESPONSE_MESSAGE)

    status = payload.get("status")
    logger.info("Model responded | status=%r", status)

    if status == "off_topic":
        return OffTopicOutcome(message=_payload_message(payload, OFF_TOPIC_MESSAGE))

    if status in ("incomplete", "complete") and isinstance(payload.get("examDates"), list):
        return _run_batch_turn(payload, prior, prior_entries, store, user_id)

    if status == "incomplete":
        missing = payload.get("missing")
        return IncompleteOutcome(
            message=_payload_message(payload, INCOMPLETE_MESSAGE),
            missing=[str(m) for m in missing] if isinstance(missing, list) else [],
            gathered=merge_gathered(prior, _payload_fields(payload)),
            examDates=prior_entries or None,
        )

    if status == "complete":
        record = validate_candidate(payload)
        if record is None:
            logger.error("AI response failed validation: %r", payload)
            return ErrorOutcome(message=INVALID_FORMAT_MESSAGE)
        return CompleteOutcome(data=record, message=COMPLETE_MESSAGE)

    logger.error("AI response has unrecognized status: %r", payload)
    return ErrorOutcome(message=INVALID_FORMAT_MESSAGE)
