"""
Artifact: assistant_service/exam_assistant/extraction/retry.py
Purpose: Retries extraction-provider calls that fail with a transient overload signal.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added bounded retry with linear backoff for transient provider failures. (Exam Planner Team)
Preconditions:
- `call` is a callable taking the prompt string and returning the model's text.
Inputs:
- Acceptable: Positive attempt counts and non-negative base delays.
- Unacceptable: max_attempts < 1.
Postconditions:
- Returns a reply, or a busy marker after exhausting attempts on transient errors only.
Returns:
- `ProviderReply` or `ProviderBusy`.
Errors/Exceptions:
- Non-transient provider exceptions propagate unchanged on the first occurrence.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..core.logging import get_logger

logger = get_logger("examplanner.retry")

# Case-sensitive substrings of the provider error text.
TRANSIENT_MARKERS = ("503", "overloaded", "high demand")


@dataclass(frozen=True)
class ProviderReply:
    text: str
    attempts: int


@dataclass(frozen=True)
class ProviderBusy:
    attempts: int
    last_error: Optional[BaseException] = None


def is_transient_provider_error(exc: BaseException) -> bool:
    message = str(exc)
    return any(marker in message for marker in TRANSIENT_MARKERS)


def call_with_retry(
    call: Callable[[str], str],
    prompt: str,
    *,
    max_attempts: int = 3,
    base_delay_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Union[ProviderReply, ProviderBusy]:
    """
    Invoke `call(prompt)` up to `max_attempts` times.

    Before retry n (n = 1, 2, ...) the wrapper sleeps `base_delay_seconds * n`.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    last_error: Optional[BaseException] = None
    for attempt in range(1, max_attempts + 1):
        try:
            text = call(prompt)
            if attempt > 1:
                logger.info("Provider call succeeded on attempt %d/%d", attempt, max_attempts)
            return ProviderReply(text=text, attempts=attempt)
        except Exception as e:
            if not is_transient_provider_error(e):
                raise
            last_error = e
            logger.warning("Transient provider error (attempt %d/%d): %s", attempt, max_attempts, repr(e))
            if attempt < max_attempts:
                sleep(base_delay_seconds * attempt)

    logger.error("Provider still busy after %d attempts: %s", max_attempts, repr(last_error))
    return ProviderBusy(attempts=max_attempts, last_error=last_error)
