"""
Artifact: assistant_service/exam_assistant/clients/llm_client.py
Purpose: Wraps the Nvidia-backed LangChain chat model behind a plain "prompt in, text out" adapter.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added extraction engine and lazy engine over the ChatNVIDIA client. (Exam Planner Team)
Preconditions:
- `langchain_nvidia_ai_endpoints` package is installed and NVIDIA_API_KEY is configured.
Inputs:
- Acceptable: Model name string, numeric temperature and max token values; prompt strings.
- Unacceptable: Unsupported model identifiers or non-numeric generation parameters.
Postconditions:
- Returns a configured ChatNVIDIA client or an ExtractionEngine around one.
Returns:
- `ChatNVIDIA` object, `ExtractionEngine` object, raw completion text.
Errors/Exceptions:
- MissingConfigurationError when NVIDIA_API_KEY is not set.
- Underlying provider exceptions from `invoke` propagate to the retry wrapper.
"""

import ast
import time

from langchain_core.messages import HumanMessage
from langchain_nvidia_ai_endpoints import ChatNVIDIA

from ..core.config import settings
from ..core.errors import MissingConfigurationError
from ..core.logging import get_logger

logger = get_logger("examplanner.llm")


def build_nvidia_chat_client(model_name: str, temperature: float, max_tokens: int) -> ChatNVIDIA:
    """Create a configured ChatNVIDIA client."""
    return ChatNVIDIA(
        model=model_name,
        temperature=temperature,
        max_tokens=max_tokens,
    )


def _to_text(x):
    """Normalize LangChain outputs into a plain string."""
    if x is None:
        return ""
    if isinstance(x, str):
        return x
    if isinstance(x, list):
        return "\n".join(_to_text(i) for i in x)
    content = getattr(x, "content", None)
    if content is not None:
        return _to_text(content)
    return str(x)


def _maybe_unwrap_text_dict(text: str) -> str:
    """Unwrap provider text wrappers like {'type': 'text', 'text': '...'}."""
    if not text:
        return text
    s = text.strip()
    if "{'type'" not in s:
        return text
    try:
        obj = ast.literal_eval(s)
    except (ValueError, SyntaxError):
        return text
    if isinstance(obj, dict) and isinstance(obj.get("text"), str):
        return obj["text"]
    if isinstance(obj, list) and obj:
        first = obj[0]
        if isinstance(first, dict) and isinstance(first.get("text"), str):
            return first["text"]
    return text


class ExtractionEngine:
    """Sends one prompt string to the chat model and returns its text completion."""

    def __init__(self, llm):
        self._llm = llm

    def complete(self, prompt: str) -> str:
        t0 = time.time()
        res = self._llm.invoke([HumanMessage(content=prompt)])
        elapsed_ms = int((time.time() - t0) * 1000)

        text = _maybe_unwrap_text_dict(_to_text(res).strip()).strip()
        logger.info("LLM returned in %dms | chars=%d", elapsed_ms, len(text))
        logger.debug("Model output (first 500 chars): %r", text[:500])
        return text


def build_extraction_engine() -> ExtractionEngine:
    """Build the engine from settings; a missing API key is a configuration error."""
    if not settings.nvidia_api_key():
        raise MissingConfigurationError("NVIDIA_API_KEY is not set")

    logger.info(
        "Initializing LLM | model=%s temperature=%s max_tokens=%d",
        settings.model_name(),
        settings.temperature(),
        settings.max_tokens(),
    )
    llm = build_nvidia_chat_client(
        model_name=settings.model_name(),
        temperature=settings.temperature(),
        max_tokens=settings.max_tokens(),
    )
    return ExtractionEngine(llm)


class LazyExtractionEngine:
    """Defers building the chat client until a prompt actually needs sending."""

    def __init__(self, factory=build_extraction_engine):
        self._factory = factory
        self._engine = None

    def complete(self, prompt: str) -> str:
        if self._engine is None:
            self._engine = self._factory()
        return self._engine.complete(prompt)
