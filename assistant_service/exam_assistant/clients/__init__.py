"""Client package exports for external provider integrations."""

from .llm_client import (
    ExtractionEngine,
    LazyExtractionEngine,
    build_extraction_engine,
    build_nvidia_chat_client,
)

__all__ = [
    "ExtractionEngine",
    "LazyExtractionEngine",
    "build_extraction_engine",
    "build_nvidia_chat_client",
]
