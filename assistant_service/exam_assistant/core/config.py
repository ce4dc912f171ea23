"""
Artifact: assistant_service/exam_assistant/core/config.py
Purpose: Centralizes environment loading and static service configuration values.
Author: Exam Planner Team
Created: 2026-10-18
Revised:
- 2026-10-18: Added model, retry and topic keyword settings. (Exam Planner Team)
Preconditions:
- Environment variables may be present in process env and optional .env file.
Inputs:
- Acceptable: String environment variables such as NVIDIA_API_KEY or EXAM_ASSISTANT_MODEL.
- Unacceptable: Non-numeric strings for numeric settings (temperature, max tokens, retries).
Postconditions:
- Dotenv variables are loaded and configuration accessors are available to callers.
Returns:
- Settings object with service title and helper accessors.
Errors/Exceptions:
- ValueError when a numeric environment variable cannot be parsed.
"""

import os

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application-level configuration values."""

    app_title: str = "Exam Planner Assistant Service"

    @staticmethod
    def nvidia_api_key() -> str:
        return os.getenv("NVIDIA_API_KEY", "")

    @staticmethod
    def model_name() -> str:
        return os.getenv("EXAM_ASSISTANT_MODEL", "nvidia/llama-3.3-nemotron-super-49b-v1.5")

    @staticmethod
    def temperature() -> float:
        return float(os.getenv("EXAM_ASSISTANT_TEMPERATURE", "0.2"))

    @staticmethod
    def max_tokens() -> int:
        return int(os.getenv("EXAM_ASSISTANT_MAX_TOKENS", "1024"))

    @staticmethod
    def retry_attempts() -> int:
        return int(os.getenv("EXAM_ASSISTANT_RETRY_ATTEMPTS", "3"))

    @staticmethod
    def retry_base_delay_seconds() -> float:
        return float(os.getenv("EXAM_ASSISTANT_RETRY_BASE_DELAY", "1.0"))

    @staticmethod
    def extra_topic_keywords() -> list[str]:
        raw = os.getenv("EXAM_ASSISTANT_EXTRA_KEYWORDS", "")
        return [kw.strip().lower() for kw in raw.split(",") if kw.strip()]


settings = Settings()
