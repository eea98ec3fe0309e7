from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    def __init__(self) -> None:
        self.api_key: Optional[str] = os.getenv("API_KEY") or os.getenv("GOOGLE_API_KEY")
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
        self.temperature: float = _float_env("MODEL_TEMPERATURE", "0.7")
        self.top_p: float = _float_env("MODEL_TOP_P", "0.95")
        self.system_prompt: Optional[str] = os.getenv("SYSTEM_PROMPT")
        self.log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
