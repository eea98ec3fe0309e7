"""Shared fixtures for the chat client tests.

The remote model is never contacted: tests use ``unittest.mock`` doubles or
langchain-core's fake chat model.
"""

from __future__ import annotations

from typing import List
from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessageChunk

from chat.session import ChatSession
from config.settings import get_settings


ENV_VARS = (
    "API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_MODEL",
    "MODEL_TEMPERATURE",
    "MODEL_TOP_P",
    "SYSTEM_PROMPT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate every test from the developer's environment and .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "test-key")
    return "test-key"


def make_llm(*replies: List[str]) -> MagicMock:
    """Mock chat model whose n-th ``stream`` call yields the n-th chunk list."""
    llm = MagicMock()
    llm.stream.side_effect = [
        iter([AIMessageChunk(content=piece) for piece in pieces]) for pieces in replies
    ]
    return llm


@pytest.fixture
def llm_factory():
    return make_llm


@pytest.fixture
def session_factory():
    def factory(*replies: List[str]) -> ChatSession:
        return ChatSession(llm=make_llm(*replies), system_prompt="Be brief.")

    return factory
