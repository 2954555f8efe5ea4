"""Shared pytest fixtures for the CareerFlow test suite."""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Ensure test environment variables are set BEFORE importing app modules
os.environ.setdefault("GROQ_API_KEY", "test-key-not-real")
os.environ.setdefault("GROQ_MODEL", "llama-3.3-70b-versatile")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="careerflow-logs-"))

from careerflow.config import Settings  # noqa: E402


def _make_settings(**overrides) -> Settings:
    """Build an isolated Settings object (no .env lookup)."""
    values = {
        "groq_api_key": "test-key-not-real",
        "event_log_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _make_llm(content: Any = "", side_effect=None) -> AsyncMock:
    """Helper to build a mock ChatOpenAI instance whose agenerate yields ``content``."""
    mock_llm = AsyncMock()
    if side_effect is not None:
        mock_llm.agenerate.side_effect = side_effect
    else:
        generation = MagicMock(message=MagicMock(content=content))
        mock_llm.agenerate.return_value = MagicMock(generations=[[generation]])
    return mock_llm


def _sent_messages(mock_llm: AsyncMock) -> list:
    """Return the message list passed to the mocked ``agenerate`` call."""
    return mock_llm.agenerate.call_args.args[0][0]


def _make_quiz_response() -> str:
    """A quiz reply wrapped in the prose and fences models tend to add."""
    questions = [
        {
            "question": "What does `yield` turn a function into?",
            "options": ["A class", "A generator", "A coroutine", "A decorator"],
            "correct": 1,
            "explanation": "Any function containing yield returns a generator.",
        }
    ]
    return "Here is your quiz!\n```json\n" + json.dumps(questions) + "\n```\nGood luck!"


@pytest.fixture
def settings() -> Settings:
    """Settings with a fake API key and the event log disabled."""
    return _make_settings()


@pytest.fixture
def client() -> TestClient:
    """FastAPI synchronous test client."""
    from careerflow.main import app

    return TestClient(app)
