"""Shared fixtures for LLM tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Settings with a test key and no retry delay."""
    from songvocab.config import Settings

    return Settings(
        _env_file=None,
        openai_api_key="sk-test-key-123456",
        max_retries=3,
        retry_delay=0.0,
    )


@pytest.fixture
def mock_openai():
    """OpenAI SDK client whose chat.completions.create() is a MagicMock."""
    return MagicMock()
